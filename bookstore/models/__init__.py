"""
数据模型
"""
from .author import Author
from .book import Book
from .cart import Cart, CartItem
from .customer import Customer
from .order import Order, OrderItem

__all__ = [
    "Author",
    "Book",
    "Cart",
    "CartItem",
    "Customer",
    "Order",
    "OrderItem",
]
