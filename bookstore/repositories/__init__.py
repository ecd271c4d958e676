"""
数据访问层
"""
from .author_repository import AuthorRepository
from .book_repository import BookRepository
from .cart_repository import CartRepository
from .customer_repository import CustomerRepository
from .order_repository import OrderRepository
from .store import DataStore

__all__ = [
    "AuthorRepository",
    "BookRepository",
    "CartRepository",
    "CustomerRepository",
    "DataStore",
    "OrderRepository",
]
