"""
业务服务层
"""
from .cart_service import CartService
from .catalog_service import CatalogService
from .checkout_service import CheckoutService
from .customer_service import CustomerService

__all__ = [
    "CartService",
    "CatalogService",
    "CheckoutService",
    "CustomerService",
]
