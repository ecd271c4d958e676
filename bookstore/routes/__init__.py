"""
API路由
"""
from fastapi import APIRouter

from . import authors, books, carts, customers, health, orders

api_router = APIRouter()
api_router.include_router(books.router)
api_router.include_router(authors.router)
api_router.include_router(customers.router)
api_router.include_router(carts.router)
api_router.include_router(orders.router)

__all__ = ["api_router", "health"]
