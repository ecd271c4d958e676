"""
服务装配与FastAPI依赖

应用启动时构造一个DataStore，所有仓库和服务共享它以及它的锁。
"""
from dataclasses import dataclass

from fastapi import Request

from .repositories import (
    AuthorRepository,
    BookRepository,
    CartRepository,
    CustomerRepository,
    DataStore,
    OrderRepository,
)
from .services import CartService, CatalogService, CheckoutService, CustomerService


@dataclass
class ServiceContainer:
    """服务容器"""
    store: DataStore
    catalog: CatalogService
    customers: CustomerService
    carts: CartService
    checkout: CheckoutService


def build_services(store: DataStore) -> ServiceContainer:
    """基于同一个存储实例构造全部服务"""
    books = BookRepository(store)
    authors = AuthorRepository(store)
    customers = CustomerRepository(store)
    carts = CartRepository(store)
    orders = OrderRepository(store)

    return ServiceContainer(
        store=store,
        catalog=CatalogService(books, authors, lock=store.lock),
        customers=CustomerService(customers, lock=store.lock),
        carts=CartService(customers, books, carts, lock=store.lock),
        checkout=CheckoutService(customers, books, carts, orders, lock=store.lock),
    )


def get_services(request: Request) -> ServiceContainer:
    return request.app.state.services


def get_catalog_service(request: Request) -> CatalogService:
    return get_services(request).catalog


def get_customer_service(request: Request) -> CustomerService:
    return get_services(request).customers


def get_cart_service(request: Request) -> CartService:
    return get_services(request).carts


def get_checkout_service(request: Request) -> CheckoutService:
    return get_services(request).checkout
