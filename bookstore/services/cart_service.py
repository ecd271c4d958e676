"""
购物车业务服务层
"""
import asyncio
import logging
from typing import Optional

from ..exceptions import CustomerNotFoundError, InvalidInputError, OutOfStockError
from ..models import Cart, CartItem
from ..repositories import BookRepository, CartRepository, CustomerRepository

logger = logging.getLogger(__name__)


class CartService:
    """购物车服务类

    添加条目时只校验本次数量与当前库存，合并后的总数量不再校验；
    下单时的库存检查才是最终检查。
    """

    def __init__(
        self,
        customer_repository: CustomerRepository,
        book_repository: BookRepository,
        cart_repository: CartRepository,
        lock: Optional[asyncio.Lock] = None,
    ):
        self.customer_repository = customer_repository
        self.book_repository = book_repository
        self.cart_repository = cart_repository
        self.lock = lock or asyncio.Lock()

    async def get_cart(self, customer_id: int) -> Cart:
        """获取客户购物车"""
        async with self.lock:
            self._ensure_customer_exists(customer_id)
            return self.cart_repository.get_or_create(customer_id)

    async def add_cart_item(self, customer_id: int, book_id: int, quantity: int) -> Cart:
        """添加条目，同一本书数量累加"""
        async with self.lock:
            self._ensure_customer_exists(customer_id)
            book = self.book_repository.get_by_id(book_id)
            if quantity <= 0:
                raise InvalidInputError("Quantity must be greater than zero.")
            if book.stock < quantity:
                raise OutOfStockError(book.id, quantity, book.stock)

            cart = self.cart_repository.get_or_create(customer_id)
            cart.add_item(CartItem(book_id=book_id, quantity=quantity))
        logger.info(f"客户 {customer_id} 加入购物车: 书籍 {book_id} x {quantity}")
        return cart

    async def update_cart_item(self, customer_id: int, book_id: int, quantity: int) -> Cart:
        """替换条目数量"""
        async with self.lock:
            self._ensure_customer_exists(customer_id)
            book = self.book_repository.get_by_id(book_id)
            if quantity <= 0:
                raise InvalidInputError("Quantity must be greater than zero.")
            if book.stock < quantity:
                raise OutOfStockError(book.id, quantity, book.stock)

            cart = self.cart_repository.get_or_create(customer_id)
            if not cart.update_item(book_id, quantity):
                raise InvalidInputError(f"Book with ID {book_id} not found in cart.")
        logger.info(f"客户 {customer_id} 更新购物车: 书籍 {book_id} -> {quantity}")
        return cart

    async def remove_cart_item(self, customer_id: int, book_id: int) -> Cart:
        """移除条目（不存在时无操作）"""
        async with self.lock:
            self._ensure_customer_exists(customer_id)
            cart = self.cart_repository.get_or_create(customer_id)
            cart.remove_item(book_id)
        return cart

    def _ensure_customer_exists(self, customer_id: int) -> None:
        if not self.customer_repository.exists(customer_id):
            raise CustomerNotFoundError(customer_id)
