"""
下单业务服务层

下单分两个阶段：先逐行校验书籍存在、库存充足并生成快照，
全部通过后才扣减库存、写入订单并清空购物车。任一行失败时
库存、购物车和订单历史都保持不变。
"""
import asyncio
import logging
from typing import List, Optional, Tuple

from ..exceptions import CustomerNotFoundError, InvalidInputError, OutOfStockError
from ..models import Book, Order, OrderItem
from ..repositories import BookRepository, CartRepository, CustomerRepository, OrderRepository

logger = logging.getLogger(__name__)


class CheckoutService:
    """下单服务类"""

    def __init__(
        self,
        customer_repository: CustomerRepository,
        book_repository: BookRepository,
        cart_repository: CartRepository,
        order_repository: OrderRepository,
        lock: Optional[asyncio.Lock] = None,
    ):
        self.customer_repository = customer_repository
        self.book_repository = book_repository
        self.cart_repository = cart_repository
        self.order_repository = order_repository
        self.lock = lock or asyncio.Lock()

    async def create_order(self, customer_id: int) -> Order:
        """将购物车转换为订单"""
        async with self.lock:
            self._ensure_customer_exists(customer_id)

            cart = self.cart_repository.get_or_create(customer_id)
            if cart.is_empty:
                raise InvalidInputError("Cannot create an order with an empty cart.")

            # 第一阶段：校验并生成快照
            lines: List[Tuple[Book, OrderItem]] = []
            for cart_item in cart.items:
                book = self.book_repository.get_by_id(cart_item.book_id)
                if book.stock < cart_item.quantity:
                    raise OutOfStockError(book.id, cart_item.quantity, book.stock)
                lines.append((
                    book,
                    OrderItem(
                        book_id=book.id,
                        book_title=book.title,
                        quantity=cart_item.quantity,
                        price=book.price,
                    ),
                ))

            # 第二阶段：提交
            total_amount = 0.0
            for book, order_item in lines:
                book.stock -= order_item.quantity
                total_amount += order_item.total_price

            order = Order(
                id=self.order_repository.next_id(),
                customer_id=customer_id,
                items=tuple(order_item for _, order_item in lines),
                total_amount=total_amount,
            )
            self.order_repository.add(order)
            cart.clear()

        logger.info(f"客户 {customer_id} 下单成功: 订单 {order.id}, 金额 {order.total_amount:.2f}")
        return order

    async def get_customer_orders(self, customer_id: int) -> List[Order]:
        """获取客户全部订单（按下单顺序）"""
        async with self.lock:
            self._ensure_customer_exists(customer_id)
            return list(self.order_repository.get_history(customer_id))

    async def get_customer_order(self, customer_id: int, order_id: int) -> Order:
        """获取客户的某个订单，只在该客户自己的历史中查找"""
        async with self.lock:
            self._ensure_customer_exists(customer_id)
            return self.order_repository.get_for_customer(customer_id, order_id)

    def _ensure_customer_exists(self, customer_id: int) -> None:
        if not self.customer_repository.exists(customer_id):
            raise CustomerNotFoundError(customer_id)
