"""
订单模型

订单创建后不可变：条目中的书名和单价是下单时刻的快照，
与之后对书籍的修改无关。
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Tuple


@dataclass(frozen=True)
class OrderItem:
    """订单条目（快照）"""
    book_id: int
    book_title: str
    quantity: int
    price: float

    @property
    def total_price(self) -> float:
        return self.price * self.quantity


@dataclass(frozen=True)
class Order:
    """订单模型"""
    id: int
    customer_id: int
    items: Tuple[OrderItem, ...]
    total_amount: float
    order_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
