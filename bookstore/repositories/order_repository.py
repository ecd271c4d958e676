"""
订单数据访问层
"""
import logging
from typing import List

from ..exceptions import OrderNotFoundError
from ..models import Order
from .store import DataStore

logger = logging.getLogger(__name__)


class OrderRepository:
    """订单仓库类，按客户保存有序的订单历史"""

    def __init__(self, store: DataStore):
        self.store = store

    def next_id(self) -> int:
        return self.store.next_id("order")

    def get_history(self, customer_id: int) -> List[Order]:
        """获取客户订单历史，不存在时初始化为空列表"""
        orders = self.store.customer_orders.get(customer_id)
        if orders is None:
            logger.warning(f"客户 {customer_id} 没有订单列表，初始化为空")
            orders = []
            self.store.customer_orders[customer_id] = orders
        return orders

    def add(self, order: Order) -> Order:
        """追加订单到客户历史"""
        self.get_history(order.customer_id).append(order)
        return order

    def get_for_customer(self, customer_id: int, order_id: int) -> Order:
        """在客户自己的订单历史中查找订单"""
        for order in self.get_history(customer_id):
            if order.id == order_id:
                return order
        raise OrderNotFoundError(order_id)
