"""
购物车数据访问层
"""
import logging

from ..models import Cart
from .store import DataStore

logger = logging.getLogger(__name__)


class CartRepository:
    """购物车仓库类"""

    def __init__(self, store: DataStore):
        self.store = store

    def get_or_create(self, customer_id: int) -> Cart:
        """获取客户购物车，不存在时创建空购物车

        正常情况下购物车随客户一起创建，这里只是兜底。
        """
        cart = self.store.carts.get(customer_id)
        if cart is None:
            logger.warning(f"客户 {customer_id} 没有购物车，创建空购物车")
            cart = Cart(customer_id=customer_id)
            self.store.carts[customer_id] = cart
        return cart
