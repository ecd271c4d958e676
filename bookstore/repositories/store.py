"""
内存数据存储

持有所有实体映射与ID计数器，所有仓库共享同一个实例。
"""
import asyncio
import itertools
import logging
from typing import Dict, List

from ..models import Author, Book, Cart, Customer, Order

logger = logging.getLogger(__name__)


class DataStore:
    """内存数据存储"""

    ID_KINDS = ("book", "author", "customer", "order")

    def __init__(self):
        # 服务层在每个操作的读-检查-写序列外持有该锁
        self.lock = asyncio.Lock()
        self.reset()

    def reset(self) -> None:
        """清空所有数据并重置ID计数器"""
        self.books: Dict[int, Book] = {}
        self.authors: Dict[int, Author] = {}
        self.customers: Dict[int, Customer] = {}
        self.carts: Dict[int, Cart] = {}
        self.customer_orders: Dict[int, List[Order]] = {}
        self._counters = {kind: itertools.count(1) for kind in self.ID_KINDS}

    def next_id(self, kind: str) -> int:
        """分配下一个ID（从1开始单调递增）"""
        if kind not in self._counters:
            raise KeyError(f"Unknown id kind: {kind}")
        return next(self._counters[kind])

    def stats(self) -> Dict[str, int]:
        return {
            "books": len(self.books),
            "authors": len(self.authors),
            "customers": len(self.customers),
            "orders": sum(len(orders) for orders in self.customer_orders.values()),
        }
