"""
客户数据访问层
"""
from typing import List, Optional

from ..exceptions import CustomerNotFoundError
from ..models import Cart, Customer
from .store import DataStore


class CustomerRepository:
    """客户仓库类

    客户与其购物车、订单历史一起创建、一起删除。
    """

    def __init__(self, store: DataStore):
        self.store = store

    def create(self, customer: Customer) -> Customer:
        """创建客户，同时初始化空购物车和空订单列表"""
        customer.id = self.store.next_id("customer")
        self.store.customers[customer.id] = customer
        self.store.carts[customer.id] = Cart(customer_id=customer.id)
        self.store.customer_orders[customer.id] = []
        return customer

    def exists(self, customer_id: int) -> bool:
        return customer_id in self.store.customers

    def get_by_id(self, customer_id: int) -> Customer:
        """根据ID获取客户"""
        customer = self.store.customers.get(customer_id)
        if customer is None:
            raise CustomerNotFoundError(customer_id)
        return customer

    def get_all(self) -> List[Customer]:
        """获取所有客户"""
        return list(self.store.customers.values())

    def find_by_email(self, email: str, exclude_id: Optional[int] = None) -> Optional[Customer]:
        """按邮箱精确查找（区分大小写），可排除指定客户"""
        for customer in self.store.customers.values():
            if customer.email == email and customer.id != exclude_id:
                return customer
        return None

    def update(self, customer_id: int, customer: Customer) -> Customer:
        """替换客户，保留原ID"""
        if customer_id not in self.store.customers:
            raise CustomerNotFoundError(customer_id)
        customer.id = customer_id
        self.store.customers[customer_id] = customer
        return customer

    def delete(self, customer_id: int) -> None:
        """删除客户（级联删除购物车和订单历史）"""
        if customer_id not in self.store.customers:
            raise CustomerNotFoundError(customer_id)
        del self.store.customers[customer_id]
        self.store.carts.pop(customer_id, None)
        self.store.customer_orders.pop(customer_id, None)
