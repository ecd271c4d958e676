"""
客户业务服务层
"""
import asyncio
import logging
from typing import Any, Dict, List, Optional

from ..exceptions import InvalidInputError
from ..models import Customer
from ..repositories import CustomerRepository

logger = logging.getLogger(__name__)


class CustomerService:
    """客户服务类"""

    REQUIRED_FIELDS = ("name", "email", "password")

    def __init__(self, customer_repository: CustomerRepository, lock: Optional[asyncio.Lock] = None):
        self.customer_repository = customer_repository
        self.lock = lock or asyncio.Lock()

    async def create_customer(self, customer_data: Dict[str, Any]) -> Customer:
        """创建客户（同时创建空购物车和订单列表）"""
        async with self.lock:
            self._validate_customer_data(customer_data)
            if self.customer_repository.find_by_email(customer_data["email"]) is not None:
                raise InvalidInputError("Email address is already in use.")
            customer = self.customer_repository.create(self._build_customer(customer_data))
        logger.info(f"创建客户: {customer.id}")
        return customer

    async def get_customer(self, customer_id: int) -> Customer:
        """根据ID获取客户"""
        async with self.lock:
            return self.customer_repository.get_by_id(customer_id)

    async def list_customers(self) -> List[Customer]:
        """获取所有客户"""
        async with self.lock:
            return self.customer_repository.get_all()

    async def update_customer(self, customer_id: int, customer_data: Dict[str, Any]) -> Customer:
        """更新客户，邮箱不能与其他客户重复"""
        async with self.lock:
            self.customer_repository.get_by_id(customer_id)
            self._validate_customer_data(customer_data)
            duplicate = self.customer_repository.find_by_email(
                customer_data["email"], exclude_id=customer_id
            )
            if duplicate is not None:
                raise InvalidInputError("Email address is already in use by another customer.")
            customer = self.customer_repository.update(
                customer_id, self._build_customer(customer_data)
            )
        logger.info(f"更新客户: {customer_id}")
        return customer

    async def delete_customer(self, customer_id: int) -> None:
        """删除客户及其购物车和订单历史"""
        async with self.lock:
            self.customer_repository.delete(customer_id)
        logger.info(f"删除客户: {customer_id}")

    @staticmethod
    def _build_customer(customer_data: Dict[str, Any]) -> Customer:
        return Customer(
            name=customer_data["name"],
            email=customer_data["email"],
            password=customer_data["password"],
        )

    def _validate_customer_data(self, customer_data: Dict[str, Any]) -> None:
        """验证客户数据"""
        for field in self.REQUIRED_FIELDS:
            value = customer_data.get(field)
            if not isinstance(value, str) or not value.strip():
                raise InvalidInputError(f"Customer {field} cannot be empty.")
