"""
客户模型
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class Customer:
    """客户模型"""
    name: str
    email: str
    password: str
    id: Optional[int] = None

    def __repr__(self):
        # 不输出密码
        return f"Customer(id={self.id}, email='{self.email}')"
