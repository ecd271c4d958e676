"""
API请求/响应模型

JSON字段使用camelCase（authorId、publicationYear 等），
请求体同时接受snake_case。
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """公共配置"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ---- 请求 ----
# 字符串字段允许缺省，交给服务层按业务规则校验（返回400而不是422）

class BookRequest(ApiModel):
    """创建/更新书籍请求"""
    id: Optional[int] = None  # 忽略，书籍ID由服务端分配
    title: Optional[str] = None
    author_id: Optional[int] = None
    isbn: Optional[str] = None
    publication_year: Optional[int] = None
    price: Optional[float] = None
    stock: int = 0


class AuthorRequest(ApiModel):
    """创建/更新作者请求"""
    id: Optional[int] = None
    name: Optional[str] = None
    biography: Optional[str] = None


class CustomerRequest(ApiModel):
    """创建/更新客户请求"""
    id: Optional[int] = None  # 忽略
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class CartItemRequest(ApiModel):
    """加入购物车请求"""
    book_id: int
    quantity: int


class CartItemUpdateRequest(ApiModel):
    """更新购物车条目请求，书籍ID取自路径"""
    book_id: Optional[int] = None
    quantity: int


# ---- 响应 ----

class BookResponse(ApiModel):
    id: int
    title: str
    author_id: int
    isbn: str
    publication_year: int
    price: float
    stock: int


class AuthorResponse(ApiModel):
    id: int
    name: str
    biography: Optional[str] = None


class CustomerResponse(ApiModel):
    """客户响应（不包含密码）"""
    id: int
    name: str
    email: str


class CartItemResponse(ApiModel):
    book_id: int
    quantity: int


class CartResponse(ApiModel):
    customer_id: int
    items: List[CartItemResponse]


class OrderItemResponse(ApiModel):
    book_id: int
    book_title: str
    quantity: int
    price: float
    total_price: float


class OrderResponse(ApiModel):
    id: int
    customer_id: int
    items: List[OrderItemResponse]
    order_date: datetime
    total_amount: float


class ErrorResponse(BaseModel):
    """错误响应"""
    error: str
    message: str
