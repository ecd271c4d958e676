"""
业务异常定义
"""
from typing import Any


class BookstoreError(Exception):
    """基础异常类"""
    label = "Internal Server Error"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(BookstoreError):
    """实体未找到异常"""
    kind = "Entity"
    status_code = 404

    def __init__(self, entity_id: Any, message: str = None):
        self.entity_id = entity_id
        super().__init__(message or f"{self.kind} with ID {entity_id} not found.")

    @property
    def label(self) -> str:
        return f"{self.kind} Not Found"


class BookNotFoundError(NotFoundError):
    """书籍未找到异常"""
    kind = "Book"


class AuthorNotFoundError(NotFoundError):
    """作者未找到异常"""
    kind = "Author"


class CustomerNotFoundError(NotFoundError):
    """客户未找到异常"""
    kind = "Customer"


class OrderNotFoundError(NotFoundError):
    """订单未找到异常"""
    kind = "Order"


class InvalidInputError(BookstoreError):
    """输入数据无效异常"""
    label = "Invalid Input"
    status_code = 400


class OutOfStockError(BookstoreError):
    """库存不足异常"""
    label = "Out Of Stock"
    status_code = 400

    def __init__(self, book_id: int, requested: int, available: int):
        self.book_id = book_id
        self.requested = requested
        self.available = available
        super().__init__(
            f"Book with ID {book_id} has insufficient stock. "
            f"Requested: {requested}, Available: {available}"
        )
