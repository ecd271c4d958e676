"""
目录业务服务层（书籍与作者）
"""
import asyncio
import logging
import math
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..exceptions import AuthorNotFoundError, InvalidInputError
from ..models import Author, Book
from ..repositories import AuthorRepository, BookRepository

logger = logging.getLogger(__name__)


class CatalogService:
    """目录服务类"""

    def __init__(
        self,
        book_repository: BookRepository,
        author_repository: AuthorRepository,
        lock: Optional[asyncio.Lock] = None,
    ):
        self.book_repository = book_repository
        self.author_repository = author_repository
        self.lock = lock or asyncio.Lock()

    # ---- 书籍 ----

    async def create_book(self, book_data: Dict[str, Any]) -> Book:
        """创建书籍"""
        async with self.lock:
            self._validate_book_data(book_data)
            self._ensure_author_exists(book_data.get("author_id"))
            book = self.book_repository.create(self._build_book(book_data))
        logger.info(f"创建书籍: {book.id} {book.title}")
        return book

    async def get_book(self, book_id: int) -> Book:
        """根据ID获取书籍"""
        async with self.lock:
            return self.book_repository.get_by_id(book_id)

    async def list_books(self) -> List[Book]:
        """获取所有书籍"""
        async with self.lock:
            return self.book_repository.get_all()

    async def update_book(self, book_id: int, book_data: Dict[str, Any]) -> Book:
        """更新书籍（整体替换，ID保持不变）"""
        async with self.lock:
            # 先确认书籍存在
            self.book_repository.get_by_id(book_id)
            self._validate_book_data(book_data)
            self._ensure_author_exists(book_data.get("author_id"))
            book = self.book_repository.update(book_id, self._build_book(book_data))
        logger.info(f"更新书籍: {book_id}")
        return book

    async def delete_book(self, book_id: int) -> None:
        """删除书籍

        订单中保存的是快照，因此不检查引用。
        """
        async with self.lock:
            self.book_repository.delete(book_id)
        logger.info(f"删除书籍: {book_id}")

    async def list_books_by_author(self, author_id: int) -> List[Book]:
        """获取某位作者的全部书籍"""
        async with self.lock:
            self._ensure_author_exists(author_id)
            return self.book_repository.get_by_author(author_id)

    # ---- 作者 ----

    async def create_author(self, author_data: Dict[str, Any]) -> Author:
        """创建作者，允许调用方指定ID"""
        async with self.lock:
            self._validate_author_data(author_data)
            author = self.author_repository.create(
                Author(
                    name=author_data["name"],
                    biography=author_data.get("biography"),
                    id=author_data.get("id"),
                )
            )
        logger.info(f"创建作者: {author.id} {author.name}")
        return author

    async def get_author(self, author_id: int) -> Author:
        """根据ID获取作者"""
        async with self.lock:
            return self.author_repository.get_by_id(author_id)

    async def list_authors(self) -> List[Author]:
        """获取所有作者"""
        async with self.lock:
            return self.author_repository.get_all()

    async def update_author(self, author_id: int, author_data: Dict[str, Any]) -> Author:
        """更新作者（ID保持不变）"""
        async with self.lock:
            self.author_repository.get_by_id(author_id)
            self._validate_author_data(author_data)
            author = self.author_repository.update(
                author_id,
                Author(name=author_data["name"], biography=author_data.get("biography")),
            )
        logger.info(f"更新作者: {author_id}")
        return author

    async def delete_author(self, author_id: int) -> None:
        """删除作者，仍有书籍引用时拒绝"""
        async with self.lock:
            self.author_repository.get_by_id(author_id)
            if self.book_repository.has_books_by_author(author_id):
                raise InvalidInputError("Cannot delete author with existing books.")
            self.author_repository.delete(author_id)
        logger.info(f"删除作者: {author_id}")

    # ---- 校验 ----

    def _ensure_author_exists(self, author_id: Optional[int]) -> None:
        if author_id is None or not self.author_repository.exists(author_id):
            raise AuthorNotFoundError(author_id)

    @staticmethod
    def _build_book(book_data: Dict[str, Any]) -> Book:
        return Book(
            title=book_data["title"],
            author_id=book_data["author_id"],
            isbn=book_data["isbn"],
            publication_year=book_data["publication_year"],
            price=book_data["price"],
            stock=book_data.get("stock", 0),
        )

    def _validate_book_data(self, book_data: Dict[str, Any]) -> None:
        """验证书籍数据"""
        if not _has_text(book_data.get("title")):
            raise InvalidInputError("Book title cannot be empty.")
        if not _has_text(book_data.get("isbn")):
            raise InvalidInputError("Book ISBN cannot be empty.")

        year = book_data.get("publication_year")
        if year is None:
            raise InvalidInputError("Book publication year is required.")
        if year > datetime.now().year:
            raise InvalidInputError("Publication year cannot be in the future.")

        price = book_data.get("price")
        if price is None or not math.isfinite(price) or price <= 0:
            raise InvalidInputError("Book price must be greater than zero.")

        if book_data.get("stock", 0) < 0:
            raise InvalidInputError("Book stock cannot be negative.")

    def _validate_author_data(self, author_data: Dict[str, Any]) -> None:
        """验证作者数据"""
        if not _has_text(author_data.get("name")):
            raise InvalidInputError("Author name cannot be empty.")


def _has_text(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())
