"""
书籍数据访问层
"""
from typing import List

from ..exceptions import BookNotFoundError
from ..models import Book
from .store import DataStore


class BookRepository:
    """书籍仓库类"""

    def __init__(self, store: DataStore):
        self.store = store

    def create(self, book: Book) -> Book:
        """创建书籍，由服务端分配ID"""
        book.id = self.store.next_id("book")
        self.store.books[book.id] = book
        return book

    def exists(self, book_id: int) -> bool:
        return book_id in self.store.books

    def get_by_id(self, book_id: int) -> Book:
        """根据ID获取书籍"""
        book = self.store.books.get(book_id)
        if book is None:
            raise BookNotFoundError(book_id)
        return book

    def get_all(self) -> List[Book]:
        """获取所有书籍"""
        return list(self.store.books.values())

    def get_by_author(self, author_id: int) -> List[Book]:
        """获取某位作者的全部书籍"""
        return [book for book in self.store.books.values() if book.author_id == author_id]

    def has_books_by_author(self, author_id: int) -> bool:
        return any(book.author_id == author_id for book in self.store.books.values())

    def update(self, book_id: int, book: Book) -> Book:
        """替换书籍，保留原ID"""
        if book_id not in self.store.books:
            raise BookNotFoundError(book_id)
        book.id = book_id
        self.store.books[book_id] = book
        return book

    def delete(self, book_id: int) -> None:
        """删除书籍"""
        if self.store.books.pop(book_id, None) is None:
            raise BookNotFoundError(book_id)
