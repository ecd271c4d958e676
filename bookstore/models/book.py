"""
书籍模型
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class Book:
    """书籍模型"""
    title: str
    author_id: int
    isbn: str
    publication_year: int
    price: float
    stock: int = 0
    id: Optional[int] = None

    def __repr__(self):
        return f"Book(id={self.id}, title='{self.title}')"
