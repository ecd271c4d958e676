"""
作者模型
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class Author:
    """作者模型"""
    name: str
    biography: Optional[str] = None
    id: Optional[int] = None

    def __repr__(self):
        return f"Author(id={self.id}, name='{self.name}')"
