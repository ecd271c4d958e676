"""
作者数据访问层
"""
from typing import List

from ..exceptions import AuthorNotFoundError, InvalidInputError
from ..models import Author
from .store import DataStore


class AuthorRepository:
    """作者仓库类

    作者ID可以由调用方指定；未指定时由计数器分配，并跳过已被占用的ID。
    """

    def __init__(self, store: DataStore):
        self.store = store

    def create(self, author: Author) -> Author:
        """创建作者"""
        if author.id is not None:
            if author.id in self.store.authors:
                raise InvalidInputError("Author ID already exists.")
        else:
            author.id = self._allocate_id()
        self.store.authors[author.id] = author
        return author

    def _allocate_id(self) -> int:
        new_id = self.store.next_id("author")
        while new_id in self.store.authors:
            new_id = self.store.next_id("author")
        return new_id

    def exists(self, author_id: int) -> bool:
        return author_id in self.store.authors

    def get_by_id(self, author_id: int) -> Author:
        """根据ID获取作者"""
        author = self.store.authors.get(author_id)
        if author is None:
            raise AuthorNotFoundError(author_id)
        return author

    def get_all(self) -> List[Author]:
        """获取所有作者"""
        return list(self.store.authors.values())

    def update(self, author_id: int, author: Author) -> Author:
        """替换作者，保留原ID"""
        if author_id not in self.store.authors:
            raise AuthorNotFoundError(author_id)
        author.id = author_id
        self.store.authors[author_id] = author
        return author

    def delete(self, author_id: int) -> None:
        """删除作者"""
        if self.store.authors.pop(author_id, None) is None:
            raise AuthorNotFoundError(author_id)
