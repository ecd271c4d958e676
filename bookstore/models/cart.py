"""
购物车模型
"""
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class CartItem:
    """购物车条目"""
    book_id: int
    quantity: int


@dataclass
class Cart:
    """购物车模型，每个客户一个，每本书最多一行"""
    customer_id: int
    items: List[CartItem] = field(default_factory=list)

    def find_item(self, book_id: int) -> Optional[CartItem]:
        """按书籍ID查找条目"""
        for item in self.items:
            if item.book_id == book_id:
                return item
        return None

    def add_item(self, item: CartItem) -> None:
        """添加条目，同一本书数量累加"""
        existing = self.find_item(item.book_id)
        if existing is not None:
            existing.quantity += item.quantity
            return
        self.items.append(CartItem(book_id=item.book_id, quantity=item.quantity))

    def update_item(self, book_id: int, quantity: int) -> bool:
        """替换条目数量，条目不存在时返回False"""
        existing = self.find_item(book_id)
        if existing is None:
            return False
        existing.quantity = quantity
        return True

    def remove_item(self, book_id: int) -> None:
        """移除条目（不存在时无操作）"""
        self.items = [item for item in self.items if item.book_id != book_id]

    def clear(self) -> None:
        self.items.clear()

    @property
    def is_empty(self) -> bool:
        return not self.items
