from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Item


class ItemRepository(Protocol):
    def get_by_id(self, item_id: int) -> Optional[Item]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Item]:
        raise NotImplementedError

    def insert(self, item: Item) -> int:
        raise NotImplementedError

    def delete_by_id(self, item_id: int) -> bool:
        raise NotImplementedError
