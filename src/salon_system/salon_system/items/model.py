from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Item:
    """Domain entity: a catalog service (e.g. a haircut) and its price."""

    item_id: Optional[int]
    description: str
    value: Decimal

    def with_id(self, item_id: int) -> "Item":
        return replace(self, item_id=int(item_id))


@dataclass
class ItemCommand:
    description: Optional[str] = None
    value: Optional[Decimal] = None


@dataclass(frozen=True)
class ItemResponse:
    id: str
    description: str
    value: Decimal
