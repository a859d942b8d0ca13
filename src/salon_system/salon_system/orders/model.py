from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date as Date
from decimal import Decimal
from typing import List, Optional, Tuple

from ..core.enums import PaymentMethod


@dataclass(frozen=True)
class ItemOrder:
    """An item line inside an order; description and value are copied from the catalog."""

    item_id: int
    description: str
    value: Decimal
    amount: int = 1

    @property
    def subtotal(self) -> Decimal:
        return self.value * self.amount


@dataclass(frozen=True)
class ServiceOrder:
    """Domain entity: services performed for a client on a date."""

    order_id: Optional[int]
    client_id: int
    date: Date
    payment_method: PaymentMethod
    obs: str = ""
    items: Tuple[ItemOrder, ...] = ()

    @property
    def total(self) -> Decimal:
        return sum((i.subtotal for i in self.items), Decimal("0"))

    def with_id(self, order_id: int) -> "ServiceOrder":
        return replace(self, order_id=int(order_id))


@dataclass
class ItemOrderDto:
    id: Optional[str] = None
    amount: int = 1


@dataclass
class ServiceOrderCommand:
    client_id: Optional[str] = None
    date: Optional[Date] = None
    payment_method: Optional[PaymentMethod] = None
    obs: Optional[str] = None
    items: List[ItemOrderDto] = field(default_factory=list)


@dataclass(frozen=True)
class ItemOrderResponse:
    id: str
    description: str
    value: Decimal
    amount: int


@dataclass(frozen=True)
class OrderResponse:
    id: str
    client_id: str
    date: Date
    payment_method: PaymentMethod
    obs: str
    items: List[ItemOrderResponse]
    total: Decimal
