from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import ServiceOrder


class ServiceOrderRepository(Protocol):
    def get_by_id(self, order_id: int) -> Optional[ServiceOrder]:
        raise NotImplementedError

    def list_all(self) -> Sequence[ServiceOrder]:
        raise NotImplementedError

    def list_by_client(self, client_id: int) -> Sequence[ServiceOrder]:
        raise NotImplementedError

    def insert(self, order: ServiceOrder) -> int:
        """Store the order together with its item lines. Returns order_id."""

        raise NotImplementedError

    def delete_by_id(self, order_id: int) -> bool:
        raise NotImplementedError
