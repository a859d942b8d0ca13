from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Client


class ClientRepository(Protocol):
    def get_by_id(self, client_id: int) -> Optional[Client]:
        raise NotImplementedError

    def list_all(self, *, amount: Optional[int] = None) -> Sequence[Client]:
        """List clients ordered by id; amount caps the number returned."""

        raise NotImplementedError

    def insert(self, client: Client) -> int:
        raise NotImplementedError

    def update(self, client: Client) -> bool:
        raise NotImplementedError

    def delete_by_id(self, client_id: int) -> bool:
        raise NotImplementedError
