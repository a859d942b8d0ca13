from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class Client:
    """Domain entity: a salon client."""

    client_id: Optional[int]
    name: str
    email: str
    contact_numbers: Tuple[str, ...] = ()

    def with_id(self, client_id: int) -> "Client":
        return replace(self, client_id=int(client_id))


@dataclass
class ClientCommand:
    name: Optional[str] = None
    email: Optional[str] = None
    contact_numbers: List[str] = field(default_factory=list)


@dataclass
class UpdateClientCommand:
    id: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    contact_numbers: Optional[List[str]] = None


@dataclass(frozen=True)
class ClientResponse:
    id: str
    name: str
    email: str
    contact_numbers: List[str]
