from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Note: Plain data object (no DB access code). user_id is None until stored.
    """

    user_id: Optional[int]
    login: str
    password_hash: str
    name: str
    email: str
    role: Role = Role.USER

    def with_id(self, user_id: int) -> "User":
        return replace(self, user_id=int(user_id))


@dataclass
class UserCommand:
    """Create command. id is normally empty; when given, it is the user's own id."""

    login: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    role: Role = Role.USER
    id: Optional[str] = None


@dataclass
class UpdateUserCommand:
    """Update command. Fields left as None keep their current value."""

    id: Optional[str] = None
    login: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None


@dataclass
class AuthCommand:
    login: str = ""
    password: str = ""


@dataclass(frozen=True)
class UserResponse:
    id: str
    login: str
    name: str
    email: str
    role: Role
