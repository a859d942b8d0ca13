from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import User


class UserRepository(Protocol):
    """Repository interface for User (the credential store).

    Note (DIP): the service layer depends on this interface, not on a concrete DB.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_login(self, login: str) -> Optional[User]:
        raise NotImplementedError

    def list_all(self, *, amount: Optional[int] = None) -> Sequence[User]:
        raise NotImplementedError

    def insert(self, user: User) -> int:
        """Store a new user. Returns user_id.

        Raises LoginTakenError when the login is already stored.
        """

        raise NotImplementedError

    def update(self, user: User) -> bool:
        raise NotImplementedError

    def delete_by_id(self, user_id: int) -> bool:
        raise NotImplementedError
