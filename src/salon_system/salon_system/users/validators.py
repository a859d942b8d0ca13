from __future__ import annotations

from typing import Iterable, Optional

from ..common.validation import CommandValidator, Rule, ValidationFailure
from ..common.validators import has_min_length, is_blank, parse_id
from ..core.constants import MIN_PASSWORD_LENGTH
from .model import UpdateUserCommand, UserCommand
from .repository import UserRepository

LOGIN_EMPTY = "Login can't be empty!"
PASSWORD_TOO_SHORT = "Password must be bigger than 5 characters!"
LOGIN_TAKEN = "Login already exist!"


def _login_taken(users: UserRepository, login: str, own_id: Optional[str]) -> bool:
    existing = users.get_by_login(login)
    if existing is None:
        return False
    # The user may resubmit its own login.
    return existing.user_id != parse_id(own_id)


class UserCommandValidator(CommandValidator[UserCommand]):
    """Rules for creating a user."""

    def __init__(self, users: UserRepository):
        self._users = users

    def rules(self) -> Iterable[Rule[UserCommand]]:
        return (self._login_not_empty, self._password_long_enough, self._login_unique)

    def _login_not_empty(self, command: UserCommand) -> Optional[ValidationFailure]:
        if is_blank(command.login):
            return ValidationFailure("login", LOGIN_EMPTY)
        return None

    def _password_long_enough(self, command: UserCommand) -> Optional[ValidationFailure]:
        if not has_min_length(command.password, MIN_PASSWORD_LENGTH):
            return ValidationFailure("password", PASSWORD_TOO_SHORT)
        return None

    def _login_unique(self, command: UserCommand) -> Optional[ValidationFailure]:
        if is_blank(command.login):
            return None
        if _login_taken(self._users, command.login.strip(), command.id):
            return ValidationFailure("login", LOGIN_TAKEN)
        return None


class UpdateUserCommandValidator(CommandValidator[UpdateUserCommand]):
    """Rules for updating a user.

    The login is only checked when the command carries one; None keeps the
    stored login. Password is not part of an update.
    """

    def __init__(self, users: UserRepository):
        self._users = users

    def rules(self) -> Iterable[Rule[UpdateUserCommand]]:
        return (self._login_not_empty, self._login_unique)

    def _login_not_empty(self, command: UpdateUserCommand) -> Optional[ValidationFailure]:
        if command.login is not None and is_blank(command.login):
            return ValidationFailure("login", LOGIN_EMPTY)
        return None

    def _login_unique(self, command: UpdateUserCommand) -> Optional[ValidationFailure]:
        if is_blank(command.login):
            return None
        if _login_taken(self._users, command.login.strip(), command.id):
            return ValidationFailure("login", LOGIN_TAKEN)
        return None
