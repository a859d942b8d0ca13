from __future__ import annotations

from ..common.validators import parse_id
from .model import UpdateUserCommand, User, UserCommand, UserResponse


class UserMapper:
    def map_command_to_entity(self, command: UserCommand, *, password_hash: str) -> User:
        """Build the entity a create command describes.

        Empty or missing ids map to an unsaved user (user_id None).
        """

        return User(
            user_id=parse_id(command.id),
            login=(command.login or "").strip(),
            password_hash=password_hash,
            name=(command.name or "").strip(),
            email=(command.email or "").strip(),
            role=command.role,
        )

    def apply_update(self, user: User, command: UpdateUserCommand) -> User:
        return User(
            user_id=user.user_id,
            login=command.login.strip() if command.login is not None else user.login,
            password_hash=user.password_hash,
            name=command.name.strip() if command.name is not None else user.name,
            email=command.email.strip() if command.email is not None else user.email,
            role=user.role,
        )

    def map_response(self, user: User) -> UserResponse:
        return UserResponse(
            id=str(user.user_id),
            login=user.login,
            name=user.name,
            email=user.email,
            role=user.role,
        )
