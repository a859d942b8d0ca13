from __future__ import annotations

import logging
from typing import Optional

from ..common.validators import parse_id
from ..core.constants import AUTH_FAILED_MESSAGE
from ..core.exceptions import LoginTakenError
from ..core.result import Result
from .mapper import UserMapper
from .model import AuthCommand, UpdateUserCommand, UserCommand
from .passwords import UNKNOWN_USER_HASH, PasswordVerifier
from .repository import UserRepository
from .tokens import TokenIssuer
from .validators import LOGIN_TAKEN, UpdateUserCommandValidator, UserCommandValidator

logger = logging.getLogger(__name__)

USER_INVALID = "User Invalid"


class AuthService:
    """Use case: authenticate user (login) and hand out a token."""

    def __init__(self, users: UserRepository, passwords: PasswordVerifier, tokens: TokenIssuer):
        self._users = users
        self._passwords = passwords
        self._tokens = tokens

    def authenticate(self, command: AuthCommand) -> Result:
        # Unknown login and wrong password answer the same way on purpose.
        user = self._users.get_by_login((command.login or "").strip())
        if not user:
            self._passwords.verify(UNKNOWN_USER_HASH, command.password or "")
            logger.info("Authentication failed: unknown login")
            return Result.fail(AUTH_FAILED_MESSAGE)

        if not self._passwords.verify(user.password_hash, command.password):
            logger.info("Authentication failed: bad password for user_id=%s", user.user_id)
            return Result.fail(AUTH_FAILED_MESSAGE)

        token = self._tokens.generate_token(user)
        logger.info("User authenticated: user_id=%s", user.user_id)
        return Result.ok(token)


class UserService:
    """Use case: manage users."""

    def __init__(self, users: UserRepository, passwords: PasswordVerifier, mapper: Optional[UserMapper] = None):
        self._users = users
        self._passwords = passwords
        self._mapper = mapper or UserMapper()
        self._create_validator = UserCommandValidator(users)
        self._update_validator = UpdateUserCommandValidator(users)

    def create_user(self, command: UserCommand) -> Result:
        validation = self._create_validator.validate(command)
        if not validation.is_valid:
            return Result.from_validation(validation)

        user = self._mapper.map_command_to_entity(command, password_hash=self._passwords.hash(command.password))
        try:
            user_id = self._users.insert(user)
        except LoginTakenError:
            # Lost a race with another create for the same login.
            return Result.fail([LOGIN_TAKEN])
        logger.info("User created: user_id=%s", user_id)
        return Result.created(self._mapper.map_response(user.with_id(user_id)))

    def get_all_users(self, amount: Optional[int] = None) -> Result:
        users = self._users.list_all(amount=amount)
        return Result.ok([self._mapper.map_response(u) for u in users])

    def get_user_by_id(self, user_id) -> Result:
        user = self._find(user_id)
        if not user:
            return Result.fail(USER_INVALID)
        return Result.ok(self._mapper.map_response(user))

    def update_user(self, command: UpdateUserCommand) -> Result:
        validation = self._update_validator.validate(command)
        if not validation.is_valid:
            return Result.from_validation(validation)

        user = self._find(command.id)
        if not user:
            return Result.fail(USER_INVALID)

        # rowcount is 0 when nothing changed, so existence was checked above.
        try:
            self._users.update(self._mapper.apply_update(user, command))
        except LoginTakenError:
            return Result.fail([LOGIN_TAKEN])
        return Result.ok()

    def delete_user(self, user_id) -> Result:
        uid = parse_id(user_id)
        if uid is None or not self._users.delete_by_id(uid):
            return Result.fail(USER_INVALID)
        logger.info("User deleted: user_id=%s", uid)
        return Result.ok()

    def _find(self, user_id):
        uid = parse_id(user_id)
        return self._users.get_by_id(uid) if uid is not None else None
