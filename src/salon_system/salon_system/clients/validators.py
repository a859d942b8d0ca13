from __future__ import annotations

from typing import Iterable, Optional, Union

from ..common.validation import CommandValidator, Rule, ValidationFailure
from ..common.validators import is_blank
from .model import ClientCommand, UpdateClientCommand

NAME_EMPTY = "Name can't be empty!"
EMAIL_INVALID = "Email is invalid!"

AnyClientCommand = Union[ClientCommand, UpdateClientCommand]


class ClientCommandValidator(CommandValidator[AnyClientCommand]):
    """Rules shared by client create and update.

    On update a None name means "keep current"; on create it is required.
    """

    def __init__(self, *, require_name: bool = True):
        self._require_name = require_name

    def rules(self) -> Iterable[Rule[AnyClientCommand]]:
        return (self._name_not_empty, self._email_well_formed)

    def _name_not_empty(self, command: AnyClientCommand) -> Optional[ValidationFailure]:
        if command.name is None and not self._require_name:
            return None
        if is_blank(command.name):
            return ValidationFailure("name", NAME_EMPTY)
        return None

    def _email_well_formed(self, command: AnyClientCommand) -> Optional[ValidationFailure]:
        if is_blank(command.email):
            return None
        local, at, domain = command.email.strip().partition("@")
        if not at or not local or not domain:
            return ValidationFailure("email", EMAIL_INVALID)
        return None
