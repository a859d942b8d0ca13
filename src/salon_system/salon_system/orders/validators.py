from __future__ import annotations

from typing import Iterable, Mapping, Optional

from ..clients.repository import ClientRepository
from ..common.validation import CommandValidator, Rule, ValidationFailure
from ..common.validators import is_blank, parse_id
from ..items.model import Item
from .model import ServiceOrderCommand

CLIENT_EMPTY = "Client can't be empty!"
CLIENT_NOT_FOUND = "Client not found!"
DATE_REQUIRED = "Date is required!"
PAYMENT_METHOD_INVALID = "Payment method is invalid!"
ITEMS_EMPTY = "Order must have at least one item!"
ITEM_NOT_FOUND = "Item not found!"
AMOUNT_NOT_POSITIVE = "Amount must be greater than zero!"


class ServiceOrderCommandValidator(CommandValidator[ServiceOrderCommand]):
    """Rules for a new order.

    catalog holds the items the command refers to, already looked up by id;
    ids missing from it are unknown items.
    """

    def __init__(self, clients: ClientRepository, catalog: Mapping[int, Item]):
        self._clients = clients
        self._catalog = catalog

    def rules(self) -> Iterable[Rule[ServiceOrderCommand]]:
        return (
            self._client_not_empty,
            self._client_exists,
            self._date_present,
            self._payment_method_present,
            self._has_items,
            self._items_exist,
            self._amounts_positive,
        )

    def _client_not_empty(self, command: ServiceOrderCommand) -> Optional[ValidationFailure]:
        if is_blank(command.client_id):
            return ValidationFailure("client_id", CLIENT_EMPTY)
        return None

    def _client_exists(self, command: ServiceOrderCommand) -> Optional[ValidationFailure]:
        if is_blank(command.client_id):
            return None
        cid = parse_id(command.client_id)
        if cid is None or self._clients.get_by_id(cid) is None:
            return ValidationFailure("client_id", CLIENT_NOT_FOUND)
        return None

    def _date_present(self, command: ServiceOrderCommand) -> Optional[ValidationFailure]:
        if command.date is None:
            return ValidationFailure("date", DATE_REQUIRED)
        return None

    def _payment_method_present(self, command: ServiceOrderCommand) -> Optional[ValidationFailure]:
        if command.payment_method is None:
            return ValidationFailure("payment_method", PAYMENT_METHOD_INVALID)
        return None

    def _has_items(self, command: ServiceOrderCommand) -> Optional[ValidationFailure]:
        if not command.items:
            return ValidationFailure("items", ITEMS_EMPTY)
        return None

    def _items_exist(self, command: ServiceOrderCommand) -> Optional[ValidationFailure]:
        for line in command.items:
            iid = parse_id(line.id)
            if iid is None or iid not in self._catalog:
                return ValidationFailure("items", ITEM_NOT_FOUND)
        return None

    def _amounts_positive(self, command: ServiceOrderCommand) -> Optional[ValidationFailure]:
        if any(line.amount is None or int(line.amount) < 1 for line in command.items):
            return ValidationFailure("items", AMOUNT_NOT_POSITIVE)
        return None
