from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable, Optional

from ..common.validation import CommandValidator, Rule, ValidationFailure
from ..common.validators import is_blank, parse_id
from ..core.result import Result
from .model import Item, ItemCommand, ItemResponse
from .repository import ItemRepository

logger = logging.getLogger(__name__)

ITEM_INVALID = "Item Invalid"
DESCRIPTION_EMPTY = "Description can't be empty!"
VALUE_NOT_POSITIVE = "Value must be greater than zero!"


class ItemCommandValidator(CommandValidator[ItemCommand]):
    def rules(self) -> Iterable[Rule[ItemCommand]]:
        return (self._description_not_empty, self._value_positive)

    def _description_not_empty(self, command: ItemCommand) -> Optional[ValidationFailure]:
        if is_blank(command.description):
            return ValidationFailure("description", DESCRIPTION_EMPTY)
        return None

    def _value_positive(self, command: ItemCommand) -> Optional[ValidationFailure]:
        if command.value is None or Decimal(command.value) <= 0:
            return ValidationFailure("value", VALUE_NOT_POSITIVE)
        return None


def to_response(item: Item) -> ItemResponse:
    return ItemResponse(id=str(item.item_id), description=item.description, value=item.value)


class ItemService:
    def __init__(self, items: ItemRepository):
        self._items = items
        self._validator = ItemCommandValidator()

    def create_item(self, command: ItemCommand) -> Result:
        validation = self._validator.validate(command)
        if not validation.is_valid:
            return Result.from_validation(validation)

        item = Item(item_id=None, description=command.description.strip(), value=Decimal(command.value))
        item_id = self._items.insert(item)
        logger.info("Item created: item_id=%s", item_id)
        return Result.created(to_response(item.with_id(item_id)))

    def get_all_items(self) -> Result:
        return Result.ok([to_response(i) for i in self._items.list_all()])

    def get_item_by_id(self, item_id) -> Result:
        iid = parse_id(item_id)
        item = self._items.get_by_id(iid) if iid is not None else None
        if not item:
            return Result.fail(ITEM_INVALID)
        return Result.ok(to_response(item))

    def delete_item(self, item_id) -> Result:
        iid = parse_id(item_id)
        if iid is None or not self._items.delete_by_id(iid):
            return Result.fail(ITEM_INVALID)
        logger.info("Item deleted: item_id=%s", iid)
        return Result.ok()
