from __future__ import annotations

from dataclasses import asdict, dataclass, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from http import HTTPStatus
from typing import Any

from ..common.validation import ValidationResult


@dataclass
class Result:
    """Outcome of a service call as seen by the HTTP layer.

    value carries the payload on success and the message (or list of messages)
    on failure; status_code is the HTTP status the controller answers with.
    """

    value: Any = None
    status_code: int = HTTPStatus.OK
    error: bool = False

    @classmethod
    def ok(cls, value: Any = None) -> "Result":
        return cls(value=value, status_code=HTTPStatus.OK)

    @classmethod
    def created(cls, value: Any = None) -> "Result":
        return cls(value=value, status_code=HTTPStatus.CREATED)

    @classmethod
    def fail(cls, value: Any, status_code: int = HTTPStatus.BAD_REQUEST) -> "Result":
        return cls(value=value, status_code=status_code, error=True)

    @classmethod
    def from_validation(cls, validation: ValidationResult) -> "Result":
        return cls.fail(validation.messages())

    def to_dict(self) -> dict:
        return {
            "error": self.error,
            "statusCode": int(self.status_code),
            "value": _jsonable(self.value),
        }


def _jsonable(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return _jsonable(asdict(value))
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value
