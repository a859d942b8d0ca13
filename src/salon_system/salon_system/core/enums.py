from __future__ import annotations

from enum import IntEnum


class Role(IntEnum):
    """User role used for authorization. Stored and put in tokens as its integer value."""

    ADMIN = 0
    USER = 1


class PaymentMethod(IntEnum):
    """How a service order was paid."""

    CASH = 0
    CREDIT = 1
    DEBIT = 2
