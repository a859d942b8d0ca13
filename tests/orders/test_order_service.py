from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from src.salon_system.salon_system.core.enums import PaymentMethod
from src.salon_system.salon_system.items.model import Item
from src.salon_system.salon_system.orders.model import ItemOrderDto, ServiceOrderCommand
from src.salon_system.salon_system.orders.service import ORDER_INVALID, OrderService
from src.salon_system.salon_system.orders.validators import (
    AMOUNT_NOT_POSITIVE,
    CLIENT_EMPTY,
    CLIENT_NOT_FOUND,
    DATE_REQUIRED,
    ITEM_NOT_FOUND,
    ITEMS_EMPTY,
    PAYMENT_METHOD_INVALID,
)


@pytest.fixture
def svc(orders_repo, clients_repo, items_repo):
    return OrderService(orders_repo, clients_repo, items_repo)


def _command(**overrides):
    values = dict(
        client_id="1",
        date=date(2024, 5, 10),
        payment_method=PaymentMethod.CREDIT,
        obs="first visit",
        items=[ItemOrderDto(id="1", amount=1), ItemOrderDto(id="2", amount=2)],
    )
    values.update(overrides)
    return ServiceOrderCommand(**values)


def test_create_order_snapshots_item_values(svc, orders_repo, items_repo):
    result = svc.create_order(_command())

    assert result.status_code == 201
    assert result.value.id == "1"
    assert result.value.total == Decimal("75.00")
    assert [(i.description, i.amount) for i in result.value.items] == [("Haircut", 1), ("Beard trim", 2)]

    # A later catalog price change does not touch the stored order.
    items_repo.delete_by_id(1)
    items_repo.insert(Item(item_id=None, description="Haircut", value=Decimal("50.00")))
    assert orders_repo.get_by_id(1).total == Decimal("75.00")


def test_create_order_collects_all_errors(svc):
    result = svc.create_order(ServiceOrderCommand())

    assert result.error is True
    assert result.status_code == 400
    assert result.value == [CLIENT_EMPTY, DATE_REQUIRED, PAYMENT_METHOD_INVALID, ITEMS_EMPTY]


def test_unknown_client_fails(svc):
    result = svc.create_order(_command(client_id="99"))

    assert result.value == [CLIENT_NOT_FOUND]


def test_unknown_item_fails(svc):
    result = svc.create_order(_command(items=[ItemOrderDto(id="77", amount=1)]))

    assert result.value == [ITEM_NOT_FOUND]


def test_zero_amount_fails(svc):
    result = svc.create_order(_command(items=[ItemOrderDto(id="1", amount=0)]))

    assert result.value == [AMOUNT_NOT_POSITIVE]


def test_get_orders(svc):
    svc.create_order(_command())

    assert len(svc.get_all_orders().value) == 1
    assert svc.get_order_by_id("1").value.client_id == "1"
    assert svc.get_order_by_id("2").value == ORDER_INVALID


def test_get_orders_by_client(svc):
    svc.create_order(_command())

    assert len(svc.get_orders_by_client_id("1").value) == 1
    assert svc.get_orders_by_client_id("2").value == []
    assert svc.get_orders_by_client_id("not-an-id").value == []


def test_delete_order(svc):
    svc.create_order(_command())

    assert svc.delete_order("1").error is False
    assert svc.delete_order("1").value == ORDER_INVALID


class VanishingItems:
    """Serves each item once, then behaves as if it had been deleted."""

    def __init__(self, items_repo):
        self._items = items_repo
        self.lookups: list[int] = []

    def get_by_id(self, item_id: int):
        self.lookups.append(item_id)
        if self.lookups.count(item_id) > 1:
            return None
        return self._items.get_by_id(item_id)


def test_create_order_reads_each_item_once(orders_repo, clients_repo, items_repo):
    items = VanishingItems(items_repo)
    svc = OrderService(orders_repo, clients_repo, items)

    result = svc.create_order(
        _command(items=[ItemOrderDto(id="1", amount=1), ItemOrderDto(id="2", amount=1), ItemOrderDto(id="1", amount=2)])
    )

    assert result.status_code == 201
    assert items.lookups == [1, 2]
    assert [(i.id, i.amount) for i in result.value.items] == [("1", 1), ("2", 1), ("1", 2)]
    assert result.value.total == Decimal("125.00")
