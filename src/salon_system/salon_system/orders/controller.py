from __future__ import annotations

from typing import Optional

from flask import Flask

from ..common.datetime_utils import parse_optional_date
from ..common.http import json_body, optional_str, respond, token_required
from ..core.enums import PaymentMethod
from ..core.result import Result
from .model import ItemOrderDto, ServiceOrderCommand


def _parse_payment_method(value) -> Optional[PaymentMethod]:
    if value is None or value == "":
        return None
    try:
        return PaymentMethod(int(value))
    except (TypeError, ValueError):
        pass
    try:
        return PaymentMethod[str(value).upper()]
    except KeyError:
        return None


def _parse_amount(value) -> Optional[int]:
    if value is None or value == "":
        return 1
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _item_lines(raw) -> list[ItemOrderDto]:
    if not isinstance(raw, list):
        return []
    lines = []
    for entry in raw:
        if isinstance(entry, dict):
            lines.append(ItemOrderDto(id=optional_str(entry.get("id")), amount=_parse_amount(entry.get("amount"))))
        else:
            lines.append(ItemOrderDto(id=optional_str(entry)))
    return lines


def register(app: Flask, container) -> None:
    auth_required = token_required(container.token_issuer)

    @app.route("/api/orders", methods=["POST"], endpoint="create_order")
    @auth_required
    def create_order():
        data = json_body()
        raw_date = data.get("date")
        order_date = parse_optional_date(raw_date)
        if raw_date not in (None, "") and order_date is None:
            return respond(Result.fail(["Date is invalid!"]))

        command = ServiceOrderCommand(
            client_id=optional_str(data.get("clientId")),
            date=order_date,
            payment_method=_parse_payment_method(data.get("paymentMethod")),
            obs=optional_str(data.get("obs")),
            items=_item_lines(data.get("items")),
        )
        return respond(container.order_service.create_order(command))

    @app.route("/api/orders", methods=["GET"], endpoint="list_orders")
    @auth_required
    def list_orders():
        return respond(container.order_service.get_all_orders())

    @app.route("/api/orders/<order_id>", methods=["GET"], endpoint="get_order")
    @auth_required
    def get_order(order_id: str):
        return respond(container.order_service.get_order_by_id(order_id))

    @app.route("/api/orders/client/<client_id>", methods=["GET"], endpoint="list_client_orders")
    @auth_required
    def list_client_orders(client_id: str):
        return respond(container.order_service.get_orders_by_client_id(client_id))

    @app.route("/api/orders/<order_id>", methods=["DELETE"], endpoint="delete_order")
    @auth_required
    def delete_order(order_id: str):
        return respond(container.order_service.delete_order(order_id))
