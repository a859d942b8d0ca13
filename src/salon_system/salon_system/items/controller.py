from __future__ import annotations

from flask import Flask

from ..common.http import json_body, optional_str, respond, token_required
from ..common.validators import parse_decimal
from ..core.result import Result
from .model import ItemCommand


def register(app: Flask, container) -> None:
    auth_required = token_required(container.token_issuer)

    @app.route("/api/items", methods=["POST"], endpoint="create_item")
    @auth_required
    def create_item():
        data = json_body()
        value = parse_decimal(data.get("value"))
        if data.get("value") not in (None, "") and value is None:
            return respond(Result.fail(["Value must be a number!"]))

        command = ItemCommand(
            description=optional_str(data.get("description")),
            value=value,
        )
        return respond(container.item_service.create_item(command))

    @app.route("/api/items", methods=["GET"], endpoint="list_items")
    @auth_required
    def list_items():
        return respond(container.item_service.get_all_items())

    @app.route("/api/items/<item_id>", methods=["GET"], endpoint="get_item")
    @auth_required
    def get_item(item_id: str):
        return respond(container.item_service.get_item_by_id(item_id))

    @app.route("/api/items/<item_id>", methods=["DELETE"], endpoint="delete_item")
    @auth_required
    def delete_item(item_id: str):
        return respond(container.item_service.delete_item(item_id))
