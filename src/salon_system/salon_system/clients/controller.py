from __future__ import annotations

from flask import Flask, request

from ..common.http import json_body, optional_str, respond, token_required
from .model import ClientCommand, UpdateClientCommand


def _numbers(value):
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value]
    return [str(value)]


def register(app: Flask, container) -> None:
    auth_required = token_required(container.token_issuer)

    @app.route("/api/clients", methods=["POST"], endpoint="create_client")
    @auth_required
    def create_client():
        data = json_body()
        command = ClientCommand(
            name=optional_str(data.get("name")),
            email=optional_str(data.get("email")),
            contact_numbers=_numbers(data.get("contactNumbers")) or [],
        )
        return respond(container.client_service.create_client(command))

    @app.route("/api/clients", methods=["GET"], endpoint="list_clients")
    @auth_required
    def list_clients():
        amount = request.args.get("amount", type=int)
        return respond(container.client_service.get_all_clients(amount))

    @app.route("/api/clients/<client_id>", methods=["GET"], endpoint="get_client")
    @auth_required
    def get_client(client_id: str):
        return respond(container.client_service.get_client_by_id(client_id))

    @app.route("/api/clients", methods=["PUT"], endpoint="update_client")
    @auth_required
    def update_client():
        data = json_body()
        command = UpdateClientCommand(
            id=optional_str(data.get("id")),
            name=optional_str(data.get("name")),
            email=optional_str(data.get("email")),
            contact_numbers=_numbers(data.get("contactNumbers")),
        )
        return respond(container.client_service.update_client(command))

    @app.route("/api/clients/<client_id>", methods=["DELETE"], endpoint="delete_client")
    @auth_required
    def delete_client(client_id: str):
        return respond(container.client_service.delete_client(client_id))
