from __future__ import annotations

from typing import Optional

from flask import Flask, request

from ..common.http import json_body, optional_claims, optional_str, respond, token_required
from ..core.enums import Role
from ..core.result import Result
from .model import AuthCommand, UpdateUserCommand, UserCommand
from .tokens import CLAIM_ROLE


def _parse_role(value) -> Optional[Role]:
    if value is None or value == "":
        return Role.USER
    try:
        return Role(int(value))
    except (TypeError, ValueError):
        pass
    try:
        return Role[str(value).upper()]
    except KeyError:
        return None


def register(app: Flask, container) -> None:
    auth_required = token_required(container.token_issuer)

    @app.route("/api/auth", methods=["POST"], endpoint="authenticate")
    def authenticate():
        data = json_body()
        command = AuthCommand(login=str(data.get("login") or ""), password=str(data.get("password") or ""))
        return respond(container.auth_service.authenticate(command))

    @app.route("/api/users", methods=["POST"], endpoint="create_user")
    def create_user():
        data = json_body()
        # Sign-up is open, but only an admin may pick a role other than USER.
        claims = optional_claims(container.token_issuer)
        if claims and claims.get(CLAIM_ROLE) == str(int(Role.ADMIN)):
            role = _parse_role(data.get("role"))
            if role is None:
                return respond(Result.fail(["Role is invalid!"]))
        else:
            role = Role.USER

        command = UserCommand(
            id=optional_str(data.get("id")),
            login=optional_str(data.get("login")),
            password=optional_str(data.get("password")),
            name=optional_str(data.get("name")),
            email=optional_str(data.get("email")),
            role=role,
        )
        return respond(container.user_service.create_user(command))

    @app.route("/api/users", methods=["GET"], endpoint="list_users")
    @auth_required
    def list_users():
        amount = request.args.get("amount", type=int)
        return respond(container.user_service.get_all_users(amount))

    @app.route("/api/users/<user_id>", methods=["GET"], endpoint="get_user")
    @auth_required
    def get_user(user_id: str):
        return respond(container.user_service.get_user_by_id(user_id))

    @app.route("/api/users", methods=["PUT"], endpoint="update_user")
    @auth_required
    def update_user():
        data = json_body()
        command = UpdateUserCommand(
            id=optional_str(data.get("id")),
            login=optional_str(data.get("login")),
            name=optional_str(data.get("name")),
            email=optional_str(data.get("email")),
        )
        return respond(container.user_service.update_user(command))

    @app.route("/api/users/<user_id>", methods=["DELETE"], endpoint="delete_user")
    @auth_required
    def delete_user(user_id: str):
        return respond(container.user_service.delete_user(user_id))
