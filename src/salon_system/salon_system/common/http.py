from __future__ import annotations

from functools import wraps
from http import HTTPStatus

from flask import g, jsonify, request

from ..core.exceptions import AuthenticationError
from ..core.result import Result


def respond(result: Result):
    """JSON body is the Result itself; HTTP status follows Result.status_code."""
    return jsonify(result.to_dict()), int(result.status_code)


def json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _bearer_token() -> str:
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    return token.strip() if scheme.lower() == "bearer" else ""


def optional_claims(tokens):
    """Claims of a valid bearer token, or None for anonymous (or bad-token) callers."""
    token = _bearer_token()
    if not token:
        return None
    try:
        return tokens.decode_token(token)
    except AuthenticationError:
        return None


def token_required(tokens):
    """Build a decorator that only lets requests with a valid bearer token through.

    The decoded claims end up in flask.g.claims.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            token = _bearer_token()
            if not token:
                return respond(Result.fail("Missing bearer token", HTTPStatus.UNAUTHORIZED))
            try:
                g.claims = tokens.decode_token(token)
            except AuthenticationError as e:
                return respond(Result.fail(str(e), HTTPStatus.UNAUTHORIZED))
            return view(*args, **kwargs)

        return wrapper

    return decorator


def optional_str(value):
    """JSON field as str, keeping None for "not sent"."""
    return None if value is None else str(value)
