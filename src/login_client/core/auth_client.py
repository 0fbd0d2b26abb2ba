from __future__ import annotations

from login_client.core.api import post_json
from login_client.core.errors import MissingTokenError


def login(username: str, password: str) -> str:
    """POST /login and return the bearer token.

    Transport and HTTP errors from ``requests`` are left to the caller.
    """
    data = post_json("/login", {"username": username, "password": password})
    token = data.get("token") if isinstance(data, dict) else None
    if not token:
        raise MissingTokenError("No token returned by server.")
    return token
