from __future__ import annotations
from typing import Callable, MutableMapping

from loguru import logger

from login_client.core.state import LOGIN, SessionStore, go


def guard(store: SessionStore, state: MutableMapping, render: Callable[[], None]) -> bool:
    """Render ``render`` only for an authenticated session.

    Without a token the route is switched to the login page and nothing is
    drawn; the caller reruns the script. Returns whether ``render`` ran.
    """
    if store.is_authenticated:
        render()
        return True
    logger.debug("No session token, redirecting {} -> {}", state.get("route"), LOGIN)
    go(state, LOGIN)
    return False
