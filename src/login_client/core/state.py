from __future__ import annotations
from enum import Enum
from typing import Mapping, MutableMapping

from loguru import logger

from login_client.core.errors import MissingContextError
from login_client.core.storage import KeyValueStorage

# client routes
LOGIN = "/"
PROFILE = "/profile"
CALCULATOR = "/calculator"
ROUTES = (LOGIN, PROFILE, CALCULATOR)

TOKEN_KEY = "authToken"
STORE_KEY = "_session_store"

SESSION_KEYS = {
    "route": LOGIN,
}

def init_session(state: MutableMapping, params: Mapping | None = None):
    """Fill in defaults; the first run of a session takes its route from the URL."""
    if "route" not in state and params is not None:
        requested = params.get("route")
        if requested in ROUTES:
            state["route"] = requested
    for k, default in SESSION_KEYS.items():
        if k not in state:
            state[k] = default

def sync_route(state: MutableMapping, params: MutableMapping):
    # keep ?route= in the address bar in step with the page shown
    if params.get("route") != state["route"]:
        params["route"] = state["route"]

def go(state: MutableMapping, route: str, **kwargs):
    state["route"] = route
    for k, v in kwargs.items():
        state[k] = v


class SessionEvent(str, Enum):
    LOGGED_IN = "logged_in"
    LOGGED_OUT = "logged_out"


def route_after(event: SessionEvent) -> str:
    return PROFILE if event is SessionEvent.LOGGED_IN else LOGIN


class SessionStore:
    """The current token, held in session state and mirrored to durable storage.

    Mutators only change state; they hand back a SessionEvent and leave
    navigation to whoever called them.
    """

    def __init__(self, state: MutableMapping, storage: KeyValueStorage):
        self._state = state
        self._storage = storage
        if TOKEN_KEY not in state:
            # fresh session (or a reload): pick up whatever was persisted
            state[TOKEN_KEY] = storage.get(TOKEN_KEY)

    @property
    def token(self) -> str | None:
        return self._state.get(TOKEN_KEY) or None

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    def login(self, token: str) -> SessionEvent:
        if not token:
            raise ValueError("token must be a non-empty string")
        self._state[TOKEN_KEY] = token
        self._storage.set(TOKEN_KEY, token)
        logger.info("Session token stored")
        return SessionEvent.LOGGED_IN

    def logout(self) -> SessionEvent:
        self._state[TOKEN_KEY] = None
        self._storage.remove(TOKEN_KEY)
        logger.info("Session token cleared")
        return SessionEvent.LOGGED_OUT


def provide_session_store(state: MutableMapping, storage: KeyValueStorage) -> SessionStore:
    store = state.get(STORE_KEY)
    if store is None:
        store = SessionStore(state, storage)
        state[STORE_KEY] = store
    return store

def get_session_store(state: MutableMapping) -> SessionStore:
    store = state.get(STORE_KEY)
    if store is None:
        raise MissingContextError(
            "SessionStore requested before provide_session_store() ran; "
            "call it once at the app root"
        )
    return store
