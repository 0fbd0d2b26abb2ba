"""Form -> client -> API -> store -> guard, with the API served in-process."""

from login_client.core.state import LOGIN, PROFILE, TOKEN_KEY, SessionStore, go, route_after
from login_client.core.storage import KeyValueStorage
from login_client.modules.guard import guard
from login_client.modules.login import FormStatus, LoginForm
from login_client.pages.profile import WELCOME


def test_valid_login_lands_on_profile(backend, storage, store_path):
    state = {}
    store = SessionStore(state, storage)
    form = LoginForm(store, state)

    event = form.submit("user", "password123")
    go(state, route_after(event))

    assert state["route"] == PROFILE
    assert storage.get(TOKEN_KEY) == "mock-token-123456"

    shown = []
    assert guard(store, state, lambda: shown.append(WELCOME))
    assert shown == ["Welcome to your profile!"]

    reopened = KeyValueStorage.open(store_path)
    try:
        assert SessionStore({}, reopened).token == "mock-token-123456"
    finally:
        reopened.close()


def test_wrong_password_shows_server_message(backend, storage):
    state = {}
    store = SessionStore(state, storage)
    form = LoginForm(store, state)

    assert form.submit("user", "wrong") is None
    assert form.status == FormStatus.ERROR
    assert form.error == "Invalid username or password"
    assert store.token is None
    assert storage.get(TOKEN_KEY) is None


def test_profile_without_token_redirects_to_login(storage):
    state = {"route": PROFILE}
    store = SessionStore(state, storage)
    assert not guard(store, state, lambda: None)
    assert state["route"] == LOGIN
