from __future__ import annotations

from pathlib import Path
from urllib.parse import urlsplit

import pytest
import requests
import streamlit as st
from streamlit.runtime import context as st_context
from fastapi.testclient import TestClient
from streamlit.testing.v1 import AppTest

from login_api.main import app
from login_client.core.browser import BROWSER_KEY
from login_client.core.config import settings
from login_client.core.storage import KeyValueStorage


@pytest.fixture()
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def store_path(tmp_path):
    return tmp_path / "store" / "session.json"


@pytest.fixture()
def storage(store_path):
    kv = KeyValueStorage.open(store_path)
    yield kv
    kv.close()


def _as_requests_response(url, resp) -> requests.Response:
    r = requests.Response()
    r.status_code = resp.status_code
    r._content = resp.content
    r.headers.update(resp.headers)
    r.reason = resp.reason_phrase
    r.url = url
    return r


@pytest.fixture()
def backend(monkeypatch, client):
    """Send the client's requests.post calls into the in-process API."""
    calls: list[dict] = []

    def post(url, headers=None, json=None, timeout=None, **kwargs):
        calls.append({"url": url, "json": json, "headers": headers, "timeout": timeout})
        resp = client.post(urlsplit(url).path, json=json, headers=headers)
        return _as_requests_response(url, resp)

    monkeypatch.setattr(requests, "post", post)
    return calls


APP_PATH = Path(__file__).resolve().parents[1] / "src" / "login_client" / "app.py"


@pytest.fixture()
def new_session(backend, store_path, monkeypatch):
    """Factory for browser sessions of the Streamlit app, wired to the in-process API."""
    monkeypatch.setattr(settings, "TOKEN_STORE_PATH", str(store_path))
    # AppTest's mocked runtime has no real client context; report none so
    # st.context.cookies is an empty mapping instead of a MagicMock.
    monkeypatch.setattr(st_context, "_get_client_context", lambda: None)
    st.cache_resource.clear()

    def make(route: str | None = None, browser_id: str | None = None) -> AppTest:
        at = AppTest.from_file(APP_PATH, default_timeout=30)
        if route is not None:
            at.query_params["route"] = route
        if browser_id is not None:
            at.session_state[BROWSER_KEY] = browser_id
        return at

    yield make
    st.cache_resource.clear()
