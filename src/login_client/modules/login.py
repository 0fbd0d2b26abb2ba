# login_client/modules/login.py
from __future__ import annotations
from enum import Enum
from typing import Callable, MutableMapping

import requests
import streamlit as st
from loguru import logger

from login_client.core import auth_client
from login_client.core.errors import MissingTokenError
from login_client.core.state import CALCULATOR, SessionEvent, SessionStore, go, route_after

GENERIC_ERROR = "An error occurred. Please try again."
MISSING_FIELDS = "Please enter both username and password."

CARD_MAX_W = 420


class FormStatus(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    ERROR = "error"


def describe_login_error(exc: Exception) -> str:
    """Message from the error's response body if it has one, else the generic text."""
    # a 4xx Response is falsy, so compare against None
    response = getattr(exc, "response", None)
    if response is not None:
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
    return GENERIC_ERROR


class LoginForm:
    """Idle -> Submitting -> (navigated away | Error), Error -> Submitting.

    Status, error text and the last issued request number live in ``state``
    so they survive Streamlit reruns. A result whose request number is not
    the latest one issued is dropped.
    """

    STATUS_KEY = "login_status"
    ERROR_KEY = "login_error"
    SEQ_KEY = "login_seq"

    def __init__(
        self,
        store: SessionStore,
        state: MutableMapping,
        authenticate: Callable[[str, str], str] = auth_client.login,
    ):
        self.store = store
        self._state = state
        self._authenticate = authenticate
        state.setdefault(self.STATUS_KEY, FormStatus.IDLE)
        state.setdefault(self.ERROR_KEY, "")
        state.setdefault(self.SEQ_KEY, 0)

    @property
    def status(self) -> FormStatus:
        return self._state[self.STATUS_KEY]

    @property
    def error(self) -> str:
        return self._state[self.ERROR_KEY]

    def begin(self) -> int:
        self._state[self.SEQ_KEY] += 1
        self._state[self.STATUS_KEY] = FormStatus.SUBMITTING
        self._state[self.ERROR_KEY] = ""
        return self._state[self.SEQ_KEY]

    def finish(self, request_id: int, token: str | None = None, error: Exception | None = None) -> SessionEvent | None:
        if request_id != self._state[self.SEQ_KEY]:
            logger.debug("Dropping stale login result #{} (latest is #{})", request_id, self._state[self.SEQ_KEY])
            return None
        if error is not None:
            self._state[self.STATUS_KEY] = FormStatus.ERROR
            self._state[self.ERROR_KEY] = describe_login_error(error)
            return None
        event = self.store.login(token)
        self._state[self.STATUS_KEY] = FormStatus.IDLE
        return event

    def submit(self, username: str, password: str) -> SessionEvent | None:
        """Run one login attempt. Returns the session event on success, else None."""
        if not username or not password:
            return None
        request_id = self.begin()
        try:
            token = self._authenticate(username, password)
        except (requests.RequestException, MissingTokenError) as exc:
            logger.warning("Login for {!r} failed: {}", username, exc)
            return self.finish(request_id, error=exc)
        return self.finish(request_id, token=token)


def render_login(store: SessionStore):
    _inject_css()
    form = LoginForm(store, st.session_state)

    st.markdown(f"""
    <div class="auth-wrap">
      <div class="auth-card" style="max-width:{CARD_MAX_W}px;">
        <div class="auth-head"><div class="auth-title">Login</div></div>
    """, unsafe_allow_html=True)

    with st.form("login_form", clear_on_submit=False):
        username = st.text_input("Username:")
        pwd = st.text_input("Password:", type="password")
        if form.status == FormStatus.ERROR and form.error:
            st.error(form.error)
        submitted = st.form_submit_button("Login", use_container_width=True, type="primary")

    st.markdown("</div></div>", unsafe_allow_html=True)

    st.button("Calculator", key="go_calc", use_container_width=True,
              on_click=lambda: go(st.session_state, CALCULATOR))

    if not submitted:
        return
    if not username or not pwd:
        st.warning(MISSING_FIELDS)
        return

    with st.spinner("Signing in..."):
        event = form.submit(username, pwd)
    # success or failure, redraw so the form shows the new state
    if event is not None:
        go(st.session_state, route_after(event))
    st.rerun()


def _inject_css():
    st.markdown("""
    <style>
      .auth-wrap{ display:flex; justify-content:center; padding: 6vh 16px 0; }
      .auth-card{ width:100%; text-align:center; }
      .auth-title{ font-size: 26px; font-weight: 800; margin: 0 0 8px; }
    </style>
    """, unsafe_allow_html=True)
