from __future__ import annotations
import streamlit as st

st.set_page_config(page_title="Login", layout="centered", initial_sidebar_state="collapsed")

from login_client.core.browser import COOKIE_NAME, cookie_script, resolve_browser_id
from login_client.core.config import settings
from login_client.core.logging import setup_logging
from login_client.core.state import (
    CALCULATOR, LOGIN, PROFILE, get_session_store, init_session, provide_session_store, sync_route,
)
from login_client.core.storage import KeyValueStorage


@st.cache_resource
def _configure_logging() -> bool:
    setup_logging(settings.LOG_LEVEL)
    return True

@st.cache_resource
def _token_storage() -> KeyValueStorage:
    # one file per server process; records inside are scoped per browser
    return KeyValueStorage.open(settings.TOKEN_STORE_PATH)


_configure_logging()
init_session(st.session_state, st.query_params)
sync_route(st.session_state, st.query_params)

browser_id = resolve_browser_id(st.session_state, st.context.cookies)
if COOKIE_NAME not in st.context.cookies:
    st.html(cookie_script(browser_id), unsafe_allow_javascript=True)
provide_session_store(st.session_state, _token_storage().scoped(browser_id))

from login_client.modules.guard import guard
from login_client.modules.login import render_login
from login_client.pages.calculator import render_calculator
from login_client.pages.profile import render_profile

store = get_session_store(st.session_state)
route = st.session_state.get("route", LOGIN)

if route == PROFILE:
    if not guard(store, st.session_state, lambda: render_profile(store)):
        st.rerun()
elif route == CALCULATOR:
    render_calculator()
else:
    render_login(store)


# --- Hide Streamlit built-in sidebar/nav ---
hide_streamlit_sidebar_css = """
    <style>
    [data-testid="stSidebarNav"] {display: none !important;}
    section[data-testid="stSidebar"] {display: none !important;}
    </style>
"""
st.markdown(hide_streamlit_sidebar_css, unsafe_allow_html=True)
