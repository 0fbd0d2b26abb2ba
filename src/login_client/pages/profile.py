# pages/profile.py
from __future__ import annotations
import streamlit as st

from login_client.core.state import SessionStore, go, route_after

WELCOME = "Welcome to your profile!"


def logout(store: SessionStore, state):
    go(state, route_after(store.logout()))


def render_profile(store: SessionStore):
    st.title("User Profile")
    st.write(WELCOME)
    st.button("Logout", key="logout", on_click=logout, args=(store, st.session_state))
