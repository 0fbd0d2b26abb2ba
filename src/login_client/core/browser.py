from __future__ import annotations
import re
import uuid
from typing import Mapping, MutableMapping

COOKIE_NAME = "login_browser_id"
BROWSER_KEY = "_browser_id"
COOKIE_MAX_AGE = 60 * 60 * 24 * 365

_ID = re.compile(r"[0-9a-f]{32}")


def resolve_browser_id(state: MutableMapping, cookies: Mapping[str, str]) -> str:
    """Id of the browser behind this session.

    Taken from the session if already known, else from the request cookie,
    else freshly minted. The caller writes the cookie when it was missing.
    """
    bid = state.get(BROWSER_KEY)
    if not bid:
        cookie = cookies.get(COOKIE_NAME) or ""
        bid = cookie if _ID.fullmatch(cookie) else uuid.uuid4().hex
        state[BROWSER_KEY] = bid
    return bid


def cookie_script(browser_id: str) -> str:
    return (
        "<script>"
        f"document.cookie = '{COOKIE_NAME}={browser_id}; path=/; "
        f"max-age={COOKIE_MAX_AGE}; SameSite=Lax';"
        "</script>"
    )
