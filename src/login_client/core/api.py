# core/api.py
from __future__ import annotations
import requests

from login_client.core.config import settings

def _headers(extra: dict[str, str] | None = None) -> dict[str, str]:
    h = {"Accept": "application/json"}
    if extra:
        h.update(extra)
    return h

def post_json(path: str, payload: dict):
    r = requests.post(
        f"{settings.API_BASE_URL}{path}",
        headers=_headers({"Content-Type": "application/json"}),
        json=payload,
        timeout=settings.API_TIMEOUT,
    )
    r.raise_for_status()
    return r.json()
