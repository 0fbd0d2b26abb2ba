from __future__ import annotations
import re

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

def parse_operand(text: str | None) -> int:
    # leading integer wins: "12abc" -> 12, "3.9" -> 3, "abc" -> 0
    m = _LEADING_INT.match(text or "")
    return int(m.group(1)) if m else 0

def add(a: int, b: int) -> int:
    return a + b
