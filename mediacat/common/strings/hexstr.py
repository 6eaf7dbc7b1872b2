# mediacat/common/strings/hexstr.py
from __future__ import annotations

import string

HEX_DIGITS = frozenset(string.hexdigits)  # 0-9, a-f, A-F


def is_hex(s: str | None) -> bool:
    """True when `s` is non-empty and every character is a hex digit (either case)."""
    if not s:
        return False
    return all(ch in HEX_DIGITS for ch in s)
