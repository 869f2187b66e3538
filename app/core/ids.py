# app/core/ids.py

import re
import secrets
import time

from app.core.exceptions import InvalidArgument

_OBJECT_ID_RE = re.compile(r"^[0-9a-fA-F]{24}$")


def generate_object_id() -> str:
    """
    24 hex chars: creation time in seconds (8) followed by 16 random digits.
    Ids sort roughly by creation time but callers must not rely on it.
    """
    return f"{int(time.time()):08x}{secrets.token_hex(8)}"


def is_valid_object_id(value) -> bool:
    return isinstance(value, str) and bool(_OBJECT_ID_RE.match(value))


def ensure_object_id(value, label: str) -> str:
    """Return the normalized id or raise InvalidArgument("Invalid <label> ID")."""
    if not is_valid_object_id(value):
        raise InvalidArgument(f"Invalid {label} ID")
    return value.lower()
