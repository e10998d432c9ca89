"""Text validation, splitting and hashing helpers."""

from __future__ import annotations

import re

_EMAIL = re.compile(r"(\w+)(\.|_)?(\w*)@(\w+)(\.(\w+))+", re.ASCII)
_DISCORD = re.compile(r"(\w+)#(\d)+", re.ASCII)


def is_valid_email(value: str) -> bool:
    return _EMAIL.fullmatch(value) is not None


def is_valid_discord(value: str) -> bool:
    return _DISCORD.fullmatch(value) is not None


def to_lowercase(value: str) -> str:
    """Lower-case an ASCII alphanumeric string.

    Raises ValueError if the string is empty or holds anything other than
    ASCII letters and digits.
    """
    if not value:
        raise ValueError("empty string")
    if not (value.isascii() and value.isalnum()):
        raise ValueError(f"not alphanumeric: {value!r}")
    return value.lower()


def split(value: str, delimiter: str) -> list[str]:
    """Split on every occurrence of ``delimiter``, keeping empty pieces."""
    if not delimiter:
        raise ValueError("empty delimiter")
    return value.split(delimiter)


def quick_hash(data: str | bytes) -> int:
    """DJB2 hash over signed bytes, truncated to 32 bits."""
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    result = 5381
    for byte in raw:
        signed = byte - 256 if byte >= 0x80 else byte
        result = (result * 33 + signed) & 0xFFFFFFFF
    return result