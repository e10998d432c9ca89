"""Rolling 32-bit hash used for item and file data."""

from __future__ import annotations


def proton_hash(data: bytes | None) -> int:
    """Hash ``data``; ``None`` hashes to 0."""
    if data is None:
        return 0
    result = 0x55555555
    for byte in bytes(data):
        result = ((result >> 27) + (result << 5) + byte) & 0xFFFFFFFF
    return result