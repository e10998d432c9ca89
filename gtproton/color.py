"""RGBA colour packed the way the game client expects."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Color:
    """An 8-bit-per-channel colour; packs as blue, green, red, alpha."""

    red: int = 255
    green: int = 255
    blue: int = 255
    alpha: int = 255

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if not 0 <= value <= 0xFF:
                raise ValueError(f"{name} must be in 0..255, got {value}")

    @classmethod
    def from_uint(cls, value: int) -> Color:
        """Build a colour from its packed 32-bit form."""
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError(f"packed colour out of range: {value}")
        return cls(
            red=(value >> 8) & 0xFF,
            green=(value >> 16) & 0xFF,
            blue=(value >> 24) & 0xFF,
            alpha=value & 0xFF,
        )

    def to_uint(self) -> int:
        """Pack as a 32-bit integer: blue, green, red, alpha from high to low."""
        return (self.blue << 24) | (self.green << 16) | (self.red << 8) | self.alpha