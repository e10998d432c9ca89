"""Line-oriented ``key|value`` text used by client messages and server data."""

from __future__ import annotations

import re
from typing import Iterable

from gtproton.vectors import Recti, Vec2i

_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)

ScannerValue = str | int | float | Vec2i | Recti


def _format_value(value: ScannerValue) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f"{value:f}"
    if isinstance(value, Vec2i):
        return f"{value.x}|{value.y}"
    if isinstance(value, Recti):
        return f"{value.x}|{value.y}|{value.width}|{value.height}"
    raise TypeError(f"unsupported value: {value!r}")


def _parse_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    number = int(match.group(1))
    if not _INT32_MIN <= number <= _INT32_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return number


def _parse_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return float(match.group(1))


class TextScanner:
    """An ordered list of lines, each a key followed by token-separated values."""

    def __init__(
        self,
        source: str | Iterable[tuple[str, ScannerValue]] | None = None,
    ) -> None:
        self._lines: list[str] = []
        if source is None:
            return
        if isinstance(source, str):
            self.parse(source)
        else:
            for key, value in source:
                self.add(key, value)

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    def parse(self, text: str) -> None:
        """Replace the contents with the lines of ``text``."""
        self._lines = [line.replace("\r", "") for line in self.tokenize(text, "\n")]

    @staticmethod
    def tokenize(text: str, delimiter: str = "|") -> list[str]:
        """Split on ``delimiter``; an empty text gives no tokens."""
        if not delimiter:
            raise ValueError("empty delimiter")
        if not text:
            return []
        return text.split(delimiter)

    def get(
        self, key: str, index: int = 1, token: str = "|", key_index: int = 0
    ) -> str:
        """Return the value ``index`` places after the key, or "" if absent."""
        for line in self._lines:
            if not line:
                continue
            parts = self.tokenize(line, token)
            if len(parts) <= key_index or parts[key_index] != key:
                continue
            if index < 0 or index >= len(parts) or key_index + index >= len(parts):
                return ""
            return parts[key_index + index]
        return ""

    def get_int(self, key: str, index: int = 1, token: str = "|") -> int:
        """Read the leading integer of a value; raises ValueError if none."""
        return _parse_int(self.get(key, index, token))

    def get_float(self, key: str, index: int = 1, token: str = "|") -> float:
        """Read the leading number of a value; raises ValueError if none."""
        return _parse_float(self.get(key, index, token))

    def try_get(self, key: str) -> str | None:
        """Return the first value of ``key``, or None if it has none."""
        if key not in self:
            return None
        return self.get(key)

    def add(self, key: str, value: ScannerValue, token: str = "|") -> TextScanner:
        """Append a line and return the scanner for chaining."""
        self._lines.append(f"{key}{token}{_format_value(value)}")
        return self

    def set(self, key: str, value: ScannerValue, token: str = "|") -> None:
        """Replace the values of the first line with ``key``; no-op if absent."""
        for position, line in enumerate(self._lines):
            parts = self.tokenize(line, token)
            if parts and parts[0] == key:
                self._lines[position] = f"{parts[0]}{token}{_format_value(value)}"
                return

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) != ""

    def __len__(self) -> int:
        return len(self._lines)

    def numbered_lines(self) -> list[str]:
        """Each line prefixed with its position, for logging."""
        return [f"[{position}]: {line}" for position, line in enumerate(self._lines)]

    def raw(self) -> str:
        """Join the lines; no newline is put before an empty line."""
        pieces: list[str] = []
        for line, following in zip(self._lines, self._lines[1:] + [None]):
            pieces.append(line)
            if following:
                pieces.append("\n")
        return "".join(pieces)

    def __str__(self) -> str:
        return self.raw()