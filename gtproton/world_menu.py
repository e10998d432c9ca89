"""Builder for the world selection menu text."""

from __future__ import annotations

from gtproton.color import Color


def _format_number(value: float) -> str:
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value) if isinstance(value, float) else str(value)


class WorldMenu:
    """Accumulates world menu lines; every adder returns the menu."""

    def __init__(self) -> None:
        self._parts: list[str] = []

    def __str__(self) -> str:
        return "".join(self._parts)

    def _append(self, text: str) -> WorldMenu:
        self._parts.append(text)
        return self

    def add_floater(
        self, text: str, player_count: int, scale: float, color: Color
    ) -> WorldMenu:
        return self._append(
            f"add_floater|{text}|{player_count}|{_format_number(scale)}|"
            f"{color.to_uint()}\n"
        )

    def add_button(self, text: str, name: str, scale: int, color: Color) -> WorldMenu:
        return self._append(f"add_button|{text}|{name}|{scale}|{color.to_uint()}\n")

    def set_default(self, name: str) -> WorldMenu:
        return self._append(f"default|{name}\n")

    def add_heading(self, text: str) -> WorldMenu:
        return self._append(f"add_heading|{text}\n")

    def add_filter(self) -> WorldMenu:
        return self._append("add_filter\n")

    def set_max_rows(self, count: int) -> WorldMenu:
        return self._append(f"set_max_rows|{count}\n")

    def setup_simple_menu(self) -> WorldMenu:
        return self._append("setup_simple_menu\n")