"""Builder for the text that describes a client dialog."""

from __future__ import annotations

from enum import IntEnum


class SizeType(IntEnum):
    SMALL = 0
    BIG = 1


class Direction(IntEnum):
    NONE = 0
    LEFT = 1
    RIGHT = 2
    STATIC_BLUE_FRAME = 3


_DIRECTION_NAMES = {
    Direction.LEFT: "left",
    Direction.RIGHT: "right",
    Direction.STATIC_BLUE_FRAME: "staticBlueFrame",
}


def _direction_name(direction: int) -> str:
    try:
        return _DIRECTION_NAMES.get(Direction(direction), "")
    except ValueError:
        return ""


class DialogBuilder:
    """Accumulates dialog elements; every adder returns the builder."""

    def __init__(self) -> None:
        self._parts: list[str] = []

    def __str__(self) -> str:
        return "".join(self._parts)

    def _append(self, text: str) -> DialogBuilder:
        self._parts.append(text)
        return self

    def clear(self) -> None:
        self._parts.clear()

    def set_default_color(self, color: str) -> DialogBuilder:
        if len(color) != 1:
            raise ValueError(f"colour code must be one character, got {color!r}")
        return self._append(f"\nset_default_color|`{color}")

    def text_scaling_string(self, scale: str) -> DialogBuilder:
        return self._append(f"\ntext_scaling_string|{scale}")

    def end_dialog(self, name: str, cancel: str, ok: str) -> DialogBuilder:
        return self._append(f"\nend_dialog|{name}|{cancel}|{ok}|")

    def add_spacer(self, size: SizeType = SizeType.SMALL) -> DialogBuilder:
        size_name = "small" if size == SizeType.SMALL else "big"
        return self._append(f"\nadd_spacer|{size_name}|")

    def add_textbox(self, label: str) -> DialogBuilder:
        return self._append(f"\nadd_textbox|{label}|")

    def add_text_input(
        self, name: str, label: str, label_inside: str, max_length: int
    ) -> DialogBuilder:
        return self._append(
            f"\nadd_text_input|{name}|{label}|{label_inside}|{max_length}|"
        )

    def add_text_input_password(
        self, name: str, label: str, label_inside: str, max_length: int
    ) -> DialogBuilder:
        return self._append(
            f"\nadd_text_input_password|{name}|{label}|{label_inside}|{max_length}|"
        )

    def add_label_with_icon(
        self,
        label: str,
        item_id: int,
        direction: Direction = Direction.LEFT,
        size: SizeType = SizeType.SMALL,
    ) -> DialogBuilder:
        size_name = "small" if size == SizeType.SMALL else "big"
        return self._append(
            f"\nadd_label_with_icon|{size_name}|{label}|"
            f"{_direction_name(direction)}|{item_id}|"
        )