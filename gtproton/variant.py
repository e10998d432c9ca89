"""Typed values and value lists serialised for function-call packets."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, Union

from gtproton.binary import BinaryWriter
from gtproton.vectors import Vec2f, Vec3f

VariantValue = Union[float, str, Vec2f, Vec3f, int]

_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1
_UINT32_MAX = (1 << 32) - 1


class VariantType(IntEnum):
    """Wire tag of a variant value."""

    NONE = 0
    FLOAT = 1
    STRING = 2
    VECTOR_2 = 3
    VECTOR_3 = 4
    UNSIGNED_INT = 5
    INT = 9


def _infer_type(value: object) -> VariantType:
    if isinstance(value, bool):
        raise TypeError("bool is not a variant value")
    if isinstance(value, float):
        return VariantType.FLOAT
    if isinstance(value, str):
        return VariantType.STRING
    if isinstance(value, Vec2f):
        return VariantType.VECTOR_2
    if isinstance(value, Vec3f):
        return VariantType.VECTOR_3
    if isinstance(value, int):
        return VariantType.INT
    raise TypeError(f"unsupported variant value: {value!r}")


def _coerce(value: object, kind: VariantType) -> VariantValue:
    if isinstance(value, bool):
        raise TypeError("bool is not a variant value")
    if kind is VariantType.FLOAT:
        if not isinstance(value, (int, float)):
            raise TypeError(f"FLOAT variant needs a number, got {value!r}")
        return float(value)
    if kind is VariantType.STRING:
        if not isinstance(value, str):
            raise TypeError(f"STRING variant needs a str, got {value!r}")
        return value
    if kind is VariantType.VECTOR_2:
        if not isinstance(value, Vec2f):
            raise TypeError(f"VECTOR_2 variant needs a Vec2f, got {value!r}")
        return value
    if kind is VariantType.VECTOR_3:
        if not isinstance(value, Vec3f):
            raise TypeError(f"VECTOR_3 variant needs a Vec3f, got {value!r}")
        return value
    if kind in (VariantType.UNSIGNED_INT, VariantType.INT):
        if not isinstance(value, int):
            raise TypeError(f"{kind.name} variant needs an int, got {value!r}")
        low, high = (
            (0, _UINT32_MAX) if kind is VariantType.UNSIGNED_INT
            else (_INT32_MIN, _INT32_MAX)
        )
        if not low <= value <= high:
            raise ValueError(f"{value} out of range for {kind.name}")
        return value
    raise ValueError(f"cannot hold a value of type {kind.name}")


@dataclass(frozen=True)
class Variant:
    """A single typed value; the type is inferred unless given."""

    value: VariantValue
    type: VariantType | None = None

    def __post_init__(self) -> None:
        kind = _infer_type(self.value) if self.type is None else VariantType(self.type)
        object.__setattr__(self, "type", kind)
        object.__setattr__(self, "value", _coerce(self.value, kind))

    def size(self) -> int:
        """Number of bytes ``pack`` writes, type tag included."""
        if self.type is VariantType.STRING:
            return 5 + len(self.value.encode("utf-8"))
        if self.type is VariantType.VECTOR_2:
            return 1 + 2 * 4
        if self.type is VariantType.VECTOR_3:
            return 1 + 3 * 4
        return 5

    def pack(self, writer: BinaryWriter) -> None:
        """Write the type tag followed by the value."""
        writer.write_u8(self.type)
        value = self.value
        if self.type is VariantType.FLOAT:
            writer.write_float(value)
        elif self.type is VariantType.STRING:
            writer.write_string(value, 4)
        elif self.type is VariantType.VECTOR_2:
            writer.write_float(value.x)
            writer.write_float(value.y)
        elif self.type is VariantType.VECTOR_3:
            writer.write_float(value.x)
            writer.write_float(value.y)
            writer.write_float(value.z)
        elif self.type is VariantType.UNSIGNED_INT:
            writer.write_u32(value)
        else:
            writer.write_i32(value)


class VariantList:
    """An ordered list of one to seven variants."""

    MAX_ITEMS = 7

    def __init__(self, *values: Variant | VariantValue) -> None:
        if not 1 <= len(values) <= self.MAX_ITEMS:
            raise ValueError(
                f"a variant list holds 1 to {self.MAX_ITEMS} values, got {len(values)}"
            )
        self._items = tuple(
            value if isinstance(value, Variant) else Variant(value) for value in values
        )

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Variant]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Variant:
        return self._items[index]

    def __repr__(self) -> str:
        return f"VariantList{self._items!r}"

    def serialize(self) -> bytes:
        """Encode as a count byte, then an index byte and the value per item."""
        writer = BinaryWriter()
        writer.write_u8(len(self._items))
        for index, item in enumerate(self._items):
            writer.write_u8(index)
            item.pack(writer)
        return writer.getvalue()