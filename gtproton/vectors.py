"""Small value types for 2D/3D vectors and rectangles."""

from __future__ import annotations

from dataclasses import astuple, dataclass
from typing import Any, Callable


def _combine(left: Any, right: Any, op: Callable[[Any, Any], Any]) -> Any:
    if type(right) is not type(left):
        return NotImplemented
    return type(left)(*(op(a, b) for a, b in zip(astuple(left), astuple(right))))


def _scale(value: Any, scalar: Any) -> Any:
    if not isinstance(scalar, (int, float)) or isinstance(scalar, bool):
        return NotImplemented
    return type(value)(*(component * scalar for component in astuple(value)))


def _add(a: Any, b: Any) -> Any:
    return a + b


def _sub(a: Any, b: Any) -> Any:
    return a - b


@dataclass(frozen=True)
class Vec2f:
    """A two-component float vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2f) -> Vec2f:
        return _combine(self, other, _add)

    def __sub__(self, other: Vec2f) -> Vec2f:
        return _combine(self, other, _sub)

    def __mul__(self, scalar: float) -> Vec2f:
        return _scale(self, scalar)


@dataclass(frozen=True)
class Vec2i:
    """A two-component integer vector."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Vec2i) -> Vec2i:
        return _combine(self, other, _add)

    def __sub__(self, other: Vec2i) -> Vec2i:
        return _combine(self, other, _sub)

    def __mul__(self, scalar: int) -> Vec2i:
        return _scale(self, scalar)


@dataclass(frozen=True)
class Vec3f:
    """A three-component float vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3f) -> Vec3f:
        return _combine(self, other, _add)

    def __sub__(self, other: Vec3f) -> Vec3f:
        return _combine(self, other, _sub)

    def __mul__(self, scalar: float) -> Vec3f:
        return _scale(self, scalar)


@dataclass(frozen=True)
class Vec3i:
    """A three-component integer vector."""

    x: int = 0
    y: int = 0
    z: int = 0

    def __add__(self, other: Vec3i) -> Vec3i:
        return _combine(self, other, _add)

    def __sub__(self, other: Vec3i) -> Vec3i:
        return _combine(self, other, _sub)

    def __mul__(self, scalar: int) -> Vec3i:
        return _scale(self, scalar)


@dataclass(frozen=True)
class Rectf:
    """A float rectangle given by origin and size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def __add__(self, other: Rectf) -> Rectf:
        return _combine(self, other, _add)

    def __sub__(self, other: Rectf) -> Rectf:
        return _combine(self, other, _sub)

    def __mul__(self, scalar: float) -> Rectf:
        return _scale(self, scalar)


@dataclass(frozen=True)
class Recti:
    """An integer rectangle given by origin and size."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def __add__(self, other: Recti) -> Recti:
        return _combine(self, other, _add)

    def __sub__(self, other: Recti) -> Recti:
        return _combine(self, other, _sub)

    def __mul__(self, scalar: int) -> Recti:
        return _scale(self, scalar)