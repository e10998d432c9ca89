"""Little-endian binary writer and reader for wire buffers."""

from __future__ import annotations

import struct


class BinaryWriter:
    """Accumulates little-endian encoded values into a byte buffer."""

    def __init__(self) -> None:
        self._buffer = bytearray()

    def __len__(self) -> int:
        return len(self._buffer)

    def _write_int(self, value: int, size: int, signed: bool) -> None:
        self._buffer += value.to_bytes(size, "little", signed=signed)

    def write_u8(self, value: int) -> None:
        self._write_int(value, 1, False)

    def write_u16(self, value: int) -> None:
        self._write_int(value, 2, False)

    def write_u32(self, value: int) -> None:
        self._write_int(value, 4, False)

    def write_i32(self, value: int) -> None:
        self._write_int(value, 4, True)

    def write_float(self, value: float) -> None:
        self._buffer += struct.pack("<f", value)

    def write_string(self, value: str, len_size: int = 2) -> None:
        """Write a UTF-8 string prefixed by its byte length (2 or 4 bytes)."""
        if len_size not in (2, 4):
            raise ValueError(f"length prefix must be 2 or 4 bytes, not {len_size}")
        encoded = value.encode("utf-8")
        self._write_int(len(encoded), len_size, False)
        self._buffer += encoded

    def write_bytes(self, data: bytes) -> None:
        self._buffer += data

    def skip(self, length: int) -> None:
        """Advance by writing ``length`` zero bytes."""
        if length < 0:
            raise ValueError("cannot skip a negative length")
        self._buffer += bytes(length)

    def getvalue(self) -> bytes:
        return bytes(self._buffer)


class BinaryReader:
    """Reads little-endian encoded values from a byte buffer."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    def _take(self, size: int) -> bytes:
        end = self._pos + size
        if end > len(self._data):
            raise EOFError(
                f"need {size} bytes at offset {self._pos}, "
                f"buffer holds {len(self._data)}"
            )
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def _read_int(self, size: int, signed: bool) -> int:
        return int.from_bytes(self._take(size), "little", signed=signed)

    def read_u8(self) -> int:
        return self._read_int(1, False)

    def read_u16(self) -> int:
        return self._read_int(2, False)

    def read_u32(self) -> int:
        return self._read_int(4, False)

    def read_i32(self) -> int:
        return self._read_int(4, True)

    def read_string(self) -> str:
        """Read a string prefixed by a 2-byte length."""
        length = self.read_u16()
        return self._take(length).decode("utf-8")

    def skip(self, length: int) -> None:
        if length < 0:
            raise ValueError("cannot skip a negative length")
        self._pos += length