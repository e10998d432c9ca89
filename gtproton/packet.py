"""Network message types and the fixed-layout game update packet."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum, IntFlag

MESSAGE_TYPE_SIZE = 4

_HEADER = struct.Struct("<4B3ifi5f3I")
HEADER_SIZE = _HEADER.size


class NetMessageType(IntEnum):
    """Top-level message kinds carried in the first four bytes of a packet."""

    UNKNOWN = 0
    SERVER_HELLO = 1
    GENERIC_TEXT = 2
    GAME_MESSAGE = 3
    GAME_PACKET = 4
    ERROR = 5
    TRACK = 6
    CLIENT_LOG_REQUEST = 7
    CLIENT_LOG_RESPONSE = 8


class GamePacketType(IntEnum):
    """Kinds of game update packet."""

    STATE = 0
    CALL_FUNCTION = 1
    UPDATE_STATUS = 2
    TILE_CHANGE_REQUEST = 3
    SEND_MAP_DATA = 4
    SEND_TILE_UPDATE_DATA = 5
    SEND_TILE_UPDATE_DATA_MULTIPLE = 6
    TILE_ACTIVATE_REQUEST = 7
    TILE_APPLY_DAMAGE = 8
    SEND_INVENTORY_STATE = 9
    ITEM_ACTIVATE_REQUEST = 10
    ITEM_ACTIVATE_OBJECT_REQUEST = 11
    SEND_TILE_TREE_STATE = 12
    MODIFY_ITEM_INVENTORY = 13
    ITEM_CHANGE_OBJECT = 14
    SEND_LOCK = 15
    SEND_ITEM_DATABASE_DATA = 16
    SEND_PARTICLE_EFFECT = 17
    SET_ICON_STATE = 18
    ITEM_EFFECT = 19
    SET_CHARACTER_STATE = 20
    PING_REPLY = 21
    PING_REQUEST = 22
    GOT_PUNCHED = 23
    APP_CHECK_RESPONSE = 24
    APP_INTEGRITY_FAIL = 25
    DISCONNECT = 26
    BATTLE_JOIN = 27
    BATTLE_EVENT = 28
    USE_DOOR = 29
    SEND_PARENTAL = 30
    GONE_FISHIN = 31
    STEAM = 32
    PET_BATTLE = 33
    NPC = 34
    SPECIAL = 35
    SEND_PARTICLE_EFFECT_V2 = 36
    ACTIVE_ARROW_TO_ITEM = 37
    SELECT_TILE_INDEX = 38
    SEND_PLAYER_TRIBUTE_DATA = 39


class GamePacketFlags(IntFlag):
    """Bit flags of a game update packet."""

    NONE = 0
    FLYING = 1 << 1
    UPDATE = 1 << 2
    EXTENDED = 1 << 3
    FACING_LEFT = 1 << 4


@dataclass
class GameUpdatePacket:
    """A game update packet: a fixed header optionally followed by extra data.

    Extra data is read back only when the EXTENDED flag is set.
    """

    type: int = 0
    object_type: int = 0
    count1: int = 0
    count2: int = 0
    net_id: int = 0
    item: int = 0
    flags: int = 0
    float_var: float = 0.0
    int_data: int = 0
    vec_x: float = 0.0
    vec_y: float = 0.0
    vec2_x: float = 0.0
    vec2_y: float = 0.0
    particle_rotation: float = 0.0
    int_x: int = 0
    int_y: int = 0
    data: bytes = b""

    @property
    def is_extended(self) -> bool:
        return bool(self.flags & GamePacketFlags.EXTENDED)

    def pack(self) -> bytes:
        """Encode the header followed by the extra data."""
        try:
            header = _HEADER.pack(
                self.type,
                self.object_type,
                self.count1,
                self.count2,
                self.net_id,
                self.item,
                self.flags,
                self.float_var,
                self.int_data,
                self.vec_x,
                self.vec_y,
                self.vec2_x,
                self.vec2_y,
                self.particle_rotation,
                self.int_x,
                self.int_y,
                len(self.data),
            )
        except (struct.error, OverflowError) as exc:
            raise ValueError(f"field out of range: {exc}") from exc
        return header + bytes(self.data)

    @classmethod
    def unpack(cls, data: bytes) -> GameUpdatePacket:
        """Decode a packet body (without the leading message type)."""
        raw = bytes(data)
        if len(raw) < HEADER_SIZE:
            raise ValueError(
                f"game update packet needs {HEADER_SIZE} bytes, got {len(raw)}"
            )
        fields = _HEADER.unpack_from(raw)
        *values, data_size = fields
        packet = cls(*values)
        if packet.is_extended:
            end = HEADER_SIZE + data_size
            if len(raw) < end:
                raise ValueError(
                    f"extended data of {data_size} bytes is truncated"
                )
            packet.data = raw[HEADER_SIZE:end]
        return packet


def build_tank_packet(message_type: int, payload: bytes | str = b"") -> bytes:
    """Prefix ``payload`` with a little-endian 32-bit message type."""
    body = payload.encode("utf-8") if isinstance(payload, str) else bytes(payload)
    return int(message_type).to_bytes(MESSAGE_TYPE_SIZE, "little", signed=True) + body


def get_generic_text(data: bytes) -> str:
    """Extract the text of a text message.

    The last byte of the message is treated as its terminator, and the text
    ends at the first NUL byte.
    """
    raw = bytes(data)
    if len(raw) <= MESSAGE_TYPE_SIZE:
        raise ValueError("message too short to hold text")
    text = raw[MESSAGE_TYPE_SIZE:-1].split(b"\x00", 1)[0]
    return text.decode("utf-8", errors="replace")


def get_game_update_packet(data: bytes) -> GameUpdatePacket | None:
    """Decode the game update packet of a whole message, or None if invalid."""
    raw = bytes(data)
    if len(raw) < MESSAGE_TYPE_SIZE + HEADER_SIZE:
        return None
    try:
        return GameUpdatePacket.unpack(raw[MESSAGE_TYPE_SIZE:])
    except ValueError:
        return None