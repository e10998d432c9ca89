# gtproton

Building blocks for a tile-world game server's network protocol, in plain
Python with no third-party dependencies.

## What is inside

- `gtproton.vectors`: frozen dataclasses `Vec2f`, `Vec2i`, `Vec3f`, `Vec3i`,
  `Rectf` and `Recti`. They support `+` and `-` with a value of the same type
  and `*` with a number.
- `gtproton.binary`: `BinaryWriter` (`write_u8`, `write_u16`, `write_u32`,
  `write_i32`, `write_float`, `write_string` with a 2- or 4-byte length
  prefix, `write_bytes`, `skip`, `getvalue`) and `BinaryReader` (`read_u8`,
  `read_u16`, `read_u32`, `read_i32`, `read_string`, `skip`). Everything is
  little-endian. A read past the end raises `EOFError`.
- `gtproton.color`: `Color` with `red`, `green`, `blue` and `alpha` channels
  that default to 255. `to_uint()` packs them as blue, green, red and alpha,
  from the high byte to the low byte. `Color.from_uint()` unpacks that form.
- `gtproton.text`: `is_valid_email`, `is_valid_discord`, `to_lowercase`,
  `split` and `quick_hash`. `to_lowercase` raises `ValueError` unless the
  string is non-empty ASCII letters and digits. `quick_hash` is a 32-bit DJB2
  hash over signed bytes.
- `gtproton.checksum`: `proton_hash`, a rolling 32-bit hash over raw bytes.
  `None` hashes to 0.
- `gtproton.packet`: the enums `NetMessageType`, `GamePacketType` and
  `GamePacketFlags`, plus the `GameUpdatePacket` dataclass with `pack()` and
  `GameUpdatePacket.unpack()`. Extra data is read back only when the
  `EXTENDED` flag is set. Three helpers work on whole messages:
  - `build_tank_packet` puts a 32-bit message type in front of a payload.
  - `get_generic_text` pulls out the text of a text message.
  - `get_game_update_packet` decodes a game packet, or returns `None` if the
    message is invalid.
- `gtproton.variant`: `VariantType`, `Variant` and `VariantList`.
  - `Variant` infers its type from the value or takes one that you give it.
    `size()` is the number of bytes that `pack()` writes.
  - `VariantList` holds 1 to 7 values. `serialize()` returns bytes.
- `gtproton.text_scanner`: `TextScanner`, the `key|value` line format.
  - Its methods are `parse`, `tokenize`, `get`, `get_int`, `get_float`,
    `try_get`, `add` (chainable), `set`, `numbered_lines` and `raw`.
  - `in` and `len()` work on a scanner.
  - `add` accepts strings, ints, floats, `Vec2i` and `Recti`.
- `gtproton.dialog_builder`: `DialogBuilder`, with the enums `SizeType` and
  `Direction`. Each adder returns the builder, so calls can be chained, and
  `str(builder)` gives the dialog text. The adders are:
  - `set_default_color`
  - `text_scaling_string`
  - `end_dialog`
  - `add_spacer`
  - `add_textbox`
  - `add_text_input`
  - `add_text_input_password`
  - `add_label_with_icon`

  `clear()` empties the builder.
- `gtproton.world_menu`: `WorldMenu`, a chainable builder for the
  world-selection menu. `str(menu)` gives the menu text. The adders are:
  - `add_floater`
  - `add_button`
  - `set_default`
  - `add_heading`
  - `add_filter`
  - `set_max_rows`
  - `setup_simple_menu`
- `gtproton.http_server`: `build_server_data`, `is_authorized` and
  `HTTPServer`.
  - `HTTPServer` answers `POST /growtopia/server_data.php`. It replies 403
    unless the request carries parameters and a `User-Agent` containing
    `UbiServices_SDK`.
  - By default it serves HTTPS with `./cache/cert.pem` and `./cache/key.pem`.
    Pass `certfile=None` to serve plain HTTP.
  - `listen()` serves in a background thread and returns `False` if the port
    cannot be bound. `stop()` shuts the server down.
  - It can also be used as a context manager.

## Installing

```
pip install .
```

## Examples

Parse a text message and add to it:

```python
from gtproton.text_scanner import TextScanner

scanner = TextScanner("action|input\ntext|hello")
scanner.get("action")   # "input"
"text" in scanner       # True
scanner.add("reply", "hi")
print(scanner.raw())
```

Serialise a function call:

```python
from gtproton.variant import VariantList

payload = VariantList("OnConsoleMessage", "Welcome!").serialize()
```

Build a dialog:

```python
from gtproton.dialog_builder import DialogBuilder

dialog = (
    DialogBuilder()
    .add_label_with_icon("Hello", 18)
    .add_textbox("Pick a name")
    .end_dialog("name_dialog", "Cancel", "OK")
)
text = str(dialog)
```

Decode a game packet from a received message:

```python
from gtproton.packet import get_game_update_packet

packet = get_game_update_packet(received_bytes)
if packet is not None:
    print(packet.type, packet.net_id)
```

Serve the server-data endpoint over plain HTTP:

```python
from gtproton.http_server import HTTPServer

with HTTPServer("127.0.0.1", 0, game_address="127.0.0.1", certfile=None) as server:
    print("listening on port", server.port)
```

## What it does not do

The package has no game server. It does not handle UDP connections,
players, worlds, items or events, and it stores nothing. It provides the
message formats and builders that such a server would use, plus the
server-data HTTP endpoint. It offers no command-line entry point.

## Running the tests

```
pip install .[test]
pytest
```