"""Protocol building blocks for a tile-world game server: vectors, binary I/O, colours, text helpers, hashes, packets, variants, text scanning, dialogs, world menus and a server-data HTTP endpoint."""

__version__ = "0.1.0"