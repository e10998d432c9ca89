[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gtproton"
version = "0.1.0"
description = "Protocol building blocks for a tile-world game server: packets, variants, text scanning, dialogs, menus and a server-data HTTPS endpoint"
requires-python = ">=3.10"
dependencies = []
keywords = ["game-server", "protocol", "packets", "variant", "dialog", "binary"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gtproton"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
