[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "dotmatrix"
version = "0.1.0"
description = "Game Boy CPU state, instruction types, PPU building blocks and a terminal image renderer"
requires-python = ">=3.10"
dependencies = []
keywords = ["gameboy", "emulator", "sm83", "ppu", "terminal", "ansi"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["dotmatrix*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
