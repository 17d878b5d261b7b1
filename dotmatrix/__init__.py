"""Game Boy emulation building blocks and a terminal image renderer."""

__version__ = "0.1.0"