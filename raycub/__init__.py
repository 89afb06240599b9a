"""Character, string, byte-buffer, formatting, line-reading and linked-list helpers."""

__version__ = "0.1.0"