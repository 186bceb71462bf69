"""A small shell running built-in commands, with string, memory, list and line-reading helpers."""

__version__ = "0.1.0"