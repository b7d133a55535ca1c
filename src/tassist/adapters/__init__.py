"""Adapters - I/O implementations of ports."""

from .json_storage import JsonPersonStore

__all__ = [
    "JsonPersonStore",
]
