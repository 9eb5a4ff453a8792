"""Key/value store connectivity."""
from .connection import KeyValueStore, open_store

__all__ = [
    "KeyValueStore",
    "open_store",
]
