"""Record cache domain entities."""

from .cache_entry import CacheEntry
from .record import Record

__all__ = [
    "CacheEntry",
    "Record",
]
