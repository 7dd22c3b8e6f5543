"""Cache entry format exception.

ONLY compact entry errors - raised when a stored dict does not have the
shape of a serialized cache entry.
"""

from typing import Any

from .base import RecordCacheError


class CacheEntryFormatError(RecordCacheError):
    """Raised when a compact cache entry dict is malformed."""
    
    def __init__(self, message: str, data: Any = None):
        details = {}
        if data is not None:
            details["data_type"] = type(data).__name__
            details["data_preview"] = repr(data)[:100]
        super().__init__(
            message,
            error_code="RECORD_CACHE_ENTRY_FORMAT",
            details=details,
        )
