"""Unknown record type exception.

ONLY type resolution errors - raised when a cache entry names a record type
that cannot be resolved to a record class.
"""

from typing import Any, Optional

from .base import RecordCacheError


class UnknownTypeError(RecordCacheError):
    """Raised when a cache entry's type identifier cannot be resolved."""
    
    def __init__(self, type_id: Any, reason: Optional[str] = None):
        message = f"Unknown record type: {type_id!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(
            message,
            error_code="RECORD_CACHE_UNKNOWN_TYPE",
            details={"type_id": type_id, "reason": reason},
        )
        self.type_id = type_id
