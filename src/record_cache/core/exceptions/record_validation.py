"""Record validation exception.

ONLY construction errors - raised when normal record construction rejects
an attribute value. Never raised by snapshot reconstruction.
"""

from typing import Any

from .base import RecordCacheError


class RecordValidationError(RecordCacheError):
    """Raised when a record attribute fails validation."""
    
    def __init__(self, type_id: str, attribute: str, value: Any, reason: str):
        super().__init__(
            f"Invalid value for {type_id}.{attribute}: {reason}",
            error_code="RECORD_CACHE_VALIDATION",
            details={
                "type_id": type_id,
                "attribute": attribute,
                "value_type": type(value).__name__,
                "reason": reason,
            },
        )
        self.attribute = attribute
        self.value = value
