"""Type mismatch exception.

ONLY ordering errors - raised when two values at the same sort key cannot
be ordered against each other.
"""

from typing import Any, Optional

from .base import RecordCacheError


class TypeMismatchError(RecordCacheError):
    """Raised when values at a sort key are not mutually comparable."""
    
    def __init__(
        self,
        attribute: str,
        left: Any,
        right: Any,
        original_error: Optional[Exception] = None
    ):
        left_type = type(left).__name__
        right_type = type(right).__name__
        super().__init__(
            f"Cannot order values of attribute {attribute!r}: "
            f"{left_type} and {right_type} are not comparable",
            error_code="RECORD_CACHE_TYPE_MISMATCH",
            details={
                "attribute": attribute,
                "left_type": left_type,
                "right_type": right_type,
            },
        )
        self.attribute = attribute
        self.original_error = original_error
