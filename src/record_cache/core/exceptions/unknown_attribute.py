"""Unknown attribute exception.

ONLY attribute lookup errors - raised when a filter predicate or sort key
names an attribute the record type does not declare.
"""

from .base import RecordCacheError


class UnknownAttributeError(RecordCacheError):
    """Raised when a filter or sort references a non-existent attribute."""
    
    def __init__(self, type_id: str, attribute: str):
        super().__init__(
            f"Record type {type_id!r} has no attribute {attribute!r}",
            error_code="RECORD_CACHE_UNKNOWN_ATTRIBUTE",
            details={"type_id": type_id, "attribute": attribute},
        )
        self.type_id = type_id
        self.attribute = attribute
