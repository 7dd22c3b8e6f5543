"""Record cache exceptions.

One exception per file following maximum separation architecture.
"""

from .base import RecordCacheError, create_error_response
from .unknown_type import UnknownTypeError
from .unknown_attribute import UnknownAttributeError
from .type_mismatch import TypeMismatchError
from .entry_format import CacheEntryFormatError
from .record_validation import RecordValidationError

__all__ = [
    "RecordCacheError",
    "create_error_response",
    "UnknownTypeError",
    "UnknownAttributeError",
    "TypeMismatchError",
    "CacheEntryFormatError",
    "RecordValidationError",
]
