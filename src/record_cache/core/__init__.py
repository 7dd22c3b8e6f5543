"""Record cache core domain.

Entities, value objects, protocols and exceptions shared by the
serializer, filter and sorter.
"""

from .exceptions import (
    RecordCacheError,
    UnknownTypeError,
    UnknownAttributeError,
    TypeMismatchError,
    CacheEntryFormatError,
    RecordValidationError,
    create_error_response,
)
from .value_objects import StorageType, AttributeDefinition, SortOrder
from .protocols import CacheableRecord, SecondarilyEncoded
from .entities import CacheEntry, Record

__all__ = [
    "RecordCacheError",
    "UnknownTypeError",
    "UnknownAttributeError",
    "TypeMismatchError",
    "CacheEntryFormatError",
    "RecordValidationError",
    "create_error_response",
    "StorageType",
    "AttributeDefinition",
    "SortOrder",
    "CacheableRecord",
    "SecondarilyEncoded",
    "CacheEntry",
    "Record",
]
