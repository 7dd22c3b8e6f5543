"""Record-Cache - in-memory support engine for cached domain records.

Serializes records to compact cache entries, filters cached record sets
with WHERE-style predicates and sorts them with ORDER BY-style orders
using case-insensitive, accent-insensitive string collation.
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .config import RecordCacheSettings, get_settings

from .core.exceptions import (
    RecordCacheError,
    UnknownTypeError,
    UnknownAttributeError,
    TypeMismatchError,
    CacheEntryFormatError,
    RecordValidationError,
    create_error_response,
)

from .core.value_objects import StorageType, AttributeDefinition, SortOrder
from .core.protocols import CacheableRecord, SecondarilyEncoded
from .core.entities import CacheEntry, Record

from .infrastructure import (
    RecordTypeRegistry,
    get_default_registry,
    RecordSerializer,
    JSONEncodedValue,
)

from .application.services import (
    Collator,
    RecordFilter,
    RecordSorter,
    RecordCacheService,
    create_record_cache_service,
    serialize,
    deserialize,
    filter_records,
    sort_records,
)

from .__version__ import __version__

__all__ = [
    # Configuration
    "RecordCacheSettings",
    "get_settings",
    
    # Exceptions
    "RecordCacheError",
    "UnknownTypeError",
    "UnknownAttributeError",
    "TypeMismatchError",
    "CacheEntryFormatError",
    "RecordValidationError",
    "create_error_response",
    
    # Domain
    "StorageType",
    "AttributeDefinition",
    "SortOrder",
    "CacheableRecord",
    "SecondarilyEncoded",
    "CacheEntry",
    "Record",
    
    # Infrastructure
    "RecordTypeRegistry",
    "get_default_registry",
    "RecordSerializer",
    "JSONEncodedValue",
    
    # Services
    "Collator",
    "RecordFilter",
    "RecordSorter",
    "RecordCacheService",
    "create_record_cache_service",
    "serialize",
    "deserialize",
    "filter_records",
    "sort_records",
    
    # Version
    "__version__",
]
