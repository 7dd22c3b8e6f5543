"""Record cache infrastructure.

Serializers and type registries backing the application services.
"""

from .registries import RecordTypeRegistry, get_default_registry
from .serializers import (
    RecordSerializer,
    create_record_serializer,
    JSONEncodedValue,
)

__all__ = [
    "RecordTypeRegistry",
    "get_default_registry",
    "RecordSerializer",
    "create_record_serializer",
    "JSONEncodedValue",
]
