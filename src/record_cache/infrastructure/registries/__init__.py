"""Record type registries."""

from .record_type_registry import RecordTypeRegistry, get_default_registry

__all__ = [
    "RecordTypeRegistry",
    "get_default_registry",
]
