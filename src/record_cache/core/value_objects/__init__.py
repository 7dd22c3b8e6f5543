"""Record cache value objects.

Immutable values following maximum separation - one value object per file.
"""

from .storage_type import StorageType
from .attribute_definition import AttributeDefinition
from .sort_order import SortOrder

__all__ = [
    "StorageType",
    "AttributeDefinition",
    "SortOrder",
]
