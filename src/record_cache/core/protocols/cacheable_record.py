"""Cacheable record protocol.

ONLY record access contract - defines what the serializer, filter and
sorter need from a record without reflective attribute lookup.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any, Dict, FrozenSet, Mapping, Tuple
from typing_extensions import Protocol, runtime_checkable

from ..value_objects.storage_type import StorageType


@runtime_checkable
class CacheableRecord(Protocol):
    """Cacheable record protocol.
    
    Defines the interface every cached record type implements:
    - Stable type identifier used to resolve the type on deserialize
    - Attribute getter and declared storage type by attribute name
    - Names of secondarily encoded attributes
    - Shallow attribute snapshot for serialization
    - Snapshot reconstruction bypassing normal construction
    """
    
    type_id: str
    serialized_attributes: FrozenSet[str]
    
    def get(self, attribute: str) -> Any:
        """Get attribute value by name.
        
        Raises:
            UnknownAttributeError: If the type does not declare the attribute
        """
        ...
    
    @classmethod
    def declared_type(cls, attribute: str) -> StorageType:
        """Get declared storage type of an attribute.
        
        Raises:
            UnknownAttributeError: If the type does not declare the attribute
        """
        ...
    
    @classmethod
    def attribute_names(cls) -> Tuple[str, ...]:
        """Get declared attribute names in declaration order."""
        ...
    
    def attributes_snapshot(self) -> Dict[str, Any]:
        """Get a shallow copy of the current attribute values."""
        ...
    
    @classmethod
    def from_snapshot(cls, attributes: Mapping[str, Any]) -> "CacheableRecord":
        """Reconstruct a record without defaults, validation or callbacks."""
        ...
