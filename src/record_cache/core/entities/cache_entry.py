"""Cache entry domain entity.

ONLY cache entry entity - the association-free snapshot of a record as it
is handed to the cache store, with its compact dict representation.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from ..exceptions.entry_format import CacheEntryFormatError


@dataclass
class CacheEntry:
    """Cache entry domain entity.
    
    Shallow snapshot of a record. Holds no related records, only the
    record's own attribute values keyed by attribute name.
    
    Each cache entry contains:
    - Type identifier used to resolve the record class on deserialize
    - Attribute values (a copy, never the live record's storage)
    - Optional version taken from the record's version attribute
    """
    
    TYPE_KEY = "c"
    ATTRIBUTES_KEY = "a"
    VERSION_KEY = "v"
    
    type_id: str
    attributes: Dict[str, Any] = field(default_factory=dict)
    version: Optional[Any] = None
    
    def to_dict(self) -> Dict[str, Any]:
        """Compact dict form for cache stores."""
        data = {
            self.TYPE_KEY: self.type_id,
            self.ATTRIBUTES_KEY: dict(self.attributes),
        }
        if self.version is not None:
            data[self.VERSION_KEY] = self.version
        return data
    
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CacheEntry":
        """Rebuild a cache entry from its compact dict form.
        
        Raises:
            CacheEntryFormatError: If data is not a compact cache entry
        """
        if not isinstance(data, Mapping):
            raise CacheEntryFormatError("Cache entry must be a mapping", data=data)
        
        type_id = data.get(cls.TYPE_KEY)
        if not isinstance(type_id, str) or not type_id:
            raise CacheEntryFormatError(
                f"Cache entry is missing a type identifier under {cls.TYPE_KEY!r}",
                data=data,
            )
        
        attributes = data.get(cls.ATTRIBUTES_KEY, {})
        if not isinstance(attributes, Mapping):
            raise CacheEntryFormatError(
                f"Cache entry attributes under {cls.ATTRIBUTES_KEY!r} must be a mapping",
                data=data,
            )
        
        return cls(
            type_id=type_id,
            attributes=dict(attributes),
            version=data.get(cls.VERSION_KEY),
        )
