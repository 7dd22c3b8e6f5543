"""Record cache serializer.

ONLY record snapshots - converts live records to association-free cache
entries and reconstructs records from them without running normal
construction logic.

Following maximum separation architecture - one file = one purpose.
"""

import logging
from typing import Any, Dict, Mapping, Optional

from ...core.entities.cache_entry import CacheEntry
from ...core.protocols.cacheable_record import CacheableRecord
from ...core.protocols.secondarily_encoded import SecondarilyEncoded
from ..registries.record_type_registry import RecordTypeRegistry, get_default_registry

logger = logging.getLogger(__name__)


class RecordSerializer:
    """Record cache serializer.
    
    Features:
    - Shallow copy-on-serialize, no storage shared with the live record
    - No association data, only the record's own attributes
    - Type resolution through a record type registry
    - Decode step for secondarily encoded attributes on deserialize
    - Compact dict form for cache stores
    """
    
    def __init__(
        self,
        registry: Optional[RecordTypeRegistry] = None,
        version_attribute: Optional[str] = "lock_version"
    ):
        """Initialize record serializer.
        
        Args:
            registry: Registry used to resolve type identifiers
            version_attribute: Fallback version attribute for records that
                do not declare their own
        """
        self._registry = registry if registry is not None else get_default_registry()
        self._version_attribute = version_attribute
    
    def serialize(self, record: CacheableRecord) -> CacheEntry:
        """Snapshot a record into a cache entry."""
        return CacheEntry(
            type_id=record.type_id,
            attributes=record.attributes_snapshot(),
            version=self._version_of(record),
        )
    
    def deserialize(self, entry: CacheEntry) -> CacheableRecord:
        """Reconstruct a record from a cache entry.
        
        The entry is left untouched; decoded values go into a copy.
        
        Raises:
            UnknownTypeError: If the entry's type cannot be resolved
        """
        record_class = self._registry.resolve(entry.type_id)
        attributes = dict(entry.attributes)
        
        for attribute in record_class.serialized_attributes:
            raw = attributes.get(attribute)
            if isinstance(raw, SecondarilyEncoded):
                attributes[attribute] = raw.unserialize()
        
        return record_class.from_snapshot(attributes)
    
    def dump(self, record: CacheableRecord) -> Dict[str, Any]:
        """Serialize a record straight to the compact dict form."""
        return self.serialize(record).to_dict()
    
    def load(self, data: Mapping[str, Any]) -> CacheableRecord:
        """Deserialize a record from the compact dict form.
        
        Raises:
            CacheEntryFormatError: If data is not a compact cache entry
            UnknownTypeError: If the entry's type cannot be resolved
        """
        return self.deserialize(CacheEntry.from_dict(data))
    
    def _version_of(self, record: CacheableRecord) -> Optional[Any]:
        version_attribute = getattr(record, "version_attribute", self._version_attribute)
        if not version_attribute or version_attribute not in record.attribute_names():
            return None
        return record.get(version_attribute)


# Factory function for dependency injection
def create_record_serializer(
    registry: Optional[RecordTypeRegistry] = None,
    version_attribute: Optional[str] = "lock_version"
) -> RecordSerializer:
    """Create record serializer.
    
    Args:
        registry: Registry used to resolve type identifiers
        version_attribute: Fallback version attribute name
        
    Returns:
        Configured record serializer
    """
    return RecordSerializer(registry=registry, version_attribute=version_attribute)
