"""Record cache service.

ONLY cache strategy support - high-level API combining the serializer,
filter and sorter that cache strategies use on cached record sets.

Following maximum separation architecture - one file = one purpose.
"""

from functools import lru_cache, partial
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ...config.settings import RecordCacheSettings, get_settings
from ...core.entities.cache_entry import CacheEntry
from ...core.protocols.cacheable_record import CacheableRecord
from ...infrastructure.registries.record_type_registry import RecordTypeRegistry
from ...infrastructure.serializers.record_serializer import RecordSerializer
from .collator import Collator
from .record_filter import RecordFilter
from .record_sorter import RecordSorter


class RecordCacheService:
    """Record cache service.
    
    Unified API for cache strategies:
    - serialize/deserialize records to and from cache entries
    - filter cached records with WHERE-style predicates
    - sort cached records with ORDER BY-style sort orders
    """
    
    def __init__(
        self,
        serializer: Optional[RecordSerializer] = None,
        record_filter: Optional[RecordFilter] = None,
        sorter: Optional[RecordSorter] = None
    ):
        """Initialize record cache service.
        
        Args:
            serializer: Serializer for cache entries
            record_filter: Filter for predicate narrowing
            sorter: Sorter for composite ordering
        """
        self._serializer = serializer or RecordSerializer()
        self._filter = record_filter or RecordFilter()
        self._sorter = sorter or RecordSorter()
    
    def serialize(self, record: CacheableRecord) -> CacheEntry:
        return self._serializer.serialize(record)
    
    def deserialize(self, entry: CacheEntry) -> CacheableRecord:
        return self._serializer.deserialize(entry)
    
    def dump(self, record: CacheableRecord) -> Dict[str, Any]:
        return self._serializer.dump(record)
    
    def load(self, data: Mapping[str, Any]) -> CacheableRecord:
        return self._serializer.load(data)
    
    def filter(
        self,
        records: Sequence[CacheableRecord],
        predicates: Mapping[str, Any]
    ) -> List[CacheableRecord]:
        return self._filter.filter(records, predicates)
    
    def sort(self, records: Sequence[CacheableRecord], *sort_orders: Any) -> List[CacheableRecord]:
        return self._sorter.sort(records, *sort_orders)
    
    def filter_and_sort(
        self,
        records: Sequence[CacheableRecord],
        predicates: Optional[Mapping[str, Any]],
        *sort_orders: Any
    ) -> List[CacheableRecord]:
        """Narrow records by predicates, then order what remains."""
        if predicates:
            records = self._filter.filter(records, predicates)
        return self._sorter.sort(records, *sort_orders)


# Factory function for dependency injection
def create_record_cache_service(
    settings: Optional[RecordCacheSettings] = None,
    registry: Optional[RecordTypeRegistry] = None
) -> RecordCacheService:
    """Create record cache service from settings.
    
    Args:
        settings: Settings to use (defaults to environment settings)
        registry: Record type registry (defaults to the process-wide one)
        
    Returns:
        Configured record cache service
    """
    settings = settings or get_settings()
    collator_factory = partial(
        Collator,
        normalization_form=settings.unicode_normalization_form,
    )
    return RecordCacheService(
        serializer=RecordSerializer(
            registry=registry,
            version_attribute=settings.version_attribute,
        ),
        record_filter=RecordFilter(),
        sorter=RecordSorter(collator_factory=collator_factory),
    )


@lru_cache()
def get_record_cache_service() -> RecordCacheService:
    """Get the shared service used by the module-level functions."""
    return create_record_cache_service()


def serialize(record: CacheableRecord) -> CacheEntry:
    """Serialize one record before adding it to the cache."""
    return get_record_cache_service().serialize(record)


def deserialize(entry: CacheEntry) -> CacheableRecord:
    """Deserialize a cached record."""
    return get_record_cache_service().deserialize(entry)


def filter_records(
    records: Sequence[CacheableRecord],
    predicates: Mapping[str, Any]
) -> List[CacheableRecord]:
    """Filter cached records in memory.
    
    Example:
        filter_records(apples, {"price": [0.49, 0.59, 0.69], "name": "Green Apple"})
    """
    return get_record_cache_service().filter(records, predicates)


def sort_records(records: Sequence[CacheableRecord], *sort_orders: Any) -> List[CacheableRecord]:
    """Sort cached records in memory.
    
    Example:
        sort_records(apples, ("price", False), "name")
    """
    return get_record_cache_service().sort(records, *sort_orders)
