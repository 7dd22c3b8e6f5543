"""Record cache application services."""

from .collator import Collator, tidy, transliterate_char
from .record_filter import RecordFilter
from .record_sorter import RecordSorter, compare_values
from .record_cache_service import (
    RecordCacheService,
    create_record_cache_service,
    get_record_cache_service,
    serialize,
    deserialize,
    filter_records,
    sort_records,
)

__all__ = [
    "Collator",
    "tidy",
    "transliterate_char",
    "RecordFilter",
    "RecordSorter",
    "compare_values",
    "RecordCacheService",
    "create_record_cache_service",
    "get_record_cache_service",
    "serialize",
    "deserialize",
    "filter_records",
    "sort_records",
]
