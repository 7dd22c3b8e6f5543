"""Record filter.

ONLY in-memory WHERE - narrows cached records by equality and set
membership predicates with case-insensitive string comparison.

Only ``attribute = value`` and ``attribute IN (a, b, c)`` are supported.

Example:
    RecordFilter().filter(apples, {"price": [0.49, 0.59, 0.69], "name": "Green Apple"})
"""

import logging
from typing import Any, Callable, Collection, List, Mapping, Sequence

from ...core.protocols.cacheable_record import CacheableRecord

logger = logging.getLogger(__name__)

_COLLECTION_TYPES = (list, tuple, set, frozenset)
_CROSS_COMPARED_TYPES = {int, str}


def _fold(value: Any) -> Any:
    return value.lower() if isinstance(value, str) else value


class RecordFilter:
    """Filter records in memory, emulating SQL WHERE semantics."""
    
    def filter(
        self,
        records: Sequence[CacheableRecord],
        predicates: Mapping[str, Any]
    ) -> List[CacheableRecord]:
        """Keep the records matching every predicate.
        
        A list is narrowed in place and returned; any other sequence is
        copied into a new list first.
        
        Raises:
            UnknownAttributeError: If a predicate names an undeclared attribute
        """
        working = records if isinstance(records, list) else list(records)
        if not working or not predicates:
            return working
        
        record_type = type(working[0])
        for attribute in predicates:
            record_type.declared_type(attribute)
        
        for attribute, value in predicates.items():
            if isinstance(value, _COLLECTION_TYPES):
                matches = self._membership_matcher(value)
            else:
                matches = self._equality_matcher(value)
            
            before = len(working)
            working[:] = [record for record in working if matches(record.get(attribute))]
            logger.debug(
                f"Filtered {record_type.type_id} on {attribute!r}: {before} -> {len(working)} records"
            )
        
        return working
    
    def _membership_matcher(self, values: Collection[Any]) -> Callable[[Any], bool]:
        values = list(values)
        if values and isinstance(values[0], str):
            values = [_fold(value) for value in values]
        try:
            targets: Collection[Any] = set(values)
        except TypeError:
            # unhashable targets such as JSON objects are matched by equality
            targets = values
        
        def matches(attribute_value: Any) -> bool:
            try:
                return _fold(attribute_value) in targets
            except TypeError:
                # unhashable attribute values are never members of a set
                return False
        
        return matches
    
    def _equality_matcher(self, value: Any) -> Callable[[Any], bool]:
        where_value = _fold(value)
        
        def matches(attribute_value: Any) -> bool:
            attribute_value = _fold(attribute_value)
            if {type(attribute_value), type(where_value)} == _CROSS_COMPARED_TYPES:
                return str(attribute_value) == str(where_value)
            return attribute_value == where_value
        
        return matches
