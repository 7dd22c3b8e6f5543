"""Record sorter.

ONLY in-memory ORDER BY - sorts cached records by one or more attributes
following MySQL ordering rules, including string collation.

Provide attribute names to sort ascending, or ``(attribute, False)`` to
sort descending.

Example:
    sorter = RecordSorter()
    sorter.sort(apples, "name")
    sorter.sort(apples, ("name", False))
    sorter.sort(apples, ("price", False), "name")
    sorter.sort(apples, ("price", False), ("name", True))
    sorter.sort(apples, [("price", False), ("name", True)])
"""

import logging
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any, Callable, List, Sequence

from ...core.exceptions.type_mismatch import TypeMismatchError
from ...core.protocols.cacheable_record import CacheableRecord
from ...core.value_objects.sort_order import SortOrder
from .collator import Collator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _SortKey:
    attribute: str
    ascending: bool
    collated: bool


def compare_values(attribute: str, left: Any, right: Any) -> int:
    """Three-way compare of the values at one sort key.
    
    A None on the left sorts first, even against another None. A None on
    the right (with a value on the left) sorts last.
    
    Raises:
        TypeMismatchError: If the two values cannot be ordered
    """
    if left is None:
        return -1
    if right is None:
        return 1
    try:
        if left < right:
            return -1
        if left > right:
            return 1
    except TypeError as e:
        raise TypeMismatchError(attribute, left, right, original_error=e) from e
    return 0


class RecordSorter:
    """Sort records in memory, emulating SQL ORDER BY semantics.
    
    Strings are ordered case-insensitively by collation key. Descending
    keys swap which record supplies the left value, so the None rule in
    ``compare_values`` puts nulls first ascending and last descending.
    Records that tie on every key are not kept in a guaranteed order.
    """
    
    def __init__(self, collator_factory: Callable[[], Collator] = Collator):
        self._collator_factory = collator_factory
    
    def sort(self, records: Sequence[CacheableRecord], *sort_orders: Any) -> List[CacheableRecord]:
        """Sort records by the given sort orders.
        
        A list is sorted in place and returned; any other sequence is
        returned as a new sorted list. The list is only modified once the
        whole sort has succeeded.
        
        Raises:
            UnknownAttributeError: If a sort attribute is not declared
            TypeMismatchError: If values at a key cannot be ordered
            ValueError: If a sort order is malformed
        """
        if not records or not sort_orders:
            return records
        
        orders = SortOrder.parse(*sort_orders)
        if not orders:
            return records
        
        record_type = type(records[0])
        keys = [
            _SortKey(
                attribute=order.attribute,
                ascending=order.ascending,
                collated=record_type.declared_type(order.attribute).is_textual,
            )
            for order in orders
        ]
        
        collator = self._collator_factory()
        try:
            ordered = sorted(records, key=cmp_to_key(self._comparator(keys, collator)))
        finally:
            collator.clear()
        
        logger.debug(
            f"Sorted {len(ordered)} {record_type.type_id} records by "
            f"{', '.join(str(order) for order in orders)}"
        )
        
        if isinstance(records, list):
            records[:] = ordered
            return records
        return ordered
    
    def _comparator(
        self,
        keys: List[_SortKey],
        collator: Collator
    ) -> Callable[[CacheableRecord, CacheableRecord], int]:
        def value_of(record: CacheableRecord, key: _SortKey) -> Any:
            value = record.get(key.attribute)
            return collator.collate(value) if key.collated else value
        
        def compare(x: CacheableRecord, y: CacheableRecord) -> int:
            for key in keys:
                left, right = (x, y) if key.ascending else (y, x)
                result = compare_values(key.attribute, value_of(left, key), value_of(right, key))
                if result:
                    return result
            # full tie: first operand is treated as greater
            return 1
        
        return compare
