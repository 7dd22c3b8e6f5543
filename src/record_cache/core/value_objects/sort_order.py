"""Sort order value object.

ONLY sort keys - one (attribute, direction) pair of a composite ordering,
plus parsing of the accepted calling conventions.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass
from typing import Any, List


@dataclass(frozen=True)
class SortOrder:
    """One key of an ORDER BY clause.
    
    Accepted calling conventions for ``parse``::
    
        SortOrder.parse("name")
        SortOrder.parse(("name", False))
        SortOrder.parse(("price", False), "name")
        SortOrder.parse(("price", False), ("name", True))
        SortOrder.parse([("price", False), ("name", True)])
    """
    
    attribute: str
    ascending: bool = True
    
    def __post_init__(self):
        if not isinstance(self.attribute, str) or not self.attribute:
            raise ValueError(f"Sort attribute must be a non-empty string: {self.attribute!r}")
        if not isinstance(self.ascending, bool):
            raise ValueError(f"Sort direction must be a bool: {self.ascending!r}")
    
    @property
    def descending(self) -> bool:
        return not self.ascending
    
    @classmethod
    def parse(cls, *sort_orders: Any) -> List["SortOrder"]:
        """Normalize sort orders into a list of SortOrder."""
        if len(sort_orders) == 1 and isinstance(sort_orders[0], (tuple, list)):
            if not sort_orders[0]:
                return []
            if _is_order_list(sort_orders[0]):
                sort_orders = tuple(sort_orders[0])
        return [cls.coerce(order) for order in sort_orders]
    
    @classmethod
    def coerce(cls, order: Any) -> "SortOrder":
        """Convert a bare name or an (attribute, ascending) pair."""
        if isinstance(order, SortOrder):
            return order
        if isinstance(order, str):
            return cls(order)
        if _is_pair(order):
            return cls(*order)
        raise ValueError(f"Invalid sort order: {order!r}")
    
    def __str__(self) -> str:
        return f"{self.attribute} {'ASC' if self.ascending else 'DESC'}"


def _is_pair(value: Any) -> bool:
    if not isinstance(value, (tuple, list)) or not value:
        return False
    if not isinstance(value[0], str):
        return False
    return len(value) == 1 or (len(value) == 2 and isinstance(value[1], bool))


def _is_order_list(value: Any) -> bool:
    return isinstance(value, (tuple, list)) and bool(value) and not _is_pair(value)
