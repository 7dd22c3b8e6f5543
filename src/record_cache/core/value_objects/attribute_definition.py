"""Attribute definition value object.

ONLY attribute schema - name, declared storage type, default and
nullability of one record attribute.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from .storage_type import StorageType


@dataclass(frozen=True)
class AttributeDefinition:
    """Declared attribute of a record type.
    
    Defaults are applied only by normal record construction. A callable
    default is invoked once per record. Attributes flagged ``serialized``
    are stored in an encoded form and decoded when a cache entry is
    reconstructed.
    """
    
    name: str
    storage_type: StorageType = StorageType.STRING
    default: Union[Any, Callable[[], Any], None] = None
    nullable: bool = True
    serialized: bool = False
    
    def __post_init__(self):
        if not self.name or not self.name.isidentifier():
            raise ValueError(f"Attribute name must be a valid identifier: {self.name!r}")
        if not isinstance(self.storage_type, StorageType):
            object.__setattr__(self, "storage_type", StorageType(self.storage_type))
    
    def default_value(self) -> Optional[Any]:
        """Resolve the default value for a newly constructed record."""
        if callable(self.default):
            return self.default()
        return self.default
    
    def accepts(self, value: Any) -> bool:
        """Check whether a value is valid for this attribute."""
        if value is None:
            return self.nullable
        if self.serialized:
            return True
        # bool is an int subclass, only BOOLEAN accepts it
        if isinstance(value, bool) and self.storage_type is not StorageType.BOOLEAN:
            return self.storage_type is StorageType.JSON
        return isinstance(value, self.storage_type.python_types)
