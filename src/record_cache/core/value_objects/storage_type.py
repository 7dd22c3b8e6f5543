"""Storage type value object.

ONLY declared column types - the storage type a record type declares for
each attribute, used to pick comparison and coercion rules.

Following maximum separation architecture - one file = one purpose.
"""

from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Tuple


class StorageType(str, Enum):
    """Declared storage type of a record attribute."""
    
    STRING = "string"
    TEXT = "text"
    INTEGER = "integer"
    FLOAT = "float"
    DECIMAL = "decimal"
    BOOLEAN = "boolean"
    DATE = "date"
    DATETIME = "datetime"
    TIME = "time"
    JSON = "json"
    BINARY = "binary"
    
    @property
    def is_textual(self) -> bool:
        """Textual attributes are ordered by collation key."""
        return self in (StorageType.STRING, StorageType.TEXT)
    
    @property
    def python_types(self) -> Tuple[type, ...]:
        """Python types accepted for this storage type on normal construction."""
        return _PYTHON_TYPES[self]


_PYTHON_TYPES = {
    StorageType.STRING: (str,),
    StorageType.TEXT: (str,),
    StorageType.INTEGER: (int,),
    StorageType.FLOAT: (float, int),
    StorageType.DECIMAL: (Decimal, int),
    StorageType.BOOLEAN: (bool,),
    StorageType.DATE: (date,),
    StorageType.DATETIME: (datetime,),
    StorageType.TIME: (time,),
    StorageType.JSON: (dict, list, str, int, float, bool),
    StorageType.BINARY: (bytes, bytearray),
}
