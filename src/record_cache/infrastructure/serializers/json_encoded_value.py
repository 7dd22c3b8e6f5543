"""JSON encoded attribute value.

ONLY JSON column decoding - raw JSON text of a secondarily encoded
attribute, with extended type support for dates, decimals, UUIDs and sets.

Following maximum separation architecture - one file = one purpose.
"""

import json
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, Union
from uuid import UUID


class ExtendedJSONEncoder(json.JSONEncoder):
    """JSON encoder for extended type support."""
    
    def default(self, obj: Any) -> Any:
        """Handle non-standard JSON types."""
        if isinstance(obj, datetime):
            return {"__datetime__": obj.isoformat()}
        elif isinstance(obj, date):
            return {"__date__": obj.isoformat()}
        elif isinstance(obj, Decimal):
            return {"__decimal__": str(obj)}
        elif isinstance(obj, UUID):
            return {"__uuid__": str(obj)}
        elif isinstance(obj, set):
            return {"__set__": sorted(obj, key=repr)}
        elif isinstance(obj, frozenset):
            return {"__frozenset__": sorted(obj, key=repr)}
        
        return super().default(obj)


def decode_json_object(obj: Dict[str, Any]) -> Any:
    """Decode extended JSON objects back to Python types."""
    if "__datetime__" in obj:
        return datetime.fromisoformat(obj["__datetime__"])
    elif "__date__" in obj:
        return date.fromisoformat(obj["__date__"])
    elif "__decimal__" in obj:
        return Decimal(obj["__decimal__"])
    elif "__uuid__" in obj:
        return UUID(obj["__uuid__"])
    elif "__set__" in obj:
        return set(obj["__set__"])
    elif "__frozenset__" in obj:
        return frozenset(obj["__frozenset__"])
    
    return obj


@dataclass(frozen=True)
class JSONEncodedValue:
    """Raw JSON text stored for a secondarily encoded attribute.
    
    The cache keeps the encoded text; the attribute value is produced by
    ``unserialize`` when a record is reconstructed from its cache entry.
    """
    
    raw: Union[str, bytes]
    
    @classmethod
    def encode(cls, value: Any) -> "JSONEncodedValue":
        return cls(json.dumps(value, cls=ExtendedJSONEncoder, separators=(",", ":")))
    
    def unserialize(self) -> Any:
        raw = self.raw.decode("utf-8") if isinstance(self.raw, bytes) else self.raw
        return json.loads(raw, object_hook=decode_json_object)
