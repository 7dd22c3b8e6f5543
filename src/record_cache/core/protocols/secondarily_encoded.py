"""Secondarily encoded value protocol.

ONLY decode hook contract - a raw attribute value stored in an encoded
form (JSON text, packed struct) that knows how to decode itself.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any
from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class SecondarilyEncoded(Protocol):
    """Raw encoded attribute value exposing a decode step."""
    
    def unserialize(self) -> Any:
        """Decode the raw value into its attribute value."""
        ...
