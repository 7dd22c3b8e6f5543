"""Record cache serializers."""

from .record_serializer import RecordSerializer, create_record_serializer
from .json_encoded_value import (
    JSONEncodedValue,
    ExtendedJSONEncoder,
    decode_json_object,
)

__all__ = [
    "RecordSerializer",
    "create_record_serializer",
    "JSONEncodedValue",
    "ExtendedJSONEncoder",
    "decode_json_object",
]
