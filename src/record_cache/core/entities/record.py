"""Record domain entity.

ONLY record base class - a typed attribute container implementing the
cacheable record protocol, with a normal constructor that applies
defaults, validation and callbacks, and a snapshot constructor that
bypasses all of them.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any, ClassVar, Dict, FrozenSet, Mapping, Optional, Tuple

from ..exceptions.record_validation import RecordValidationError
from ..exceptions.unknown_attribute import UnknownAttributeError
from ..value_objects.attribute_definition import AttributeDefinition
from ..value_objects.storage_type import StorageType


class Record:
    """Base class for cacheable records.
    
    Subclasses declare their schema with ``attributes_schema``. Every
    subclass with a schema is registered in the default record type
    registry under ``type_id`` (the class name unless overridden).
    
    Example:
        class Apple(Record):
            attributes_schema = (
                AttributeDefinition("id", StorageType.INTEGER),
                AttributeDefinition("name", StorageType.STRING),
                AttributeDefinition("price", StorageType.DECIMAL),
            )
    """
    
    type_id: ClassVar[str] = "Record"
    attributes_schema: ClassVar[Tuple[AttributeDefinition, ...]] = ()
    version_attribute: ClassVar[Optional[str]] = "lock_version"
    serialized_attributes: ClassVar[FrozenSet[str]] = frozenset()
    _definitions: ClassVar[Dict[str, AttributeDefinition]] = {}
    
    def __init_subclass__(cls, register: bool = True, **kwargs):
        super().__init_subclass__(**kwargs)
        if "type_id" not in cls.__dict__:
            cls.type_id = cls.__name__
        cls._definitions = {
            definition.name: definition for definition in cls.attributes_schema
        }
        cls.serialized_attributes = frozenset(
            definition.name for definition in cls.attributes_schema if definition.serialized
        )
        if register and cls.attributes_schema:
            from ...infrastructure.registries.record_type_registry import get_default_registry
            get_default_registry().register(cls)
    
    def __init__(self, **values: Any):
        unknown = set(values) - set(self._definitions)
        if unknown:
            raise UnknownAttributeError(self.type_id, sorted(unknown)[0])
        
        self._attributes: Dict[str, Any] = {}
        for definition in self.attributes_schema:
            if definition.name in values:
                value = values[definition.name]
            else:
                value = definition.default_value()
            self._validate(definition, value)
            self._attributes[definition.name] = value
        
        self._new_record = True
        self.after_initialize()
    
    @classmethod
    def from_snapshot(cls, attributes: Mapping[str, Any]) -> "Record":
        """Reconstruct a record from cached attribute values.
        
        Defaults, validation and ``after_initialize`` are not run.
        Missing attributes are set to None, undeclared ones are dropped.
        """
        record = cls.__new__(cls)
        record._attributes = {name: attributes.get(name) for name in cls._definitions}
        record._new_record = False
        return record
    
    def after_initialize(self) -> None:
        """Callback run after normal construction only."""
    
    @classmethod
    def declared_type(cls, attribute: str) -> StorageType:
        return cls._definition(attribute).storage_type
    
    @classmethod
    def attribute_names(cls) -> Tuple[str, ...]:
        return tuple(cls._definitions)
    
    @classmethod
    def _definition(cls, attribute: str) -> AttributeDefinition:
        try:
            return cls._definitions[attribute]
        except KeyError:
            raise UnknownAttributeError(cls.type_id, attribute) from None
    
    def get(self, attribute: str) -> Any:
        self._definition(attribute)
        return self._attributes[attribute]
    
    def set(self, attribute: str, value: Any) -> None:
        self._validate(self._definition(attribute), value)
        self._attributes[attribute] = value
    
    def attributes_snapshot(self) -> Dict[str, Any]:
        return dict(self._attributes)
    
    @property
    def version(self) -> Optional[Any]:
        if self.version_attribute and self.version_attribute in self._definitions:
            return self._attributes[self.version_attribute]
        return None
    
    @property
    def is_new_record(self) -> bool:
        return self._new_record
    
    def _validate(self, definition: AttributeDefinition, value: Any) -> None:
        if not definition.accepts(value):
            reason = (
                "value cannot be null" if value is None
                else f"expected {definition.storage_type.value}, got {type(value).__name__}"
            )
            raise RecordValidationError(self.type_id, definition.name, value, reason)
    
    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails
        if name.startswith("_"):
            raise AttributeError(name)
        definitions = type(self)._definitions
        if name in definitions:
            return self._attributes[name]
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")
    
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Record):
            return NotImplemented
        return self.type_id == other.type_id and self._attributes == other._attributes
    
    __hash__ = None
    
    def __repr__(self) -> str:
        values = ", ".join(f"{name}={value!r}" for name, value in self._attributes.items())
        return f"{type(self).__name__}({values})"
