"""Record type registry.

ONLY type resolution - maps cache entry type identifiers back to record
classes, with a dotted-path lookup among already loaded modules as a
fallback for unregistered types.
"""

import inspect
import logging
import sys
from threading import Lock
from typing import Dict, List, Optional, Type

from ...core.exceptions.unknown_type import UnknownTypeError

logger = logging.getLogger(__name__)


class RecordTypeRegistry:
    """Registry resolving type identifiers to record classes."""
    
    def __init__(self):
        self._types: Dict[str, Type] = {}
        self._lock = Lock()
    
    def register(self, record_class: Type, type_id: Optional[str] = None) -> Type:
        """Register a record class under its type identifier.
        
        Returns the class so the method can be used as a decorator.
        """
        if not _is_record_class(record_class):
            raise ValueError(f"{record_class!r} is not a cacheable record class")
        
        type_id = type_id or record_class.type_id
        with self._lock:
            existing = self._types.get(type_id)
            if existing is not None and existing is not record_class:
                logger.warning(
                    f"Record type {type_id!r} re-registered: "
                    f"{existing.__module__}.{existing.__qualname__} replaced by "
                    f"{record_class.__module__}.{record_class.__qualname__}"
                )
            self._types[type_id] = record_class
        return record_class
    
    def unregister(self, type_id: str) -> bool:
        with self._lock:
            return self._types.pop(type_id, None) is not None
    
    def clear(self) -> None:
        with self._lock:
            self._types.clear()
    
    def registered_types(self) -> List[str]:
        with self._lock:
            return sorted(self._types)
    
    def resolve(self, type_id: str) -> Type:
        """Resolve a type identifier to a record class.
        
        Registered identifiers are looked up first; otherwise a dotted
        ``module.ClassName`` path is looked up in the modules that are
        already loaded. Cache data never causes a module import.
        
        Raises:
            UnknownTypeError: If the identifier cannot be resolved
        """
        if not isinstance(type_id, str) or not type_id:
            raise UnknownTypeError(type_id, "type identifier must be a non-empty string")
        
        with self._lock:
            record_class = self._types.get(type_id)
        if record_class is not None:
            return record_class
        
        if "." not in type_id:
            raise UnknownTypeError(type_id, "not registered")
        
        return self._lookup_loaded(type_id)
    
    def _lookup_loaded(self, type_id: str) -> Type:
        module_path, class_name = type_id.rsplit(".", 1)
        module = sys.modules.get(module_path)
        if module is None:
            raise UnknownTypeError(type_id, f"module {module_path!r} is not loaded")
        
        record_class = getattr(module, class_name, None)
        if record_class is None:
            raise UnknownTypeError(type_id, f"class {class_name!r} not found in {module_path!r}")
        if not _is_record_class(record_class):
            raise UnknownTypeError(type_id, f"{class_name!r} is not a cacheable record class")
        
        logger.debug(f"Resolved record type {type_id!r} from loaded module")
        return record_class
    
    def __contains__(self, type_id: str) -> bool:
        with self._lock:
            return type_id in self._types
    
    def __len__(self) -> int:
        with self._lock:
            return len(self._types)


def _is_record_class(candidate) -> bool:
    if not inspect.isclass(candidate) or inspect.isabstract(candidate):
        return False
    return (
        isinstance(getattr(candidate, "type_id", None), str)
        and callable(getattr(candidate, "from_snapshot", None))
        and callable(getattr(candidate, "declared_type", None))
    )


_default_registry = RecordTypeRegistry()


def get_default_registry() -> RecordTypeRegistry:
    """Get the process-wide registry that Record subclasses register into."""
    return _default_registry
