"""
Registry that maps concrete types to stable type tags.

Special wrapper types are identified by a tag looked up through the value's
MRO rather than by inspecting class names at conversion time. Types are keyed
by their fully qualified ``module.QualName`` path, so integrations can register
types from optional libraries (``bson`` and friends) without importing them.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, Mapping, Optional, Union

from .exceptions import RuleDefinitionError

logger = logging.getLogger(__name__)

TypeRef = Union[type, str]

DECIMAL_TAGS = ("Decimal", "Decimal128", "NumberDecimal")
IDENTIFIER_TAGS = ("ObjectId", "UUID", "Identifier")
BINARY_WRAPPER_TAGS = ("Binary",)
BYTE_BUFFER_TAGS = ("bytes", "bytearray", "memoryview")

_BUILTIN_ENTRIES: Dict[str, str] = {
    "decimal.Decimal": "Decimal",
    "bson.decimal128.Decimal128": "Decimal128",
    "bson.objectid.ObjectId": "ObjectId",
    "uuid.UUID": "UUID",
    "bson.binary.Binary": "Binary",
    "builtins.bytes": "bytes",
    "builtins.bytearray": "bytearray",
    "builtins.memoryview": "memoryview",
}


def type_path(type_ref: TypeRef) -> str:
    """Return the ``module.QualName`` identifier for a class or dotted path."""
    if isinstance(type_ref, str):
        path = type_ref.strip()
        if "." not in path:
            raise RuleDefinitionError.invalid_type_path(type_ref)
        return path
    if isinstance(type_ref, type):
        return f"{type_ref.__module__}.{type_ref.__qualname__}"
    raise RuleDefinitionError.invalid_type_ref(type_ref)


class TypeRegistry:
    """Thread-safe mapping of type paths to tags."""

    def __init__(self, entries: Optional[Mapping[TypeRef, str]] = None) -> None:
        self._lock = threading.Lock()
        self._entries: Dict[str, str] = {}
        for type_ref, tag in (entries or {}).items():
            self.register(type_ref, tag)

    def register(self, type_ref: TypeRef, tag: str) -> None:
        if not isinstance(tag, str) or not tag:
            raise RuleDefinitionError.invalid_type_tag(tag)
        path = type_path(type_ref)
        with self._lock:
            previous = self._entries.get(path)
            self._entries = {**self._entries, path: tag}
        if previous is not None and previous != tag:
            logger.debug("Re-registered %s from tag %s to %s", path, previous, tag)
        else:
            logger.debug("Registered %s as %s", path, tag)

    def unregister(self, type_ref: TypeRef) -> bool:
        """Remove a registration; return whether one existed."""
        path = type_path(type_ref)
        with self._lock:
            if path not in self._entries:
                return False
            self._entries = {key: tag for key, tag in self._entries.items() if key != path}
        logger.debug("Unregistered %s", path)
        return True

    def tag_for(self, value: object) -> Optional[str]:
        """Return the tag of the most specific registered class of *value*."""
        if value is None:
            return None
        entries = self._entries
        for klass in type(value).__mro__:
            tag = entries.get(f"{klass.__module__}.{klass.__qualname__}")
            if tag is not None:
                return tag
        return None

    def copy(self) -> "TypeRegistry":
        clone = TypeRegistry()
        clone._entries = dict(self._entries)
        return clone

    def __contains__(self, type_ref: object) -> bool:
        if isinstance(type_ref, type):
            return type_path(type_ref) in self._entries
        if isinstance(type_ref, str):
            return type_ref.strip() in self._entries
        return False

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"TypeRegistry({len(self)} types)"


DEFAULT_TYPE_REGISTRY = TypeRegistry(_BUILTIN_ENTRIES)


__all__ = [
    "BINARY_WRAPPER_TAGS",
    "BYTE_BUFFER_TAGS",
    "DECIMAL_TAGS",
    "DEFAULT_TYPE_REGISTRY",
    "IDENTIFIER_TAGS",
    "TypeRef",
    "TypeRegistry",
    "type_path",
]
