"""
Capability interfaces for values that know how to describe themselves.

A class exposes a plain form by implementing ``to_object()`` or ``to_json()``.
Like the ``collections.abc`` interfaces, classes are recognised structurally
(any class defining the method counts), by subclassing, or through
``register()`` for adapted third-party types.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


def _defines_method(klass: type, method_name: str) -> bool:
    for base in klass.__mro__:
        if method_name in base.__dict__:
            return callable(base.__dict__[method_name])
    return False


class ObjectConvertible(ABC):
    """Values that can produce a plain object form via ``to_object()``."""

    __slots__ = ()

    @abstractmethod
    def to_object(self) -> Any:
        raise NotImplementedError

    @classmethod
    def __subclasshook__(cls, klass: type) -> Any:
        if cls is ObjectConvertible:
            return _defines_method(klass, "to_object") or NotImplemented
        return NotImplemented


class JsonConvertible(ABC):
    """Values that can produce a JSON-ready form via ``to_json()``."""

    __slots__ = ()

    @abstractmethod
    def to_json(self) -> Any:
        raise NotImplementedError

    @classmethod
    def __subclasshook__(cls, klass: type) -> Any:
        if cls is JsonConvertible:
            return _defines_method(klass, "to_json") or NotImplemented
        return NotImplemented


__all__ = ["JsonConvertible", "ObjectConvertible"]
