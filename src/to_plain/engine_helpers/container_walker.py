"""Structural recursion over sequences and mappings."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, List

from ..absent import ABSENT
from ..conversion_rule import RecurseFn

# JSON spellings for scalar keys, as a JavaScript property key would read
_KEY_LITERALS = {
    type(None): lambda key: "null",
    bool: lambda key: "true" if key else "false",
}


def is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


class ContainerWalker:
    """Builds converted copies of containers, leaving the input untouched."""

    @staticmethod
    def convert_sequence(value: Any, recurse: RecurseFn) -> List[Any]:
        """Convert each element in order; elements converting to ABSENT are dropped."""
        converted: List[Any] = []
        for element in value:
            result = recurse(element)
            if result is not ABSENT:
                converted.append(result)
        return converted

    @staticmethod
    def convert_mapping(value: Mapping, recurse: RecurseFn) -> Dict[str, Any]:
        """
        Convert each value in key order; keys whose value converts to ABSENT are dropped.

        Non-string keys are converted like values and stored as text. An entry
        whose key converts to ABSENT is dropped. When two keys produce the same
        text the later entry wins.
        """
        converted: Dict[str, Any] = {}
        for key, item in value.items():
            text_key = ContainerWalker.convert_key(key, recurse)
            if text_key is ABSENT:
                continue
            result = recurse(item)
            if result is not ABSENT:
                converted[text_key] = result
        return converted

    @staticmethod
    def convert_key(key: Any, recurse: RecurseFn) -> Any:
        """Return *key* as a string, or ABSENT when it converts to nothing."""
        if isinstance(key, str):
            return key
        plain = recurse(key)
        if plain is ABSENT or isinstance(plain, str):
            return plain
        return _KEY_LITERALS.get(type(plain), str)(plain)
