"""
Built-in conversion rules and the default option set.

Order matters: the engine stops at the first matching rule. The fixed order is

1. ``None``
2. exceptions
3. decimal wrappers
4. opaque identifiers
5. binary wrappers
6. raw byte buffers
7. ``to_object()`` capability
8. ``to_json()`` capability
9. enums
10. dates and times
11. dataclass instances

Rules 1-8 keep their relative precedence in every configuration; extra rules
should be appended or, when they must win (binary encoders), prepended.
"""

from __future__ import annotations

import copy
import dataclasses
import datetime
import enum
from decimal import Decimal
from typing import Any, Optional, Tuple

from .capabilities import JsonConvertible, ObjectConvertible
from .conversion_rule import ConversionRule, RecurseFn
from .default_rules_helpers import ErrorMapper
from .options import ConversionOptions
from .rule_factories import make_capability_rule, make_type_matcher
from .type_registry import (
    BINARY_WRAPPER_TAGS,
    BYTE_BUFFER_TAGS,
    DECIMAL_TAGS,
    IDENTIFIER_TAGS,
    TypeRegistry,
)


def _is_none(value: Any) -> bool:
    return value is None


def _to_none(value: Any, recurse: RecurseFn) -> None:
    return None


def _is_error(value: Any) -> bool:
    return isinstance(value, BaseException)


def _error_to_mapping(value: BaseException, recurse: RecurseFn) -> dict:
    return ErrorMapper.to_mapping(value, recurse)


def _decimal_to_number(value: Any, recurse: RecurseFn) -> float:
    text = str(value)
    # float() refuses signalling NaN
    if Decimal(text).is_snan():
        return float("nan")
    return float(text)


def _identifier_to_string(value: Any, recurse: RecurseFn) -> str:
    return str(value)


def _bytes_to_list(value: Any, recurse: RecurseFn) -> list:
    return list(bytes(value))


def _is_enum(value: Any) -> bool:
    return isinstance(value, enum.Enum)


def _enum_to_value(value: enum.Enum, recurse: RecurseFn) -> Any:
    return recurse(value.value)


def _is_temporal(value: Any) -> bool:
    return isinstance(value, (datetime.date, datetime.time))


def _temporal_to_iso(value: Any, recurse: RecurseFn) -> str:
    return value.isoformat()


def _is_dataclass_instance(value: Any) -> bool:
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def _dataclass_to_mapping(value: Any, recurse: RecurseFn) -> Any:
    return recurse({field.name: getattr(value, field.name) for field in dataclasses.fields(value)})


def default_conversions(registry: Optional[TypeRegistry] = None) -> Tuple[ConversionRule, ...]:
    """Build the built-in rules; type matchers consult *registry* (default registry when omitted)."""
    return (
        ConversionRule(match=_is_none, transform=_to_none, name="none"),
        ConversionRule(match=_is_error, transform=_error_to_mapping, name="error"),
        ConversionRule(
            match=make_type_matcher(*DECIMAL_TAGS, registry=registry),
            transform=_decimal_to_number,
            name="decimal",
        ),
        ConversionRule(
            match=make_type_matcher(*IDENTIFIER_TAGS, registry=registry),
            transform=_identifier_to_string,
            name="identifier",
        ),
        ConversionRule(
            match=make_type_matcher(*BINARY_WRAPPER_TAGS, registry=registry),
            transform=_bytes_to_list,
            name="binary",
        ),
        ConversionRule(
            match=make_type_matcher(*BYTE_BUFFER_TAGS, registry=registry),
            transform=_bytes_to_list,
            name="buffer",
        ),
        make_capability_rule(ObjectConvertible, "to_object"),
        make_capability_rule(JsonConvertible, "to_json"),
        ConversionRule(match=_is_enum, transform=_enum_to_value, name="enum"),
        ConversionRule(match=_is_temporal, transform=_temporal_to_iso, name="temporal"),
        ConversionRule(match=_is_dataclass_instance, transform=_dataclass_to_mapping, name="dataclass"),
    )


DEFAULT_CONVERSIONS = default_conversions()

DEFAULT_OPTIONS = ConversionOptions(conversions=DEFAULT_CONVERSIONS, default_transform=copy.deepcopy)


__all__ = [
    "DEFAULT_CONVERSIONS",
    "DEFAULT_OPTIONS",
    "default_conversions",
]
