"""Exception classes for the conversion library.

All custom exceptions inherit from :class:`ToPlainError` to keep a single
hierarchy callers can catch.

Exception classes support two patterns:
1. No-argument raise: raise RuleDefinitionError()
2. Contextual attributes: err = RuleDefinitionError(rule="x"); raise err

The conversion engine itself never raises or wraps these; errors raised by a
rule propagate to the caller untouched.
"""

from __future__ import annotations

from typing import Any


class ToPlainError(Exception):
    """Base exception for all conversion library errors.

    Supports keyword arguments that are stored as attributes for debugging.
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = self.__class__.__doc__ or "Conversion library error occurred"
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)


class RuleDefinitionError(ToPlainError):
    """Conversion rule is malformed."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Conversion rule is malformed"
        super().__init__(message, **kwargs)

    @classmethod
    def not_callable(cls, rule_name: str, field_name: str, value: Any) -> "RuleDefinitionError":
        """Create error for a match/transform slot that cannot be called."""
        label = rule_name or "<unnamed>"
        return cls(
            f"Rule {label!r} requires a callable {field_name} (got {type(value).__name__})",
            rule=rule_name,
            field=field_name,
        )

    @classmethod
    def no_type_tags(cls) -> "RuleDefinitionError":
        """Create error for a type matcher built without tags."""
        return cls("Type matcher requires at least one type tag")

    @classmethod
    def invalid_type_tag(cls, tag: Any) -> "RuleDefinitionError":
        """Create error for a type tag that is not a non-empty string."""
        return cls(f"Type tags must be non-empty strings (got {tag!r})", tag=tag)

    @classmethod
    def invalid_type_path(cls, type_ref: Any) -> "RuleDefinitionError":
        """Create error for a dotted type path without a module part."""
        return cls(f"Type path must be fully qualified (got {type_ref!r})", type_ref=type_ref)

    @classmethod
    def invalid_type_ref(cls, type_ref: Any) -> "RuleDefinitionError":
        """Create error for a type reference that is neither a class nor a dotted path."""
        return cls(
            f"Expected a class or dotted path, got {type(type_ref).__name__}",
            type_ref=type_ref,
        )


class UnknownEncodingError(ToPlainError, ValueError):
    """Binary encoding name is not supported."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Binary encoding name is not supported"
        super().__init__(message, **kwargs)

    @classmethod
    def for_name(cls, name: Any, supported: tuple[str, ...]) -> "UnknownEncodingError":
        """Create error naming the rejected encoding and the allowed ones."""
        return cls(
            f"Unknown binary encoding {name!r}. Supported: {', '.join(supported)}",
            encoding=name,
        )


class NotSerializableError(ToPlainError):
    """Converted value cannot be encoded by a downstream serializer."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Converted value cannot be encoded by a downstream serializer"
        super().__init__(message, **kwargs)

    @classmethod
    def for_value(cls, value: Any, reason: str) -> "NotSerializableError":
        """Create error describing the value that failed to encode."""
        return cls(
            f"Value of type {type(value).__name__} is not serializable: {reason}",
            value_type=type(value).__name__,
        )


__all__ = [
    "NotSerializableError",
    "RuleDefinitionError",
    "ToPlainError",
    "UnknownEncodingError",
]
