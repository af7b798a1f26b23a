"""
Recursive conversion of complex values into plain, serialization-ready data.

For every node the engine tries each rule of the active options in order and
returns the first matching rule's transform output. When nothing matches,
lists, tuples and mappings are rebuilt from their converted children (children
converting to ``ABSENT`` are dropped) and the default transform runs on the
result. Exactly one of "a rule's transform" or "the default transform"
produces each node's final value.

The engine holds no per-call state and never mutates its input, so one
instance can be reused freely, including from several threads. It catches
nothing: an exception raised by a rule or the default transform aborts the
whole conversion and reaches the caller unchanged.
"""

from __future__ import annotations

from functools import partial
from typing import Any, Iterable, Optional

from .config import ConfigurationError
from .conversion_rule import ConversionRule, DefaultTransformFn
from .default_rules import DEFAULT_OPTIONS
from .engine_helpers import ContainerWalker, is_mapping, is_sequence
from .options import ConversionOptions


class ToPlain:
    """Converter bound to a complete default option set."""

    def __init__(self, default_options: ConversionOptions = DEFAULT_OPTIONS) -> None:
        if not default_options.is_complete:
            raise ConfigurationError.missing_value(
                "default_options", "engine defaults need both conversions and default_transform"
            )
        self.default_options = default_options

    def convert(
        self,
        value: Any,
        options: Optional[ConversionOptions] = None,
        *,
        conversions: Optional[Iterable[ConversionRule]] = None,
        default_transform: Optional[DefaultTransformFn] = None,
    ) -> Any:
        """
        Convert *value* into plain data.

        Args:
            value: Any value tree
            options: Partial or complete options layered over the instance defaults
            conversions: Rules replacing those of *options*/defaults for this call
            default_transform: Fallback replacing that of *options*/defaults for this call

        Returns:
            The converted value; ``ABSENT`` when the input converts to nothing
        """
        resolved = self.resolve_options(options, conversions=conversions, default_transform=default_transform)
        return self._convert(value, resolved)

    def resolve_options(
        self,
        options: Optional[ConversionOptions] = None,
        *,
        conversions: Optional[Iterable[ConversionRule]] = None,
        default_transform: Optional[DefaultTransformFn] = None,
    ) -> ConversionOptions:
        base = options if options is not None else ConversionOptions()
        resolved = base.resolve(self.default_options)
        if conversions is not None or default_transform is not None:
            resolved = ConversionOptions(conversions=conversions, default_transform=default_transform).resolve(resolved)
        return resolved

    def _convert(self, value: Any, options: ConversionOptions) -> Any:
        recurse = partial(self._convert, options=options)

        for rule in options.conversions:
            if rule.applies_to(value):
                return rule.apply(value, recurse)

        if is_sequence(value):
            value = ContainerWalker.convert_sequence(value, recurse)
        elif is_mapping(value):
            value = ContainerWalker.convert_mapping(value, recurse)

        return options.default_transform(value)


def to_plain(
    value: Any,
    options: Optional[ConversionOptions] = None,
    *,
    conversions: Optional[Iterable[ConversionRule]] = None,
    default_transform: Optional[DefaultTransformFn] = None,
) -> Any:
    """Convert *value* with a fresh :class:`ToPlain` engine using the built-in defaults."""
    engine = ToPlain()
    return engine.convert(value, options, conversions=conversions, default_transform=default_transform)


__all__ = ["ToPlain", "to_plain"]
