"""Immutable option sets for the conversion engine."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Optional, Tuple

from .conversion_rule import ConversionRule, DefaultTransformFn
from .exceptions import RuleDefinitionError


def _freeze_rules(rules: Iterable[ConversionRule]) -> Tuple[ConversionRule, ...]:
    frozen = tuple(rules)
    for rule in frozen:
        if not isinstance(rule, ConversionRule):
            raise RuleDefinitionError(
                f"Conversions must be ConversionRule instances (got {type(rule).__name__})",
                rule=rule,
            )
    return frozen


@dataclass(frozen=True)
class ConversionOptions:
    """
    Rules plus the fallback transform applied when no rule matches.

    Either field may be ``None`` to mean "inherit from the engine defaults";
    :meth:`resolve` fills the gaps. Options are never mutated after
    construction; the ``with_*`` helpers return new instances.
    """

    conversions: Optional[Tuple[ConversionRule, ...]] = None
    default_transform: Optional[DefaultTransformFn] = None

    def __post_init__(self) -> None:
        if self.conversions is not None:
            object.__setattr__(self, "conversions", _freeze_rules(self.conversions))
        if self.default_transform is not None and not callable(self.default_transform):
            raise RuleDefinitionError.not_callable("default", "default_transform", self.default_transform)

    @property
    def is_complete(self) -> bool:
        return self.conversions is not None and self.default_transform is not None

    def resolve(self, fallback: "ConversionOptions") -> "ConversionOptions":
        """Return options where every unset field is taken from *fallback*."""
        if self.is_complete:
            return self
        conversions = self.conversions if self.conversions is not None else fallback.conversions
        default_transform = self.default_transform if self.default_transform is not None else fallback.default_transform
        return ConversionOptions(conversions=conversions, default_transform=default_transform)

    def with_prepended(self, *rules: ConversionRule) -> "ConversionOptions":
        """
        Place *rules* ahead of the existing conversions so they take precedence.

        On options with unset conversions the result holds only *rules*; prepend
        to a complete set (such as ``DEFAULT_OPTIONS``) to keep the defaults.
        """
        return replace(self, conversions=(*rules, *(self.conversions or ())))

    def with_appended(self, *rules: ConversionRule) -> "ConversionOptions":
        return replace(self, conversions=(*(self.conversions or ()), *rules))

    def with_default_transform(self, default_transform: DefaultTransformFn) -> "ConversionOptions":
        return replace(self, default_transform=default_transform)


__all__ = ["ConversionOptions"]
