"""
Conversion rules: a predicate paired with the transform it guards.

A rule's ``transform`` receives the matched value and a ``recurse`` callable.
``recurse`` converts a child value with the options of the conversion call that
is currently running, so a transform can unwrap a value and keep normalizing
the result. Returning :data:`~to_plain.absent.ABSENT` removes the node from its
parent container.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from .exceptions import RuleDefinitionError

MatchFn = Callable[[Any], bool]
RecurseFn = Callable[[Any], Any]
TransformFn = Callable[[Any, RecurseFn], Any]
DefaultTransformFn = Callable[[Any], Any]


@dataclass(frozen=True)
class ConversionRule:
    """Stateless (match, transform) pair evaluated by the engine in order."""

    match: MatchFn
    transform: TransformFn
    name: str = ""

    def __post_init__(self) -> None:
        if not callable(self.match):
            raise RuleDefinitionError.not_callable(self.name, "match", self.match)
        if not callable(self.transform):
            raise RuleDefinitionError.not_callable(self.name, "transform", self.transform)

    def applies_to(self, value: Any) -> bool:
        return bool(self.match(value))

    def apply(self, value: Any, recurse: RecurseFn) -> Any:
        return self.transform(value, recurse)

    def __repr__(self) -> str:
        label = self.name or getattr(self.transform, "__name__", "transform")
        return f"ConversionRule({label})"


__all__ = [
    "ConversionRule",
    "DefaultTransformFn",
    "MatchFn",
    "RecurseFn",
    "TransformFn",
]
