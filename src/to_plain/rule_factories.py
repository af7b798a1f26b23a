"""
Constructors for commonly needed conversion rules.

``make_type_matcher`` is the shared way to ask "is this one of these special
wrapper types"; the rest build complete rules on top of it.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Tuple, Type, Union

from .binary_encoding import BinaryEncoding, ByteEncoder, encode_bytes
from .conversion_rule import ConversionRule, MatchFn, RecurseFn
from .exceptions import RuleDefinitionError
from .type_registry import BINARY_WRAPPER_TAGS, BYTE_BUFFER_TAGS, DEFAULT_TYPE_REGISTRY, TypeRegistry

logger = logging.getLogger(__name__)


def make_type_matcher(*tags: str, registry: Optional[TypeRegistry] = None) -> MatchFn:
    """
    Build a predicate matching non-``None`` values whose registered tag is in *tags*.

    Args:
        tags: One or more type tags
        registry: Registry to consult; the default registry when omitted. The
            registry is read on every call so later registrations take effect.

    Raises:
        RuleDefinitionError: If no tags are given or a tag is not a string
    """
    if not tags:
        raise RuleDefinitionError.no_type_tags()
    for tag in tags:
        if not isinstance(tag, str) or not tag:
            raise RuleDefinitionError.invalid_type_tag(tag)

    wanted = frozenset(tags)

    def match(value: Any) -> bool:
        if value is None:
            return False
        source = registry if registry is not None else DEFAULT_TYPE_REGISTRY
        return source.tag_for(value) in wanted

    match.__name__ = f"is_{'_or_'.join(sorted(wanted))}"
    logger.debug("Built type matcher for tags %s", sorted(wanted))
    return match


def make_capability_rule(capability: Type[Any], method_name: str, name: str = "") -> ConversionRule:
    """Rule converting instances of *capability* by recursing into ``value.<method_name>()``."""

    def match(value: Any) -> bool:
        return isinstance(value, capability)

    def transform(value: Any, recurse: RecurseFn) -> Any:
        return recurse(getattr(value, method_name)())

    return ConversionRule(match=match, transform=transform, name=name or method_name)


def make_binary_encoder_rules(
    encoding: Union[str, BinaryEncoding],
    encoder: ByteEncoder = encode_bytes,
    registry: Optional[TypeRegistry] = None,
) -> Tuple[ConversionRule, ConversionRule]:
    """
    Build rules that encode binary wrappers and raw byte buffers as text.

    The first rule handles binary wrapper types, the second raw byte buffers.
    Prepend both to an option set so they win over the default byte-list rules.
    *encoding* is passed to *encoder* unexamined.
    """

    label = getattr(encoding, "value", encoding)

    def transform(value: Any, recurse: RecurseFn) -> Any:
        return encoder(bytes(value), encoding)

    binary_rule = ConversionRule(
        match=make_type_matcher(*BINARY_WRAPPER_TAGS, registry=registry),
        transform=transform,
        name=f"binary_as_{label}",
    )
    buffer_rule = ConversionRule(
        match=make_type_matcher(*BYTE_BUFFER_TAGS, registry=registry),
        transform=transform,
        name=f"buffer_as_{label}",
    )
    logger.debug("Built binary encoder rules for encoding %s", label)
    return binary_rule, buffer_rule


__all__ = [
    "make_binary_encoder_rules",
    "make_capability_rule",
    "make_type_matcher",
]
