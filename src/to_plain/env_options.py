"""
Build conversion options from environment configuration.

Recognised variables (environment first, then ``.env`` defaults):

- ``TO_PLAIN_BINARY_ENCODING``: when set, binary wrappers and byte buffers are
  encoded as text with this encoding instead of lists of byte values.
- ``TO_PLAIN_IDENTIFIER_TYPES``: comma-separated ``module.QualName`` paths of
  extra types converted to their string form.
- ``TO_PLAIN_DEEP_COPY``: set false to return unmatched values without copying.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from .binary_encoding import BinaryEncoding
from .config import ConfigurationError, env_bool, env_list, env_str
from .default_rules import DEFAULT_OPTIONS, default_conversions
from .exceptions import RuleDefinitionError, UnknownEncodingError
from .options import ConversionOptions
from .rule_factories import make_binary_encoder_rules
from .type_registry import DEFAULT_TYPE_REGISTRY, TypeRegistry

logger = logging.getLogger(__name__)

BINARY_ENCODING_ENV = "TO_PLAIN_BINARY_ENCODING"
IDENTIFIER_TYPES_ENV = "TO_PLAIN_IDENTIFIER_TYPES"
DEEP_COPY_ENV = "TO_PLAIN_DEEP_COPY"


def _return_unchanged(value: Any) -> Any:
    return value


def _binary_encoding_from_env() -> Optional[BinaryEncoding]:
    raw = env_str(BINARY_ENCODING_ENV)
    if raw is None:
        return None
    try:
        return BinaryEncoding.parse(raw)
    except UnknownEncodingError as exc:
        raise ConfigurationError.invalid_value(
            BINARY_ENCODING_ENV, raw, f"Expected one of {', '.join(BinaryEncoding.names())}"
        ) from exc


def _registry_from_env() -> Optional[TypeRegistry]:
    type_paths = env_list(IDENTIFIER_TYPES_ENV)
    if not type_paths:
        return None
    registry = DEFAULT_TYPE_REGISTRY.copy()
    for path in type_paths:
        try:
            registry.register(path, "Identifier")
        except RuleDefinitionError as exc:
            raise ConfigurationError.invalid_format(IDENTIFIER_TYPES_ENV, path, "module.QualName") from exc
    return registry


def options_from_env() -> ConversionOptions:
    """Return complete options reflecting the environment; the defaults when nothing is set."""
    encoding = _binary_encoding_from_env()
    registry = _registry_from_env()
    deep_copy = env_bool(DEEP_COPY_ENV, or_value=True)
    logger.debug(
        "Environment options: encoding=%s extra_identifier_types=%s deep_copy=%s",
        encoding.value if encoding else None,
        len(registry) - len(DEFAULT_TYPE_REGISTRY) if registry else 0,
        deep_copy,
    )

    if encoding is None and registry is None and deep_copy:
        return DEFAULT_OPTIONS

    options = DEFAULT_OPTIONS
    if registry is not None:
        options = ConversionOptions(conversions=default_conversions(registry), default_transform=options.default_transform)
    if encoding is not None:
        options = options.with_prepended(*make_binary_encoder_rules(encoding, registry=registry))
    if not deep_copy:
        options = options.with_default_transform(_return_unchanged)

    logger.info("Using environment conversion options (%d rules)", len(options.conversions))
    return options


__all__ = [
    "BINARY_ENCODING_ENV",
    "DEEP_COPY_ENV",
    "IDENTIFIER_TYPES_ENV",
    "options_from_env",
]
