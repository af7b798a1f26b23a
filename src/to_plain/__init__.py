"""Convert complex in-memory values into plain, serialization-ready data."""

from .absent import ABSENT, is_absent
from .binary_encoding import BinaryEncoding, ByteEncoder, encode_bytes
from .capabilities import JsonConvertible, ObjectConvertible
from .conversion_rule import ConversionRule
from .default_rules import DEFAULT_CONVERSIONS, DEFAULT_OPTIONS, default_conversions
from .engine import ToPlain, to_plain
from .env_options import options_from_env
from .exceptions import NotSerializableError, RuleDefinitionError, ToPlainError, UnknownEncodingError
from .options import ConversionOptions
from .rule_factories import make_binary_encoder_rules, make_capability_rule, make_type_matcher
from .type_registry import DEFAULT_TYPE_REGISTRY, TypeRegistry
from .validation import ensure_serializable

__all__ = [
    "ABSENT",
    "BinaryEncoding",
    "ByteEncoder",
    "ConversionOptions",
    "ConversionRule",
    "DEFAULT_CONVERSIONS",
    "DEFAULT_OPTIONS",
    "DEFAULT_TYPE_REGISTRY",
    "JsonConvertible",
    "NotSerializableError",
    "ObjectConvertible",
    "RuleDefinitionError",
    "ToPlain",
    "ToPlainError",
    "TypeRegistry",
    "UnknownEncodingError",
    "default_conversions",
    "encode_bytes",
    "ensure_serializable",
    "is_absent",
    "make_binary_encoder_rules",
    "make_capability_rule",
    "make_type_matcher",
    "options_from_env",
    "to_plain",
]
