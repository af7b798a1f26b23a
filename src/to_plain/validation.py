from __future__ import annotations

"""Checks that converted output is ready for a downstream encoder."""

from typing import Any

import orjson

from .exceptions import NotSerializableError

# Types orjson would otherwise encode on its own are rejected so leftovers of
# the conversion surface here instead of being silently serialized.
_STRICT_OPTIONS = orjson.OPT_PASSTHROUGH_DATACLASS | orjson.OPT_PASSTHROUGH_DATETIME | orjson.OPT_PASSTHROUGH_SUBCLASS


def ensure_serializable(value: Any) -> Any:
    """
    Return *value* unchanged if orjson can encode it.

    Raises:
        NotSerializableError: If a node is not plain data (for example a
            leftover ``bytes``, ``Decimal``, set, dataclass or datetime, a
            non-string mapping key, or a top-level ``ABSENT``)
    """
    try:
        orjson.dumps(value, option=_STRICT_OPTIONS)
    except orjson.JSONEncodeError as exc:
        raise NotSerializableError.for_value(value, str(exc)) from exc
    return value


__all__ = ["ensure_serializable"]
