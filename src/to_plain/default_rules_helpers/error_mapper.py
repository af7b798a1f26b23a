"""Flatten exceptions into plain mappings."""

from __future__ import annotations

import traceback
from typing import Any, Dict

from ..absent import ABSENT
from ..conversion_rule import RecurseFn

_CORE_KEYS = ("name", "message", "stack")


class ErrorMapper:
    """Builds ``{attributes..., name, message, stack[, cause]}`` for an exception."""

    @staticmethod
    def to_mapping(error: BaseException, recurse: RecurseFn) -> Dict[str, Any]:
        mapping: Dict[str, Any] = {}
        for key, value in ErrorMapper._public_attributes(error).items():
            if key in _CORE_KEYS:
                continue
            converted = recurse(value)
            if converted is not ABSENT:
                mapping[key] = converted

        mapping["name"] = type(error).__name__
        mapping["message"] = str(error)
        mapping["stack"] = ErrorMapper.format_stack(error)

        if error.__cause__ is not None:
            cause = recurse(error.__cause__)
            if cause is not ABSENT:
                mapping["cause"] = cause
        return mapping

    @staticmethod
    def format_stack(error: BaseException) -> str:
        """Render the traceback like the interpreter does, without chained causes."""
        lines = traceback.format_exception(type(error), error, error.__traceback__, chain=False)
        return "".join(lines)

    @staticmethod
    def _public_attributes(error: BaseException) -> Dict[str, Any]:
        attributes = getattr(error, "__dict__", None) or {}
        return {key: value for key, value in attributes.items() if not key.startswith("_")}
