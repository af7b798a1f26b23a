"""Marker for a value that should not appear in converted output."""

from __future__ import annotations

from typing import Any


class _Absent:
    """Singleton type behind :data:`ABSENT`."""

    _instance: "_Absent | None" = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_Absent":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "_Absent":
        return self

    def __reduce__(self) -> str:
        return "ABSENT"


ABSENT = _Absent()
"""Returned by a transform to drop the node from its parent container."""


def is_absent(value: object) -> bool:
    return value is ABSENT


__all__ = ["ABSENT", "is_absent"]
