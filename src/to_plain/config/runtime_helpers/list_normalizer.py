"""List normalization utilities for environment variables."""

from __future__ import annotations

from typing import Iterable, Sequence


class ListNormalizer:
    """Normalizes delimited list values such as comma-separated type paths."""

    @staticmethod
    def split_and_normalize(raw_value: str, separator: str) -> list[str]:
        """
        Split raw value by separator, strip items and drop empty ones.

        Args:
            raw_value: Raw string value
            separator: Delimiter (empty string means no splitting)
        """
        parts: Iterable[str] = raw_value.split(separator) if separator else [raw_value]
        return [item.strip() for item in parts if item.strip()]

    @staticmethod
    def deduplicate_preserving_order(items: Sequence[str]) -> tuple[str, ...]:
        seen: set[str] = set()
        deduped: list[str] = []

        for item in items:
            if item not in seen:
                deduped.append(item)
                seen.add(item)

        return tuple(deduped)
