from __future__ import annotations

"""Runtime helpers for working with environment-backed configuration."""


import os
from pathlib import Path
from typing import Optional, Sequence

from .errors import ConfigurationError

_TRUE_VALUES = {"1", "true", "t", "yes", "y", "on"}
_FALSE_VALUES = {"0", "false", "f", "no", "n", "off"}

_DOTENV_CANDIDATES = (Path(".env"), Path.home() / ".to_plain.env")

_DEFAULT_VALUES: dict[str, str] | None = None


def _load_default_values() -> dict[str, str]:
    """Load configuration values from .env-style files; earlier files win."""
    from .runtime_helpers import DotenvLoader

    global _DEFAULT_VALUES
    if _DEFAULT_VALUES is not None:
        return _DEFAULT_VALUES

    defaults: dict[str, str] = {}
    for path in _DOTENV_CANDIDATES:
        for key, value in DotenvLoader.load_from_file(path).items():
            defaults.setdefault(key, value)

    _DEFAULT_VALUES = defaults
    return defaults


def _default_value(name: str) -> Optional[str]:
    return _load_default_values().get(name)


def _normalize(value: str | None, *, strip: bool) -> str | None:
    if value is None:
        return None
    return value.strip() if strip else value


def env_str(
    name: str,
    or_value: str | None = None,
    *,
    required: bool = False,
    strip: bool = True,
    allow_blank: bool = False,
) -> str | None:
    """Fetch an environment variable as a string with validation."""

    value = _normalize(os.getenv(name), strip=strip)

    if value is None or (not allow_blank and value == ""):
        configured_default = _default_value(name)
        if configured_default is not None:
            value = _normalize(configured_default, strip=strip)

    if value is None or (not allow_blank and value == ""):
        if required:
            raise ConfigurationError(f"Required environment variable {name!r} is not set")
        return or_value
    return value


def env_bool(name: str, or_value: bool | None = None, *, required: bool = False) -> bool | None:
    """Fetch an environment variable and coerce it to ``bool``."""

    raw = env_str(name, strip=True, allow_blank=False)
    if raw is None:
        if required and or_value is None:
            raise ConfigurationError(f"Required environment variable {name!r} is not set")
        return or_value

    lowered = raw.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError.invalid_value(name, raw, f"Allowed: {sorted(_TRUE_VALUES | _FALSE_VALUES)}")


def env_list(
    name: str,
    *,
    or_value: Sequence[str] | None = None,
    separator: str = ",",
    required: bool = False,
) -> tuple[str, ...] | None:
    """Fetch a delimited list from the environment, deduplicated in order."""
    from .runtime_helpers import ListNormalizer

    raw = env_str(name, strip=True, allow_blank=False)
    if raw is None:
        if required and not or_value:
            raise ConfigurationError(f"Required environment variable {name!r} is not set")
        if or_value is None:
            return None
        return tuple(or_value)

    items = ListNormalizer.split_and_normalize(raw, separator)
    if not items and required:
        raise ConfigurationError(f"Environment variable {name!r} must contain at least one value")

    return ListNormalizer.deduplicate_preserving_order(items)
