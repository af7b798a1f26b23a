"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from to_plain import ToPlain
from to_plain.config import runtime

_ENV_NAMES = (
    "TO_PLAIN_BINARY_ENCODING",
    "TO_PLAIN_IDENTIFIER_TYPES",
    "TO_PLAIN_DEEP_COPY",
)


@pytest.fixture(autouse=True)
def isolated_runtime_config(monkeypatch):
    """Keep tests independent of the developer's environment and .env files."""
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(runtime, "_DOTENV_CANDIDATES", ())
    runtime._DEFAULT_VALUES = None
    yield
    runtime._DEFAULT_VALUES = None


@pytest.fixture
def engine() -> ToPlain:
    return ToPlain()
