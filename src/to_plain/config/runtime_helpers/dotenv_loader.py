"""Dotenv file loading utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Dict

from ..errors import ConfigurationError


class DotenvLoader:
    """Loads configuration defaults from .env-style files."""

    @staticmethod
    def load_from_file(path: Path) -> Dict[str, str]:
        """
        Load key-value pairs from a .env file.

        Args:
            path: Path to .env file

        Returns:
            Dictionary of variables; empty when the file does not exist

        Raises:
            ConfigurationError: If file cannot be read
        """
        if not path.exists():
            return {}

        values: Dict[str, str] = {}
        try:
            text = path.read_text()
        except OSError as exc:
            raise ConfigurationError(f"Failed to load configuration from {path}") from exc

        for line in text.splitlines():
            stripped = line.strip()
            if DotenvLoader._should_skip_line(stripped):
                continue

            key, value = DotenvLoader._parse_env_line(stripped)
            if key:
                values[key] = value

        return values

    @staticmethod
    def _should_skip_line(line: str) -> bool:
        return not line or line.startswith("#") or "=" not in line

    @staticmethod
    def _parse_env_line(line: str) -> tuple[str, str]:
        """Split ``KEY=value`` and drop an optional ``export`` prefix and quotes."""
        key, raw_value = line.split("=", 1)
        key = key.strip()
        if key.startswith("export "):
            key = key[len("export ") :].strip()
        value = raw_value.strip().strip("'").strip('"')
        return key, value
