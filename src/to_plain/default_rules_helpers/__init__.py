"""Helper modules for the built-in conversion rules."""

from .error_mapper import ErrorMapper

__all__ = ["ErrorMapper"]
