"""Helper modules for runtime configuration."""

from .dotenv_loader import DotenvLoader
from .list_normalizer import ListNormalizer

__all__ = [
    "DotenvLoader",
    "ListNormalizer",
]
