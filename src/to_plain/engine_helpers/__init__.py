"""Helper modules for the conversion engine."""

from .container_walker import ContainerWalker, is_mapping, is_sequence

__all__ = [
    "ContainerWalker",
    "is_mapping",
    "is_sequence",
]
