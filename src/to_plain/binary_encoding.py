"""
Byte encoders used by the binary-encoder conversion rules.

The rules only pass an encoding identifier through; :func:`encode_bytes` is the
default implementation of the encoder they call, built on ``base64`` and the
codec machinery of the standard library.
"""

from __future__ import annotations

import base64
from enum import Enum
from typing import Any, Callable, Dict, Protocol, Union

from .exceptions import UnknownEncodingError


class BinaryEncoding(str, Enum):
    """Named text encodings for byte payloads."""

    ASCII = "ascii"
    UTF8 = "utf8"
    UTF16LE = "utf16le"
    UCS2 = "ucs2"
    BASE64 = "base64"
    BASE64URL = "base64url"
    LATIN1 = "latin1"
    BINARY = "binary"
    HEX = "hex"

    @classmethod
    def parse(cls, name: Union[str, "BinaryEncoding"]) -> "BinaryEncoding":
        """Resolve *name* case-insensitively; ``utf-8`` style spellings are accepted."""
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            raise UnknownEncodingError.for_name(name, cls.names())
        key = name.strip().lower().replace("-", "").replace("_", "")
        try:
            return cls(key)
        except ValueError as exc:
            raise UnknownEncodingError.for_name(name, cls.names()) from exc

    @classmethod
    def names(cls) -> tuple[str, ...]:
        return tuple(member.value for member in cls)


class ByteEncoder(Protocol):
    def __call__(self, data: bytes, encoding: Any) -> Any: ...


def _ascii(data: bytes) -> str:
    return bytes(byte & 0x7F for byte in data).decode("ascii")


def _utf16le(data: bytes) -> str:
    # a trailing odd byte cannot form a code unit
    usable = len(data) - (len(data) % 2)
    return data[:usable].decode("utf-16-le", errors="replace")


def _base64url(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


_ENCODERS: Dict[BinaryEncoding, Callable[[bytes], str]] = {
    BinaryEncoding.ASCII: _ascii,
    BinaryEncoding.UTF8: lambda data: data.decode("utf-8", errors="replace"),
    BinaryEncoding.UTF16LE: _utf16le,
    BinaryEncoding.UCS2: _utf16le,
    BinaryEncoding.BASE64: lambda data: base64.b64encode(data).decode("ascii"),
    BinaryEncoding.BASE64URL: _base64url,
    BinaryEncoding.LATIN1: lambda data: data.decode("latin-1"),
    BinaryEncoding.BINARY: lambda data: data.decode("latin-1"),
    BinaryEncoding.HEX: lambda data: data.hex(),
}


def encode_bytes(data: bytes, encoding: Union[str, BinaryEncoding]) -> str:
    """
    Encode *data* as text using a named binary encoding.

    Args:
        data: Raw bytes (any buffer-protocol object is accepted)
        encoding: A :class:`BinaryEncoding` member or its name

    Returns:
        The encoded text

    Raises:
        UnknownEncodingError: If the encoding name is not recognised
    """
    resolved = BinaryEncoding.parse(encoding)
    return _ENCODERS[resolved](bytes(data))


__all__ = ["BinaryEncoding", "ByteEncoder", "encode_bytes"]
