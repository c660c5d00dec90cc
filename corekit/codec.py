"""Byte-level codecs: gzip, SHA-1 digests and JSON identifiers."""

from __future__ import annotations

import gzip
import hashlib
import json
import uuid
import zlib
from typing import Any, Callable, TypeVar

T = TypeVar("T")

_INVALID = object()


class UnmarshalError(ValueError):
    """JSON data could not be turned into an identifier."""

    def __init__(self, message: str, default_value: Any = None) -> None:
        super().__init__(message)
        self.default_value = default_value


class UnmarshalStringError(UnmarshalError):
    """A JSON string did not hold a valid UUID."""


class UnmarshalByteArrayError(UnmarshalError):
    """A JSON byte array did not hold a valid UUID."""


def gzip_bytes(data: bytes) -> bytes:
    """Compress data into a gzip stream."""
    return gzip.compress(bytes(data), mtime=0)


def gunzip_bytes(data: bytes) -> bytes:
    """Decompress a gzip stream; raises ValueError on bad input."""
    if not data:
        raise ValueError("failed to create gzip reader: empty input")
    try:
        return gzip.decompress(bytes(data))
    except (OSError, EOFError, zlib.error) as err:
        raise ValueError(f"failed to read gzip data: {err}") from err


def sha1_hex(data: bytes) -> str:
    """Hex-encoded SHA-1 digest of the data."""
    return hashlib.sha1(bytes(data)).hexdigest()  # noqa: S324


def _is_byte_array(value: Any) -> bool:
    return isinstance(value, list) and all(
        isinstance(item, int) and not isinstance(item, bool) and 0 <= item <= 255 for item in value
    )


def unmarshal_json_to_id(data: bytes | str, default_value: T, fn: Callable[[uuid.UUID], T]) -> T:
    """Decode a JSON UUID string or 16-element byte array and pass it to ``fn``.

    Errors carry ``default_value`` as their ``default_value`` attribute.
    """
    text = data.decode("utf-8", errors="replace") if isinstance(data, (bytes, bytearray)) else str(data)

    try:
        parsed = json.loads(data)
    except ValueError:
        parsed = _INVALID

    if parsed is None:
        parsed = ""

    if isinstance(parsed, str):
        try:
            uuid_value = uuid.UUID(parsed)
        except ValueError as err:
            raise UnmarshalStringError(f"unmarshal string error: {err}: {text}", default_value) from err
        return fn(uuid_value)

    if _is_byte_array(parsed):
        try:
            uuid_value = uuid.UUID(bytes=bytes(parsed))
        except ValueError as err:
            raise UnmarshalByteArrayError(
                f"unmarshal byte array error: {err}: {text}", default_value
            ) from err
        return fn(uuid_value)

    raise UnmarshalError(f"unmarshal error: {text}", default_value)