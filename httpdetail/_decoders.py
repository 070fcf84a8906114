"""
Decoders turn a response body into ``Ok(value)`` or ``Err(reason)``.

JSON decoding is done by msgspec, whose error messages are passed through
untouched, e.g.::

    JSON is malformed: invalid character (byte 0)
    Object missing required field `x`
    Expected `int`, got `str` - at `$.x`

Binary decoders can't say much about what went wrong, so every failure is
reported as ``"Error decoding bytes"``.
"""

from __future__ import annotations

import struct
import typing

import msgspec

from ._models import DecodeOutcome, Err, Ok

T = typing.TypeVar("T")

BYTES_DECODE_ERROR = "Error decoding bytes"

TextDecoder = typing.Callable[[str], DecodeOutcome[typing.Any]]
BytesDecoder = typing.Callable[[bytes], DecodeOutcome[typing.Any]]


def json_decoder(type: type[T] | typing.Any = typing.Any) -> TextDecoder:
    """Decode a JSON body into ``type`` (anything msgspec can validate)."""
    decoder = msgspec.json.Decoder(type)

    def decode(body: str | bytes) -> DecodeOutcome[T]:
        try:
            return Ok(decoder.decode(body))
        except msgspec.DecodeError as exc:
            # ValidationError is a DecodeError subclass.
            return Err(str(exc))

    return decode


def json_field(name: str, type: type[T] | typing.Any = typing.Any) -> TextDecoder:
    """Decode the single field ``name`` of a JSON object body.

    >>> json_field("x", int)('{"x": 3}')
    Ok(value=3)
    """
    field_struct = msgspec.defstruct(
        "Field", [("value", type)], rename={"value": name}
    )
    decode_struct = json_decoder(field_struct)

    def decode(body: str | bytes) -> DecodeOutcome[T]:
        return decode_struct(body).map(lambda decoded: decoded.value)

    return decode


def bytes_decoder(func: typing.Callable[[bytes], T]) -> BytesDecoder:
    """Wrap a plain parsing function as a binary decoder.

    ``func`` signals failure by raising ``ValueError``, ``TypeError``,
    ``LookupError``, ``struct.error`` or ``msgspec.DecodeError``.
    """

    def decode(body: bytes) -> DecodeOutcome[T]:
        try:
            return Ok(func(body))
        except (
            ValueError,
            TypeError,
            LookupError,
            struct.error,
            msgspec.DecodeError,
        ):
            return Err(BYTES_DECODE_ERROR)

    return decode


def struct_decoder(fmt: str) -> BytesDecoder:
    """Unpack a fixed-layout binary body with :mod:`struct`.

    A format with a single field yields that value, otherwise the tuple.
    """
    layout = struct.Struct(fmt)

    def unpack(body: bytes) -> typing.Any:
        values = layout.unpack(body)
        return values[0] if len(values) == 1 else values

    return bytes_decoder(unpack)


def msgpack_decoder(type: type[T] | typing.Any = typing.Any) -> BytesDecoder:
    """Decode a MessagePack body into ``type``."""
    return bytes_decoder(msgspec.msgpack.Decoder(type).decode)
