"""
Adapters whose success is ``Ok(WithMetadata(metadata, value))``.

Errors are the same detailed taxonomy as :mod:`httpdetail.detailed`.
"""

from __future__ import annotations

import typing

from ._decoders import BytesDecoder, TextDecoder
from ._errors import DetailedError
from ._models import Metadata, Ok, RawResponse, Result, WithMetadata
from ._resolve import Expectation, resolve

__all__ = [
    "WithMetadata",
    "expect_bytes",
    "expect_json",
    "expect_string",
    "expect_whatever",
    "response_to_bytes",
    "response_to_json",
    "response_to_string",
    "response_to_whatever",
]

Msg = typing.TypeVar("Msg")


def _decoding(
    decoder: typing.Callable[[typing.Any], typing.Any],
) -> typing.Callable[[Metadata, typing.Any], typing.Any]:
    return lambda metadata, body: decoder(body).map(
        lambda value: WithMetadata(metadata, value)
    )


def response_to_string(
    response: RawResponse[str],
) -> Result[WithMetadata[str], DetailedError[str]]:
    return resolve(lambda metadata, body: Ok(WithMetadata(metadata, body)), response)


def response_to_json(
    decoder: TextDecoder, response: RawResponse[str]
) -> Result[WithMetadata[typing.Any], DetailedError[str]]:
    return resolve(_decoding(decoder), response)


def response_to_bytes(
    decoder: BytesDecoder, response: RawResponse[bytes]
) -> Result[WithMetadata[typing.Any], DetailedError[bytes]]:
    return resolve(_decoding(decoder), response)


def response_to_whatever(
    response: RawResponse[typing.Any],
) -> Result[WithMetadata[None], DetailedError[typing.Any]]:
    return resolve(lambda metadata, body: Ok(WithMetadata(metadata, None)), response)


def expect_string(
    callback: typing.Callable[[Result[WithMetadata[str], DetailedError[str]]], Msg],
) -> Expectation[Msg]:
    return Expectation("text", lambda response: callback(response_to_string(response)))


def expect_json(
    callback: typing.Callable[
        [Result[WithMetadata[typing.Any], DetailedError[str]]], Msg
    ],
    decoder: TextDecoder,
) -> Expectation[Msg]:
    return Expectation(
        "text", lambda response: callback(response_to_json(decoder, response))
    )


def expect_bytes(
    callback: typing.Callable[
        [Result[WithMetadata[typing.Any], DetailedError[bytes]]], Msg
    ],
    decoder: BytesDecoder,
) -> Expectation[Msg]:
    return Expectation(
        "bytes", lambda response: callback(response_to_bytes(decoder, response))
    )


def expect_whatever(
    callback: typing.Callable[
        [Result[WithMetadata[None], DetailedError[typing.Any]]], Msg
    ],
) -> Expectation[Msg]:
    return Expectation(
        "bytes", lambda response: callback(response_to_whatever(response))
    )
