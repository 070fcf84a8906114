"""
Adapters that keep the response metadata.

Success is ``Ok((metadata, value))``. Failures use the detailed taxonomy, so a
``BadStatus`` or ``BadBody`` still carries the metadata and the raw body::

    expect = detailed.expect_json(handle_user, json_decoder(User))
"""

from __future__ import annotations

import typing

from ._decoders import BytesDecoder, TextDecoder
from ._errors import BadBody, BadStatus, BadUrl, DetailedError, NetworkError, Timeout
from ._models import Metadata, Ok, RawResponse, Result
from ._resolve import Expectation, resolve

__all__ = [
    "BadBody",
    "BadStatus",
    "BadUrl",
    "DetailedError",
    "NetworkError",
    "Timeout",
    "expect_bytes",
    "expect_json",
    "expect_string",
    "expect_whatever",
    "response_to_bytes",
    "response_to_json",
    "response_to_string",
    "response_to_whatever",
]

T = typing.TypeVar("T")
Msg = typing.TypeVar("Msg")

Success = typing.Tuple[Metadata, T]


def response_to_string(
    response: RawResponse[str],
) -> Result[Success[str], DetailedError[str]]:
    return resolve(lambda metadata, body: Ok((metadata, body)), response)


def response_to_json(
    decoder: TextDecoder, response: RawResponse[str]
) -> Result[Success[typing.Any], DetailedError[str]]:
    return resolve(
        lambda metadata, body: decoder(body).map(lambda value: (metadata, value)),
        response,
    )


def response_to_bytes(
    decoder: BytesDecoder, response: RawResponse[bytes]
) -> Result[Success[typing.Any], DetailedError[bytes]]:
    return resolve(
        lambda metadata, body: decoder(body).map(lambda value: (metadata, value)),
        response,
    )


def response_to_whatever(
    response: RawResponse[typing.Any],
) -> Result[Success[None], DetailedError[typing.Any]]:
    return resolve(lambda metadata, body: Ok((metadata, None)), response)


def expect_string(
    callback: typing.Callable[[Result[Success[str], DetailedError[str]]], Msg],
) -> Expectation[Msg]:
    return Expectation("text", lambda response: callback(response_to_string(response)))


def expect_json(
    callback: typing.Callable[[Result[Success[typing.Any], DetailedError[str]]], Msg],
    decoder: TextDecoder,
) -> Expectation[Msg]:
    return Expectation(
        "text", lambda response: callback(response_to_json(decoder, response))
    )


def expect_bytes(
    callback: typing.Callable[
        [Result[Success[typing.Any], DetailedError[bytes]]], Msg
    ],
    decoder: BytesDecoder,
) -> Expectation[Msg]:
    return Expectation(
        "bytes", lambda response: callback(response_to_bytes(decoder, response))
    )


def expect_whatever(
    callback: typing.Callable[[Result[Success[None], DetailedError[typing.Any]]], Msg],
) -> Expectation[Msg]:
    return Expectation(
        "bytes", lambda response: callback(response_to_whatever(response))
    )
