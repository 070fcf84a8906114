"""
Bare adapters: ``Ok(value)`` with the metadata thrown away.

The error taxonomy is flattened as well. ``BadStatus`` only keeps the status
code and ``BadBody`` only keeps the decoder's reason; reach for
:mod:`httpdetail.detailed` when the body of a failed response matters.
"""

from __future__ import annotations

import typing

from ._decoders import BytesDecoder, TextDecoder
from ._errors import BadUrl, NetworkError, SimpleError, Timeout, simplify_error
from ._errors import SimpleBadBody as BadBody
from ._errors import SimpleBadStatus as BadStatus
from ._models import Ok, RawResponse, Result
from ._resolve import Expectation, resolve

__all__ = [
    "BadBody",
    "BadStatus",
    "BadUrl",
    "NetworkError",
    "SimpleError",
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

Msg = typing.TypeVar("Msg")


def response_to_string(response: RawResponse[str]) -> Result[str, SimpleError]:
    return resolve(lambda metadata, body: Ok(body), response).map_err(simplify_error)


def response_to_json(
    decoder: TextDecoder, response: RawResponse[str]
) -> Result[typing.Any, SimpleError]:
    return resolve(lambda metadata, body: decoder(body), response).map_err(
        simplify_error
    )


def response_to_bytes(
    decoder: BytesDecoder, response: RawResponse[bytes]
) -> Result[typing.Any, SimpleError]:
    return resolve(lambda metadata, body: decoder(body), response).map_err(
        simplify_error
    )


def response_to_whatever(response: RawResponse[typing.Any]) -> Result[None, SimpleError]:
    return resolve(lambda metadata, body: Ok(None), response).map_err(simplify_error)


def expect_string(
    callback: typing.Callable[[Result[str, SimpleError]], Msg],
) -> Expectation[Msg]:
    return Expectation("text", lambda response: callback(response_to_string(response)))


def expect_json(
    callback: typing.Callable[[Result[typing.Any, SimpleError]], Msg],
    decoder: TextDecoder,
) -> Expectation[Msg]:
    return Expectation(
        "text", lambda response: callback(response_to_json(decoder, response))
    )


def expect_bytes(
    callback: typing.Callable[[Result[typing.Any, SimpleError]], Msg],
    decoder: BytesDecoder,
) -> Expectation[Msg]:
    return Expectation(
        "bytes", lambda response: callback(response_to_bytes(decoder, response))
    )


def expect_whatever(
    callback: typing.Callable[[Result[None, SimpleError]], Msg],
) -> Expectation[Msg]:
    return Expectation(
        "bytes", lambda response: callback(response_to_whatever(response))
    )
