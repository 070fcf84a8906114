"""
Canned responses for tests.

A mocked expectation looks like any other to the host client. The request is
still sent, but whatever comes back is ignored and the canned response is
classified instead::

    canned = GoodStatusResponse(Metadata("https://x", 200, "OK"), '{"x": 3}')
    expect = mock.expect_json(canned, handle, json_field("x", int))
    httpdetail.get(client, "https://x", expect=expect)
"""

from __future__ import annotations

import logging
import typing

from . import detailed
from ._decoders import BytesDecoder, TextDecoder
from ._models import RawResponse
from ._resolve import Expectation

__all__ = [
    "expect",
    "expect_bytes",
    "expect_json",
    "expect_string",
    "expect_whatever",
    "substitute",
]

logger = logging.getLogger("httpdetail.mock")

R = typing.TypeVar("R")
Msg = typing.TypeVar("Msg")


def expect(
    canned: RawResponse[typing.Any],
    callback: typing.Callable[[R], Msg],
    to_result: typing.Callable[[RawResponse[typing.Any]], R],
    *,
    body_type: str = "bytes",
) -> Expectation[Msg]:
    """Build an expectation that always resolves ``canned`` with ``to_result``.

    ``to_result`` is any ``response_to_*`` function (bind the decoder first,
    e.g. with :func:`functools.partial`).

    ``body_type`` only decides how the body of the real response is read
    before being thrown away; ``canned`` is handed to ``to_result`` as is.
    The default, ``"bytes"``, skips decoding that body to text.
    """

    def handle(response: RawResponse[typing.Any]) -> Msg:
        logger.debug(
            "Ignoring %s in favour of canned %s",
            type(response).__name__,
            type(canned).__name__,
        )
        return callback(to_result(canned))

    return Expectation(body_type, handle, ignores_response=True)


def substitute(
    canned: RawResponse[typing.Any], expectation: Expectation[Msg]
) -> Expectation[Msg]:
    """Wrap an existing expectation so it only ever sees ``canned``."""
    return expect(
        canned,
        lambda msg: msg,
        expectation.handle,
        body_type=expectation.body_type,
    )


def expect_string(
    canned: RawResponse[str], callback: typing.Callable[[typing.Any], Msg]
) -> Expectation[Msg]:
    return expect(canned, callback, detailed.response_to_string)


def expect_json(
    canned: RawResponse[str],
    callback: typing.Callable[[typing.Any], Msg],
    decoder: TextDecoder,
) -> Expectation[Msg]:
    return expect(
        canned,
        callback,
        lambda response: detailed.response_to_json(decoder, response),
    )


def expect_bytes(
    canned: RawResponse[bytes],
    callback: typing.Callable[[typing.Any], Msg],
    decoder: BytesDecoder,
) -> Expectation[Msg]:
    return expect(
        canned,
        callback,
        lambda response: detailed.response_to_bytes(decoder, response),
    )


def expect_whatever(
    canned: RawResponse[typing.Any], callback: typing.Callable[[typing.Any], Msg]
) -> Expectation[Msg]:
    return expect(canned, callback, detailed.response_to_whatever)
