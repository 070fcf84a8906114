from __future__ import annotations

import typing

from ._errors import BadBody, BadStatus, BadUrl, DetailedError, NetworkError, Timeout
from ._models import (
    BadStatusResponse,
    BadUrlResponse,
    DecodeOutcome,
    Err,
    GoodStatusResponse,
    Metadata,
    NetworkErrorResponse,
    RawResponse,
    Result,
    TimeoutResponse,
)

T = typing.TypeVar("T")
Msg = typing.TypeVar("Msg")

BODY_TYPES = ("text", "bytes")


def resolve(
    decode: typing.Callable[[Metadata, typing.Any], DecodeOutcome[T]],
    response: RawResponse[typing.Any],
) -> Result[T, DetailedError[typing.Any]]:
    """Classify a raw response, decoding the body of successful ones.

    ``decode`` only ever runs for a ``GoodStatusResponse``. A failing status
    wins over whatever the body contains.
    """
    if isinstance(response, BadUrlResponse):
        return Err(BadUrl(response.url))
    if isinstance(response, TimeoutResponse):
        return Err(Timeout())
    if isinstance(response, NetworkErrorResponse):
        return Err(NetworkError())
    if isinstance(response, BadStatusResponse):
        return Err(BadStatus(response.metadata, response.body))
    if isinstance(response, GoodStatusResponse):
        outcome = decode(response.metadata, response.body)
        if outcome.is_ok():
            return outcome
        return Err(BadBody(response.metadata, response.body, outcome.error))
    raise TypeError(f"Expected a raw response, got {type(response).__name__}")


class Expectation(typing.Generic[Msg]):
    """What to do with a response once the host client has one.

    ``body_type`` says whether the handler wants the body as ``"text"`` or
    ``"bytes"``; ``handle`` turns the raw response into the caller's message.
    An expectation built with ``ignores_response=True`` never looks at the
    response it is given, so :func:`send` hands it a placeholder when the
    request fails in any way.
    """

    __slots__ = ("body_type", "ignores_response", "_handler")

    def __init__(
        self,
        body_type: str,
        handler: typing.Callable[[RawResponse[typing.Any]], Msg],
        *,
        ignores_response: bool = False,
    ) -> None:
        if body_type not in BODY_TYPES:
            raise ValueError(
                f"body_type must be one of {BODY_TYPES!r}, got {body_type!r}"
            )
        self.body_type = body_type
        self.ignores_response = ignores_response
        self._handler = handler

    def handle(self, response: RawResponse[typing.Any]) -> Msg:
        return self._handler(response)

    def __repr__(self) -> str:
        return f"Expectation(body_type={self.body_type!r})"
