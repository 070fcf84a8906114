from __future__ import annotations

import typing

from ._models import (
    BadStatusResponse,
    BadUrlResponse,
    Err,
    GoodStatusResponse,
    NetworkErrorResponse,
    Ok,
    RawResponse,
    Result,
    TimeoutResponse,
)

T = typing.TypeVar("T")


def _project(
    response: RawResponse[typing.Any],
    field: typing.Callable[[typing.Any], T],
) -> Result[T, str]:
    if isinstance(response, (BadStatusResponse, GoodStatusResponse)):
        return Ok(field(response))
    if isinstance(response, BadUrlResponse):
        return Err(f"Bad Url: {response.url}")
    if isinstance(response, TimeoutResponse):
        return Err("Timeout")
    if isinstance(response, NetworkErrorResponse):
        return Err("Network Error")
    raise TypeError(f"Expected a raw response, got {type(response).__name__}")


def response_url(response: RawResponse[typing.Any]) -> Result[str, str]:
    return _project(response, lambda r: r.metadata.url)


def response_status_code(response: RawResponse[typing.Any]) -> Result[int, str]:
    return _project(response, lambda r: r.metadata.status_code)


def response_status_text(response: RawResponse[typing.Any]) -> Result[str, str]:
    return _project(response, lambda r: r.metadata.status_text)


def response_headers(
    response: RawResponse[typing.Any],
) -> Result[typing.Mapping[str, str], str]:
    return _project(response, lambda r: r.metadata.headers)


def response_body(response: RawResponse[T]) -> Result[T, str]:
    return _project(response, lambda r: r.body)
