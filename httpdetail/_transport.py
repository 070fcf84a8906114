"""
Bridge between the host HTTP client (httpx, or anything httpx-compatible such
as httpxr) and the raw response model.

Only the outcome of a request is interpreted here. Connection handling,
redirects, retries and timeouts are configured on the client as usual, and
any keyword arguments given to :func:`send` are forwarded to it untouched.
"""

from __future__ import annotations

import logging
import typing

import httpx

from ._models import (
    BadStatusResponse,
    BadUrlResponse,
    GoodStatusResponse,
    Metadata,
    NetworkErrorResponse,
    RawResponse,
    TimeoutResponse,
)
from ._resolve import Expectation

logger = logging.getLogger("httpdetail.transport")

Msg = typing.TypeVar("Msg")

# Exceptions that become a raw response instead of propagating.
CLASSIFIED_EXCEPTIONS = (httpx.InvalidURL, httpx.TransportError)
# Anything else the host client raises. Only swallowed for expectations that
# ignore the response anyway.
DISCARDABLE_EXCEPTIONS = (httpx.HTTPError, httpx.StreamError)


def default_is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


def to_metadata(response: httpx.Response) -> Metadata:
    try:
        url = str(response.url)
    except RuntimeError:
        # Response built by hand, without a request.
        url = ""
    return Metadata(
        url=url,
        status_code=response.status_code,
        status_text=response.reason_phrase,
        headers=dict(response.headers.items()),
    )


def to_raw_response(
    response: httpx.Response,
    *,
    body_type: str = "text",
    is_success: typing.Callable[[int], bool] | None = None,
) -> RawResponse[typing.Any]:
    """Turn a completed ``httpx.Response`` into a good or bad status response."""
    if body_type == "text":
        body: str | bytes = response.text
    elif body_type == "bytes":
        body = response.content
    else:
        raise ValueError(f"body_type must be 'text' or 'bytes', got {body_type!r}")

    if is_success is None:
        is_success = default_is_success
    metadata = to_metadata(response)
    if is_success(response.status_code):
        return GoodStatusResponse(metadata, body)
    return BadStatusResponse(metadata, body)


def from_exception(exc: Exception, url: str | httpx.URL = "") -> RawResponse[typing.Any]:
    """Classify an exception raised by the host client while sending ``url``."""
    if isinstance(exc, (httpx.InvalidURL, httpx.UnsupportedProtocol)):
        logger.debug("Bad url %r: %s", str(url), exc)
        return BadUrlResponse(str(url))
    if isinstance(exc, httpx.TimeoutException):
        logger.debug("Timed out requesting %r: %s", str(url), exc)
        return TimeoutResponse()
    if isinstance(exc, httpx.TransportError):
        logger.debug("Network error requesting %r: %s", str(url), exc)
        return NetworkErrorResponse()
    raise TypeError(
        f"Cannot classify {type(exc).__name__}, expected an httpx transport error"
    )


def _placeholder(exc: Exception, url: str | httpx.URL) -> RawResponse[typing.Any]:
    logger.debug(
        "Discarding %s from %r, the response is ignored",
        type(exc).__name__,
        str(url),
    )
    return NetworkErrorResponse()


def send(
    client: httpx.Client,
    method: str,
    url: str | httpx.URL,
    *,
    expect: Expectation[Msg],
    is_success: typing.Callable[[int], bool] | None = None,
    **kwargs: typing.Any,
) -> Msg:
    """Send a request with ``client`` and hand the outcome to ``expect``.

    Transport failures are never raised: they reach the expectation as
    ``BadUrlResponse``, ``TimeoutResponse`` or ``NetworkErrorResponse``.
    Exceptions that aren't transport failures (``TooManyRedirects``, stream
    errors, ...) propagate, unless ``expect.ignores_response`` is set, as it is
    for the expectations built by :mod:`httpdetail.mock`.

    Examples
    --------
    >>> with httpx.Client() as client:
    ...     result = send(
    ...         client, "GET", "https://example.org/users/1",
    ...         expect=detailed.expect_json(lambda r: r, json_decoder(User)),
    ...     )
    """
    try:
        response = client.request(method, url, **kwargs)
    except CLASSIFIED_EXCEPTIONS as exc:
        raw = from_exception(exc, url)
    except DISCARDABLE_EXCEPTIONS as exc:
        if not expect.ignores_response:
            raise
        raw = _placeholder(exc, url)
    else:
        raw = to_raw_response(
            response, body_type=expect.body_type, is_success=is_success
        )
    return expect.handle(raw)


async def asend(
    client: httpx.AsyncClient,
    method: str,
    url: str | httpx.URL,
    *,
    expect: Expectation[Msg],
    is_success: typing.Callable[[int], bool] | None = None,
    **kwargs: typing.Any,
) -> Msg:
    """Async version of :func:`send`."""
    try:
        response = await client.request(method, url, **kwargs)
    except CLASSIFIED_EXCEPTIONS as exc:
        raw = from_exception(exc, url)
    except DISCARDABLE_EXCEPTIONS as exc:
        if not expect.ignores_response:
            raise
        raw = _placeholder(exc, url)
    else:
        raw = to_raw_response(
            response, body_type=expect.body_type, is_success=is_success
        )
    return expect.handle(raw)


def get(
    client: httpx.Client,
    url: str | httpx.URL,
    *,
    expect: Expectation[Msg],
    **kwargs: typing.Any,
) -> Msg:
    return send(client, "GET", url, expect=expect, **kwargs)


def post(
    client: httpx.Client,
    url: str | httpx.URL,
    *,
    expect: Expectation[Msg],
    **kwargs: typing.Any,
) -> Msg:
    return send(client, "POST", url, expect=expect, **kwargs)


async def aget(
    client: httpx.AsyncClient,
    url: str | httpx.URL,
    *,
    expect: Expectation[Msg],
    **kwargs: typing.Any,
) -> Msg:
    return await asend(client, "GET", url, expect=expect, **kwargs)


async def apost(
    client: httpx.AsyncClient,
    url: str | httpx.URL,
    *,
    expect: Expectation[Msg],
    **kwargs: typing.Any,
) -> Msg:
    return await asend(client, "POST", url, expect=expect, **kwargs)
