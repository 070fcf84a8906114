from __future__ import annotations

import typing
from dataclasses import dataclass

from ._models import Body, Metadata

# ---------------------------------------------------------------------------
# Errors that never saw a response. Shared by both taxonomies.
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BadUrl:
    url: str


@dataclass(frozen=True)
class Timeout:
    pass


@dataclass(frozen=True)
class NetworkError:
    pass


# ---------------------------------------------------------------------------
# Detailed taxonomy: metadata and body survive the failure.
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BadStatus(typing.Generic[Body]):
    metadata: Metadata
    body: Body


@dataclass(frozen=True)
class BadBody(typing.Generic[Body]):
    metadata: Metadata
    body: Body
    reason: str


DetailedError = typing.Union[
    BadUrl, Timeout, NetworkError, BadStatus[Body], BadBody[Body]
]


# ---------------------------------------------------------------------------
# Simple taxonomy: only the status code / the decoder's reason are kept.
# Exposed as ``httpdetail.simple.BadStatus`` and ``httpdetail.simple.BadBody``.
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SimpleBadStatus:
    status_code: int


@dataclass(frozen=True)
class SimpleBadBody:
    reason: str


SimpleError = typing.Union[BadUrl, Timeout, NetworkError, SimpleBadStatus, SimpleBadBody]


def simplify_error(error: DetailedError[typing.Any]) -> SimpleError:
    """Drop the metadata and body from a detailed error."""
    if isinstance(error, BadStatus):
        return SimpleBadStatus(error.metadata.status_code)
    if isinstance(error, BadBody):
        return SimpleBadBody(error.reason)
    return error


def error_to_string(error: DetailedError[typing.Any] | SimpleError) -> str:
    """One-line description of an error from either taxonomy."""
    if isinstance(error, BadUrl):
        return f"Bad Url: {error.url}"
    if isinstance(error, Timeout):
        return "Timeout"
    if isinstance(error, NetworkError):
        return "Network Error"
    if isinstance(error, BadStatus):
        return f"Bad Status: {error.metadata.status_code}"
    if isinstance(error, SimpleBadStatus):
        return f"Bad Status: {error.status_code}"
    if isinstance(error, (BadBody, SimpleBadBody)):
        return f"Bad Body: {error.reason}"
    raise TypeError(f"Expected an httpdetail error, got {type(error).__name__}")
