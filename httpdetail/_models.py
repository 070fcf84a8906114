from __future__ import annotations

import types
import typing
from dataclasses import dataclass, field

from ._exceptions import ResponseError

T = typing.TypeVar("T")
U = typing.TypeVar("U")
E = typing.TypeVar("E")
F = typing.TypeVar("F")
Body = typing.TypeVar("Body", str, bytes)


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Ok(typing.Generic[T]):
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def map(self, func: typing.Callable[[T], U]) -> Ok[U]:
        return Ok(func(self.value))

    def map_err(self, func: typing.Callable[[typing.Any], typing.Any]) -> Ok[T]:
        return self

    def and_then(
        self, func: typing.Callable[[T], Result[U, E]]
    ) -> Result[U, E]:
        return func(self.value)

    def with_default(self, default: typing.Any) -> T:
        return self.value

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err(typing.Generic[E]):
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def map(self, func: typing.Callable[[typing.Any], typing.Any]) -> Err[E]:
        return self

    def map_err(self, func: typing.Callable[[E], F]) -> Err[F]:
        return Err(func(self.error))

    def and_then(self, func: typing.Callable[[typing.Any], typing.Any]) -> Err[E]:
        return self

    def with_default(self, default: T) -> T:
        return default

    def unwrap(self) -> typing.NoReturn:
        raise ResponseError(self.error)


Result = typing.Union[Ok[T], Err[E]]

# What a decoder hands back: the decoded value, or the engine's reason text.
DecodeOutcome = typing.Union[Ok[T], Err[str]]


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Metadata:
    """Everything about an HTTP response except its body.

    Header names are lower-case. Repeated headers are joined with ``", "``,
    which is how the host client folds them.
    """

    url: str
    status_code: int
    status_text: str = ""
    headers: typing.Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        # Read-only copy of the caller's mapping.
        object.__setattr__(
            self, "headers", types.MappingProxyType(dict(self.headers))
        )


@dataclass(frozen=True)
class WithMetadata(typing.Generic[T]):
    """Success payload of the record-shaped adapters."""

    metadata: Metadata
    value: T


# ---------------------------------------------------------------------------
# Raw responses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BadUrlResponse:
    url: str


@dataclass(frozen=True)
class TimeoutResponse:
    pass


@dataclass(frozen=True)
class NetworkErrorResponse:
    pass


@dataclass(frozen=True)
class BadStatusResponse(typing.Generic[Body]):
    metadata: Metadata
    body: Body


@dataclass(frozen=True)
class GoodStatusResponse(typing.Generic[Body]):
    metadata: Metadata
    body: Body


RawResponse = typing.Union[
    BadUrlResponse,
    TimeoutResponse,
    NetworkErrorResponse,
    BadStatusResponse[Body],
    GoodStatusResponse[Body],
]
