from __future__ import annotations

import typing


class HTTPDetailError(Exception):
    """Base class for exceptions raised by httpdetail."""


class ResponseError(HTTPDetailError):
    """Raised by ``Err.unwrap()``.

    Transport outcomes are returned as data; this exception only exists for
    callers who would rather have ``unwrap()`` raise than branch on the result.
    The original error value is available as ``.error``.
    """

    def __init__(self, error: typing.Any) -> None:
        from ._errors import error_to_string

        if isinstance(error, str):
            message = error
        else:
            message = error_to_string(error)
        super().__init__(message)
        self.error = error
