# ruff: noqa: I001
from .__version__ import __description__, __title__, __version__  # noqa: F401
from ._exceptions import HTTPDetailError, ResponseError  # noqa: F401
from ._models import (  # noqa: F401
    BadStatusResponse,
    BadUrlResponse,
    DecodeOutcome,
    Err,
    GoodStatusResponse,
    Metadata,
    NetworkErrorResponse,
    Ok,
    RawResponse,
    Result,
    TimeoutResponse,
    WithMetadata,
)
from ._errors import (  # noqa: F401
    BadBody,
    BadStatus,
    BadUrl,
    DetailedError,
    NetworkError,
    SimpleError,
    Timeout,
    error_to_string,
)
from ._decoders import (  # noqa: F401
    BYTES_DECODE_ERROR,
    bytes_decoder,
    json_decoder,
    json_field,
    msgpack_decoder,
    struct_decoder,
)
from ._resolve import Expectation, resolve  # noqa: F401
from ._accessors import (  # noqa: F401
    response_body,
    response_headers,
    response_status_code,
    response_status_text,
    response_url,
)
from ._query import build_query, list_to_headers  # noqa: F401
from ._transport import (  # noqa: F401
    aget,
    apost,
    asend,
    from_exception,
    get,
    post,
    send,
    to_raw_response,
)
from . import detailed, mock, record, simple  # noqa: F401

_members = [
    member
    for member in list(vars().keys())
    if not member.startswith("_")
    or member in ["__description__", "__title__", "__version__"]
]

__all__ = sorted(_members, key=str.casefold)  # pyright: ignore[reportUnsupportedDunderAll]
