from __future__ import annotations

import pytest

from httpdetail import (
    BadStatusResponse,
    GoodStatusResponse,
    Metadata,
)


# httpdetail only awaits the host client, which runs on asyncio here.
@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def metadata() -> Metadata:
    return Metadata(
        url="https://x",
        status_code=200,
        status_text="OK",
        headers={"content-type": "application/json"},
    )


@pytest.fixture
def error_metadata() -> Metadata:
    return Metadata(
        url="https://x",
        status_code=500,
        status_text="Internal Server Error",
        headers={"content-type": "text/plain"},
    )


@pytest.fixture
def good(metadata: Metadata) -> GoodStatusResponse[str]:
    return GoodStatusResponse(metadata, '{"x":3}')


@pytest.fixture
def bad(error_metadata: Metadata) -> BadStatusResponse[str]:
    return BadStatusResponse(error_metadata, "err")
