from __future__ import annotations

import functools

import httpx
import pytest

import httpdetail
from httpdetail import (
    BadStatusResponse,
    BadUrlResponse,
    Err,
    GoodStatusResponse,
    Metadata,
    NetworkErrorResponse,
    Ok,
    TimeoutResponse,
    detailed,
    json_field,
    mock,
    simple,
    struct_decoder,
)


def real_server(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, text='{"x": 99}')


def redirect_loop(request: httpx.Request) -> httpx.Response:
    return httpx.Response(302, headers={"location": str(request.url)})


@pytest.fixture
def client():
    with httpx.Client(transport=httpx.MockTransport(real_server)) as client:
        yield client


CANNED = [
    pytest.param(BadUrlResponse("bad"), Err(detailed.BadUrl("bad")), id="bad-url"),
    pytest.param(TimeoutResponse(), Err(detailed.Timeout()), id="timeout"),
    pytest.param(
        NetworkErrorResponse(), Err(detailed.NetworkError()), id="network-error"
    ),
]


@pytest.mark.parametrize("canned, expected", CANNED)
def test_canned_wins_over_real_response(
    canned: object, expected: object, good: GoodStatusResponse[str]
) -> None:
    expect = mock.expect_json(canned, lambda r: r, json_field("x", int))
    assert expect.handle(good) == expected


def test_canned_good_over_real_bad(
    good: GoodStatusResponse[str], bad: BadStatusResponse[str], metadata: Metadata
) -> None:
    expect = mock.expect_json(good, lambda r: r, json_field("x", int))
    assert expect.handle(bad) == Ok((metadata, 3))


def test_canned_bad_over_real_good(
    good: GoodStatusResponse[str], bad: BadStatusResponse[str]
) -> None:
    expect = mock.expect_string(bad, lambda r: r)
    assert expect.handle(good) == Err(detailed.BadStatus(bad.metadata, "err"))


def test_generic_expect_with_any_adapter(
    good: GoodStatusResponse[str], bad: BadStatusResponse[str]
) -> None:
    expect = mock.expect(
        bad,
        lambda result: ("done", result),
        functools.partial(simple.response_to_json, json_field("x", int)),
    )
    assert expect.handle(good) == ("done", Err(simple.BadStatus(500)))


def test_bytes_and_whatever(metadata: Metadata) -> None:
    canned = GoodStatusResponse(metadata, b"\x05")
    expect = mock.expect_bytes(canned, lambda r: r, struct_decoder("B"))
    assert expect.body_type == "bytes"
    assert expect.handle(TimeoutResponse()) == Ok((metadata, 5))

    expect = mock.expect_whatever(canned, lambda r: r)
    assert expect.handle(NetworkErrorResponse()) == Ok((metadata, None))


def test_substitute_keeps_body_type(good: GoodStatusResponse[str]) -> None:
    original = simple.expect_bytes(lambda r: r, struct_decoder("B"))
    wrapped = mock.substitute(TimeoutResponse(), original)
    assert wrapped.body_type == "bytes"
    assert wrapped.handle(good) == Err(simple.Timeout())


def test_real_request_result_is_discarded(
    client: httpx.Client, good: GoodStatusResponse[str], metadata: Metadata
) -> None:
    expect = mock.expect_json(good, lambda r: r, json_field("x", int))
    result = httpdetail.get(client, "https://example.org", expect=expect)
    assert result == Ok((metadata, 3))


def test_real_transport_failure_is_discarded(good: GoodStatusResponse[str]) -> None:
    def refusing(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with httpx.Client(transport=httpx.MockTransport(refusing)) as client:
        result = httpdetail.get(
            client,
            "https://example.org",
            expect=mock.expect_string(good, lambda r: r),
        )
    assert result == Ok((good.metadata, '{"x":3}'))


@pytest.mark.anyio
async def test_async_client(bad: BadStatusResponse[str]) -> None:
    async with httpx.AsyncClient(transport=httpx.MockTransport(real_server)) as client:
        result = await httpdetail.aget(
            client, "https://example.org", expect=mock.expect_string(bad, lambda r: r)
        )
    assert result == Err(detailed.BadStatus(bad.metadata, "err"))


def test_mocked_expectations_ignore_the_response(
    good: GoodStatusResponse[str],
) -> None:
    expect = mock.expect_string(good, lambda r: r)
    assert expect.ignores_response
    assert not detailed.expect_string(lambda r: r).ignores_response


def test_real_body_is_read_as_bytes_by_default(good: GoodStatusResponse[str]) -> None:
    plain = mock.expect(good, lambda r: r, detailed.response_to_string)
    assert plain.body_type == "bytes"
    shortcut = mock.expect_json(good, lambda r: r, json_field("x", int))
    assert shortcut.body_type == "bytes"


def test_canned_wins_over_redirect_loop(metadata: Metadata) -> None:
    canned = GoodStatusResponse(metadata, "hi")
    with httpx.Client(
        transport=httpx.MockTransport(redirect_loop), follow_redirects=True
    ) as client:
        result = httpdetail.get(
            client, "https://example.org", expect=mock.expect_string(canned, lambda r: r)
        )
    assert result == Ok((metadata, "hi"))


def test_substituted_expectation_survives_redirect_loop(metadata: Metadata) -> None:
    canned = BadStatusResponse(metadata, "nope")
    expect = mock.substitute(canned, simple.expect_string(lambda r: r))
    with httpx.Client(
        transport=httpx.MockTransport(redirect_loop), follow_redirects=True
    ) as client:
        result = httpdetail.get(client, "https://example.org", expect=expect)
    assert result == Err(simple.BadStatus(200))


@pytest.mark.anyio
async def test_canned_wins_over_redirect_loop_async(metadata: Metadata) -> None:
    canned = GoodStatusResponse(metadata, "hi")
    async with httpx.AsyncClient(
        transport=httpx.MockTransport(redirect_loop), follow_redirects=True
    ) as client:
        result = await httpdetail.aget(
            client, "https://example.org", expect=mock.expect_string(canned, lambda r: r)
        )
    assert result == Ok((metadata, "hi"))
