"""
Canned Responses
================

Demonstrates how to give a request a canned response, so code that talks to
an API can be exercised without the API answering.
"""

import functools

import httpx

import httpdetail
from httpdetail import (
    BadStatusResponse,
    GoodStatusResponse,
    Metadata,
    TimeoutResponse,
    json_field,
    mock,
    simple,
)


def main() -> None:
    metadata = Metadata(
        url="https://api.example.org/counter",
        status_code=200,
        status_text="OK",
        headers={"content-type": "application/json"},
    )
    counter = json_field("x", int)

    # The transport answers every request with a 500...
    def broken(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="Internal Server Error")

    with httpx.Client(transport=httpx.MockTransport(broken)) as client:
        # ...but the canned response is what gets classified.
        print("── Canned success ─────────────────────────────────────────────")
        canned = GoodStatusResponse(metadata, '{"x": 3}')
        result = httpdetail.get(
            client,
            metadata.url,
            expect=mock.expect_json(canned, lambda r: r, counter),
        )
        print(f"  {result}")
        print()

        print("── Canned failures ────────────────────────────────────────────")
        for canned in (
            TimeoutResponse(),
            BadStatusResponse(
                Metadata(metadata.url, 429, "Too Many Requests"), "slow down"
            ),
        ):
            result = httpdetail.get(
                client,
                metadata.url,
                expect=mock.expect(
                    canned,
                    lambda r: r,
                    functools.partial(simple.response_to_json, counter),
                ),
            )
            print(f"  {type(canned).__name__}: {result}")
        print()

        print("── Wrapping an existing expectation ───────────────────────────")
        real = simple.expect_string(lambda r: r)
        result = httpdetail.get(
            client,
            metadata.url,
            expect=mock.substitute(GoodStatusResponse(metadata, "hi"), real),
        )
        print(f"  {result}")


if __name__ == "__main__":
    main()
