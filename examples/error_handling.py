"""
Error Handling
==============

Demonstrates how httpdetail reports failures as data instead of exceptions.

Error taxonomy:
    BadUrl          (the URL could not be used, nothing was sent)
    Timeout         (no response before the deadline)
    NetworkError    (connection failed, reset, proxy trouble...)
    BadStatus       (a response arrived with a failing status)
    BadBody         (a successful response whose body would not decode)

``httpdetail.detailed`` keeps the metadata and body on BadStatus / BadBody,
``httpdetail.simple`` keeps only the status code / the decoder's reason.
"""

import httpx

import httpdetail
from httpdetail import detailed, json_field, simple


def main() -> None:
    counter = json_field("count", int)

    # ── Detailed results ─────────────────────────────────────────────────
    print("── detailed ───────────────────────────────────────────────────")
    with httpx.Client(timeout=5.0) as client:
        for url in (
            "https://httpbin.org/status/200",
            "https://httpbin.org/status/404",
            "https://httpbin.org/html",
        ):
            result = httpdetail.get(
                client, url, expect=detailed.expect_json(lambda r: r, counter)
            )
            if isinstance(result, httpdetail.Ok):
                metadata, count = result.value
                print(f"  {url}: {metadata.status_code} count={count}")
            elif isinstance(result.error, detailed.BadStatus):
                print(f"  {url}: bad status, body was {result.error.body[:40]!r}")
            elif isinstance(result.error, detailed.BadBody):
                print(f"  {url}: bad body, {result.error.reason}")
            else:
                print(f"  {url}: {httpdetail.error_to_string(result.error)}")
    print()

    # ── Simple results ───────────────────────────────────────────────────
    print("── simple ─────────────────────────────────────────────────────")
    with httpx.Client(timeout=5.0) as client:
        result = httpdetail.get(
            client,
            "https://httpbin.org/status/503",
            expect=simple.expect_string(lambda r: r),
        )
        print(f"  503: {result}")
    print()

    # ── Timeouts ─────────────────────────────────────────────────────────
    print("── Timeout ────────────────────────────────────────────────────")
    with httpx.Client(timeout=httpx.Timeout(1.0)) as client:
        result = httpdetail.get(
            client,
            "https://httpbin.org/delay/10",
            expect=simple.expect_whatever(lambda r: r),
        )
        print(f"  {result}")
    print()

    # ── unwrap() for callers who want an exception ───────────────────────
    print("── unwrap ─────────────────────────────────────────────────────")
    try:
        httpdetail.Err(simple.BadStatus(500)).unwrap()
    except httpdetail.ResponseError as exc:
        print(f"  Caught ResponseError → {exc}")


if __name__ == "__main__":
    main()
