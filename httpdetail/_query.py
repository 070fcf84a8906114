from __future__ import annotations

import typing

import httpx

UNRESERVED_CHARACTERS = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-._~"
)

Pairs = typing.Iterable[typing.Tuple[str, str]]


def _encode_component(component: str) -> str:
    # Everything outside the unreserved set is escaped, "/" "?" "&" "=" included.
    encoded: list[str] = []
    for char in component:
        if char in UNRESERVED_CHARACTERS:
            encoded.append(char)
        else:
            encoded.extend(f"%{byte:02X}" for byte in char.encode("utf-8"))
    return "".join(encoded)


def build_query(pairs: Pairs) -> str:
    """Format ``pairs`` as a query string, leading ``?`` included.

    >>> build_query([("q", "a b"), ("page", "2")])
    '?q=a%20b&page=2'
    >>> build_query([])
    ''
    """
    parts = [
        f"{_encode_component(key)}={_encode_component(value)}" for key, value in pairs
    ]
    if not parts:
        return ""
    return "?" + "&".join(parts)


def list_to_headers(pairs: Pairs) -> httpx.Headers:
    """Build request headers from ``(name, value)`` pairs, repeats kept."""
    return httpx.Headers(list(pairs))
