import httpx

from httpdetail import build_query, list_to_headers


def test_build_query():
    assert build_query([("a", "1"), ("b", "2")]) == "?a=1&b=2"


def test_build_query_empty():
    assert build_query([]) == ""


def test_build_query_encodes_keys_and_values():
    assert build_query([("q", "fish & chips"), ("ü", "/?#")]) == (
        "?q=fish%20%26%20chips&%C3%BC=%2F%3F%23"
    )


def test_build_query_keeps_unreserved():
    assert build_query([("a-b_c.d~", "Z9")]) == "?a-b_c.d~=Z9"


def test_build_query_repeats():
    assert build_query([("tag", "x"), ("tag", "y")]) == "?tag=x&tag=y"


def test_list_to_headers():
    headers = list_to_headers([("Accept", "text/plain"), ("X-Tag", "a"), ("X-Tag", "b")])
    assert isinstance(headers, httpx.Headers)
    assert headers["accept"] == "text/plain"
    assert headers.get_list("x-tag") == ["a", "b"]


def test_list_to_headers_empty():
    assert list(list_to_headers([]).items()) == []


def test_build_query_escapes_separators():
    assert build_query([("k=v", "a/b?c&d")]) == "?k%3Dv=a%2Fb%3Fc%26d"
