"""
Unit tests for per-attempt request construction.
"""

import pytest

from fullcontact_client.client.credentials import (
    RotatingCredentialsProvider,
    StaticCredentialsProvider,
)
from fullcontact_client.client.endpoints import USER_AGENT
from fullcontact_client.client.exceptions import FullContactConstructionError
from fullcontact_client.client.request_builder import build_request

URL = "https://api.fullcontact.com/v3/person.enrich"
BODY = b'{"emails": ["bart@fullcontact.com"]}'


def test_builds_post_with_fixed_headers():
    request = build_request(URL, BODY, StaticCredentialsProvider("secret"))

    assert request.method == "POST"
    assert str(request.url) == URL
    assert request.headers["Authorization"] == "Bearer secret"
    assert request.headers["Content-Type"] == "application/json"
    assert request.headers["User-Agent"] == USER_AGENT
    assert request.content == BODY


def test_static_headers_are_merged():
    request = build_request(
        URL,
        BODY,
        StaticCredentialsProvider("secret"),
        {"Reporting-Key": "clientX", "X-Trace": "abc"},
    )

    assert request.headers["Reporting-Key"] == "clientX"
    assert request.headers["X-Trace"] == "abc"


def test_fixed_headers_override_static_ones():
    request = build_request(
        URL,
        BODY,
        StaticCredentialsProvider("secret"),
        {"authorization": "Bearer spoofed", "Content-Type": "text/plain"},
    )

    assert request.headers.get_list("Authorization") == ["Bearer secret"]
    assert request.headers.get_list("Content-Type") == ["application/json"]


def test_key_is_read_fresh_for_every_request():
    provider = RotatingCredentialsProvider("first")

    first = build_request(URL, BODY, provider)
    provider.rotate("second")
    second = build_request(URL, BODY, provider)

    assert first.headers["Authorization"] == "Bearer first"
    assert second.headers["Authorization"] == "Bearer second"


@pytest.mark.parametrize("url", ["person.enrich", "ftp://api.fullcontact.com/v3/person.enrich"])
def test_non_http_url_raises_construction_error(url):
    with pytest.raises(FullContactConstructionError) as exc_info:
        build_request(url, BODY, StaticCredentialsProvider("secret"))

    assert exc_info.value.details["url"] == url


def test_non_ascii_header_raises_construction_error():
    with pytest.raises(FullContactConstructionError):
        build_request(URL, BODY, StaticCredentialsProvider("secret"), {"X-Name": "Zoë"})
