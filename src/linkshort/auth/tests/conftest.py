"""Shared fixtures for authentication tests."""

import pytest
from starlette.requests import Request


def make_request(cookies: dict[str, str] | None = None, headers: dict[str, str] | None = None) -> Request:
    """Build a bare Starlette request carrying the given cookies and headers."""
    raw_headers = []
    if cookies:
        cookie_header = "; ".join(f"{name}={value}" for name, value in cookies.items())
        raw_headers.append((b"cookie", cookie_header.encode()))
    for name, value in (headers or {}).items():
        raw_headers.append((name.lower().encode(), value.encode()))
    return Request(
        {
            "type": "http",
            "method": "GET",
            "path": "/dashboard",
            "query_string": b"",
            "headers": raw_headers,
        }
    )


@pytest.fixture
def request_factory():
    """Provide the request builder to tests."""
    return make_request
