"""Shared fixtures: a page that passes every markup check and a hardened header set."""

from unittest.mock import MagicMock

import pytest
from requests.structures import CaseInsensitiveDict

PAGE_URL = "https://example.com/blog/"

FULL_PAGE_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>Example Domain Home Page</title>
<meta name="description" content="An example page used in tests to exercise every check in the site analyzer catalog.">
<meta name="keywords" content="example, testing">
<link rel="canonical" href="/home">
<link rel="icon" href="/favicon.ico">
<link rel="apple-touch-icon" href="icons/apple.png">
<link rel="manifest" href="/site.webmanifest">
<meta property="og:title" content="Example">
<meta property="og:description" content="Example description">
<meta property="og:image" content="//cdn.example.com/og.png">
<meta property="og:url" content="https://example.com/">
<meta name="twitter:card" content="summary">
<meta name="twitter:image" content="/twitter.png">
<meta name="robots" content="index, follow">
<script type="application/ld+json">{"@type": "WebSite"}</script>
<style>body{margin:0}</style>
<script>var a=1;</script>
</head>
<body><p>Hello</p></body>
</html>
"""

SECURE_HEADERS = {
    "Cache-Control": "max-age=3600, public",
    "Content-Encoding": "gzip",
    "X-Forwarded-Proto": "https",
    "Content-Security-Policy": "default-src 'self'",
    "X-Content-Type-Options": "nosniff",
    "X-XSS-Protection": "1; mode=block",
    "Strict-Transport-Security": "max-age=63072000",
}


@pytest.fixture
def page_url() -> str:
    return PAGE_URL


@pytest.fixture
def full_page_html() -> str:
    return FULL_PAGE_HTML


@pytest.fixture
def secure_headers() -> dict:
    return dict(SECURE_HEADERS)


def make_response(
    html: str,
    status_code: int = 200,
    headers: dict | None = None,
    chunks: list[bytes] | None = None,
) -> MagicMock:
    """Stand-in for a streamed requests.Response; the body arrives through raw.read1."""
    response = MagicMock()
    response.status_code = status_code
    response.encoding = "utf-8"
    body_chunks = chunks if chunks is not None else [html.encode("utf-8")]
    response.raw.read1.side_effect = [*body_chunks, b""]
    response.headers = CaseInsensitiveDict(headers or {})
    return response


@pytest.fixture
def fake_response():
    return make_response
