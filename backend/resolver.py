"""Turn href/src/content references found on a page into absolute URLs."""

from urllib.parse import urljoin, urlparse


def _naive_join(base_url: str, reference: str) -> str:
    base = base_url[:-1] if base_url.endswith("/") else base_url
    return f"{base}/{reference.lstrip('/')}"


def resolve_url(base_url: str, reference: str) -> str:
    """
    Resolve `reference` against the page URL `base_url`.

    Absolute http(s) references are returned unchanged, protocol-relative ones
    inherit the page scheme, everything else goes through RFC 3986 resolution.
    If the base cannot be parsed as an absolute URL the two parts are simply
    concatenated. Never raises.
    """
    if not reference:
        return ""
    if reference.startswith(("http://", "https://")):
        return reference
    if reference.startswith("//"):
        scheme = "http:" if base_url.lower().startswith("http:") else "https:"
        return f"{scheme}{reference}"

    try:
        parsed = urlparse(base_url)
        if not parsed.scheme or not parsed.netloc:
            raise ValueError(f"base URL is not absolute: {base_url!r}")
        return urljoin(base_url, reference)
    except ValueError:
        return _naive_join(base_url, reference)
