"""Read-only accessors over a fetched page: markup queries and response headers.

Checks only talk to PageDocument and HeaderMap, never to BeautifulSoup directly.
"""

from collections.abc import Iterable, Mapping

from bs4 import BeautifulSoup, Tag

from models import HeaderMap, MatchedElement


def _detach(tag: Tag) -> MatchedElement:
    attrs = {str(k): v if isinstance(v, str) else " ".join(v) for k, v in tag.attrs.items()}
    text = tag.string if tag.string is not None else tag.get_text()
    return {"attrs": attrs, "text": str(text)}


class PageDocument:
    """CSS-selector queries over parsed HTML."""

    def __init__(self, html: str) -> None:
        # Keep multi-valued attributes such as rel="shortcut icon" as plain strings
        # so selectors compare the literal attribute value.
        self._soup = BeautifulSoup(html or "", "html.parser", multi_valued_attributes=None)

    def first(self, selector: str) -> MatchedElement | None:
        tag = self._soup.select_one(selector)
        return _detach(tag) if tag is not None else None

    def element_text(self, selector: str) -> str | None:
        """Text content of the first element matching `selector`, or None."""
        element = self.first(selector)
        return element["text"] if element is not None else None

    def attribute(self, selector: str, name: str) -> str | None:
        """Value of attribute `name` on the first element matching `selector`."""
        element = self.first(selector)
        if element is None:
            return None
        return element["attrs"].get(name)

    def all_matching(self, selector: str) -> list[MatchedElement]:
        return [_detach(tag) for tag in self._soup.select(selector)]


def build_header_map(
    headers: Mapping[str, str] | Iterable[tuple[str, str]] | None,
) -> HeaderMap:
    """Copy response headers into a case-insensitive mapping."""
    return HeaderMap(headers or {})
