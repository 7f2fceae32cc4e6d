"""Data models and types used across the backend.

API request/response models are in schemas.py.
Types exchanged between the fetcher, the document accessor and the checks live here.
"""

from typing import Literal, TypedDict

from requests.structures import CaseInsensitiveDict

Status = Literal["success", "warning", "error"]

# Header name -> value, looked up case-insensitively.
HeaderMap = CaseInsensitiveDict


class FetchedPage(TypedDict):
    """Snapshot returned by the fetcher."""

    url: str
    html: str
    status_code: int
    headers: HeaderMap


class MatchedElement(TypedDict):
    """One element returned by a selector query, detached from the parser."""

    attrs: dict[str, str]
    text: str
