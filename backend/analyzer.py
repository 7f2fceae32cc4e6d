"""Analysis pipeline: fetch page -> run checks per category -> score -> report."""

from collections.abc import Mapping
import logging
from typing import Callable

from checks import (
    check_ai_integration,
    check_favicon,
    check_metadata,
    check_performance,
    check_security,
    check_seo_files,
    check_social_media,
)
from config import DEFAULT_USER_AGENT
from document import PageDocument, build_header_map
from mock import create_mock_result
from models import HeaderMap
from report import build_result
from schemas import CATEGORY_ORDER, AnalysisResult, CheckItem
from scraper import fetch_page

logger = logging.getLogger(__name__)

CategoryRunner = Callable[[str, str, PageDocument, HeaderMap], list[CheckItem]]

# Keyed by category name; report order comes from CATEGORY_ORDER.
CATEGORY_CHECKS: dict[str, CategoryRunner] = {
    "Metadata": lambda url, html, doc, headers: check_metadata(doc, url),
    "Favicon": lambda url, html, doc, headers: check_favicon(doc, url),
    "Social Media": lambda url, html, doc, headers: check_social_media(doc, url),
    "SEO Files": lambda url, html, doc, headers: check_seo_files(url),
    "Performance": lambda url, html, doc, headers: check_performance(doc, html, headers),
    "AI Integration": lambda url, html, doc, headers: check_ai_integration(doc, url),
    "Security": lambda url, html, doc, headers: check_security(headers),
}


def analyze_website(
    url: str,
    html: str,
    headers: Mapping[str, str] | None = None,
) -> AnalysisResult:
    """
    Run every check against an already fetched page.

    Deterministic for the same (url, html, headers) apart from the timestamp.
    """
    doc = PageDocument(html)
    header_map = build_header_map(headers)

    item_groups = [(name, CATEGORY_CHECKS[name](url, html, doc, header_map)) for name in CATEGORY_ORDER]
    return build_result(url, item_groups)


def analyze_url(
    url: str,
    *,
    use_fixture_data: bool = False,
    timeout: float = 10.0,
    user_agent: str = DEFAULT_USER_AGENT,
) -> AnalysisResult:
    """
    Fetch `url` and analyze it.

    With `use_fixture_data` a canned report is returned and nothing is fetched.
    Raises RetrievalError when the page cannot be retrieved.
    """
    if use_fixture_data:
        logger.info("Returning fixture report for %s", url)
        return create_mock_result(url)

    page = fetch_page(url, timeout=timeout, user_agent=user_agent)
    result = analyze_website(url, page["html"], page["headers"])
    logger.info(
        "Analyzed %s status=%s overall_score=%s",
        url,
        page["status_code"],
        result.overall_score,
    )
    return result
