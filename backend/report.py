"""Report assembly: score each category, then the whole page, and stamp the time."""

from datetime import datetime, timezone

from schemas import AnalysisResult, Category, CheckItem
from scoring import category_score, overall_score


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds, e.g. 2024-05-01T12:00:00.000Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_result(url: str, item_groups: list[tuple[str, list[CheckItem]]]) -> AnalysisResult:
    """Score each (category name, items) pair, in the order given, and assemble the report."""
    categories = [
        Category(name=name, score=category_score(items), items=items) for name, items in item_groups
    ]
    return AnalysisResult(
        url=url,
        overall_score=overall_score(items for _, items in item_groups),
        categories=categories,
        timestamp=utc_timestamp(),
    )
