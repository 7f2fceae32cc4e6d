"""Category and overall scores.

A success counts as a full point, a warning as half a point, an error as
nothing. The overall score is taken over every item of every category, so
categories with more checks weigh more.
"""

from collections.abc import Iterable


def round_half_up(numerator: int, denominator: int) -> int:
    """Integer rounding of numerator/denominator with .5 rounded up."""
    return (2 * numerator + denominator) // (2 * denominator)


def _score(statuses: list[str]) -> int:
    if not statuses:
        return 0
    # Doubled so a warning's half point stays an integer.
    points = 2 * statuses.count("success") + statuses.count("warning")
    return round_half_up(100 * points, 2 * len(statuses))


def category_score(items: Iterable) -> int:
    """Score (0-100) of one category's items."""
    return _score([item.status for item in items])


def overall_score(item_groups: Iterable[Iterable]) -> int:
    """Score (0-100) over the flattened items of all categories."""
    return _score([item.status for items in item_groups for item in items])
