"""
Feed query engine.

Derives the list of meals shown in the browse feed from the full meal
collection, a free-text query and a set of required tags.
"""

from typing import Any, Iterable, List, Mapping, Optional


def _matches_query(meal: Mapping[str, Any], needle: str) -> bool:
    if needle in (meal.get("title") or "").lower():
        return True
    if needle in (meal.get("description") or "").lower():
        return True
    return any(needle in (tag or "").lower() for tag in meal.get("tags") or [])


def _has_all_tags(meal: Mapping[str, Any], required_tags: Iterable[str]) -> bool:
    tags = meal.get("tags") or []
    return all(tag in tags for tag in required_tags)


def filter_meals(
    meals: Iterable[Mapping[str, Any]],
    query: Optional[str] = "",
    required_tags: Optional[Iterable[str]] = None,
) -> List[Mapping[str, Any]]:
    """
    Filter meals by free-text query and required tags.

    A meal is kept when the query (case-insensitive substring) occurs in its
    title, its description or any of its tags, and when its tags contain
    every one of ``required_tags`` (exact match). An empty query and an empty
    tag set both accept every meal. The input order is preserved.

    Args:
        meals: Meal documents in display order
        query: Free-text search string, may be empty
        required_tags: Tags every returned meal must carry

    Returns:
        New list with the matching meals, in input order
    """
    needle = (query or "").lower()
    required = list(required_tags or [])

    result = []
    for meal in meals:
        if needle and not _matches_query(meal, needle):
            continue
        if required and not _has_all_tags(meal, required):
            continue
        result.append(meal)
    return result
