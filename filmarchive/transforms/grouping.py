"""Order-preserving grouping of records by a field value."""

from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from filmarchive.constants import TEAM_FALLBACK_DEPARTMENT
from filmarchive.models.schemas import TeamMember

T = TypeVar("T")


def _field_value(item: Any, key: str) -> Any:
    if isinstance(item, Mapping):
        return item.get(key)
    return getattr(item, key, None)


def group_by(
    items: Iterable[T],
    key: str,
    fallback: str | None = None,
) -> dict[str, list[T]]:
    """Partition items into buckets keyed by ``item.<key>``.

    Keys appear in first-seen order and each bucket keeps the input order of
    its members. Nothing is sorted.

    Args:
        items: Records (models or mappings)
        key: Field to group on
        fallback: Bucket for items whose field is empty; when None the empty
            value itself is used as the key

    Returns:
        Mapping of field value to members
    """
    groups: dict[str, list[T]] = {}
    for item in items:
        value = _field_value(item, key) or ""
        if not value and fallback is not None:
            value = fallback
        groups.setdefault(value, []).append(item)
    return groups


def team_by_department(team: Iterable[TeamMember]) -> dict[str, list[TeamMember]]:
    """Production team grouped for display; blank departments go under "Other"."""
    return group_by(team, "department", fallback=TEAM_FALLBACK_DEPARTMENT)
