"""Pick single sub-records out of a film's one-to-many lists."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar

from filmarchive.models.schemas import Author

T = TypeVar("T")


@dataclass(frozen=True)
class RoleEntry:
    """Name and comment of the author holding a role."""

    name: str = ""
    comment: str = ""


def find_by_role(authors: Sequence[Author], role: str) -> RoleEntry:
    """Return the first author whose role matches exactly (case-sensitive).

    A missing role is normal for optional credits and yields an empty entry.
    """
    for author in authors:
        if author.role == role:
            return RoleEntry(name=author.name, comment=author.comment)
    return RoleEntry()


def first_or_default(items: Sequence[T], default: T) -> T:
    """Primary record of a list (index 0), or ``default`` when the list is empty."""
    if items:
        return items[0]
    return default
