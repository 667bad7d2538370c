"""Key and value normalization shared by the form and export transforms."""

import re

from filmarchive.constants import DATE_LENGTH

_WHITESPACE_RUN = re.compile(r"\s+")


def column_key(label: str) -> str:
    """Derive a column name from a free-text role or department label.

    Lowercases and collapses each whitespace run into one underscore. Every
    other character is kept, so the result is stable for a given label.

    Examples:
        'Image Technicians' -> 'image_technicians'
        'Sound/Image' -> 'sound/image'
    """
    return _WHITESPACE_RUN.sub("_", label.lower())


def truncate_date(value: str) -> str:
    """Keep the ``YYYY-MM-DD`` part of a date or timestamp string."""
    return value[:DATE_LENGTH]
