"""CSV serialization of flat export records."""

import csv
import io
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from filmarchive.constants import EXPORT_FILENAME, EXPORT_MEDIA_TYPE


@dataclass(frozen=True)
class CsvExport:
    """A rendered CSV file ready to be downloaded or written to disk."""

    content: str
    filename: str = EXPORT_FILENAME
    media_type: str = EXPORT_MEDIA_TYPE

    def write_to(self, directory: Path) -> Path:
        """Write the file as UTF-8 into ``directory`` and return its path."""
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / self.filename
        # newline="" keeps the "\n" row separator on every platform
        with path.open("w", encoding="utf-8", newline="") as fh:
            fh.write(self.content)
        return path


def serialize(
    records: Sequence[dict[str, Any]],
    headers: Sequence[str] | None = None,
) -> str:
    """Render records as CSV text.

    Headers default to the keys of the first record only; keys that appear
    only in later records are not exported. The header line is written as
    plain comma-joined names. Every data cell is double-quoted with embedded
    quotes doubled, and missing or None values become empty strings. Rows are
    separated by "\\n" with no trailing newline.

    Args:
        records: Flat export records, possibly with differing keys
        headers: Explicit column order

    Returns:
        CSV text
    """
    if headers is None:
        headers = list(records[0].keys()) if records else []
    if not headers:
        return ""

    buffer = io.StringIO()
    buffer.write(",".join(headers) + "\n")
    writer = csv.DictWriter(
        buffer,
        fieldnames=list(headers),
        restval="",
        extrasaction="ignore",
        quoting=csv.QUOTE_ALL,
        lineterminator="\n",
    )
    writer.writerows(records)
    return buffer.getvalue().removesuffix("\n")


def build_csv_export(
    records: Sequence[dict[str, Any]],
    headers: Sequence[str] | None = None,
) -> CsvExport:
    return CsvExport(content=serialize(records, headers))
