"""CSV export of the whole catalog."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from filmarchive.services.archive.client import (
    FilmArchiveAuthError,
    FilmArchiveClient,
    FilmArchiveError,
)
from filmarchive.transforms.csv_writer import CsvExport, build_csv_export
from filmarchive.transforms.export import to_export_records

logger = logging.getLogger(__name__)


@dataclass
class ExportResult:
    """Result of an export operation."""

    path: Path | None = None
    rows: int = 0
    message: str = ""
    auth_expired: bool = False

    @property
    def ok(self) -> bool:
        return self.path is not None

    def __str__(self) -> str:
        return f"path={self.path}, rows={self.rows}, message={self.message}"


class FilmExportService:
    """Fetches every film, flattens it and renders one CSV file."""

    def __init__(self, client: FilmArchiveClient):
        self.client = client

    async def build_export(self, headers: Sequence[str] | None = None) -> tuple[CsvExport, int]:
        """Render the catalog as CSV in memory.

        Raises:
            FilmArchiveError: If the records cannot be fetched

        Returns:
            Tuple of (export, row count)
        """
        records = await self.client.fetch_full_films()
        rows = to_export_records(records)
        return build_csv_export(rows, headers), len(rows)

    async def export_to(
        self, directory: Path, headers: Sequence[str] | None = None
    ) -> ExportResult:
        """Write ``films_full_export.csv`` into ``directory``."""
        if not self.client.auth.is_authenticated:
            return ExportResult(message="You must be logged in to export data.")

        try:
            export, count = await self.build_export(headers)
        except FilmArchiveAuthError:
            return ExportResult(
                message="Your session has expired. Please log in again.",
                auth_expired=True,
            )
        except FilmArchiveError as e:
            logger.error(f"Export failed: {e}")
            return ExportResult(message="Failed to export CSV.")

        path = export.write_to(directory)
        logger.info(f"Exported {count} film(s) to {path}")
        return ExportResult(path=path, rows=count, message=f"Exported {count} film(s).")
