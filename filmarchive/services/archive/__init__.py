"""Film archive integration module.

Usage:
    from filmarchive.auth import AuthContext
    from filmarchive.services.archive import FilmEditorService, create_archive_client

    auth = AuthContext()
    client = create_archive_client(auth)
    await client.login("editor", "secret")

    editor = FilmEditorService(client)
    form = await editor.load_form(42)
    form.title = "New title"
    result = await editor.update(42, form)
"""

from filmarchive.services.archive.client import (
    FilmArchiveAuthError,
    FilmArchiveClient,
    FilmArchiveError,
    FilmArchivePayloadError,
    FilmArchiveTransportError,
    create_archive_client,
)
from filmarchive.services.archive.editor import FilmEditorService, SubmitResult, UploadResult
from filmarchive.services.archive.export import ExportResult, FilmExportService

__all__ = [
    # Client
    "FilmArchiveAuthError",
    "FilmArchiveClient",
    "FilmArchiveError",
    "FilmArchivePayloadError",
    "FilmArchiveTransportError",
    "create_archive_client",
    # Workflows
    "ExportResult",
    "FilmEditorService",
    "FilmExportService",
    "SubmitResult",
    "UploadResult",
]
