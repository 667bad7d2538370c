"""Add, update and delete workflows for film records.

Each workflow turns archive errors into one user-facing message on its
result object. Nothing is retried. Staged files are uploaded one at a time
after the film itself has been saved.
"""

import logging
from dataclasses import dataclass, field

from filmarchive.models.form import FilmForm
from filmarchive.models.schemas import DocumentUpload, GalleryUpload, PosterUpload
from filmarchive.services.archive.client import (
    FilmArchiveAuthError,
    FilmArchiveClient,
    FilmArchiveError,
)
from filmarchive.transforms.form import to_form, to_persistence_payload, validate_form
from filmarchive.utils.logging import LogContext

logger = logging.getLogger(__name__)

MSG_SESSION_EXPIRED = "Your session has expired. Please log in again."
MSG_INVALID_FORM = "Please correct the highlighted fields."
MSG_MISSING_FILM_ID = "Film ID not received after creation. Cannot upload assets."


@dataclass
class UploadResult:
    """Outcome of uploading a form's staged files.

    Uploads already accepted by the archive stay there when a later one fails.
    """

    poster: PosterUpload | None = None
    images: list[GalleryUpload] = field(default_factory=list)
    document: DocumentUpload | None = None
    error: str | None = None
    auth_expired: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None

    def __str__(self) -> str:
        return (
            f"poster={'yes' if self.poster else 'no'}, images={len(self.images)}, "
            f"document={'yes' if self.document else 'no'}, error={self.error}"
        )


@dataclass
class SubmitResult:
    """Outcome of an add, update or delete."""

    film_id: int | str | None = None
    message: str = ""
    field_errors: dict[str, str] = field(default_factory=dict)
    uploads: UploadResult | None = None
    auth_expired: bool = False
    saved: bool = False

    @property
    def ok(self) -> bool:
        return self.saved and (self.uploads is None or self.uploads.ok)


class FilmEditorService:
    """Editing workflows on top of the archive client."""

    def __init__(self, client: FilmArchiveClient):
        self.client = client

    async def load_form(self, film_id: int | str) -> FilmForm:
        """Fetch a film and project it into an editable form.

        Raises:
            FilmArchiveError: If the film cannot be fetched
        """
        record = await self.client.get_film(film_id)
        return to_form(record)

    async def upload_staged(self, film_id: int | str, form: FilmForm) -> UploadResult:
        """Upload the poster, then gallery images in order, then the document.

        Stops at the first failure without undoing earlier uploads. Uploads add
        to what the film already has, so the sequence can be submitted again.
        """
        log = LogContext(logger, film_id=film_id)
        result = UploadResult()

        try:
            if form.poster_file:
                result.poster = await self.client.upload_poster(film_id, form.poster_file)
                log.info(f"Uploaded poster {form.poster_file.filename}")

            for index, image in enumerate(form.image_files, start=1):
                uploaded = await self.client.upload_gallery_image(film_id, image)
                result.images.append(uploaded)
                log.info(f"Uploaded gallery image {index}/{len(form.image_files)}")

            if form.film_document:
                result.document = await self.client.upload_document(
                    film_id, form.film_document
                )
                log.info(f"Uploaded document {form.film_document.filename}")

        except FilmArchiveAuthError as e:
            log.warning(f"Upload aborted, session expired: {e}")
            result.error = MSG_SESSION_EXPIRED
            result.auth_expired = True
        except FilmArchiveError as e:
            log.error(f"Upload failed after {len(result.images)} gallery image(s): {e}")
            result.error = f"Upload failed: {e}"

        return result

    def _finish(self, result: SubmitResult, success_message: str) -> SubmitResult:
        uploads = result.uploads
        if uploads is not None and not uploads.ok:
            result.message = f"Film saved. {uploads.error}"
            result.auth_expired = uploads.auth_expired
        else:
            result.message = success_message
        return result

    async def create(self, form: FilmForm) -> SubmitResult:
        """Create a film from the add form, then upload its staged files."""
        field_errors = validate_form(form)
        if field_errors:
            return SubmitResult(message=MSG_INVALID_FORM, field_errors=field_errors)

        try:
            response = await self.client.create_film(to_persistence_payload(form))
        except FilmArchiveAuthError:
            return SubmitResult(message=MSG_SESSION_EXPIRED, auth_expired=True)
        except FilmArchiveError as e:
            logger.error(f"Film creation failed: {e}")
            return SubmitResult(message=str(e) or "Submission error")

        film_id = response.get("film_id")
        if not film_id:
            logger.error(f"Create response has no film_id: {response}")
            return SubmitResult(message=MSG_MISSING_FILM_ID, saved=True)

        logger.info(f"Created film {film_id} ({form.title})")
        result = SubmitResult(film_id=film_id, saved=True)
        if form.has_pending_uploads:
            result.uploads = await self.upload_staged(film_id, form)
        return self._finish(result, "Film added successfully!")

    async def update(self, film_id: int | str, form: FilmForm) -> SubmitResult:
        """Save edits to an existing film, then upload any newly staged files."""
        field_errors = validate_form(form)
        if field_errors:
            return SubmitResult(
                film_id=film_id, message=MSG_INVALID_FORM, field_errors=field_errors
            )

        try:
            await self.client.update_film(film_id, to_persistence_payload(form))
        except FilmArchiveAuthError:
            return SubmitResult(film_id=film_id, message=MSG_SESSION_EXPIRED, auth_expired=True)
        except FilmArchiveError as e:
            logger.error(f"Update of film {film_id} failed: {e}")
            return SubmitResult(film_id=film_id, message=str(e) or "Submission error")

        logger.info(f"Updated film {film_id}")
        result = SubmitResult(film_id=film_id, saved=True)
        if form.has_pending_uploads:
            result.uploads = await self.upload_staged(film_id, form)
        return self._finish(result, "Film updated successfully!")

    async def delete(self, film_id: int | str) -> SubmitResult:
        try:
            await self.client.delete_film(film_id)
        except FilmArchiveAuthError:
            return SubmitResult(film_id=film_id, message=MSG_SESSION_EXPIRED, auth_expired=True)
        except FilmArchiveError as e:
            logger.error(f"Delete of film {film_id} failed: {e}")
            return SubmitResult(film_id=film_id, message="Failed to delete film")

        logger.info(f"Deleted film {film_id}")
        return SubmitResult(film_id=film_id, message="Film deleted successfully!", saved=True)
