"""Editable film form and staged uploads."""

from dataclasses import dataclass

from pydantic import Field

from filmarchive.constants import DEFAULT_UPLOAD_CONTENT_TYPE, MAX_GALLERY_IMAGES
from filmarchive.models.schemas import (
    ArchiveModel,
    Document,
    Equipment,
    InstitutionalInfo,
    ProductionDetails,
    Screening,
    TeamMember,
)


class FormValidationError(Exception):
    """Raised when staged form input is rejected before any upload."""

    def __init__(self, field_errors: dict[str, str]):
        self.field_errors = field_errors
        super().__init__("; ".join(f"{k}: {v}" for k, v in field_errors.items()))


@dataclass
class UploadFile:
    """A file picked by the user and waiting to be uploaded."""

    filename: str
    content: bytes
    content_type: str = DEFAULT_UPLOAD_CONTENT_TYPE


class FormAuthors(ArchiveModel):
    """Authors collapsed to one slot per known role."""

    screenwriter: str = ""
    screenwriter_comment: str = ""
    filmmaker: str = ""
    filmmaker_comment: str = ""
    executive_producer: str = ""
    executive_producer_comment: str = ""


class FilmForm(ArchiveModel):
    """Flat, editable representation of a film used by the add/update forms.

    Aliases are the keys the archive expects in the create/update payload.
    ``posterFile``, ``imageFiles`` and ``filmDocument`` only stage uploads and
    are never serialized.
    """

    title: str = ""
    # Raw user input until validated; numeric strings are allowed
    release_year: int | str | None = None
    runtime: str = ""
    synopsis: str = ""
    av_annotate_link: str = ""
    production_details: ProductionDetails = Field(
        default_factory=ProductionDetails, alias="productionDetails"
    )
    authors: FormAuthors = Field(default_factory=FormAuthors)
    production_team: list[TeamMember] = Field(
        default_factory=lambda: [TeamMember()], alias="productionTeam"
    )
    actors: str = ""
    equipment: Equipment = Field(default_factory=Equipment)
    documents: Document = Field(default_factory=Document)
    institutional_info: InstitutionalInfo = Field(
        default_factory=InstitutionalInfo, alias="institutionalInfo"
    )
    screenings: list[Screening] = Field(default_factory=lambda: [Screening()])

    poster_file: UploadFile | None = Field(None, alias="posterFile")
    image_files: list[UploadFile] = Field(default_factory=list, alias="imageFiles")
    film_document: UploadFile | None = Field(None, alias="filmDocument")

    def stage_poster(self, file: UploadFile) -> None:
        """Set the pending poster, replacing any previously staged one."""
        self.poster_file = file

    def stage_gallery_images(
        self, files: list[UploadFile], limit: int = MAX_GALLERY_IMAGES
    ) -> None:
        """Queue gallery images in order.

        Raises:
            FormValidationError: If the queue would hold more than ``limit`` files.
                Nothing is staged in that case.
        """
        if len(self.image_files) + len(files) > limit:
            raise FormValidationError(
                {"imageFiles": f"At most {limit} gallery images can be uploaded at once"}
            )
        self.image_files = [*self.image_files, *files]

    def stage_document(self, file: UploadFile) -> None:
        """Set the pending film document. Only one document is kept."""
        self.film_document = file

    def clear_staged_uploads(self) -> None:
        self.poster_file = None
        self.image_files = []
        self.film_document = None

    @property
    def has_pending_uploads(self) -> bool:
        return bool(self.poster_file or self.image_files or self.film_document)
