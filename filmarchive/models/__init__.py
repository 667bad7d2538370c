"""Archive schemas and the editable film form."""

from filmarchive.models.form import FilmForm, FormAuthors, FormValidationError, UploadFile
from filmarchive.models.schemas import (
    Actor,
    ArchiveDocument,
    ArchiveUser,
    Author,
    Document,
    DocumentUpload,
    Equipment,
    Film,
    FilmRecord,
    FilmSummary,
    GalleryImage,
    GalleryUpload,
    InstitutionalInfo,
    PosterUpload,
    ProductionDetails,
    Screening,
    TeamMember,
)

__all__ = [
    "Actor",
    "ArchiveDocument",
    "ArchiveUser",
    "Author",
    "Document",
    "DocumentUpload",
    "Equipment",
    "Film",
    "FilmForm",
    "FilmRecord",
    "FilmSummary",
    "FormAuthors",
    "FormValidationError",
    "GalleryImage",
    "GalleryUpload",
    "InstitutionalInfo",
    "PosterUpload",
    "ProductionDetails",
    "Screening",
    "TeamMember",
    "UploadFile",
]
