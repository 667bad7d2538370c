"""Pydantic schemas for archive API payloads.

Every entity the archive returns is validated here, at the I/O boundary, so
the transforms can assume well-typed input. ``null`` strings become ``""``
and ``null`` lists become ``[]``.
"""

from typing import Any

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
    model_validator,
)

from filmarchive.constants import DEFAULT_USER_ROLE


class ArchiveModel(BaseModel):
    """Base schema for archive entities."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )

    @field_validator("*", mode="before")
    @classmethod
    def replace_null(cls, v: Any, info: ValidationInfo) -> Any:
        """Substitute defaults for fields the archive sends as null."""
        if v is not None or info.field_name is None:
            return v
        field = cls.model_fields[info.field_name]
        if field.annotation is str:
            return ""
        if field.default_factory is not None:
            return field.default_factory()
        return v


# Film schemas
class Film(ArchiveModel):
    """Scalar film attributes."""

    film_id: int | None = None
    title: str = ""
    release_year: int | None = None
    runtime: str = ""
    synopsis: str = ""
    av_annotate_link: str = Field(
        "", validation_alias=AliasChoices("av_annotate_link", "link")
    )


class FilmSummary(ArchiveModel):
    """Film list item."""

    film_id: int
    title: str = ""
    release_year: int | None = None


# Sub-record schemas
class Author(ArchiveModel):
    role: str = ""
    name: str = ""
    comment: str = ""


class TeamMember(ArchiveModel):
    department: str = ""
    name: str = ""
    role: str = ""
    comment: str = ""


class Actor(ArchiveModel):
    actor_name: str = Field("", validation_alias=AliasChoices("actor_name", "actorName"))
    character_name: str = Field(
        "", validation_alias=AliasChoices("character_name", "characterName")
    )
    comment: str = ""


class Equipment(ArchiveModel):
    equipment_name: str = ""
    description: str = ""
    comment: str = ""


class Document(ArchiveModel):
    document_type: str = ""
    file_url: str = ""
    comment: str = ""


class InstitutionalInfo(ArchiveModel):
    production_company: str = ""
    funding_company: str = ""
    funding_comment: str = ""
    source: str = ""
    institutional_city: str = ""
    institutional_country: str = ""


class ProductionDetails(ArchiveModel):
    production_timeframe: str = ""
    shooting_city: str = ""
    shooting_country: str = ""
    post_production_studio: str = ""
    production_comments: str = ""


class Screening(ArchiveModel):
    screening_date: str = ""
    screening_city: str = ""
    screening_country: str = ""
    organizers: str = ""
    format: str = ""
    audience: str = ""
    film_rights: str = ""
    comment: str = ""
    source: str = ""


class GalleryImage(ArchiveModel):
    image_id: int | str | None = Field(
        None, validation_alias=AliasChoices("image_id", "imageId")
    )
    url: str = ""


# Keys of the flat full-export shape that belong to the film itself
_FILM_KEYS = (
    "film_id",
    "title",
    "release_year",
    "runtime",
    "synopsis",
    "av_annotate_link",
    "link",
)


class FilmRecord(ArchiveModel):
    """One film plus all of its joined sub-records.

    Accepts both shapes the archive serves:

    - film detail: ``{"film": {...}, "productionTeam": [...],
      "institutionalInfo": {...}, ...}``
    - full export: ``{"film_id": ..., "title": ..., "team": [...],
      "institutional_info": [...], ...}``
    """

    film: Film = Field(default_factory=Film)
    authors: list[Author] = Field(default_factory=list)
    production_team: list[TeamMember] = Field(
        default_factory=list,
        validation_alias=AliasChoices("productionTeam", "production_team", "team"),
    )
    actors: list[Actor] = Field(default_factory=list)
    equipment: list[Equipment] = Field(default_factory=list)
    documents: list[Document] = Field(default_factory=list)
    institutions: list[InstitutionalInfo] = Field(
        default_factory=list,
        validation_alias=AliasChoices(
            "institutionalInfo", "institutional_info", "institutions"
        ),
    )
    production_details: ProductionDetails = Field(
        default_factory=ProductionDetails,
        validation_alias=AliasChoices("productionDetails", "production_details"),
    )
    screenings: list[Screening] = Field(default_factory=list)
    gallery: list[GalleryImage] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def lift_flat_film(cls, data: Any) -> Any:
        """Move top-level film attributes of the full-export shape under ``film``."""
        if isinstance(data, dict) and "film" not in data:
            data = dict(data)
            data["film"] = {k: data[k] for k in _FILM_KEYS if k in data}
        return data

    @field_validator("institutions", mode="before")
    @classmethod
    def wrap_single_institution(cls, v: Any) -> Any:
        """The detail endpoint sends one institutional record, not a list."""
        if isinstance(v, dict):
            return [v]
        return v

    @field_validator("gallery", mode="before")
    @classmethod
    def wrap_gallery_urls(cls, v: Any) -> Any:
        if isinstance(v, list):
            return [{"url": item} if isinstance(item, str) else item for item in v]
        return v

    @property
    def film_id(self) -> int | None:
        return self.film.film_id


# Upload result schemas
class PosterUpload(ArchiveModel):
    url: str = Field("", validation_alias=AliasChoices("url", "poster_url"))


class GalleryUpload(ArchiveModel):
    image_id: int | str = Field(validation_alias=AliasChoices("image_id", "imageId"))
    url: str = ""


class DocumentUpload(ArchiveModel):
    document_id: int | str = Field(
        validation_alias=AliasChoices("document_id", "documentId")
    )
    filename: str = ""
    url: str = ""


class ArchiveDocument(DocumentUpload):
    """Stored document as listed by the documents endpoint."""

    content_type: str = Field(
        "", validation_alias=AliasChoices("content_type", "contentType")
    )


# User schemas
class ArchiveUser(ArchiveModel):
    id: int
    username: str
    role: str = DEFAULT_USER_ROLE
