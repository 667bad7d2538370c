"""Projection between relational film records and the editable film form."""

from typing import Any

from filmarchive.constants import KNOWN_AUTHOR_ROLES, TRANSIENT_FORM_FIELDS
from filmarchive.models.form import FilmForm, FormAuthors
from filmarchive.models.schemas import (
    Document,
    Equipment,
    FilmRecord,
    InstitutionalInfo,
    Screening,
    TeamMember,
)
from filmarchive.transforms.extract import find_by_role, first_or_default
from filmarchive.transforms.keys import truncate_date


def new_form() -> FilmForm:
    """Blank form for adding a film."""
    return FilmForm()


def _form_authors(record: FilmRecord) -> FormAuthors:
    slots: dict[str, str] = {}
    for slot, role in KNOWN_AUTHOR_ROLES.items():
        entry = find_by_role(record.authors, role)
        slots[slot] = entry.name
        slots[f"{slot}_comment"] = entry.comment
    return FormAuthors(**slots)


def _form_screening(screening: Screening) -> Screening:
    return screening.model_copy(
        update={"screening_date": truncate_date(screening.screening_date)}
    )


def to_form(record: FilmRecord) -> FilmForm:
    """Build the editable form for an existing film.

    Missing sub-records are filled with blank placeholders so the form always
    has one team row and one screening row to render. Actors are reduced to a
    comma-joined list of names; character names and comments are not carried.
    Upload fields start empty.
    """
    film = record.film

    team = [member.model_copy() for member in record.production_team]
    screenings = [_form_screening(s) for s in record.screenings]

    return FilmForm(
        title=film.title,
        release_year=film.release_year,
        runtime=film.runtime,
        synopsis=film.synopsis,
        av_annotate_link=film.av_annotate_link,
        production_details=record.production_details.model_copy(),
        authors=_form_authors(record),
        production_team=team or [TeamMember()],
        actors=", ".join(actor.actor_name for actor in record.actors),
        equipment=first_or_default(record.equipment, Equipment()).model_copy(),
        documents=first_or_default(record.documents, Document()).model_copy(),
        institutional_info=first_or_default(
            record.institutions, InstitutionalInfo()
        ).model_copy(),
        screenings=screenings or [Screening()],
    )


def to_persistence_payload(form: FilmForm) -> dict[str, Any]:
    """JSON body for the create/update request.

    Returns a new dict; the form itself is left untouched. Staged files are
    uploaded separately and never appear in the payload.
    """
    payload = form.model_dump(mode="json", by_alias=True, exclude=set(TRANSIENT_FORM_FIELDS))

    release_year = payload.get("release_year")
    if isinstance(release_year, str):
        release_year = release_year.strip()
        payload["release_year"] = int(release_year) if release_year.isdecimal() else None
    return payload


def validate_form(form: FilmForm) -> dict[str, str]:
    """Check required fields before submission.

    Returns:
        Field name -> message for every violation; empty when the form can be
        submitted
    """
    errors: dict[str, str] = {}

    if not form.title.strip():
        errors["title"] = "Title is required"

    release_year = form.release_year
    if release_year is None or (isinstance(release_year, str) and not release_year.strip()):
        errors["release_year"] = "Release year is required"
    elif isinstance(release_year, str) and not release_year.strip().isdecimal():
        errors["release_year"] = "Release year must be a number"

    return errors
