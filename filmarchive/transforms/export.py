"""Flatten relational film records into one export row per film."""

from collections.abc import Iterable
from typing import Any

from filmarchive.constants import (
    EXPORT_EMPTY_BLOCK,
    EXPORT_TEAM_SEPARATOR,
    LABEL_ACTORS,
    LABEL_DOCUMENTS,
    LABEL_EQUIPMENT,
    LABEL_INSTITUTIONS,
    LABEL_SCREENINGS,
)
from filmarchive.models.schemas import (
    Actor,
    Document,
    Equipment,
    FilmRecord,
    InstitutionalInfo,
    Screening,
)
from filmarchive.transforms.keys import column_key, truncate_date


def format_block(label: str, lines: list[str]) -> str:
    """Render a list as one multiline cell.

    Examples:
        ('Actors', ['A as X', 'B']) -> 'Actors:\\n- A as X\\n- B'
        ('Actors', []) -> 'Actors:\\n(none)'
    """
    if not lines:
        return f"{label}:\n{EXPORT_EMPTY_BLOCK}"
    return f"{label}:\n- " + "\n- ".join(lines)


def _actor_line(actor: Actor) -> str:
    if actor.character_name:
        return f"{actor.actor_name} as {actor.character_name}"
    return actor.actor_name


def _equipment_line(equipment: Equipment) -> str:
    if equipment.description:
        return f"{equipment.equipment_name} ({equipment.description})"
    return equipment.equipment_name


def _document_line(document: Document) -> str:
    return f"{document.document_type}: {document.file_url}"


def _institution_line(info: InstitutionalInfo) -> str:
    return f"{info.production_company} / {info.funding_company}"


def _screening_line(screening: Screening) -> str:
    return (
        f"{truncate_date(screening.screening_date)} - "
        f"{screening.organizers} ({screening.format})"
    )


def to_export_record(record: FilmRecord) -> dict[str, Any]:
    """Flatten one film into a single export row.

    Author roles and team departments become columns named by
    :func:`column_key`. A later author with the same role replaces the
    earlier one; team members of one department are joined with "; ".
    """
    film = record.film
    row: dict[str, Any] = {
        "film_id": film.film_id,
        "title": film.title,
        "release_year": film.release_year,
        "runtime": film.runtime,
        "synopsis": film.synopsis,
        "link": film.av_annotate_link,
    }

    for author in record.authors:
        if author.role and author.name:
            row[column_key(author.role)] = author.name

    team: dict[str, str] = {}
    for member in record.production_team:
        if member.department and member.name:
            key = column_key(member.department)
            team[key] = (
                f"{team[key]}{EXPORT_TEAM_SEPARATOR}{member.name}"
                if key in team
                else member.name
            )
    row.update(team)

    row[LABEL_ACTORS] = format_block(LABEL_ACTORS, [_actor_line(a) for a in record.actors])
    row[LABEL_EQUIPMENT] = format_block(
        LABEL_EQUIPMENT, [_equipment_line(e) for e in record.equipment]
    )
    row[LABEL_DOCUMENTS] = format_block(
        LABEL_DOCUMENTS, [_document_line(d) for d in record.documents]
    )
    row[LABEL_INSTITUTIONS] = format_block(
        LABEL_INSTITUTIONS, [_institution_line(i) for i in record.institutions]
    )
    row[LABEL_SCREENINGS] = format_block(
        LABEL_SCREENINGS, [_screening_line(s) for s in record.screenings]
    )
    return row


def to_export_records(records: Iterable[FilmRecord]) -> list[dict[str, Any]]:
    return [to_export_record(record) for record in records]
