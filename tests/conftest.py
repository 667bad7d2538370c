"""Pytest configuration and fixtures."""

import copy
import os
from collections.abc import AsyncGenerator
from typing import Any

import httpx
import pytest
import pytest_asyncio

os.environ.setdefault("API_BASE_URL", "http://archive.test/api")
os.environ.setdefault("APP_ENV", "test")

from filmarchive.auth import AuthContext
from filmarchive.models import FilmRecord
from filmarchive.services.archive import FilmArchiveClient

BASE_URL = "http://archive.test/api"


# Film detail as served by GET /films/{id}
FILM_DETAIL: dict[str, Any] = {
    "film": {
        "film_id": 42,
        "title": "Stalker",
        "release_year": 1979,
        "runtime": "161 min",
        "synopsis": "A guide leads two men into the Zone.",
        "av_annotate_link": "https://av.example.org/42",
    },
    "productionDetails": {
        "production_timeframe": "1977-1979",
        "shooting_city": "Tallinn",
        "shooting_country": "Estonia",
        "post_production_studio": "Mosfilm",
        "production_comments": None,
    },
    "authors": [
        {"role": "Screenwriter", "name": "Arkady Strugatsky", "comment": "from the novel"},
        {"role": "Filmmaker", "name": "Andrei Tarkovsky", "comment": None},
        {"role": "Executive Producer", "name": "Aleksandra Demidova"},
    ],
    "productionTeam": [
        {
            "department": "Image Technicians",
            "name": "Alexander Knyazhinsky",
            "role": "Cinematographer",
            "comment": "",
        },
        {"department": "Sound Technicians", "name": "Vladimir Sharun", "role": "Sound", "comment": ""},
        {
            "department": "Image Technicians",
            "name": "Georgy Rerberg",
            "role": "Cinematographer",
            "comment": "uncredited",
        },
    ],
    "actors": [
        {"actor_name": "Alexander Kaidanovsky", "character_name": "Stalker"},
        {"actor_name": "Anatoly Solonitsyn", "character_name": "Writer"},
    ],
    "equipment": [
        {"equipment_name": "Arriflex 35", "description": "35mm camera", "comment": ""},
        {"equipment_name": "Kodak 5247", "description": None, "comment": ""},
    ],
    "documents": [
        {"document_type": "Script", "file_url": "https://docs.example.org/42.pdf", "comment": ""},
    ],
    "institutionalInfo": {
        "production_company": "Mosfilm",
        "funding_company": "Goskino",
        "funding_comment": "state funded",
        "source": "Mosfilm archive",
        "institutional_city": "Moscow",
        "institutional_country": "USSR",
    },
    "screenings": [
        {
            "screening_date": "1979-05-25T00:00:00Z",
            "screening_city": "Moscow",
            "screening_country": "USSR",
            "organizers": "Goskino",
            "format": "35mm",
            "audience": "Public",
            "film_rights": "Mosfilm",
            "comment": None,
            "source": "Press",
        },
    ],
    "gallery": ["https://img.example.org/42/1.jpg"],
}

# Film as served by GET /films/full (flat film attributes, "team", list of institutions)
FULL_FILM: dict[str, Any] = {
    "film_id": 7,
    "title": "Close-Up",
    "release_year": 1990,
    "runtime": "98 min",
    "synopsis": "A man impersonates a filmmaker.",
    "link": "https://av.example.org/7",
    "authors": [
        {"role": "Filmmaker", "name": "Abbas Kiarostami"},
        {"role": "Screenwriter", "name": "Abbas Kiarostami"},
    ],
    "team": [
        {"department": "Image Technicians", "name": "Ali Reza Zarrindast"},
        {"department": "Film Editor", "name": "Abbas Kiarostami"},
    ],
    "actors": [
        {"actor_name": "Hossain Sabzian", "character_name": "Himself"},
    ],
    "equipment": [],
    "documents": [],
    "institutional_info": [
        {"production_company": "Kanun", "funding_company": "Kanun"},
    ],
    "screenings": [
        {"screening_date": "1990-02-01T12:30:00Z", "organizers": "Fajr", "format": "35mm"},
    ],
}


class FakeArchive:
    """In-memory stand-in for the archive API behind an httpx.MockTransport."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], Any] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self,
        method: str,
        path: str,
        status: int = 200,
        json: Any = None,
        exc: Exception | None = None,
    ) -> None:
        """Register a response (or an exception to raise) for METHOD /api<path>."""
        self.routes[(method, f"/api{path}")] = exc if exc is not None else (status, json)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"error": "Not found"})
        if isinstance(route, Exception):
            raise route
        status, body = route
        if body is None:
            return httpx.Response(status)
        return httpx.Response(status, json=body)

    def paths(self) -> list[str]:
        return [f"{r.method} {r.url.path}" for r in self.requests]


@pytest.fixture
def film_detail() -> dict[str, Any]:
    """Fresh copy of the film detail payload."""
    return copy.deepcopy(FILM_DETAIL)


@pytest.fixture
def full_film() -> dict[str, Any]:
    """Fresh copy of one full-export film payload."""
    return copy.deepcopy(FULL_FILM)


@pytest.fixture
def film_record(film_detail: dict[str, Any]) -> FilmRecord:
    return FilmRecord.model_validate(film_detail)


@pytest.fixture
def auth() -> AuthContext:
    """Logged-in session."""
    return AuthContext(token="test-token")


@pytest.fixture
def archive() -> FakeArchive:
    return FakeArchive()


@pytest_asyncio.fixture
async def archive_client(
    archive: FakeArchive, auth: AuthContext
) -> AsyncGenerator[FilmArchiveClient, None]:
    """Archive client wired to the fake archive."""
    async with httpx.AsyncClient(transport=httpx.MockTransport(archive.handler)) as http:
        yield FilmArchiveClient(BASE_URL, auth, http_client=http)
