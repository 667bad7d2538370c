"""Film archive REST API client.

Every call takes its bearer token from an explicit :class:`AuthContext`.
Response bodies are validated against the schemas in
:mod:`filmarchive.models.schemas` before they reach the transforms.
"""

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from filmarchive.auth.context import AuthContext
from filmarchive.config import get_settings
from filmarchive.constants import (
    API_TIMEOUT_DEFAULT,
    API_TIMEOUT_UPLOAD,
    DEFAULT_USER_ROLE,
    UPLOAD_FIELD_DOCUMENT,
    UPLOAD_FIELD_IMAGE,
    UPLOAD_FIELD_POSTER,
)
from filmarchive.models.form import UploadFile
from filmarchive.models.schemas import (
    ArchiveDocument,
    ArchiveUser,
    DocumentUpload,
    FilmRecord,
    FilmSummary,
    GalleryImage,
    GalleryUpload,
    PosterUpload,
)
from filmarchive.utils.http_client import get_archive_http_client

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class FilmArchiveError(Exception):
    """Base exception for archive API errors."""

    pass


class FilmArchiveAuthError(FilmArchiveError):
    """Missing, rejected or expired credentials. The user must log in again."""

    pass


class FilmArchiveTransportError(FilmArchiveError):
    """Network failure or non-2xx response."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class FilmArchivePayloadError(FilmArchiveError):
    """Response body does not match the expected schema."""

    pass


def _parse(model: type[ModelT], data: Any) -> ModelT:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise FilmArchivePayloadError(f"Invalid {model.__name__} payload: {e}") from e


def _parse_list(model: type[ModelT], data: Any, key: str) -> list[ModelT]:
    if not data:
        return []
    if not isinstance(data, dict) or not isinstance(data.get(key, []), list):
        raise FilmArchivePayloadError(f"Expected an object with a '{key}' list")
    return [_parse(model, item) for item in data.get(key, [])]


def _file_part(file: UploadFile) -> tuple[str, bytes, str]:
    return (file.filename, file.content, file.content_type)


class FilmArchiveClient:
    """Client for the film archive API.

    Usage:
        auth = AuthContext()
        client = FilmArchiveClient("https://archive.example.org/api", auth)

        await client.login("editor", "secret")
        record = await client.get_film(42)
        await client.update_film(42, payload)
    """

    def __init__(
        self,
        base_url: str,
        auth: AuthContext,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = API_TIMEOUT_DEFAULT,
    ):
        """Initialize the archive client.

        Args:
            base_url: API root, e.g. https://archive.example.org/api
            auth: Session token holder, cleared on 401
            http_client: Client to send requests with (default: shared pooled client)
            timeout: Default request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.auth = auth
        self.timeout = timeout
        self._http_client = http_client

    @property
    def http(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = get_archive_http_client(self.timeout)
        return self._http_client

    async def _request(
        self,
        method: str,
        endpoint: str,
        json: dict[str, Any] | None = None,
        files: dict[str, tuple[str, bytes, str]] | None = None,
        authenticated: bool = True,
        timeout: float | None = None,
    ) -> Any:
        """Make API request.

        Args:
            method: HTTP method
            endpoint: API endpoint (without base URL)
            json: JSON body
            files: Multipart file parts
            authenticated: Send the bearer token; a 401 then means the session expired
            timeout: Override the default timeout

        Returns:
            Parsed JSON body, or None for empty responses

        Raises:
            FilmArchiveAuthError: On 401 errors
            FilmArchiveTransportError: On connection errors and other non-2xx responses
        """
        url = f"{self.base_url}{endpoint}"
        headers = {"Accept": "application/json"}
        if authenticated:
            headers.update(self.auth.headers())

        try:
            response = await self.http.request(
                method=method,
                url=url,
                headers=headers,
                json=json,
                files=files,
                timeout=timeout or self.timeout,
            )
        except httpx.TimeoutException as e:
            raise FilmArchiveTransportError(f"Request timed out: {e}") from e
        except httpx.TransportError as e:
            raise FilmArchiveTransportError(f"Cannot reach the archive: {e}") from e

        if response.status_code == 401:
            if authenticated:
                logger.warning(f"{method} {endpoint} rejected the session token")
                self.auth.clear()
                raise FilmArchiveAuthError("Session expired, please log in again")
            raise FilmArchiveAuthError("Invalid credentials")

        if response.status_code >= 400:
            raise FilmArchiveTransportError(
                self._error_message(response), status_code=response.status_code
            )

        if response.status_code == 204 or not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise FilmArchivePayloadError(f"Response is not JSON: {e}") from e

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Prefer the archive's own ``error`` message over the status line."""
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("error"):
            return str(body["error"])
        return f"API error {response.status_code}: {response.reason_phrase}"

    def _require_token(self) -> None:
        if not self.auth.is_authenticated:
            raise FilmArchiveAuthError("Authentication token missing, please log in")

    # ==================== Authentication ====================

    async def login(self, username: str, password: str) -> str:
        """Exchange credentials for an access token and store it on the auth context."""
        data = await self._request(
            "POST",
            "/login",
            json={"username": username, "password": password},
            authenticated=False,
        )
        token = data.get("access_token") if isinstance(data, dict) else None
        if not token:
            raise FilmArchivePayloadError("Login response has no access_token")
        self.auth.token = token
        return token

    # ==================== Films ====================

    async def list_films(self) -> list[FilmSummary]:
        data = await self._request("GET", "/films")
        return _parse_list(FilmSummary, data, "films")

    async def fetch_full_films(self) -> list[FilmRecord]:
        """Get every film with all of its joined sub-records (used by CSV export)."""
        self._require_token()
        data = await self._request("GET", "/films/full")
        return _parse_list(FilmRecord, data, "films")

    async def get_film(self, film_id: int | str) -> FilmRecord:
        data = await self._request("GET", f"/films/{film_id}")
        return _parse(FilmRecord, data or {})

    async def create_film(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Create a film.

        Returns:
            Response body; holds the new ``film_id`` that asset uploads need
        """
        data = await self._request("POST", "/films", json=payload)
        return data if isinstance(data, dict) else {}

    async def update_film(self, film_id: int | str, payload: dict[str, Any]) -> dict[str, Any]:
        data = await self._request("PUT", f"/films/{film_id}", json=payload)
        return data if isinstance(data, dict) else {}

    async def delete_film(self, film_id: int | str) -> None:
        await self._request("DELETE", f"/films/{film_id}")

    # ==================== Poster ====================

    async def get_poster(self, film_id: int | str) -> str | None:
        """Get the poster URL, or None when the film has no poster."""
        try:
            data = await self._request("GET", f"/films/{film_id}/poster")
        except FilmArchiveTransportError as e:
            if e.status_code == 404:
                return None
            raise
        return _parse(PosterUpload, data or {}).url or None

    async def upload_poster(self, film_id: int | str, file: UploadFile) -> PosterUpload:
        data = await self._request(
            "POST",
            f"/films/{film_id}/poster",
            files={UPLOAD_FIELD_POSTER: _file_part(file)},
            timeout=API_TIMEOUT_UPLOAD,
        )
        return _parse(PosterUpload, data or {})

    async def delete_poster(self, film_id: int | str) -> None:
        await self._request("DELETE", f"/films/{film_id}/poster")

    # ==================== Gallery ====================

    async def get_gallery(self, film_id: int | str) -> list[GalleryImage]:
        data = await self._request("GET", f"/films/{film_id}/gallery")
        return _parse_list(GalleryImage, data, "images")

    async def upload_gallery_image(
        self, film_id: int | str, file: UploadFile
    ) -> GalleryUpload:
        data = await self._request(
            "POST",
            f"/films/{film_id}/gallery",
            files={UPLOAD_FIELD_IMAGE: _file_part(file)},
            timeout=API_TIMEOUT_UPLOAD,
        )
        return _parse(GalleryUpload, data or {})

    async def delete_gallery_image(self, film_id: int | str, image_id: int | str) -> None:
        await self._request("DELETE", f"/films/{film_id}/gallery/{image_id}")

    # ==================== Documents ====================

    async def get_documents(self, film_id: int | str) -> list[ArchiveDocument]:
        data = await self._request("GET", f"/films/{film_id}/documents")
        return _parse_list(ArchiveDocument, data, "documents")

    async def upload_document(self, film_id: int | str, file: UploadFile) -> DocumentUpload:
        data = await self._request(
            "POST",
            f"/films/{film_id}/documents",
            files={UPLOAD_FIELD_DOCUMENT: _file_part(file)},
            timeout=API_TIMEOUT_UPLOAD,
        )
        return _parse(DocumentUpload, data or {})

    async def delete_document(self, film_id: int | str, document_id: int | str) -> None:
        await self._request("DELETE", f"/films/{film_id}/documents/{document_id}")

    # ==================== Users ====================

    async def list_users(self) -> list[ArchiveUser]:
        data = await self._request("GET", "/users")
        return _parse_list(ArchiveUser, data, "users")

    async def add_user(
        self, username: str, password: str, role: str = DEFAULT_USER_ROLE
    ) -> dict[str, Any]:
        data = await self._request(
            "POST",
            "/users",
            json={"username": username, "password": password, "role": role},
        )
        return data if isinstance(data, dict) else {}

    async def update_user(
        self, user_id: int | str, username: str, password: str
    ) -> dict[str, Any]:
        data = await self._request(
            "PUT",
            f"/users/{user_id}",
            json={"username": username, "password": password},
        )
        return data if isinstance(data, dict) else {}

    async def delete_user(self, user_id: int | str) -> None:
        await self._request("DELETE", f"/users/{user_id}")


def create_archive_client(
    auth: AuthContext,
    http_client: httpx.AsyncClient | None = None,
) -> FilmArchiveClient:
    """Create a client for the configured archive.

    Args:
        auth: Session token holder
        http_client: Optional httpx client (default: shared pooled client)

    Returns:
        Configured FilmArchiveClient
    """
    settings = get_settings()
    return FilmArchiveClient(
        base_url=settings.api_base_url,
        auth=auth,
        http_client=http_client,
        timeout=settings.api_timeout,
    )
