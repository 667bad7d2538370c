"""Explicit authentication state for archive API calls."""

from dataclasses import dataclass


@dataclass
class AuthContext:
    """Bearer token for the current session.

    Passed to the archive client instead of reading a global session store.
    The client clears it when the API answers 401 so callers know they must
    log in again.
    """

    token: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    def headers(self) -> dict[str, str]:
        """Authorization header for the current token, empty when logged out."""
        if not self.token:
            return {}
        return {"Authorization": f"Bearer {self.token}"}

    def clear(self) -> None:
        self.token = None
