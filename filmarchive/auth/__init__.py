"""Authentication module."""

from filmarchive.auth.context import AuthContext

__all__ = ["AuthContext"]
