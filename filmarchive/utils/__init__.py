"""Utility modules for the film archive client."""

from filmarchive.utils.http_client import close_all_clients, get_archive_http_client
from filmarchive.utils.logging import get_logger, LogContext, setup_logging

__all__ = [
    # HTTP
    "close_all_clients",
    "get_archive_http_client",
    # Logging
    "get_logger",
    "LogContext",
    "setup_logging",
]
