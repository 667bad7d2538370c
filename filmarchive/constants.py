"""Application constants - centralized configuration values."""

# =============================================================================
# API Timeouts (in seconds)
# =============================================================================
API_TIMEOUT_DEFAULT = 15.0
API_TIMEOUT_UPLOAD = 60.0

# =============================================================================
# Authors
# =============================================================================
# Form slot -> author role as stored by the archive
KNOWN_AUTHOR_ROLES = {
    "screenwriter": "Screenwriter",
    "filmmaker": "Filmmaker",
    "executive_producer": "Executive Producer",
}

# =============================================================================
# Production team
# =============================================================================
TEAM_FALLBACK_DEPARTMENT = "Other"

# =============================================================================
# Uploads
# =============================================================================
MAX_GALLERY_IMAGES = 10
UPLOAD_FIELD_POSTER = "poster"
UPLOAD_FIELD_IMAGE = "image"
UPLOAD_FIELD_DOCUMENT = "file"
DEFAULT_UPLOAD_CONTENT_TYPE = "application/octet-stream"

# Form fields that only stage uploads and never reach the JSON payload
TRANSIENT_FORM_FIELDS = frozenset({"poster_file", "image_files", "film_document"})

# =============================================================================
# Dates
# =============================================================================
DATE_LENGTH = len("YYYY-MM-DD")

# =============================================================================
# CSV export
# =============================================================================
EXPORT_FILENAME = "films_full_export.csv"
EXPORT_MEDIA_TYPE = "text/csv"
EXPORT_EMPTY_BLOCK = "(none)"
EXPORT_TEAM_SEPARATOR = "; "

LABEL_ACTORS = "Actors"
LABEL_EQUIPMENT = "Equipment"
LABEL_DOCUMENTS = "Documents"
LABEL_INSTITUTIONS = "Institutions"
LABEL_SCREENINGS = "Screenings"

# =============================================================================
# Users
# =============================================================================
DEFAULT_USER_ROLE = "reader"
