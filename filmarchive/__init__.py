"""Film archive catalog client.

Normalizes relational film records into editable forms, persistence payloads
and flat CSV exports, and talks to the archive's REST API.
"""

__version__ = "0.1.0"
