"""Services talking to external systems."""
