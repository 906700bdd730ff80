"""
school_access.db.repositories

Repository package.

Responsibilities:
- Group SQL-backed implementations of the storage interfaces.
"""

# Package marker; repositories are imported directly from submodules.


# --- Module Notes -----------------------------------------------------------
# Repositories are intentionally thin; authorization and validation belong in services.
