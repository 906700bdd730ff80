"""
school_access.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide ORM models, engine/session setup, and the SQL-backed user directory.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services depend on `directory.UserDirectory`, never on this package directly.
