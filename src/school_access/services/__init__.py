"""
school_access.services

Service-layer package.

Responsibilities:
- Apply the authorization policy and input validation for each operation.
- Project stored users into public views (no password hashes leave this layer).
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services are pure Python over `UserDirectory`; tests drive them with the
# in-memory directory and plain Principal values.
