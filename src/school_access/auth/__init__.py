"""
school_access.auth

Authentication/authorization package.

Responsibilities:
- Role and Principal types.
- Password hashing and credential verification.
- The authorization policy (pure decision function) and its FastAPI
  dependencies (Principal resolution + per-action gate).
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# `policy` has no FastAPI or DB imports; keep it that way so it stays unit-testable.
