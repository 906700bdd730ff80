"""
school_access.api

API package for the School Access service.

Responsibilities:
- FastAPI app factory and router modules.
- API-layer dependency wiring and the error-to-status map.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The API layer should remain thin: request validation + auth + delegation to services.
