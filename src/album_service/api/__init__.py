"""
album_service.api

API package for the Album service.

Responsibilities:
- FastAPI app factory and router modules.
- API-layer dependency wiring, error translation and request models.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The API layer stays thin: request validation + auth + delegation to services.
