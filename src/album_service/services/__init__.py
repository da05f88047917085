"""
album_service.services

Service layer (transaction owners).

Responsibilities:
- Run each operation's pipeline: fetch, authorize, mutate, commit.
- Translate store failures into `InternalFailure`.
"""

# Package marker.
