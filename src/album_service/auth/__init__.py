"""
album_service.auth

Authentication/authorization package.

Responsibilities:
- Password hashing and the username/password authenticator.
- JWT issuing and validation helpers.
- The access-control guard (role + ownership decisions).
- FastAPI auth dependencies that resolve a request's `Principal`.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Both credential strategies (password, bearer token) resolve to the same
# `Principal`; the guard only ever sees that type.
