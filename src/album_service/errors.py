"""
album_service.errors

Error taxonomy shared by the auth, service and API layers.

Responsibilities:
- Define one exception type per failure kind, each carrying its HTTP status.
- Keep client-facing messages short; internal details stay in the logs.
"""

from __future__ import annotations

from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_401_UNAUTHORIZED,
    HTTP_403_FORBIDDEN,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)


class AppError(Exception):
    status_code: int = HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal server error"

    def __init__(self, message: str | None = None, *, error: str | None = None) -> None:
        self.message = message or type(self).message
        self.error = error
        super().__init__(self.message)

    def to_body(self) -> dict[str, str]:
        body = {"message": self.message}
        if self.error:
            body["error"] = self.error
        return body


class AuthenticationFailure(AppError):
    status_code = HTTP_401_UNAUTHORIZED
    message = "Unauthorized"


class MissingCredential(AuthenticationFailure):
    pass


class InvalidToken(AuthenticationFailure):
    pass


class UnknownPrincipal(AuthenticationFailure):
    pass


class InvalidCredentials(AuthenticationFailure):
    message = "Authentication failed"

    def __init__(self) -> None:
        # Same text for unknown username and wrong password.
        super().__init__(error="Invalid username or password.")


class AuthorizationFailure(AppError):
    status_code = HTTP_403_FORBIDDEN
    message = "Forbidden"


class NotFound(AppError):
    status_code = HTTP_404_NOT_FOUND
    message = "Not found"


class ValidationFailure(AppError):
    status_code = HTTP_400_BAD_REQUEST
    message = "Validation failed"


class InternalFailure(AppError):
    pass
