"""
album_service.services.accounts

Registration and login.

Responsibilities:
- Create users with bcrypt-hashed passwords.
- Authenticate username/password and mint the bearer token returned by /login.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from album_service.auth.authenticator import authenticate
from album_service.auth.jwt import JwtConfig, issue_token
from album_service.auth.models import Principal, Role
from album_service.auth.password import hash_password
from album_service.db.repositories.users import UserRepo
from album_service.errors import ValidationFailure
from album_service.observability.logging import get_logger
from album_service.services.base import TransactionalService
from album_service.settings import Settings

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class LoginResult:
    principal: Principal
    token: str


class AccountService(TransactionalService):
    def __init__(self, *, session: AsyncSession, settings: Settings) -> None:
        super().__init__(session=session)
        self._settings = settings
        self._users = UserRepo(session)

    async def register(
        self,
        *,
        username: str,
        email: str | None,
        password: str,
        confirm_password: str,
        role: Role = Role.user,
    ) -> Principal:
        if password != confirm_password:
            raise ValidationFailure("Passwords do not match")
        if await self._users.get_by_username(username) is not None:
            raise ValidationFailure("Username already exists.")

        password_hash = hash_password(password, rounds=self._settings.bcrypt_rounds)
        try:
            user = await self._users.create(
                username=username,
                email=email,
                password_hash=password_hash,
                role=role.value,
            )
        except IntegrityError as e:
            # A concurrent registration took the username after the lookup above.
            await self._session.rollback()
            raise ValidationFailure("Username already exists.") from e
        await self._commit()
        log.info("user_registered", user_id=str(user.id), role=role.value)
        return Principal.from_user(user)

    async def login(self, *, username: str, password: str) -> LoginResult:
        principal = await authenticate(self._users, username=username, password=password)
        token = issue_token(cfg=JwtConfig.from_settings(self._settings), principal_id=principal.id)
        log.info("login_succeeded", user_id=str(principal.id))
        return LoginResult(principal=principal, token=token)
