"""
album_service.api.routers.auth

Account endpoints: register, login, logout.

Responsibilities:
- Validate account payloads and delegate to `AccountService`.
- Keep the session cookie in step with login/logout.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.ext.asyncio import AsyncSession

from album_service.api.deps import db_session, settings_dep
from album_service.auth.models import Role
from album_service.observability.logging import get_logger
from album_service.services.accounts import AccountService
from album_service.settings import Settings

router = APIRouter(tags=["auth"])

log = get_logger(__name__)

SESSION_USER_KEY = "user_id"


class RegisterRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    username: str = Field(min_length=1, max_length=128)
    email: str | None = Field(default=None, max_length=256)
    password: str = Field(min_length=1)
    confirm_password: str = Field(alias="confirmPassword")
    role: Role = Role.user


class LoginRequest(BaseModel):
    username: str
    password: str


@router.post("/register")
async def register(
    body: RegisterRequest,
    session: AsyncSession = Depends(db_session),
    settings: Settings = Depends(settings_dep),
) -> dict[str, Any]:
    principal = await AccountService(session=session, settings=settings).register(
        username=body.username,
        email=body.email,
        password=body.password,
        confirm_password=body.confirm_password,
        role=body.role,
    )
    return {"message": "Registration successful", "user": principal.public()}


@router.post("/login")
async def login(
    request: Request,
    body: LoginRequest,
    session: AsyncSession = Depends(db_session),
    settings: Settings = Depends(settings_dep),
) -> dict[str, Any]:
    result = await AccountService(session=session, settings=settings).login(
        username=body.username,
        password=body.password,
    )
    # Session identifies the user between login and token use; albums only accept the token.
    request.session[SESSION_USER_KEY] = str(result.principal.id)
    return {
        "message": "Login successful",
        "user": result.principal.public(),
        "token": result.token,
    }


@router.get("/logout")
async def logout(request: Request) -> dict[str, str]:
    user_id = request.session.pop(SESSION_USER_KEY, None)
    request.session.clear()
    log.info("logout", user_id=user_id)
    return {"message": "Logout successful"}
