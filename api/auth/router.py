"""
Auth API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from users import schemas as user_schemas

from . import dependencies, schemas, service
from .identity import Identity

router = APIRouter(prefix="/auth")


@router.post("/token")
async def token(request: schemas.TokenRequest) -> schemas.TokenResponse:
    return await service.login(request)


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(request: user_schemas.UserRegister) -> schemas.TokenResponse:
    return await service.register(request)


@router.get("/me")
async def me(identity: Identity = Depends(dependencies.ensure_logged_in)) -> dict:
    return {"username": identity.subject, "isAdmin": identity.is_strict_admin}
