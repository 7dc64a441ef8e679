"""
User API endpoints.

Listing and creating users is admin-only; everything under
`/users/{username}` is open to admins and to that user.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from auth import dependencies as auth_dependencies
from auth import security
from auth.identity import Identity

from . import schemas, service

router = APIRouter(prefix="/users")


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(
    request: schemas.UserNew,
    _: Identity = Depends(auth_dependencies.ensure_admin),
) -> dict:
    user = await service.register(request, is_admin=request.is_admin)
    token = security.build_access_token(username=user["username"], is_admin=user["isAdmin"])
    return {"user": user, "token": token}


@router.get("")
async def list_users(_: Identity = Depends(auth_dependencies.ensure_admin)) -> dict:
    users = await service.find_all()
    return {"users": users}


@router.get("/{username}")
async def get_user(
    username: str,
    _: Identity = Depends(auth_dependencies.ensure_admin_or_self),
) -> dict:
    user = await service.get(username)
    return {"user": user}


@router.patch("/{username}")
async def update_user(
    username: str,
    request: schemas.UserUpdate,
    _: Identity = Depends(auth_dependencies.ensure_admin_or_self),
) -> dict:
    user = await service.update(username, request)
    return {"user": user}


@router.delete("/{username}")
async def delete_user(
    username: str,
    _: Identity = Depends(auth_dependencies.ensure_admin_or_self),
) -> dict:
    await service.remove(username)
    return {"deleted": username}


@router.post("/{username}/jobs/{job_id}")
async def apply_to_job(
    username: str,
    job_id: int,
    _: Identity = Depends(auth_dependencies.ensure_admin_or_self),
) -> dict:
    applied = await service.apply_to_job(username, job_id)
    return {"applied": applied}
