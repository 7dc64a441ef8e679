"""
User business logic.
"""

from __future__ import annotations

import logging

from auth import security
from core.errors import BadRequestError, NotFoundError, UnauthorizedError

from . import repository, schemas

logger = logging.getLogger(__name__)


async def authenticate(username: str, password: str) -> dict:
    """
    Return the user (without password) for valid credentials.
    """
    user = await repository.get_user_with_password(username)
    if user is None:
        raise UnauthorizedError("Invalid username/password")

    password_hash = str(user.pop("password") or "")
    if not security.verify_password(password, password_hash):
        raise UnauthorizedError("Invalid username/password")
    return user


async def register(payload: schemas.UserRegister, *, is_admin: bool = False) -> dict:
    user = await repository.create_user(
        username=payload.username,
        password_hash=security.hash_password(payload.password),
        first_name=payload.first_name,
        last_name=payload.last_name,
        email=payload.email,
        is_admin=is_admin,
    )
    if user is None:
        raise BadRequestError(f"Duplicate username: {payload.username}")
    logger.info("user_registered username=%s is_admin=%s", user["username"], user["isAdmin"])
    return user


async def find_all() -> list[dict]:
    return await repository.list_users()


async def get(username: str) -> dict:
    user = await repository.get_user(username)
    if user is None:
        raise NotFoundError(f"No user: {username}")
    user["jobs"] = await repository.list_applied_job_ids(username)
    return user


async def update(username: str, payload: schemas.UserUpdate) -> dict:
    data = payload.model_dump(by_alias=True, exclude_unset=True)
    if "password" in data:
        data["password"] = security.hash_password(data["password"])

    user = await repository.update_user(username, data)
    if user is None:
        raise NotFoundError(f"No user: {username}")
    logger.info("user_updated username=%s fields=%s", username, ",".join(data))
    return user


async def remove(username: str) -> None:
    row = await repository.delete_user(username)
    if row is None:
        raise NotFoundError(f"No user: {username}")
    logger.info("user_deleted username=%s", username)


async def apply_to_job(username: str, job_id: int) -> dict:
    if not await repository.job_exists(job_id):
        raise NotFoundError(f"No job: {job_id}")
    if await repository.get_user(username) is None:
        raise NotFoundError(f"No user: {username}")

    await repository.insert_application(username, job_id)
    logger.info("job_applied username=%s job_id=%s", username, job_id)
    return {"username": username, "jobId": job_id}
