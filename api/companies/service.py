"""
Company business logic.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import asyncpg

from core.errors import BadRequestError, NotFoundError

from . import repository, schemas

logger = logging.getLogger(__name__)


async def create(payload: schemas.CompanyNew) -> dict:
    try:
        company = await repository.create_company(payload.model_dump(by_alias=True))
    except asyncpg.UniqueViolationError as exc:
        # Handle conflicts are absorbed by the insert; this is companies.name.
        raise BadRequestError(f"Duplicate company name: {payload.name}") from exc
    if company is None:
        raise BadRequestError(f"Duplicate company: {payload.handle}")
    logger.info("company_created handle=%s", company["handle"])
    return company


async def find_all(filters: Mapping[str, Any] | None = None) -> list[dict]:
    return await repository.list_companies(filters)


async def get(handle: str) -> dict:
    company = await repository.get_company(handle)
    if company is None:
        raise NotFoundError(f"No company: {handle}")
    company["jobs"] = await repository.list_company_jobs(handle)
    return company


async def update(handle: str, payload: schemas.CompanyUpdate) -> dict:
    data = payload.model_dump(by_alias=True, exclude_unset=True)
    try:
        company = await repository.update_company(handle, data)
    except asyncpg.UniqueViolationError as exc:
        raise BadRequestError(f"Duplicate company name: {data.get('name')}") from exc
    if company is None:
        raise NotFoundError(f"No company: {handle}")
    logger.info("company_updated handle=%s fields=%s", handle, ",".join(data))
    return company


async def remove(handle: str) -> None:
    row = await repository.delete_company(handle)
    if row is None:
        raise NotFoundError(f"No company: {handle}")
    logger.info("company_deleted handle=%s", handle)
