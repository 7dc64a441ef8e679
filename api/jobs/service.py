"""
Job business logic.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from core.errors import NotFoundError

from . import repository, schemas

logger = logging.getLogger(__name__)


async def create(payload: schemas.JobNew) -> dict:
    job = await repository.create_job(payload.model_dump(by_alias=True))
    if job is None:
        raise NotFoundError(f"No company: {payload.company_handle}")
    logger.info("job_created id=%s company=%s", job["id"], job["companyHandle"])
    return job


async def find_all(filters: Mapping[str, Any] | None = None) -> list[dict]:
    return await repository.list_jobs(filters)


async def get(job_id: int) -> dict:
    job = await repository.get_job(job_id)
    if job is None:
        raise NotFoundError(f"No job: {job_id}")

    job["company"] = await repository.get_company_summary(job.pop("companyHandle"))
    return job


async def update(job_id: int, payload: schemas.JobUpdate) -> dict:
    data = payload.model_dump(exclude_unset=True)
    job = await repository.update_job(job_id, data)
    if job is None:
        raise NotFoundError(f"No job: {job_id}")
    logger.info("job_updated id=%s fields=%s", job_id, ",".join(data))
    return job


async def remove(job_id: int) -> None:
    row = await repository.delete_job(job_id)
    if row is None:
        raise NotFoundError(f"No job: {job_id}")
    logger.info("job_deleted id=%s", job_id)
