"""
Job API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from auth import dependencies as auth_dependencies
from auth.identity import Identity

from . import schemas, service

router = APIRouter(prefix="/jobs")


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_job(
    request: schemas.JobNew,
    _: Identity = Depends(auth_dependencies.ensure_admin),
) -> dict:
    job = await service.create(request)
    return {"job": job}


@router.get("")
async def list_jobs(
    title: str | None = Query(default=None, min_length=1),
    min_salary: int | None = Query(default=None, alias="minSalary", ge=0),
    max_salary: int | None = Query(default=None, alias="maxSalary", ge=0),
    has_equity: bool | None = Query(default=None, alias="hasEquity"),
) -> dict:
    filters = {
        "title": title,
        "minSalary": min_salary,
        "maxSalary": max_salary,
        "hasEquity": has_equity,
    }
    jobs = await service.find_all(filters)
    return {"jobs": jobs}


@router.get("/{job_id}")
async def get_job(job_id: int) -> dict:
    job = await service.get(job_id)
    return {"job": job}


@router.patch("/{job_id}")
async def update_job(
    job_id: int,
    request: schemas.JobUpdate,
    _: Identity = Depends(auth_dependencies.ensure_admin),
) -> dict:
    job = await service.update(job_id, request)
    return {"job": job}


@router.delete("/{job_id}")
async def delete_job(
    job_id: int,
    _: Identity = Depends(auth_dependencies.ensure_admin),
) -> dict:
    await service.remove(job_id)
    return {"deleted": job_id}
