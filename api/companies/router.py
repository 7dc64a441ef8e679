"""
Company API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from auth import dependencies as auth_dependencies
from auth.identity import Identity

from . import schemas, service

router = APIRouter(prefix="/companies")


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_company(
    request: schemas.CompanyNew,
    _: Identity = Depends(auth_dependencies.ensure_admin),
) -> dict:
    company = await service.create(request)
    return {"company": company}


@router.get("")
async def list_companies(
    min_employees: int | None = Query(default=None, alias="minEmployees", ge=0),
    max_employees: int | None = Query(default=None, alias="maxEmployees", ge=0),
    name_like: str | None = Query(default=None, alias="nameLike", min_length=1),
) -> dict:
    """
    List companies, optionally filtered by size range and partial name.
    """
    filters = {
        "minEmployees": min_employees,
        "maxEmployees": max_employees,
        "nameLike": name_like,
    }
    companies = await service.find_all(filters)
    return {"companies": companies}


@router.get("/{handle}")
async def get_company(handle: str) -> dict:
    company = await service.get(handle)
    return {"company": company}


@router.patch("/{handle}")
async def update_company(
    handle: str,
    request: schemas.CompanyUpdate,
    _: Identity = Depends(auth_dependencies.ensure_admin),
) -> dict:
    company = await service.update(handle, request)
    return {"company": company}


@router.delete("/{handle}")
async def delete_company(
    handle: str,
    _: Identity = Depends(auth_dependencies.ensure_admin),
) -> dict:
    await service.remove(handle)
    return {"deleted": handle}
