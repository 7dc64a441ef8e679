"""
Company persistence (raw SQL).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from core import db
from core.sql import GTE, ILIKE, LTE, FilterRule, FilterSet, sql_for_filters, sql_for_partial_update, where

JS_TO_SQL = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}

COMPANY_FILTERS = FilterSet(
    rules=(
        FilterRule("minEmployees", "num_employees", GTE),
        FilterRule("maxEmployees", "num_employees", LTE),
        FilterRule("nameLike", "name", ILIKE),
    ),
    ranges=(("minEmployees", "maxEmployees"),),
)

COMPANY_FIELDS = """
    handle,
    name,
    description,
    num_employees AS "numEmployees",
    logo_url AS "logoUrl"
"""


async def create_company(data: Mapping[str, Any]) -> dict | None:
    """
    Insert a company; None when the handle is already taken.
    """
    return await db.fetch_one(
        f"""
        INSERT INTO companies (handle, name, description, num_employees, logo_url)
        VALUES ($1, $2, $3, $4, $5)
        ON CONFLICT (handle) DO NOTHING
        RETURNING {COMPANY_FIELDS}
        """,
        data["handle"],
        data["name"],
        data.get("description"),
        data.get("numEmployees"),
        data.get("logoUrl"),
    )


async def list_companies(filters: Mapping[str, Any] | None = None) -> list[dict]:
    fragment = sql_for_filters(filters or {}, COMPANY_FILTERS)
    return await db.fetch_all(
        f"""
        SELECT {COMPANY_FIELDS}
        FROM companies
        {where(fragment)}
        ORDER BY name
        """,
        *fragment.values,
    )


async def get_company(handle: str) -> dict | None:
    return await db.fetch_one(
        f"""
        SELECT {COMPANY_FIELDS}
        FROM companies
        WHERE handle = $1
        """,
        handle,
    )


async def list_company_jobs(handle: str) -> list[dict]:
    return await db.fetch_all(
        """
        SELECT id, title, salary, equity, company_handle AS "companyHandle"
        FROM jobs
        WHERE company_handle = $1
        ORDER BY id DESC
        """,
        handle,
    )


async def update_company(handle: str, data: Mapping[str, Any]) -> dict | None:
    fragment = sql_for_partial_update(data, JS_TO_SQL)
    return await db.fetch_one(
        f"""
        UPDATE companies
        SET {fragment.clause}
        WHERE handle = ${fragment.next_index}
        RETURNING {COMPANY_FIELDS}
        """,
        *fragment.values,
        handle,
    )


async def delete_company(handle: str) -> dict | None:
    return await db.fetch_one(
        """
        DELETE FROM companies
        WHERE handle = $1
        RETURNING handle
        """,
        handle,
    )
