"""
Job persistence (raw SQL).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from core import db
from core.sql import (
    GTE,
    ILIKE,
    LTE,
    POSITIVE,
    FilterRule,
    FilterSet,
    sql_for_filters,
    sql_for_partial_update,
    where,
)

JS_TO_SQL = {
    "companyHandle": "company_handle",
}

JOB_FILTERS = FilterSet(
    rules=(
        FilterRule("title", "title", ILIKE),
        FilterRule("minSalary", "salary", GTE),
        FilterRule("maxSalary", "salary", LTE),
        FilterRule("hasEquity", "equity", POSITIVE),
    ),
    ranges=(("minSalary", "maxSalary"),),
)

JOB_FIELDS = """
    id,
    title,
    salary,
    equity,
    company_handle AS "companyHandle"
"""


async def create_job(data: Mapping[str, Any]) -> dict | None:
    """
    Insert a job; None when the company does not exist.
    """
    return await db.fetch_one(
        f"""
        INSERT INTO jobs (title, salary, equity, company_handle)
        SELECT $1, $2, $3, c.handle
        FROM companies c
        WHERE c.handle = $4
        RETURNING {JOB_FIELDS}
        """,
        data["title"],
        data.get("salary"),
        data.get("equity"),
        data["companyHandle"],
    )


async def list_jobs(filters: Mapping[str, Any] | None = None) -> list[dict]:
    fragment = sql_for_filters(filters or {}, JOB_FILTERS)
    return await db.fetch_all(
        f"""
        SELECT {JOB_FIELDS}
        FROM jobs
        {where(fragment)}
        ORDER BY title, id
        """,
        *fragment.values,
    )


async def get_job(job_id: int) -> dict | None:
    return await db.fetch_one(
        f"""
        SELECT {JOB_FIELDS}
        FROM jobs
        WHERE id = $1
        """,
        job_id,
    )


async def get_company_summary(handle: str) -> dict | None:
    return await db.fetch_one(
        """
        SELECT handle, name, description, num_employees AS "numEmployees", logo_url AS "logoUrl"
        FROM companies
        WHERE handle = $1
        """,
        handle,
    )


async def update_job(job_id: int, data: Mapping[str, Any]) -> dict | None:
    fragment = sql_for_partial_update(data, JS_TO_SQL)
    return await db.fetch_one(
        f"""
        UPDATE jobs
        SET {fragment.clause}
        WHERE id = ${fragment.next_index}
        RETURNING {JOB_FIELDS}
        """,
        *fragment.values,
        job_id,
    )


async def delete_job(job_id: int) -> dict | None:
    return await db.fetch_one(
        """
        DELETE FROM jobs
        WHERE id = $1
        RETURNING id
        """,
        job_id,
    )
