"""
User persistence (raw SQL).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from core import db
from core.sql import sql_for_partial_update

JS_TO_SQL = {
    "firstName": "first_name",
    "lastName": "last_name",
}

USER_FIELDS = """
    username,
    first_name AS "firstName",
    last_name AS "lastName",
    email,
    is_admin AS "isAdmin"
"""


async def get_user_with_password(username: str) -> dict | None:
    return await db.fetch_one(
        f"""
        SELECT {USER_FIELDS}, password
        FROM users
        WHERE username = $1
        """,
        username,
    )


async def create_user(
    *,
    username: str,
    password_hash: str,
    first_name: str,
    last_name: str,
    email: str,
    is_admin: bool = False,
) -> dict | None:
    """
    Insert a user; None when the username is already taken.
    """
    return await db.fetch_one(
        f"""
        INSERT INTO users (username, password, first_name, last_name, email, is_admin)
        VALUES ($1, $2, $3, $4, $5, $6)
        ON CONFLICT (username) DO NOTHING
        RETURNING {USER_FIELDS}
        """,
        username,
        password_hash,
        first_name,
        last_name,
        email,
        is_admin,
    )


async def list_users() -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {USER_FIELDS}
        FROM users
        ORDER BY username
        """
    )


async def get_user(username: str) -> dict | None:
    return await db.fetch_one(
        f"""
        SELECT {USER_FIELDS}
        FROM users
        WHERE username = $1
        """,
        username,
    )


async def list_applied_job_ids(username: str) -> list[int]:
    rows = await db.fetch_all(
        """
        SELECT job_id
        FROM applications
        WHERE username = $1
        ORDER BY job_id
        """,
        username,
    )
    return [int(row["job_id"]) for row in rows]


async def update_user(username: str, data: Mapping[str, Any]) -> dict | None:
    fragment = sql_for_partial_update(data, JS_TO_SQL)
    return await db.fetch_one(
        f"""
        UPDATE users
        SET {fragment.clause}
        WHERE username = ${fragment.next_index}
        RETURNING {USER_FIELDS}
        """,
        *fragment.values,
        username,
    )


async def delete_user(username: str) -> dict | None:
    return await db.fetch_one(
        """
        DELETE FROM users
        WHERE username = $1
        RETURNING username
        """,
        username,
    )


async def job_exists(job_id: int) -> bool:
    row = await db.fetch_one(
        """
        SELECT 1 AS ok
        FROM jobs
        WHERE id = $1
        """,
        job_id,
    )
    return row is not None


async def insert_application(username: str, job_id: int) -> None:
    await db.execute(
        """
        INSERT INTO applications (username, job_id)
        VALUES ($1, $2)
        ON CONFLICT (username, job_id) DO NOTHING
        """,
        username,
        job_id,
    )
