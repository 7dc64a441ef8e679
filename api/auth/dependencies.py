"""
Auth dependencies for FastAPI routes.

Every route can depend on `get_identity` (public routes just ignore a None);
protected routes add one of the `ensure_*` dependencies.
"""

from __future__ import annotations

from fastapi import Depends, Header

from . import identity as identity_checks
from .identity import Identity


async def get_identity(authorization: str | None = Header(default=None)) -> Identity | None:
    return identity_checks.extract_identity(authorization)


async def ensure_logged_in(identity: Identity | None = Depends(get_identity)) -> Identity:
    return identity_checks.require_authenticated(identity)


async def ensure_admin(identity: Identity | None = Depends(get_identity)) -> Identity:
    return identity_checks.require_admin(identity)


async def ensure_admin_or_self(
    username: str,
    identity: Identity | None = Depends(get_identity),
) -> Identity:
    # `username` is the path parameter of the route using this dependency.
    return identity_checks.require_admin_or_self(identity, username)
