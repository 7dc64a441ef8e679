"""
Auth business logic: exchanging credentials for access tokens.
"""

from __future__ import annotations

import logging

from users import schemas as user_schemas
from users import service as user_service

from . import schemas, security

logger = logging.getLogger(__name__)


def _token_for(user_row: dict) -> schemas.TokenResponse:
    token = security.build_access_token(
        username=str(user_row["username"]),
        is_admin=user_row.get("isAdmin") is True,
    )
    return schemas.TokenResponse(token=token)


async def login(payload: schemas.TokenRequest) -> schemas.TokenResponse:
    user_row = await user_service.authenticate(payload.username, payload.password)
    logger.info("token_issued username=%s", user_row["username"])
    return _token_for(user_row)


async def register(payload: user_schemas.UserRegister) -> schemas.TokenResponse:
    # Self-registration never creates admins.
    user_row = await user_service.register(payload, is_admin=False)
    return _token_for(user_row)
