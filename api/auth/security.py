"""
Auth security helpers: password hashing and access-token signing.
"""

from __future__ import annotations

import time
from functools import lru_cache
from typing import Any

import bcrypt
import jwt

from core.config import env_int, env_str

DEFAULT_JWT_SECRET = "dev-change-this-secret"


class AuthSecurityError(RuntimeError):
    pass


@lru_cache(maxsize=1)
def jwt_secret() -> str:
    # Read once per process; set JWT_SECRET in production.
    return env_str("JWT_SECRET", DEFAULT_JWT_SECRET)


def jwt_algorithm() -> str:
    return env_str("JWT_ALG", "HS256")


def access_token_expire_minutes() -> int:
    return env_int("ACCESS_TOKEN_EXPIRE_MIN", 60)


def bcrypt_work_factor() -> int:
    # bcrypt accepts 4..31 rounds.
    return max(4, min(env_int("BCRYPT_WORK_FACTOR", 12), 31))


def now_epoch_s() -> int:
    return int(time.time())


def hash_password(plain_password: str) -> str:
    password = (plain_password or "").encode("utf-8")
    if not password:
        raise AuthSecurityError("Password is empty.")
    return bcrypt.hashpw(password, bcrypt.gensalt(rounds=bcrypt_work_factor())).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    password = (plain_password or "").encode("utf-8")
    hashed = (password_hash or "").encode("utf-8")
    if not password or not hashed:
        return False
    try:
        return bcrypt.checkpw(password, hashed)
    except ValueError:
        return False


def build_access_token(*, username: str, is_admin: bool) -> str:
    issued_at = now_epoch_s()
    expires_at = issued_at + (access_token_expire_minutes() * 60)

    payload = {
        "sub": username,
        "isAdmin": bool(is_admin),
        "iat": issued_at,
        "exp": expires_at,
    }
    return jwt.encode(payload, jwt_secret(), algorithm=jwt_algorithm())


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Verify signature and expiry; raise AuthSecurityError on any failure.
    """
    raw = (token or "").strip()
    if not raw:
        raise AuthSecurityError("Access token is empty.")

    try:
        return jwt.decode(
            raw,
            jwt_secret(),
            algorithms=[jwt_algorithm()],
            options={"require": ["sub", "exp"]},
        )
    except jwt.InvalidTokenError as exc:
        raise AuthSecurityError("Invalid access token.") from exc
