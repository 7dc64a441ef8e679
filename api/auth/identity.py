"""
Request identity and authorization checks.

Extraction is lenient and gating is strict: `extract_identity` turns a missing
or bad token into None, and the `require_*` checks decide whether None (or a
non-admin identity) may proceed. Every rejection is the same
`UnauthorizedError` so callers learn nothing about why.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any

from core.errors import UnauthorizedError

from . import security

logger = logging.getLogger(__name__)

_BEARER_PREFIX = re.compile(r"^\s*bearer\s+", re.IGNORECASE)


@dataclass(frozen=True)
class Identity:
    subject: str
    # Kept exactly as signed; only `is True` grants admin.
    is_admin: Any = False

    @property
    def is_authenticated(self) -> bool:
        return bool(self.subject)

    @property
    def is_strict_admin(self) -> bool:
        return self.is_authenticated and self.is_admin is True


def strip_bearer(authorization: str) -> str:
    return _BEARER_PREFIX.sub("", authorization).strip()


def identity_from_payload(payload: dict[str, Any]) -> Identity:
    subject = payload.get("sub")
    return Identity(
        subject=subject if isinstance(subject, str) else "",
        is_admin=payload.get("isAdmin", False),
    )


def extract_identity(authorization: str | None) -> Identity | None:
    """
    Identity from an `Authorization` header value, or None.

    Never raises: absent, malformed, forged and expired tokens all give None.
    """
    if not authorization:
        return None

    token = strip_bearer(authorization)
    try:
        payload = security.decode_access_token(token)
    except security.AuthSecurityError:
        logger.debug("bearer_token_rejected")
        return None

    return identity_from_payload(payload)


def _deny(check: str) -> UnauthorizedError:
    logger.info("authorization_denied check=%s", check)
    return UnauthorizedError()


def require_authenticated(identity: Identity | None) -> Identity:
    if identity is None or not identity.is_authenticated:
        raise _deny("authenticated")
    return identity


def require_admin(identity: Identity | None) -> Identity:
    if identity is None or not identity.is_strict_admin:
        raise _deny("admin")
    return identity


def require_admin_or_self(identity: Identity | None, target_subject: str) -> Identity:
    if identity is not None:
        if identity.is_strict_admin:
            return identity
        if identity.is_authenticated and identity.subject == target_subject:
            return identity
    raise _deny("admin_or_self")
