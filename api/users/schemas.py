"""
User request schemas.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Something before and after a single "@", as the users.email CHECK requires.
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+$"


class UserRegister(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    username: str = Field(..., min_length=1, max_length=30)
    password: str = Field(..., min_length=5, max_length=128)
    first_name: str = Field(..., alias="firstName", min_length=1, max_length=30)
    last_name: str = Field(..., alias="lastName", min_length=1, max_length=30)
    email: str = Field(..., min_length=6, max_length=60, pattern=EMAIL_PATTERN)


class UserNew(UserRegister):
    """
    Admin-created user; may itself be an admin.
    """

    is_admin: bool = Field(default=False, alias="isAdmin")


class UserUpdate(BaseModel):
    """
    Every user column is NOT NULL: fields may be left out, not nulled.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    password: str | None = Field(default=None, min_length=5, max_length=128)
    first_name: str | None = Field(default=None, alias="firstName", min_length=1, max_length=30)
    last_name: str | None = Field(default=None, alias="lastName", min_length=1, max_length=30)
    email: str | None = Field(default=None, min_length=6, max_length=60, pattern=EMAIL_PATTERN)

    @field_validator("password", "first_name", "last_name", "email")
    @classmethod
    def _not_null(cls, value: str | None) -> str:
        if value is None:
            raise ValueError("field cannot be null")
        return value
