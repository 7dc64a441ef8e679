"""
Job request schemas.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from companies.schemas import HANDLE_PATTERN


class JobNew(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    title: str = Field(..., min_length=1)
    salary: int | None = Field(default=None, ge=0)
    equity: Decimal | None = Field(default=None, ge=0, le=1)
    company_handle: str = Field(
        ...,
        alias="companyHandle",
        min_length=1,
        max_length=25,
        pattern=HANDLE_PATTERN,
    )


class JobUpdate(BaseModel):
    """
    A job cannot move to another company, so `companyHandle` is not accepted.
    `salary` and `equity` may be cleared with null; `title` may not.
    """

    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(default=None, min_length=1)
    salary: int | None = Field(default=None, ge=0)
    equity: Decimal | None = Field(default=None, ge=0, le=1)

    @field_validator("title")
    @classmethod
    def _title_not_null(cls, value: str | None) -> str:
        if value is None:
            raise ValueError("title cannot be null")
        return value
