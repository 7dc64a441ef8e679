"""
Company request schemas.

Field aliases are the wire (camelCase) names; services work with
`model_dump(by_alias=True, exclude_unset=True)` so only fields the client
sent reach the SQL builders. Columns that are NOT NULL may be omitted from
an update but never sent as null.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Matches the lowercase CHECK on companies.handle.
HANDLE_PATTERN = r"^[a-z0-9_-]+$"


class CompanyNew(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    handle: str = Field(..., min_length=1, max_length=25, pattern=HANDLE_PATTERN)
    name: str = Field(..., min_length=1)
    description: str | None = None
    num_employees: int | None = Field(default=None, alias="numEmployees", ge=0)
    logo_url: str | None = Field(default=None, alias="logoUrl")


class CompanyUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    name: str | None = Field(default=None, min_length=1)
    description: str | None = None
    num_employees: int | None = Field(default=None, alias="numEmployees", ge=0)
    logo_url: str | None = Field(default=None, alias="logoUrl")

    @field_validator("name")
    @classmethod
    def _name_not_null(cls, value: str | None) -> str:
        if value is None:
            raise ValueError("name cannot be null")
        return value
