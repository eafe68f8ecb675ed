# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20260206v1
# ---------------------------------------------------------------------------
"""Pydantic request / response models for the password-entry endpoints."""

from datetime import datetime
from typing import Optional, List

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


# The web client speaks camelCase (websiteName, createdAt …); the ORM and the
# service layer use snake_case.  Both spellings are accepted on input.
_CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True)

# Required on create, and never blank once set
REQUIRED_FIELDS = ("website_name", "client_name", "email", "password")


def _normalise_tags(value: Optional[List[str]]) -> Optional[List[str]]:
    """Strip labels, drop blanks, drop repeats keeping the first one."""
    if value is None:
        return None
    cleaned = (label.strip() for label in value)
    return list(dict.fromkeys(label for label in cleaned if label))


# -- Requests --------------------------------------------------------------
# Every field is optional at the schema level.  Required-field checks happen
# in VaultService so that a create with several missing fields reports all of
# them in one 400 response.


class PasswordEntryCreate(BaseModel):
    model_config = _CAMEL

    website_name: Optional[str] = Field(None, max_length=255)
    client_name: Optional[str] = Field(None, max_length=255)
    email: Optional[str] = Field(None, max_length=255)
    password: Optional[str] = None
    notes: Optional[str] = None
    tags: Optional[List[str]] = None

    @field_validator("tags")
    @classmethod
    def _clean_tags(cls, value):
        value = _normalise_tags(value)
        if value and any(len(label) > 64 for label in value):
            raise ValueError("Tags must be at most 64 characters")
        return value


class PasswordEntryUpdate(PasswordEntryCreate):
    """
    Partial update.  Only fields present in the request body are applied
    (``model_dump(exclude_unset=True)``); an explicit ``null`` on a required
    field is rejected, on ``notes`` / ``tags`` it clears the value.
    """


# -- Responses -------------------------------------------------------------


class PasswordEntryResponse(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    id: int
    website_name: str
    client_name: str
    email: str
    password: str
    notes: str = ""
    tags: List[str] = Field(default_factory=list)
    created_by: str
    created_at: datetime
    updated_at: datetime


class DeleteResponse(BaseModel):
    message: str
