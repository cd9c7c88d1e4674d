"""Account models shared by the auth forms, back ends and session store."""

from __future__ import annotations

import logging
from enum import StrEnum

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

__all__ = ["UserRole", "User"]

logger = logging.getLogger(__name__)


class UserRole(StrEnum):
    """Which side of the marketplace an account is on."""

    TENANT = "tenant"
    LANDLORD = "landlord"


class User(BaseModel):
    """A signed-in marketplace user.

    Serialised with camelCase keys (``joinDate``, ``emailVerified``) when
    written to the session store, and read back with either spelling.
    """

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "alias_generator": to_camel,
    }

    id: str = Field(..., min_length=1)
    name: str = Field(default="")
    email: str = Field(..., min_length=3)
    role: UserRole = Field(default=UserRole.TENANT)
    avatar: str | None = Field(default=None)
    join_date: str = Field(default="", description="Display string, e.g. 'January 2024'.")
    phone: str = Field(default="")
    bio: str = Field(default="")
    verified: bool = Field(default=False)
    email_verified: bool = Field(default=False)
    phone_verified: bool = Field(default=False)

    @field_validator("email")
    @classmethod
    def _lowercase_email(cls, v: str) -> str:
        return v.strip().lower()

    @property
    def is_landlord(self) -> bool:
        return self.role is UserRole.LANDLORD
