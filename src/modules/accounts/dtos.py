"""Account DTOs for the Service Layer (Pydantic v2, immutable)."""

from __future__ import annotations

import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from modules.accounts.models import INDONESIAN_PHONE_PATTERN

_PHONE_RE = re.compile(INDONESIAN_PHONE_PATTERN)
MIN_PASSWORD_LENGTH = 6


def _check_phone(value: str) -> str:
    value = value.strip()
    if not _PHONE_RE.match(value):
        raise ValueError("Please provide a valid Indonesian phone number.")
    return value


def _check_name(value: str) -> str:
    value = value.strip()
    if len(value) < 2:
        raise ValueError("Name must be at least 2 characters.")
    return value


class RegisterDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    email: str
    phone: str
    password: str

    @field_validator("name")
    @classmethod
    def name_length(cls, v: str) -> str:
        return _check_name(v)

    @field_validator("phone")
    @classmethod
    def phone_format(cls, v: str) -> str:
        return _check_phone(v)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        v = v.strip().lower()
        if "@" not in v:
            raise ValueError("Please provide a valid email.")
        return v

    @field_validator("password")
    @classmethod
    def password_length(cls, v: str) -> str:
        if len(v) < MIN_PASSWORD_LENGTH:
            raise ValueError("Password must be at least 6 characters.")
        return v


class LoginDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    email: str
    password: str

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()


class UpdateProfileDTO(BaseModel):
    """Partial profile update.

    Only non-``None`` fields are applied.  Changing the password needs the
    current one.
    """

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    phone: Optional[str] = None
    current_password: Optional[str] = None
    new_password: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_length(cls, v: Optional[str]) -> Optional[str]:
        return _check_name(v) if v is not None else v

    @field_validator("phone")
    @classmethod
    def phone_format(cls, v: Optional[str]) -> Optional[str]:
        return _check_phone(v) if v is not None else v

    @field_validator("new_password")
    @classmethod
    def new_password_length(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and len(v) < MIN_PASSWORD_LENGTH:
            raise ValueError("New password must be at least 6 characters.")
        return v

    @model_validator(mode="after")
    def password_change_needs_current(self):
        if self.new_password and not self.current_password:
            raise ValueError("Current password is required to set a new password.")
        return self
