"""User account model.

Customers log in with their email address; ``username`` is removed.
Phone numbers are Indonesian mobile numbers and unique per account.
Passwords are stored through Django's password hashers.
"""

from __future__ import annotations

from typing import Any, Optional

from django.contrib.auth.models import AbstractUser, BaseUserManager
from django.core.validators import MinLengthValidator, RegexValidator
from django.db import models

from modules.core.models import BaseModel

INDONESIAN_PHONE_PATTERN = r"^(\+62|62|0)8[1-9]\d{6,11}$"

phone_validator = RegexValidator(
    regex=INDONESIAN_PHONE_PATTERN,
    message="Please provide a valid Indonesian phone number.",
    code="invalid_phone",
)


class UserManager(BaseUserManager):
    use_in_migrations = True

    def _create_user(self, email: str, password: Optional[str], **extra_fields: Any):
        if not email:
            raise ValueError("An email address is required.")
        user = self.model(email=self.normalize_email(email), **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_user(self, email: str, password: Optional[str] = None, **extra_fields: Any):
        extra_fields.setdefault("is_staff", False)
        extra_fields.setdefault("is_superuser", False)
        return self._create_user(email, password, **extra_fields)

    def create_superuser(self, email: str, password: Optional[str] = None, **extra_fields: Any):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        if extra_fields.get("is_staff") is not True:
            raise ValueError("Superuser must have is_staff=True.")
        if extra_fields.get("is_superuser") is not True:
            raise ValueError("Superuser must have is_superuser=True.")
        return self._create_user(email, password, **extra_fields)


class User(AbstractUser, BaseModel):
    """Customer account identified by email."""

    username = None
    first_name = None
    last_name = None

    name: models.CharField = models.CharField(
        max_length=100, validators=[MinLengthValidator(2)]
    )
    email: models.EmailField = models.EmailField(unique=True)
    phone: models.CharField = models.CharField(
        max_length=20,
        unique=True,
        null=True,
        blank=True,
        validators=[phone_validator],
    )

    objects = UserManager()

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = ["name"]

    class Meta:
        db_table = "users"
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"
