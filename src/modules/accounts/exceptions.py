"""Account exceptions raised by ``AccountService``."""

from __future__ import annotations

from modules.core.exceptions import Conflict, NotFound, Unauthenticated, ValidationFailed


class AccountAlreadyExists(Conflict):
    default_detail = "User with this email or phone already exists."


class PhoneAlreadyTaken(Conflict):
    default_detail = "Phone number is already used by another account."


class InvalidCredentials(Unauthenticated):
    default_detail = "Invalid email or password."


class IncorrectCurrentPassword(ValidationFailed):
    code = "incorrect_password"
    default_detail = "Current password is incorrect."


class UserNotFound(NotFound):
    default_detail = "User not found."
