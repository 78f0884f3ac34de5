"""Error kinds shared by every module.

Services raise these (or module-specific subclasses); the API exception
handler turns them into the standard error envelope using ``code`` and
``status_code``.
"""

from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base class for business-rule failures surfaced to API clients."""

    code = "error"
    status_code = 400
    default_detail = "The request could not be processed."

    def __init__(self, detail: Optional[str] = None, attr: Optional[str] = None):
        self.detail = detail or self.default_detail
        self.attr = attr
        super().__init__(self.detail)


class NotFound(DomainError):
    code = "not_found"
    status_code = 404
    default_detail = "Resource not found."


class EmptyCart(DomainError):
    code = "empty_cart"
    status_code = 400
    default_detail = "Cart is empty."


class Conflict(DomainError):
    code = "conflict"
    status_code = 409
    default_detail = "Resource already exists."


class Forbidden(DomainError):
    code = "forbidden"
    status_code = 403
    default_detail = "You are not allowed to perform this action."


class InvalidStatus(DomainError):
    code = "invalid_status"
    status_code = 400
    default_detail = "Invalid status."


class ValidationFailed(DomainError):
    code = "invalid"
    status_code = 400
    default_detail = "Invalid input."


class Unauthenticated(DomainError):
    code = "not_authenticated"
    status_code = 401
    default_detail = "Authentication failed."
