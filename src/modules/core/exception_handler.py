"""DRF exception handler producing one error envelope for every failure.

Shape::

    {"type": "client_error" | "validation_error" | "server_error",
     "errors": [{"code": "...", "detail": "...", "attr": "field" | None}]}
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Optional, Tuple

import structlog
from django.core.exceptions import PermissionDenied
from django.http import Http404
from pydantic import ValidationError as PydanticValidationError
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from modules.core.exceptions import DomainError

logger = structlog.get_logger(__name__)

CLIENT_ERROR = "client_error"
VALIDATION_ERROR = "validation_error"
SERVER_ERROR = "server_error"


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    if isinstance(exc, DomainError):
        logger.info(
            "api.domain_error",
            code=exc.code,
            status_code=exc.status_code,
            detail=exc.detail,
        )
        return _error_response(
            CLIENT_ERROR,
            [_error(exc.code, exc.detail, exc.attr)],
            exc.status_code,
        )

    if isinstance(exc, PydanticValidationError):
        errors = [
            _error(
                "invalid",
                err["msg"],
                ".".join(str(part) for part in err["loc"]) or None,
            )
            for err in exc.errors()
        ]
        return _error_response(VALIDATION_ERROR, errors, status.HTTP_400_BAD_REQUEST)

    if isinstance(exc, Http404):
        exc = exceptions.NotFound()
    elif isinstance(exc, PermissionDenied):
        exc = exceptions.PermissionDenied()

    response = drf_exception_handler(exc, context)
    if response is None:
        view = context.get("view")
        logger.exception(
            "api.unhandled_error",
            view=type(view).__name__ if view is not None else None,
            error_type=type(exc).__name__,
        )
        return _error_response(
            SERVER_ERROR,
            [_error("internal", "Internal server error.")],
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, exceptions.ValidationError):
        errors = [
            _error(getattr(detail, "code", "invalid"), str(detail), attr)
            for attr, detail in _flatten(exc.detail)
        ]
        response.data = {"type": VALIDATION_ERROR, "errors": errors}
        return response

    if isinstance(exc, exceptions.APIException):
        response.data = {
            "type": CLIENT_ERROR,
            "errors": [
                _error(
                    getattr(exc.detail, "code", exc.default_code),
                    str(exc.detail),
                )
            ],
        }
    return response


def _flatten(detail: Any, attr: Optional[str] = None) -> Iterator[Tuple[Optional[str], Any]]:
    if isinstance(detail, dict):
        for key, value in detail.items():
            name = None if key == "non_field_errors" else str(key)
            yield from _flatten(value, f"{attr}.{name}" if attr and name else attr or name)
    elif isinstance(detail, list):
        for index, value in enumerate(detail):
            if isinstance(value, (dict, list)):
                yield from _flatten(value, f"{attr}.{index}" if attr else str(index))
            else:
                yield attr, value
    else:
        yield attr, detail


def _error(code: str, detail: str, attr: Optional[str] = None) -> Dict[str, Any]:
    return {"code": code, "detail": detail, "attr": attr}


def _error_response(kind: str, errors: List[Dict[str, Any]], status_code: int) -> Response:
    return Response({"type": kind, "errors": errors}, status=status_code)
