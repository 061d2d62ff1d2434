from collections.abc import Mapping
from typing import Any, Dict, Optional

from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.serializers import as_serializer_error

DEFAULT_ERROR_STATUS = status.HTTP_400_BAD_REQUEST

ERROR_STATUS_MAP = {
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "METHOD_NOT_ALLOWED": status.HTTP_405_METHOD_NOT_ALLOWED,
    "CONFLICT": status.HTTP_409_CONFLICT,
    "SERVER_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "ORDER_PERSISTENCE_FAILED": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "PAYMENT_SESSION_FAILED": status.HTTP_502_BAD_GATEWAY,
    "SERVICE_UNAVAILABLE": status.HTTP_503_SERVICE_UNAVAILABLE,
}


def _normalize_details(details: Any) -> Any:
    if isinstance(details, ValidationError):
        return as_serializer_error(details)
    if isinstance(details, Mapping):
        return dict(details)
    if isinstance(details, Exception):
        return {"type": details.__class__.__name__}
    return details


def error_response(
    code: str,
    message: str,
    details: Optional[Any] = None,
    http_status: Optional[int] = None,
    *,
    hint: Optional[str] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> Response:
    """
    Return the storefront's error envelope.

    Args:
        code: Machine-readable error identifier, upper-cased on output.
        message: Human-readable explanation shown to the shopper.
        details: Optional context such as field errors or an order reference.
        http_status: Explicit HTTP status; otherwise derived from ``code``.
        hint: Optional remediation text.
        headers: Optional response headers.
    """
    code = (code or "").strip().upper()
    message = (message or "").strip()
    if not code or not message:
        raise ValueError("error_response requires a non-empty code and message")

    status_code = (
        int(http_status)
        if http_status is not None
        else ERROR_STATUS_MAP.get(code, DEFAULT_ERROR_STATUS)
    )
    if not 100 <= status_code <= 599:
        raise ValueError("error_response status must be a valid HTTP status code")

    payload: Dict[str, Any] = {
        "error": {
            "code": code,
            "message": message,
            "status": status_code,
        }
    }
    if details is not None:
        payload["error"]["details"] = _normalize_details(details)
    if hint is not None:
        payload["error"]["hint"] = hint

    headers_dict = (
        {str(key): str(value) for key, value in headers.items()} if headers else None
    )
    return Response(payload, status=status_code, headers=headers_dict)
