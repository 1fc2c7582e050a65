"""
POS Billing HTTP API - Error Mapping
====================================
Stable transport error mapping for engine rejections.
"""

from __future__ import annotations

from typing import Any, Optional

from core.commands.rejection import ReasonCode, RejectionReason
from core.http_api.contracts import HttpApiErrorBody, HttpApiResponse

HTTP_STATUS_BY_CODE = {
    ReasonCode.VALIDATION_FAILED: 400,
    ReasonCode.INVALID_REQUEST: 400,
    ReasonCode.NO_CUSTOMER_SELECTED: 400,
    ReasonCode.NOT_FOUND: 404,
    ReasonCode.METHOD_NOT_ALLOWED: 405,
    ReasonCode.INSUFFICIENT_STOCK: 409,
    ReasonCode.CREDIT_LIMIT_EXCEEDED: 409,
    ReasonCode.EMPTY_CART: 409,
}


def error_response(
    *,
    code: str,
    message: str,
    details: Optional[dict[str, Any]] = None,
) -> dict[str, Any]:
    return HttpApiResponse(
        ok=False,
        error=HttpApiErrorBody(
            code=code,
            message=message,
            details=details or {},
        ),
    ).to_dict()


def success_response(
    data: Any,
    *,
    meta: Optional[dict[str, Any]] = None,
) -> dict[str, Any]:
    return HttpApiResponse(ok=True, data=data, meta=meta).to_dict()


def map_rejection_reason(reason: RejectionReason) -> HttpApiErrorBody:
    details = dict(reason.details)
    details["policy_name"] = reason.policy_name
    return HttpApiErrorBody(
        code=reason.code,
        message=reason.message,
        details=details,
    )


def rejection_response(reason: RejectionReason) -> dict[str, Any]:
    mapped = map_rejection_reason(reason)
    return error_response(
        code=mapped.code,
        message=mapped.message,
        details=mapped.details,
    )


def status_for_payload(payload: dict[str, Any]) -> int:
    """HTTP status for a handler payload: 200 on success."""
    if payload.get("ok"):
        return 200
    code = payload.get("error", {}).get("code")
    return HTTP_STATUS_BY_CODE.get(code, 400)
