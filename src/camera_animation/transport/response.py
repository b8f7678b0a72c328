"""Response normalization shared by every camera animation transport."""

from __future__ import annotations

from typing import Any, Dict

from ..errors import AnimationError
from .contract import OPERATION_CONTRACTS


def _error_details(operation: str, response: Dict[str, Any]) -> Dict[str, Any]:
    details = response.get("details") or {}
    details.setdefault("operation", operation)
    contract = OPERATION_CONTRACTS.get(operation)
    if contract is not None:
        details.setdefault("route", contract.http_route)
    return details


def normalize_transport_response(
    operation: str,
    response: Any,
    *,
    default_error_code: str,
) -> Dict[str, Any]:
    """
    Turn a service result into a structured response dictionary.

    Engine errors are accepted as-is and rendered as their error payload.
    Failed responses always carry the operation and its contract route in
    ``details``.
    """
    if isinstance(response, AnimationError):
        response = response.to_payload()

    if response is None:
        response = {
            "success": False,
            "error_code": "EMPTY_RESPONSE",
            "error": "Service returned no data",
        }
    elif not isinstance(response, dict):
        response = {
            "success": False,
            "error_code": "INVALID_RESPONSE",
            "error": "Service returned unexpected response type",
            "details": {"type": type(response).__name__},
        }

    response.setdefault("success", True)
    if response["success"] is False:
        response.setdefault("error_code", default_error_code)
        response.setdefault("error", "An unknown error occurred")
        response["details"] = _error_details(operation, response)

    return response


__all__ = ["normalize_transport_response"]
