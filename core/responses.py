"""
Standard API response envelope.

Location: core/responses.py

Every response, success or error, has the shape:
    {
      "data": { ... },
      "status": 200
    }
Errors put {error, message, timestamp, path, details?} in "data".
"""
from http import HTTPStatus
from typing import Any, Dict, Optional

from django.core.serializers.json import DjangoJSONEncoder
from django.http import JsonResponse

from core.utils.dates import now_ist


def api_response(data: Any, status: int = HTTPStatus.OK) -> JsonResponse:
    """
    Wraps a payload in the envelope.

    Args:
        data: Serializable payload (None allowed)
        status: HTTP status code

    Returns:
        JsonResponse with the same status in body and header
    """
    status = int(status)
    return JsonResponse(
        {'data': data, 'status': status},
        status=status,
        encoder=DjangoJSONEncoder,
        json_dumps_params={'ensure_ascii': False},
    )


def error_details(error: str, message: str, path: Optional[str] = None,
                  details: Optional[Dict[str, Any]] = None,
                  timestamp=None) -> Dict[str, Any]:
    """Builds the error payload carried inside the envelope."""
    payload = {
        'error': error,
        'message': message,
        'timestamp': timestamp or now_ist(),
        'path': path,
    }
    if details:
        payload['details'] = details
    return payload


def error_response(error: str, message: str, status: int, path: Optional[str] = None,
                   details: Optional[Dict[str, Any]] = None,
                   timestamp=None) -> JsonResponse:
    return api_response(error_details(error, message, path, details, timestamp), status)
