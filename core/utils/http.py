"""
Request parsing helpers shared by the API views.

Location: core/utils/http.py
"""
import json
from typing import Any, Dict

from core.exceptions import RequestValidationException


def parse_json_body(request) -> Dict[str, Any]:
    """
    Decodes the JSON body of a request.

    An empty body is an empty dict.

    Raises:
        RequestValidationException: If the body is not a JSON object
    """
    if not request.body:
        return {}
    try:
        data = json.loads(request.body)
    except (ValueError, UnicodeDecodeError) as e:
        raise RequestValidationException.malformed_body() from e
    if not isinstance(data, dict):
        raise RequestValidationException.malformed_body()
    return data


def require_param(request, name: str) -> str:
    """
    Returns a mandatory query string parameter.

    Raises:
        RequestValidationException: If the parameter is missing or blank
    """
    value = request.GET.get(name, '').strip()
    if not value:
        raise RequestValidationException.missing_parameter(name)
    return value


def validated(form_class, data) -> Dict[str, Any]:
    """
    Binds data to a Django form and returns its cleaned_data.

    Raises:
        RequestValidationException: With one entry per invalid field
    """
    form = form_class(data)
    if not form.is_valid():
        raise RequestValidationException.from_form(form)
    return form.cleaned_data
