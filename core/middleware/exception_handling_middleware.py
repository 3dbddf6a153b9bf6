"""
Translates exceptions raised by views into the response envelope.

Location: core/middleware/exception_handling_middleware.py
"""
import logging
from http import HTTPStatus

from core.exceptions import BaseAppException
from core.responses import error_response

logger = logging.getLogger(__name__)


class ExceptionHandlingMiddleware:
    """
    Domain exceptions become {data: ErrorDetails, status} with their own
    code and status. Anything else is logged with its traceback and
    answered with a generic 500, without internal details.

    Must be listed after the middlewares whose exceptions it should not see.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        if isinstance(exception, BaseAppException):
            status = int(exception.http_status)
            if status >= HTTPStatus.INTERNAL_SERVER_ERROR:
                logger.error("[API] %s on %s %s: %s", exception.error_code,
                             request.method, request.path, exception.message)
            else:
                logger.warning("[API] %s on %s %s: %s", exception.error_code,
                               request.method, request.path, exception.message)
            return error_response(
                exception.error_code,
                exception.message,
                status,
                path=request.path,
                details=exception.details,
                timestamp=exception.timestamp,
            )

        logger.exception("[API] Unhandled exception on %s %s", request.method, request.path)
        return error_response(
            'INTERNAL_SERVER_ERROR',
            "An unexpected error occurred",
            HTTPStatus.INTERNAL_SERVER_ERROR,
            path=request.path,
        )
