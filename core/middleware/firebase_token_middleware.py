"""
Bearer token authentication for the API.

Location: core/middleware/firebase_token_middleware.py
"""
import logging
from http import HTTPStatus

from core.exceptions import UnauthorizedException
from core.responses import error_response
from core.services.identity_service import get_identity_verifier

logger = logging.getLogger(__name__)


class FirebaseTokenMiddleware:
    """
    Requires `Authorization: Bearer <id token>` on every /api/v1/ route.

    The verified identity is exposed as request.identity and its uid as
    request.firebase_uid. Auth routes and CORS preflight (OPTIONS) are
    exempt.
    """

    PROTECTED_PREFIX = '/api/v1/'
    EXEMPT_PATHS = [
        '/api/v1/auth/',
    ]

    def __init__(self, get_response):
        self.get_response = get_response

    def _is_exempt(self, request) -> bool:
        if request.method == 'OPTIONS':
            return True
        if not request.path.startswith(self.PROTECTED_PREFIX):
            return True
        return any(request.path.startswith(exempt) for exempt in self.EXEMPT_PATHS)

    def __call__(self, request):
        request.identity = None
        request.firebase_uid = None

        if self._is_exempt(request):
            return self.get_response(request)

        header = request.META.get('HTTP_AUTHORIZATION', '')
        if not header.startswith('Bearer ') or not header[len('Bearer '):].strip():
            logger.warning("[AUTH] Missing bearer token for %s %s", request.method, request.path)
            return error_response('UNAUTHORIZED', "Missing or invalid Authorization header",
                                  HTTPStatus.UNAUTHORIZED, path=request.path)

        try:
            identity = get_identity_verifier().verify(header[len('Bearer '):].strip())
        except UnauthorizedException as e:
            return error_response(e.error_code, e.message, e.http_status,
                                  path=request.path, timestamp=e.timestamp)
        except Exception:
            logger.exception("[AUTH] Token verification failed for %s %s", request.method, request.path)
            return error_response('INTERNAL_SERVER_ERROR', "An unexpected error occurred",
                                  HTTPStatus.INTERNAL_SERVER_ERROR, path=request.path)

        request.identity = identity
        request.firebase_uid = identity.subject_id
        return self.get_response(request)
