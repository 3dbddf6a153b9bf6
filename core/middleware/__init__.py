"""
Middlewares of the core app.

Location: core/middleware/
"""
from .firebase_token_middleware import FirebaseTokenMiddleware
from .exception_handling_middleware import ExceptionHandlingMiddleware

__all__ = ['FirebaseTokenMiddleware', 'ExceptionHandlingMiddleware']
