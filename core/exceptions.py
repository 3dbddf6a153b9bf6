"""
Application exceptions.

Location: core/exceptions.py

Every exception raised by a service carries a stable error code and the
HTTP status it maps to. ExceptionHandlingMiddleware turns them into the
{data, status} envelope.
"""
from http import HTTPStatus
from typing import Any, Dict, Optional

from core.utils.dates import now_ist


class BaseAppException(Exception):
    """
    Base class for all domain exceptions.

    Attributes:
        message: Human readable message
        http_status: HTTPStatus returned to the client
        error_code: Machine readable code (ex: 'CATEGORY_NOT_FOUND')
        details: Optional per-field details
    """

    http_status = HTTPStatus.INTERNAL_SERVER_ERROR
    error_code = 'INTERNAL_SERVER_ERROR'

    def __init__(self, message: str, http_status: Optional[HTTPStatus] = None,
                 error_code: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        if http_status is not None:
            self.http_status = http_status
        if error_code is not None:
            self.error_code = error_code
        self.details = details
        self.timestamp = now_ist()


# Common

class RequestValidationException(BaseAppException):
    http_status = HTTPStatus.BAD_REQUEST
    error_code = 'VALIDATION_ERROR'

    @classmethod
    def from_form(cls, form) -> 'RequestValidationException':
        details = {field: ' '.join(str(e) for e in errors)
                   for field, errors in form.errors.items()}
        return cls("Validation failed", details=details)

    @classmethod
    def missing_parameter(cls, name: str) -> 'RequestValidationException':
        return cls(f"Required request parameter '{name}' is not present",
                   details={name: 'This parameter is required.'})

    @classmethod
    def malformed_body(cls) -> 'RequestValidationException':
        return cls("Malformed JSON request body")


class UnauthorizedException(BaseAppException):
    http_status = HTTPStatus.UNAUTHORIZED
    error_code = 'UNAUTHORIZED'


class InvalidIdTokenException(BaseAppException):
    http_status = HTTPStatus.UNAUTHORIZED
    error_code = 'INVALID_ID_TOKEN'


class MethodNotAllowedException(BaseAppException):
    http_status = HTTPStatus.METHOD_NOT_ALLOWED
    error_code = 'METHOD_NOT_ALLOWED'

    @classmethod
    def for_method(cls, method: str) -> 'MethodNotAllowedException':
        return cls(f"Request method '{method}' is not supported")


# User

class UserNotFoundException(BaseAppException):
    http_status = HTTPStatus.NOT_FOUND
    error_code = 'USER_NOT_FOUND'

    @classmethod
    def by_id(cls, user_id: str) -> 'UserNotFoundException':
        return cls(f"User with id '{user_id}' not found")


class UserAlreadyExistsException(BaseAppException):
    http_status = HTTPStatus.CONFLICT
    error_code = 'USER_ALREADY_EXISTS'

    @classmethod
    def by_email(cls, email: str) -> 'UserAlreadyExistsException':
        return cls(f"User with email '{email}' already exists")


class CurrencyEditNotAllowedException(BaseAppException):
    http_status = HTTPStatus.BAD_REQUEST
    error_code = 'CURRENCY_EDIT_NOT_ALLOWED'

    def __init__(self, message: str = "Currency cannot be changed after expenses have been created"):
        super().__init__(message)


# Currency

class CurrencyNotFoundException(BaseAppException):
    http_status = HTTPStatus.NOT_FOUND
    error_code = 'CURRENCY_NOT_FOUND'

    @classmethod
    def by_code(cls, code: str) -> 'CurrencyNotFoundException':
        return cls(f"Currency with code '{code}' not found")
