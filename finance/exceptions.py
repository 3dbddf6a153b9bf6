"""
Exceptions of the finance app.

Location: finance/exceptions.py
"""
from http import HTTPStatus

from core.exceptions import BaseAppException


# Category

class CategoryNotFoundException(BaseAppException):
    http_status = HTTPStatus.NOT_FOUND
    error_code = 'CATEGORY_NOT_FOUND'

    @classmethod
    def by_id(cls, category_id: str) -> 'CategoryNotFoundException':
        return cls(f"Category with id '{category_id}' not found")


class CategoryValidationException(BaseAppException):
    http_status = HTTPStatus.BAD_REQUEST
    error_code = 'CATEGORY_VALIDATION_ERROR'

    @classmethod
    def duplicate_name(cls, name: str) -> 'CategoryValidationException':
        return cls(f"Category with name '{name}' already exists")

    @classmethod
    def invalid_characters(cls) -> 'CategoryValidationException':
        return cls("Category name must contain only alphanumeric characters and spaces")


# Transaction

class TransactionNotFoundException(BaseAppException):
    http_status = HTTPStatus.NOT_FOUND
    error_code = 'TRANSACTION_NOT_FOUND'

    @classmethod
    def by_id_and_user_id(cls, transaction_id: str, user_id: str) -> 'TransactionNotFoundException':
        return cls(f"Transaction with id '{transaction_id}' not found for user ID '{user_id}'")


class TransactionValidationException(BaseAppException):
    http_status = HTTPStatus.BAD_REQUEST
    error_code = 'TRANSACTION_VALIDATION_ERROR'


# Dashboard

class DashboardDataException(BaseAppException):
    http_status = HTTPStatus.INTERNAL_SERVER_ERROR
    error_code = 'DASHBOARD_DATA_ERROR'
