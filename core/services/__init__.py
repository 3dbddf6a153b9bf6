"""
Services of the core app.

Location: core/services/

Business logic for authentication, user profiles and currencies.
"""
from .auth_service import AuthService
from .user_service import UserService
from .currency_service import CurrencyService

__all__ = ['AuthService', 'UserService', 'CurrencyService']
