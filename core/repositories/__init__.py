"""
Repositories of the core app.

Location: core/repositories/

Repositories are the data access layer. Each one wraps a MongoDB
collection and exposes the queries the services need.
"""
from .user_repository import UserRepository
from .currency_repository import CurrencyRepository

__all__ = ['UserRepository', 'CurrencyRepository']
