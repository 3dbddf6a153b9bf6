"""
Repositories of the finance app.

Location: finance/repositories/

Each repository represents one collection of the finance domain.
"""
from .transaction_repository import TransactionRepository
from .category_repository import DefaultCategoryRepository, UserCategoryRepository

__all__ = ['TransactionRepository', 'DefaultCategoryRepository', 'UserCategoryRepository']
