"""
Services of the finance app.

Location: finance/services/

Services hold the business rules. They orchestrate the repositories and
never touch MongoDB directly.
"""
from .category_service import CategoryService
from .transaction_service import TransactionService
from .dashboard_service import DashboardService

__all__ = ['CategoryService', 'TransactionService', 'DashboardService']
