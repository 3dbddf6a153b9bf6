"""
Service that builds the dashboard summary.

Location: finance/services/dashboard_service.py

The summary is composed from the TransactionService aggregates. It is all
or nothing: any failure is reported as a DashboardDataException and no
partial summary is returned.
"""
import logging
from datetime import date
from decimal import Decimal
from typing import Dict, Any, Optional

from core.utils.dates import previous_month, today_ist
from finance.exceptions import DashboardDataException
from finance.services.transaction_service import TransactionService

logger = logging.getLogger(__name__)


def savings_percentage(previous_month_expense: float,
                       current_month_expense: float) -> Optional[float]:
    """
    Month over month reduction of expenses, in percent.

    Returns:
        ((previous - current) / previous) * 100, or None when the previous
        month has no expense

    Example:
        savings_percentage(1000, 800) -> 20.0
    """
    if not previous_month_expense or previous_month_expense <= 0:
        return None
    previous = Decimal(str(previous_month_expense))
    current = Decimal(str(current_month_expense or 0))
    return float((previous - current) / previous * 100)


class DashboardService:
    """
    Example usage:
        service = DashboardService()
        summary = service.get_summary(user_id, page=0, size=10)
    """

    def __init__(self, transaction_service: Optional[TransactionService] = None):
        self.transaction_service = transaction_service or TransactionService()

    def get_summary(self, user_id: str, page: int, size: int,
                    today: Optional[date] = None) -> Dict[str, Any]:
        """
        Dashboard summary of a user.

        Args:
            user_id: User id
            page: Page of the current month transactions
            size: Page size
            today: Reference date (defaults to today in IST)

        Returns:
            Dict with totalIncome, totalExpense, savings, savingsPercentage,
            previousMonthExpense, monthWiseTransactions (paginated) and transactions (full list)

        Raises:
            DashboardDataException: If any step fails
        """
        try:
            today = today or today_ist()
            service = self.transaction_service

            total_income = service.get_total_income(user_id) or 0
            total_expense = service.get_total_expense(user_id) or 0
            savings = total_income - total_expense

            prev_year, prev_month = previous_month(today.year, today.month)
            previous_month_expense = service.get_total_expense_for_month(user_id, prev_year, prev_month) or 0

            percentage = None
            if previous_month_expense > 0:
                current_month_expense = service.get_total_expense_for_month(user_id, today.year, today.month)
                percentage = savings_percentage(previous_month_expense, current_month_expense)

            return {
                'totalIncome': total_income,
                'totalExpense': total_expense,
                'savings': savings,
                'previousMonthExpense': previous_month_expense,
                'savingsPercentage': percentage,
                'monthWiseTransactions': service.get_current_month_transactions(user_id, page, size, today=today),
                'transactions': service.list_all_transactions(user_id),
            }
        except Exception as e:
            logger.exception("[DASHBOARD] Failed to build summary for user %s", user_id)
            raise DashboardDataException(f"Failed to retrieve dashboard summary: {e}") from e
