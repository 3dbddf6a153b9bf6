"""
Service for financial transactions.

Location: finance/services/transaction_service.py

This service holds the business logic for transactions: ownership-scoped
CRUD and the aggregates used by the dashboard. It uses the
TransactionRepository for data access and the UserService to resolve
owners.
"""
import logging
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import List, Dict, Any, Optional

from core.pagination import paginate, page_response
from core.services.user_service import UserService
from core.utils.dates import month_window, today_ist
from finance.exceptions import TransactionNotFoundException, TransactionValidationException
from finance.models.transaction_model import TransactionModel
from finance.repositories.transaction_repository import TransactionRepository

logger = logging.getLogger(__name__)


def _sum_amounts(transactions: List[Dict[str, Any]]) -> float:
    return round(sum(t.get('amount') or 0 for t in transactions), 2)


class TransactionService:
    """
    Example usage:
        service = TransactionService()
        transaction = service.create_transaction({
            'amount': '100.50',
            'category': 'Groceries',
            'date': '2024-05-03',
            'transactionType': 'EXPENSE',
        }, user_id)
    """

    def __init__(self, user_service: Optional[UserService] = None):
        self.transaction_repo = TransactionRepository()
        self.user_service = user_service or UserService()

    @staticmethod
    def _validated_fields(data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Business validation of the mutable fields.

        Raises:
            TransactionValidationException: Non-positive amount, unknown type,
                missing category or date
        """
        transaction_type = (data.get('transactionType') or '').upper()
        if transaction_type not in TransactionModel.TYPES:
            raise TransactionValidationException(
                f"Transaction type must be one of {', '.join(TransactionModel.TYPES)}")

        try:
            amount = Decimal(str(data.get('amount')))
            positive = amount.is_finite() and amount > 0
        except InvalidOperation:
            positive = False
        if not positive:
            raise TransactionValidationException("Amount must be greater than zero")

        category = data.get('category')
        if not category or not category.strip():
            raise TransactionValidationException("Category is required")

        if data.get('date') is None:
            raise TransactionValidationException("Date is required")

        try:
            return TransactionModel.build_fields(
                amount=amount,
                category=category,
                date=data['date'],
                transaction_type=transaction_type,
                description=data.get('description'),
            )
        except (ValueError, OverflowError) as e:
            raise TransactionValidationException(f"Invalid date: {data['date']}") from e

    def _get_owned(self, transaction_id: str, user_id: str) -> Dict[str, Any]:
        transaction = self.transaction_repo.find_by_id_and_user(transaction_id, user_id)
        if not transaction:
            raise TransactionNotFoundException.by_id_and_user_id(transaction_id, user_id)
        return transaction

    def create_transaction(self, data: Dict[str, Any], user_id: str) -> Dict[str, Any]:
        """
        Creates a transaction owned by the user.

        Args:
            data: Dict with amount, description, category, date, transactionType
            user_id: Owner id

        Returns:
            TransactionDTO

        Raises:
            UserNotFoundException: If the user does not exist
            TransactionValidationException: If the data breaks a business rule
        """
        user = self.user_service.get_user_by_id(user_id)
        fields = self._validated_fields(data)

        transaction = self.transaction_repo.create({'user_id': str(user['_id']), **fields})
        logger.info("[TRANSACTION] Created transaction %s for user %s", transaction['_id'], user_id)
        return TransactionModel.to_dto(transaction, user)

    def get_transaction(self, transaction_id: str, user_id: str) -> Dict[str, Any]:
        """
        Raises:
            UserNotFoundException: If the user does not exist
            TransactionNotFoundException: Missing, malformed id or owned by another user
        """
        user = self.user_service.get_user_by_id(user_id)
        transaction = self._get_owned(transaction_id, user_id)
        return TransactionModel.to_dto(transaction, user)

    def update_transaction(self, transaction_id: str, data: Dict[str, Any],
                           user_id: str) -> Dict[str, Any]:
        """
        Replaces every mutable field of the transaction.

        There is no partial update: amount, category, date and
        transactionType are required, description is overwritten even when
        missing.
        """
        user = self.user_service.get_user_by_id(user_id)
        transaction = self._get_owned(transaction_id, user_id)
        fields = self._validated_fields(data)

        self.transaction_repo.update(transaction['_id'], fields)
        logger.info("[TRANSACTION] Updated transaction %s for user %s", transaction_id, user_id)
        return TransactionModel.to_dto(
            self.transaction_repo.find_by_id(transaction['_id']),
            user,
        )

    def delete_transaction(self, transaction_id: str, user_id: str) -> Dict[str, Any]:
        """
        Deletes the transaction permanently.

        Returns:
            TransactionDTO with the last state of the deleted transaction
        """
        user = self.user_service.get_user_by_id(user_id)
        transaction = self._get_owned(transaction_id, user_id)
        deleted = TransactionModel.to_dto(transaction, user)

        self.transaction_repo.delete_by_id_and_user(transaction['_id'], user_id)
        logger.info("[TRANSACTION] Deleted transaction %s for user %s", transaction_id, user_id)
        return deleted

    def list_transactions(self, user_id: str, page: int, size: int) -> Dict[str, Any]:
        """
        One page of the user's transactions, most recent date first.
        """
        if page < 0:
            raise ValueError("page must not be negative")
        if size < 1:
            raise ValueError("size must be at least 1")

        user = self.user_service.get_user_by_id(user_id)
        documents, total = self.transaction_repo.find_page_by_user(user_id, page, size)
        content = [TransactionModel.to_dto(t, user) for t in documents]
        return page_response(content, page, size, total)

    def list_all_transactions(self, user_id: str) -> List[Dict[str, Any]]:
        user = self.user_service.get_user_by_id(user_id)
        return [TransactionModel.to_dto(t, user) for t in self.transaction_repo.find_by_user(user_id)]

    def get_recent_transactions(self, user_id: str, limit: int = 5) -> List[Dict[str, Any]]:
        user = self.user_service.get_user_by_id(user_id)
        return [TransactionModel.to_dto(t, user)
                for t in self.transaction_repo.find_by_user(user_id, limit=limit)]

    # Aggregates

    def get_total_income(self, user_id: str) -> float:
        self.user_service.get_user_by_id(user_id)
        return _sum_amounts(self.transaction_repo.find_by_user_and_type(user_id, TransactionModel.INCOME))

    def get_total_expense(self, user_id: str) -> float:
        self.user_service.get_user_by_id(user_id)
        return _sum_amounts(self.transaction_repo.find_by_user_and_type(user_id, TransactionModel.EXPENSE))

    def get_total_amount(self, user_id: str) -> float:
        """Sum of every transaction of the user, regardless of type."""
        self.user_service.get_user_by_id(user_id)
        return _sum_amounts(self.transaction_repo.find_by_user(user_id))

    def get_total_expense_for_month(self, user_id: str, year: int, month: int) -> float:
        """
        Sum of EXPENSE amounts dated inside the month.

        The window is [day 1 00:00:00, last day 23:59:59], both inclusive.
        """
        self.user_service.get_user_by_id(user_id)
        start, end = month_window(year, month)
        return _sum_amounts(self.transaction_repo.find_by_user_and_type(
            user_id, TransactionModel.EXPENSE, start=start, end=end))

    def get_current_month_transactions(self, user_id: str, page: int, size: int,
                                       today: Optional[date] = None) -> Dict[str, Any]:
        """
        Transactions of the current month, most recent date first, paginated.

        Args:
            user_id: User id
            page: Zero-based page number
            size: Page size
            today: Reference date (defaults to today in IST)

        Returns:
            Paginated response; an out-of-range page has empty content
        """
        user = self.user_service.get_user_by_id(user_id)
        today = today or today_ist()
        start, end = month_window(today.year, today.month)

        transactions = self.transaction_repo.find_by_user_and_date_between(user_id, start, end)
        transactions.sort(key=lambda t: t['date'], reverse=True)

        return paginate([TransactionModel.to_dto(t, user) for t in transactions], page, size)
