"""
Financial transaction model.

Location: finance/models/transaction_model.py

Schema in MongoDB (collection 'financial_transactions'): see
finance/repositories/transaction_repository.py
"""
from decimal import Decimal
from typing import Optional, Dict, Any

from core.models.user_model import UserModel
from core.utils.dates import to_datetime


class TransactionModel:
    """
    Builds transaction documents and maps them to TransactionDTO payloads.
    """

    INCOME = 'INCOME'
    EXPENSE = 'EXPENSE'
    TYPES = (INCOME, EXPENSE)

    DESCRIPTION_MAX_LENGTH = 200
    CATEGORY_MAX_LENGTH = 100

    @staticmethod
    def normalize_amount(amount: Any) -> float:
        """Amounts are stored with 2 decimal places."""
        return float(round(Decimal(str(amount)), 2))

    @staticmethod
    def build_fields(amount: Any, category: str, date: Any, transaction_type: str,
                     description: Optional[str] = None) -> Dict[str, Any]:
        """
        Mutable fields of a transaction, as stored.

        Used both on create and on full replacement by update.
        """
        return {
            'amount': TransactionModel.normalize_amount(amount),
            'description': description.strip() if description else description,
            'category': category.strip(),
            'date': to_datetime(date),
            'transaction_type': transaction_type,
        }

    @staticmethod
    def create_transaction_data(user_id: str, amount: Any, category: str, date: Any,
                                transaction_type: str,
                                description: Optional[str] = None) -> Dict[str, Any]:
        """
        Args:
            user_id: Owning user id
            amount: Positive amount
            category: Category name (free text)
            date: Transaction date (datetime, date or ISO string)
            transaction_type: 'INCOME' or 'EXPENSE'
            description: Optional description

        Returns:
            Dict with the transaction document
        """
        return {
            'user_id': user_id,
            **TransactionModel.build_fields(amount, category, date, transaction_type, description),
        }

    @staticmethod
    def to_dto(transaction: Dict[str, Any], user: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        return {
            'id': str(transaction['_id']),
            'user': UserModel.to_user_dto(user),
            'amount': transaction.get('amount'),
            'description': transaction.get('description'),
            'category': transaction.get('category'),
            'date': transaction.get('date'),
            'transactionType': transaction.get('transaction_type'),
            'createdAt': transaction.get('created_at'),
            'updatedAt': transaction.get('updated_at'),
        }
