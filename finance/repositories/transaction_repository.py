"""
Repository for financial transactions.

Location: finance/repositories/transaction_repository.py

This repository wraps every operation on the 'financial_transactions'
collection in MongoDB.

Collection schema:
{
  _id: ObjectId,
  user_id: String,
  transaction_type: "INCOME" | "EXPENSE",
  category: String,
  description: String,
  amount: Number (always positive, 2 decimal places),
  date: ISODate,
  created_at: ISODate,
  updated_at: ISODate
}
"""
from datetime import datetime
from typing import Optional, List, Dict, Any, Tuple

from pymongo import ASCENDING, DESCENDING

from core.repositories.base_repository import BaseRepository

NEWEST_FIRST = [('date', DESCENDING), ('_id', DESCENDING)]


class TransactionRepository(BaseRepository):
    """
    Repository for the financial transactions of each user.

    SECURITY: every query filters by user_id to keep users isolated.

    Example usage:
        repo = TransactionRepository()
        transaction = repo.create({
            'user_id': '6f1c...',
            'transaction_type': 'EXPENSE',
            'category': 'Groceries',
            'description': 'Weekly shopping',
            'amount': 45.50,
            'date': datetime(2024, 5, 3),
        })
    """

    def __init__(self):
        super().__init__('financial_transactions')

    def _ensure_indexes(self):
        """
        Indexes:
        - [user_id, date] (desc): listing and month windows
        - [user_id, transaction_type]: totals by type
        """
        self.collection.create_index([('user_id', ASCENDING), ('date', DESCENDING)])
        self.collection.create_index([('user_id', ASCENDING), ('transaction_type', ASCENDING)])

    @staticmethod
    def _user_query(user_id: str, **filters) -> Dict[str, Any]:
        if not user_id:
            raise ValueError("user_id is required to query transactions")
        return {'user_id': user_id, **filters}

    def find_by_id_and_user(self, transaction_id: str, user_id: str) -> Optional[Dict[str, Any]]:
        """
        Finds a transaction by id, only if it belongs to the user.

        Returns:
            The transaction, or None when missing, malformed or owned by someone else
        """
        key = self._key(transaction_id)
        if key is None:
            return None
        return self.collection.find_one(self._user_query(user_id, _id=key))

    def find_by_user(self, user_id: str, limit: int = 0) -> List[Dict[str, Any]]:
        """
        Transactions of a user, most recent date first.

        Args:
            user_id: User id (required)
            limit: Maximum number of results (0 = all)

        Raises:
            ValueError: If user_id is missing
        """
        cursor = self.collection.find(self._user_query(user_id)).sort(NEWEST_FIRST)
        if limit:
            cursor = cursor.limit(limit)
        return list(cursor)

    def find_page_by_user(self, user_id: str, page: int,
                          size: int) -> Tuple[List[Dict[str, Any]], int]:
        """
        One page of a user's transactions, most recent date first.

        Returns:
            Tuple (documents of the page, total number of documents)
        """
        query = self._user_query(user_id)
        total = self.collection.count_documents(query)
        cursor = self.collection.find(query).sort(NEWEST_FIRST).skip(page * size).limit(size)
        return list(cursor), total

    def find_by_user_and_date_between(self, user_id: str, start: datetime,
                                      end: datetime) -> List[Dict[str, Any]]:
        """
        Transactions whose date falls within [start, end], both inclusive.
        """
        query = self._user_query(user_id, date={'$gte': start, '$lte': end})
        return list(self.collection.find(query))

    def find_by_user_and_type(self, user_id: str, transaction_type: str,
                              start: Optional[datetime] = None,
                              end: Optional[datetime] = None) -> List[Dict[str, Any]]:
        """
        Transactions of one type, optionally restricted to a date window.
        """
        query = self._user_query(user_id, transaction_type=transaction_type)
        if start or end:
            date_query = {}
            if start:
                date_query['$gte'] = start
            if end:
                date_query['$lte'] = end
            query['date'] = date_query
        return list(self.collection.find(query))

    def delete_by_id_and_user(self, transaction_id: Any, user_id: str) -> bool:
        key = self._key(transaction_id)
        if key is None:
            return False
        result = self.collection.delete_one(self._user_query(user_id, _id=key))
        return result.deleted_count > 0
