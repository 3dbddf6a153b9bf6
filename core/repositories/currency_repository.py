"""
Repository for currencies.

Location: core/repositories/currency_repository.py
"""
from typing import Optional, Dict, Any, List

from pymongo import ASCENDING

from core.repositories.base_repository import BaseRepository


class CurrencyRepository(BaseRepository):

    def __init__(self):
        super().__init__('currencies')

    def _ensure_indexes(self):
        self.collection.create_index([('code', ASCENDING)], unique=True)

    def find_by_code(self, code: str) -> Optional[Dict[str, Any]]:
        if not code:
            return None
        return self.collection.find_one({'code': code.strip().upper()})

    def find_active(self) -> List[Dict[str, Any]]:
        return self.find_many({'is_active': True}, sort=('code', ASCENDING))
