"""
Service for currencies.

Location: core/services/currency_service.py
"""
from typing import List, Dict, Any

from core.exceptions import CurrencyNotFoundException
from core.models.currency_model import CurrencyModel
from core.repositories.currency_repository import CurrencyRepository


class CurrencyService:

    def __init__(self):
        self.currency_repo = CurrencyRepository()

    def list_active_currencies(self) -> List[Dict[str, Any]]:
        return [CurrencyModel.to_dto(c) for c in self.currency_repo.find_active()]

    def get_by_code(self, code: str) -> Dict[str, Any]:
        """
        Raises:
            CurrencyNotFoundException: If no currency has this code
        """
        currency = self.currency_repo.find_by_code(code)
        if not currency:
            raise CurrencyNotFoundException.by_code(code)
        return CurrencyModel.to_dto(currency)
