"""
Currency model.

Location: core/models/currency_model.py

Schema in MongoDB (collection 'currencies'):
{
  _id: ObjectId,
  code: String,        // unique, ex: 'INR'
  symbol: String,
  name: String,
  is_active: Boolean,
  created_at: ISODate,
  updated_at: ISODate
}

Currencies are reference data: seeded once, never edited by users.
"""
from typing import Dict, Any, List, Tuple


class CurrencyModel:

    # (code, symbol, name, is_active)
    SEED: List[Tuple[str, str, str, bool]] = [
        ('INR', '₹', 'Indian Rupee', True),
        ('USD', '$', 'US Dollar', False),
        ('EUR', '€', 'Euro', False),
        ('GBP', '£', 'British Pound', False),
        ('JPY', '¥', 'Japanese Yen', False),
        ('AUD', 'A$', 'Australian Dollar', False),
        ('CAD', 'C$', 'Canadian Dollar', False),
        ('CNY', '¥', 'Chinese Yuan', False),
    ]

    @staticmethod
    def create_currency_data(code: str, symbol: str, name: str,
                             is_active: bool = True) -> Dict[str, Any]:
        return {
            'code': code.strip().upper(),
            'symbol': symbol,
            'name': name,
            'is_active': is_active,
        }

    @staticmethod
    def get_seed_currencies() -> List[Dict[str, Any]]:
        return [CurrencyModel.create_currency_data(*row) for row in CurrencyModel.SEED]

    @staticmethod
    def to_dto(currency: Dict[str, Any]) -> Dict[str, Any]:
        return {
            'id': str(currency['_id']),
            'code': currency.get('code'),
            'symbol': currency.get('symbol'),
            'name': currency.get('name'),
            'isActive': currency.get('is_active'),
            'createdAt': currency.get('created_at'),
            'updatedAt': currency.get('updated_at'),
        }
