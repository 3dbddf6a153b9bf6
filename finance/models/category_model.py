"""
Category models.

Location: finance/models/category_model.py

Schema in MongoDB:

default_categories
{
  _id: ObjectId,
  name: String,             // unique, alphanumeric + spaces, <= 100 chars
  is_active: Boolean,
  created_at: ISODate,
  updated_at: ISODate
}

user_categories
{
  _id: ObjectId,
  user_id: String,          // owning user
  name: String,             // unique within defaults + the user's categories
  is_active: Boolean,
  created_at: ISODate,
  updated_at: ISODate
}
"""
import re
from typing import Dict, Any, List


class CategoryModel:
    """
    Builds category documents and maps them to CategoryDTO payloads.
    """

    NAME_MAX_LENGTH = 100
    NAME_PATTERN = re.compile(r'^[a-zA-Z0-9\s]+$')

    DEFAULT_CATEGORIES = [
        'Salary',
        'Business income',
        'Subscriptions',
        'Groceries',
        'Food and Dining',
    ]

    @staticmethod
    def is_valid_name(name: str) -> bool:
        return (bool(name) and len(name) <= CategoryModel.NAME_MAX_LENGTH
                and CategoryModel.NAME_PATTERN.match(name) is not None)

    @staticmethod
    def create_default_category_data(name: str) -> Dict[str, Any]:
        return {
            'name': name.strip(),
            'is_active': True,
        }

    @staticmethod
    def create_user_category_data(user_id: str, name: str) -> Dict[str, Any]:
        """
        Args:
            user_id: Owning user id
            name: Category name

        Returns:
            Dict with the user category document
        """
        return {
            'user_id': user_id,
            'name': name.strip(),
            'is_active': True,
        }

    @staticmethod
    def get_default_categories() -> List[Dict[str, Any]]:
        return [CategoryModel.create_default_category_data(n) for n in CategoryModel.DEFAULT_CATEGORIES]

    @staticmethod
    def to_dto(category: Dict[str, Any], is_default: bool) -> Dict[str, Any]:
        return {
            'id': str(category['_id']),
            'name': category.get('name'),
            'isDefault': is_default,
            'isActive': category.get('is_active'),
        }
