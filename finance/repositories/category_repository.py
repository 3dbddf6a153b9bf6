"""
Repositories for default and user categories in MongoDB.

Location: finance/repositories/category_repository.py
"""
import re
from typing import Optional, List, Dict, Any

from pymongo import ASCENDING

from core.repositories.base_repository import BaseRepository


def _name_contains(search_term: str) -> Dict[str, Any]:
    """Case-insensitive substring match on the name field."""
    return {'$regex': re.escape(search_term), '$options': 'i'}


class DefaultCategoryRepository(BaseRepository):
    """
    Global categories shared by every user. Seeded once, read-only for users.
    """

    def __init__(self):
        super().__init__('default_categories')

    def _ensure_indexes(self):
        self.collection.create_index([('name', ASCENDING)], unique=True)

    def find_active(self, search_term: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        Active default categories, optionally filtered by name.

        Args:
            search_term: Substring to match case-insensitively (None for all)
        """
        query = {'is_active': True}
        if search_term:
            query['name'] = _name_contains(search_term)
        return self.find_many(query)

    def find_all(self) -> List[Dict[str, Any]]:
        return self.find_many()


class UserCategoryRepository(BaseRepository):
    """
    Categories created by a user.

    SECURITY: every lookup is scoped by user_id.
    """

    def __init__(self):
        super().__init__('user_categories')

    def _ensure_indexes(self):
        self.collection.create_index('user_id')
        self.collection.create_index([('user_id', ASCENDING), ('name', ASCENDING)])

    def find_active_by_user(self, user_id: str,
                            search_term: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        Active categories of a user, optionally filtered by name.

        Raises:
            ValueError: If user_id is missing
        """
        if not user_id:
            raise ValueError("user_id is required")

        query = {'user_id': user_id, 'is_active': True}
        if search_term:
            query['name'] = _name_contains(search_term)
        return self.find_many(query)

    def find_by_id_and_user(self, category_id: str, user_id: str) -> Optional[Dict[str, Any]]:
        """
        Finds a category by id, only if it belongs to the user.

        A malformed id, a default category id or another user's category
        all come back as None.
        """
        key = self._key(category_id)
        if key is None or not user_id:
            return None
        return self.collection.find_one({'_id': key, 'user_id': user_id})

    def rename(self, category_id: Any, name: str) -> bool:
        return self.update(category_id, {'name': name})
