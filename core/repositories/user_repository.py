"""
Repository for user operations in MongoDB.

Location: core/repositories/user_repository.py

Encapsulates every operation on the 'users' collection.
"""
from typing import Optional, Dict, Any

from pymongo import ASCENDING

from core.repositories.base_repository import BaseRepository
from core.utils.dates import now_ist


class UserRepository(BaseRepository):
    """
    Users are keyed by an opaque string id, not an ObjectId.

    Example usage:
        repo = UserRepository()
        user = repo.find_by_phone_number('9876543210')
    """

    object_id_keys = False

    def __init__(self):
        super().__init__('users')

    def _ensure_indexes(self):
        """
        Unique indexes on email and phone number.

        Sparse, because either field may be absent on a given user.
        """
        self.collection.create_index([('email', ASCENDING)], unique=True, sparse=True)
        self.collection.create_index([('phone_number', ASCENDING)], unique=True, sparse=True)

    def find_by_phone_number(self, phone_number: str) -> Optional[Dict[str, Any]]:
        if not phone_number:
            return None
        return self.collection.find_one({'phone_number': phone_number.strip()})

    def find_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        """
        Finds a user by email (stored lower-cased).

        Args:
            email: User email

        Returns:
            User document or None
        """
        if not email:
            return None
        return self.collection.find_one({'email': email.strip().lower()})

    def update_profile(self, user_id: str, name: Optional[str], email: Optional[str],
                       address: Optional[str]) -> bool:
        """
        Overwrites the editable profile fields.

        A blank email removes the field so the unique index keeps ignoring it.
        """
        fields = {'name': name, 'address': address, 'updated_at': now_ist()}
        update = {'$set': fields}
        if email:
            fields['email'] = email.strip().lower()
        else:
            update['$unset'] = {'email': ''}
        result = self.collection.update_one({'_id': user_id}, update)
        return result.matched_count > 0
