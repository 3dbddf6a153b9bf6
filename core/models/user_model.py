"""
User model.

Location: core/models/user_model.py

Schema in MongoDB (collection 'users'):
{
  _id: String,               // uuid4 for phone logins, Firebase UID for SSO
  phone_number: String,      // 10 digits, optional
  email: String,             // optional, unique when present
  name: String,
  currency: String,          // default 'INR'
  address: String,
  is_active: Boolean,
  email_verified: Boolean,
  created_at: ISODate,
  updated_at: ISODate
}
"""
import uuid
from typing import Optional, Dict, Any

from core.utils.dates import now_ist


class UserModel:
    """
    Builds user documents and maps them to the API payloads.
    """

    DEFAULT_CURRENCY = 'INR'

    @staticmethod
    def create_user_data(user_id: Optional[str] = None,
                         phone_number: Optional[str] = None,
                         email: Optional[str] = None,
                         name: Optional[str] = None,
                         email_verified: bool = False,
                         **kwargs) -> Dict[str, Any]:
        """
        Builds a new user document.

        Args:
            user_id: Document id (a uuid4 is generated when missing)
            phone_number: Phone number (optional)
            email: Email (optional)
            name: Display name (optional)
            email_verified: Whether the email was verified by the identity provider
            **kwargs: Extra fields

        Returns:
            Dict with the user document
        """
        now = now_ist()
        user_data = {
            '_id': user_id or str(uuid.uuid4()),
            'name': name,
            'currency': UserModel.DEFAULT_CURRENCY,
            'address': None,
            'is_active': True,
            'email_verified': email_verified,
            'created_at': now,
            'updated_at': now,
            **kwargs
        }
        # Absent rather than null so the sparse unique indexes ignore them
        if phone_number:
            user_data['phone_number'] = phone_number
        if email:
            user_data['email'] = email.strip().lower()
        return user_data

    @staticmethod
    def display_name_from_email(email: Optional[str]) -> Optional[str]:
        """Local part of an email address ('ana@x.com' -> 'ana')."""
        if not email or '@' not in email:
            return email
        return email.split('@', 1)[0]

    @staticmethod
    def to_user_dto(user: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Short representation embedded in transactions."""
        if user is None:
            return None
        return {
            'id': str(user['_id']),
            'phoneNumber': user.get('phone_number'),
            'isActive': user.get('is_active'),
            'createdAt': user.get('created_at'),
            'updatedAt': user.get('updated_at'),
        }

    @staticmethod
    def to_login_response(user: Dict[str, Any]) -> Dict[str, Any]:
        return {
            'userId': str(user['_id']),
            'phoneNumber': user.get('phone_number'),
            'name': user.get('name'),
            'email': user.get('email'),
            'currency': user.get('currency'),
            'address': user.get('address'),
            'createdAt': user.get('created_at'),
            'updatedAt': user.get('updated_at'),
        }

    @staticmethod
    def to_profile_dto(user: Dict[str, Any]) -> Dict[str, Any]:
        """
        Profile payload.

        canEditCurrency is always False: currency changes are rejected.
        """
        return {
            'id': str(user['_id']),
            'phoneNumber': user.get('phone_number'),
            'name': user.get('name'),
            'email': user.get('email'),
            'currency': user.get('currency'),
            'address': user.get('address'),
            'canEditCurrency': False,
            'createdAt': user.get('created_at'),
            'updatedAt': user.get('updated_at'),
        }
