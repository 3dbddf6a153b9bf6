"""
Service for user profile operations.

Location: core/services/user_service.py
"""
import logging
from typing import Dict, Any

from pymongo.errors import DuplicateKeyError

from core.exceptions import (
    CurrencyEditNotAllowedException,
    UserAlreadyExistsException,
    UserNotFoundException,
)
from core.models.user_model import UserModel
from core.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class UserService:

    def __init__(self):
        self.user_repo = UserRepository()

    def get_user_by_id(self, user_id: str) -> Dict[str, Any]:
        """
        Returns the user document.

        Raises:
            UserNotFoundException: If no user has this id
        """
        user = self.user_repo.find_by_id(user_id)
        if not user:
            raise UserNotFoundException.by_id(user_id)
        return user

    def get_profile(self, user_id: str) -> Dict[str, Any]:
        return UserModel.to_profile_dto(self.get_user_by_id(user_id))

    def update_profile(self, user_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Updates name, email and address.

        Any request carrying a currency is rejected, whether or not the
        user already has transactions.

        Args:
            user_id: User id
            data: Dict with name, email, address and optionally currency

        Raises:
            UserNotFoundException: If the user does not exist
            CurrencyEditNotAllowedException: If data carries a currency
            UserAlreadyExistsException: If the email belongs to another user
        """
        self.get_user_by_id(user_id)

        if data.get('currency') is not None:
            raise CurrencyEditNotAllowedException()

        try:
            self.user_repo.update_profile(
                user_id,
                name=data.get('name'),
                email=data.get('email'),
                address=data.get('address'),
            )
        except DuplicateKeyError as e:
            raise UserAlreadyExistsException.by_email(data.get('email')) from e

        logger.info("[USER] Profile updated for user %s", user_id)
        return UserModel.to_profile_dto(self.user_repo.find_by_id(user_id))
