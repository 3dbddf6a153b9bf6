"""
Service for authentication logic.

Location: core/services/auth_service.py

Login-or-create for phone numbers and for identities coming from Google
SSO. It uses the UserRepository for data access and the identity
collaborators for token verification.
"""
import logging
from typing import Optional, Dict, Any

from core.models.user_model import UserModel
from core.repositories.user_repository import UserRepository
from core.services.identity_service import get_google_token_verifier, get_firebase_uid_resolver

logger = logging.getLogger(__name__)


class AuthService:
    """
    Example usage:
        service = AuthService()
        login = service.login('9876543210')
    """

    def __init__(self, google_token_verifier=None, firebase_uid_resolver=None):
        self.user_repo = UserRepository()
        self._google_token_verifier = google_token_verifier
        self._firebase_uid_resolver = firebase_uid_resolver

    @property
    def google_token_verifier(self):
        if self._google_token_verifier is None:
            self._google_token_verifier = get_google_token_verifier()
        return self._google_token_verifier

    @property
    def firebase_uid_resolver(self):
        if self._firebase_uid_resolver is None:
            self._firebase_uid_resolver = get_firebase_uid_resolver()
        return self._firebase_uid_resolver

    def login(self, phone_number: str) -> Dict[str, Any]:
        """
        Logs in by phone number, creating the user on first login.

        Args:
            phone_number: 10 digit phone number

        Returns:
            LoginResponse payload (userId, phoneNumber, name, email, currency,
            address, createdAt, updatedAt)
        """
        phone_number = phone_number.strip()
        user = self.user_repo.find_by_phone_number(phone_number)

        if not user:
            user = self.user_repo.create(UserModel.create_user_data(phone_number=phone_number))
            logger.info("[AUTH] Created user %s for phone login", user['_id'])

        return UserModel.to_login_response(user)

    def create_user_if_not_exists(self, external_uid: str, email: Optional[str],
                                  name: Optional[str]) -> str:
        """
        Finds or creates the user behind an SSO identity.

        Lookup order: by external uid, then by email. A new user is keyed
        by the external uid and marked active with a verified email.

        Args:
            external_uid: Identity provider uid (Firebase UID)
            email: Verified email
            name: Display name (defaults to the email local part)

        Returns:
            The user id
        """
        if external_uid:
            user = self.user_repo.find_by_id(external_uid)
            if user:
                return str(user['_id'])

        user = self.user_repo.find_by_email(email)
        if user:
            return str(user['_id'])

        if not name or not name.strip():
            name = UserModel.display_name_from_email(email)

        user = self.user_repo.create(UserModel.create_user_data(
            user_id=external_uid,
            email=email,
            name=name,
            email_verified=True,
        ))
        logger.info("[AUTH] Created user %s from SSO identity", user['_id'])
        return str(user['_id'])

    def login_with_google(self, id_token: str) -> Dict[str, Any]:
        """
        Google SSO: verify the ID token, resolve the Firebase UID for the
        verified email and make sure a user exists for it.

        Returns:
            Dict with userId and email

        Raises:
            InvalidIdTokenException: If the Google token is rejected
        """
        verified = self.google_token_verifier.verify(id_token)
        firebase_uid = self.firebase_uid_resolver.resolve_uid(verified.email)
        user_id = self.create_user_if_not_exists(firebase_uid, verified.email, verified.name)
        return {'userId': user_id, 'email': verified.email}
