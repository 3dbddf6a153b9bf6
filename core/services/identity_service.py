"""
Identity verification collaborators.

Location: core/services/identity_service.py

Token cryptography is delegated to the official SDKs. The rest of the
application only sees VerifiedIdentity, so tests swap the classes below
through the IDENTITY_VERIFIER, GOOGLE_TOKEN_VERIFIER and
FIREBASE_UID_RESOLVER settings.
"""
import logging
from typing import NamedTuple, Optional, List

from django.conf import settings
from django.utils.module_loading import import_string
from firebase_admin import auth as firebase_auth
from google.auth import exceptions as google_exceptions
from google.auth.transport import requests as google_requests
from google.oauth2 import id_token as google_id_token

from core.exceptions import InvalidIdTokenException, UnauthorizedException
from core.firebase import get_firebase_app

logger = logging.getLogger(__name__)


class VerifiedIdentity(NamedTuple):
    subject_id: str
    email: Optional[str]
    email_verified: bool
    name: Optional[str]


class FirebaseIdentityVerifier:
    """Verifies Firebase ID tokens sent as bearer tokens."""

    def verify(self, token: str) -> VerifiedIdentity:
        """
        Raises:
            UnauthorizedException: If the token is invalid, expired or revoked
        """
        try:
            decoded = firebase_auth.verify_id_token(token, app=get_firebase_app())
        except (ValueError, firebase_auth.InvalidIdTokenError,
                firebase_auth.ExpiredIdTokenError, firebase_auth.RevokedIdTokenError,
                firebase_auth.CertificateFetchError) as e:
            logger.warning("[AUTH] Firebase ID token rejected: %s", e)
            raise UnauthorizedException("Invalid or expired authentication token") from e

        return VerifiedIdentity(
            subject_id=decoded['uid'],
            email=decoded.get('email'),
            email_verified=bool(decoded.get('email_verified')),
            name=decoded.get('name'),
        )


class GoogleTokenVerifier:
    """
    Verifies Google ID tokens issued to one of the configured client ids.
    """

    def __init__(self, allowed_client_ids: Optional[List[str]] = None):
        self.allowed_client_ids = allowed_client_ids or settings.GOOGLE_CLIENT_IDS
        self.request = google_requests.Request()

    def verify(self, token: str) -> VerifiedIdentity:
        """
        Raises:
            InvalidIdTokenException: If the token fails verification or its
                audience is not one of the allowed client ids
        """
        try:
            payload = google_id_token.verify_oauth2_token(token, self.request)
        except (ValueError, google_exceptions.GoogleAuthError) as e:
            logger.warning("[AUTH] Google ID token rejected: %s", e)
            raise InvalidIdTokenException("Failed to verify Google ID token") from e

        if payload.get('aud') not in self.allowed_client_ids:
            logger.warning("[AUTH] Google ID token audience %s not allowed", payload.get('aud'))
            raise InvalidIdTokenException("Invalid Google ID token")

        return VerifiedIdentity(
            subject_id=payload['sub'],
            email=payload.get('email'),
            email_verified=bool(payload.get('email_verified')),
            name=payload.get('name'),
        )


class FirebaseUidResolver:
    """Resolves the Firebase UID registered for an email address."""

    def resolve_uid(self, email: Optional[str]) -> Optional[str]:
        """
        Returns:
            The Firebase UID, or None when email is blank

        Raises:
            RuntimeError: If the Firebase lookup fails
        """
        if not email or not email.strip():
            return None
        try:
            return firebase_auth.get_user_by_email(email, app=get_firebase_app()).uid
        except firebase_auth.UserNotFoundError as e:
            raise RuntimeError(f"Failed to look up Firebase user by email: {email}") from e


def get_identity_verifier():
    return import_string(settings.IDENTITY_VERIFIER)()


def get_google_token_verifier():
    return import_string(settings.GOOGLE_TOKEN_VERIFIER)()


def get_firebase_uid_resolver():
    return import_string(settings.FIREBASE_UID_RESOLVER)()
