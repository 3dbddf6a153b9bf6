import unittest
from unittest import mock

from django.test import SimpleTestCase, override_settings

from core.exceptions import InvalidIdTokenException, UnauthorizedException
from core.services import identity_service
from core.services.identity_service import (
    FirebaseIdentityVerifier,
    FirebaseUidResolver,
    GoogleTokenVerifier,
    get_identity_verifier,
)
from tests.doubles import IDENTITY_DOUBLES, StaticIdentityVerifier

GOOGLE_PAYLOAD = {
    'sub': '1098',
    'aud': 'web-client.apps.googleusercontent.com',
    'email': 'ana@example.com',
    'email_verified': True,
    'name': 'Ana',
}


class GoogleTokenVerifierTests(unittest.TestCase):
    def setUp(self):
        self.verifier = GoogleTokenVerifier(['web-client.apps.googleusercontent.com'])

    @mock.patch.object(identity_service.google_id_token, 'verify_oauth2_token', return_value=GOOGLE_PAYLOAD)
    def test_accepts_allowed_audience(self, verify) -> None:
        identity = self.verifier.verify('token')

        self.assertEqual(identity.subject_id, '1098')
        self.assertEqual(identity.email, 'ana@example.com')
        self.assertTrue(identity.email_verified)
        verify.assert_called_once_with('token', self.verifier.request)

    @mock.patch.object(identity_service.google_id_token, 'verify_oauth2_token',
                       return_value=dict(GOOGLE_PAYLOAD, aud='someone-else'))
    def test_rejects_foreign_audience(self, _) -> None:
        with self.assertLogs('core.services.identity_service', level='WARNING'):
            with self.assertRaises(InvalidIdTokenException):
                self.verifier.verify('token')

    @mock.patch.object(identity_service.google_id_token, 'verify_oauth2_token',
                       side_effect=ValueError("Token expired"))
    def test_rejects_invalid_token(self, _) -> None:
        with self.assertLogs('core.services.identity_service', level='WARNING'):
            with self.assertRaises(InvalidIdTokenException) as ctx:
                self.verifier.verify('token')

        self.assertEqual(ctx.exception.error_code, 'INVALID_ID_TOKEN')


@mock.patch.object(identity_service, 'get_firebase_app', return_value=mock.sentinel.app)
class FirebaseIdentityVerifierTests(unittest.TestCase):
    def test_maps_decoded_token(self, _) -> None:
        decoded = {'uid': 'uid-1', 'email': 'ana@example.com', 'email_verified': True, 'name': 'Ana'}
        with mock.patch.object(identity_service.firebase_auth, 'verify_id_token', return_value=decoded) as verify:
            identity = FirebaseIdentityVerifier().verify('token')

        self.assertEqual(identity.subject_id, 'uid-1')
        verify.assert_called_once_with('token', app=mock.sentinel.app)

    def test_invalid_token_is_unauthorized(self, _) -> None:
        with mock.patch.object(identity_service.firebase_auth, 'verify_id_token',
                               side_effect=ValueError("malformed")):
            with self.assertLogs('core.services.identity_service', level='WARNING'):
                with self.assertRaises(UnauthorizedException):
                    FirebaseIdentityVerifier().verify('token')


@mock.patch.object(identity_service, 'get_firebase_app', return_value=mock.sentinel.app)
class FirebaseUidResolverTests(unittest.TestCase):
    def test_blank_email_resolves_to_none(self, get_app) -> None:
        self.assertIsNone(FirebaseUidResolver().resolve_uid('  '))
        get_app.assert_not_called()

    def test_returns_uid_of_email(self, _) -> None:
        record = mock.Mock(uid='uid-7')
        with mock.patch.object(identity_service.firebase_auth, 'get_user_by_email', return_value=record):
            self.assertEqual(FirebaseUidResolver().resolve_uid('ana@example.com'), 'uid-7')


@override_settings(**IDENTITY_DOUBLES)
class VerifierFactoryTests(SimpleTestCase):
    def test_verifier_class_comes_from_settings(self) -> None:
        self.assertIsInstance(get_identity_verifier(), StaticIdentityVerifier)
