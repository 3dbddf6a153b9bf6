"""
Firebase Admin SDK initialisation.

Location: core/firebase.py

Credentials are resolved in this order:
1. FIREBASE_CREDENTIALS_BASE64 (Base64 of the service account JSON)
2. FIREBASE_CREDENTIALS_PATH (file path)
3. GOOGLE_APPLICATION_CREDENTIALS (file path)
"""
import base64
import json
import logging
import os

import firebase_admin
from django.conf import settings
from firebase_admin import credentials

logger = logging.getLogger(__name__)


def _resolve_credentials():
    if settings.FIREBASE_CREDENTIALS_BASE64:
        logger.info("[FIREBASE] Using Base64 credentials from FIREBASE_CREDENTIALS_BASE64")
        decoded = base64.b64decode(settings.FIREBASE_CREDENTIALS_BASE64)
        return credentials.Certificate(json.loads(decoded))

    if settings.FIREBASE_CREDENTIALS_PATH:
        logger.info("[FIREBASE] Using credentials file %s", settings.FIREBASE_CREDENTIALS_PATH)
        return credentials.Certificate(settings.FIREBASE_CREDENTIALS_PATH)

    gac_path = os.getenv('GOOGLE_APPLICATION_CREDENTIALS')
    if gac_path:
        logger.info("[FIREBASE] Using credentials file from GOOGLE_APPLICATION_CREDENTIALS: %s", gac_path)
        return credentials.Certificate(gac_path)

    raise RuntimeError(
        "Firebase credentials not provided. Configure one of: "
        "FIREBASE_CREDENTIALS_BASE64, FIREBASE_CREDENTIALS_PATH or GOOGLE_APPLICATION_CREDENTIALS."
    )


def get_firebase_app():
    """
    Returns the default Firebase app, initialising it on first use.

    Raises:
        RuntimeError: If no credentials are configured
    """
    try:
        return firebase_admin.get_app()
    except ValueError:
        pass

    app = firebase_admin.initialize_app(_resolve_credentials())
    logger.info("[FIREBASE] Initialized for application '%s'", settings.APPLICATION_NAME)
    return app
