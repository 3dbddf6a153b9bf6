"""
Django settings for the finance_tracker project.

Configuration comes from environment variables, optionally loaded from a
.env file found by python-dotenv.
"""
import os
import urllib.parse
from pathlib import Path

from dotenv import load_dotenv, find_dotenv

load_dotenv(find_dotenv())

BASE_DIR = Path(__file__).resolve().parent.parent

APPLICATION_NAME = 'finance-tracker'

SECRET_KEY = os.getenv('DJANGO_SECRET_KEY', 'django-insecure-change-me')

DEBUG = os.getenv('DJANGO_DEBUG', 'False').lower() in ('1', 'true', 'yes')

ALLOWED_HOSTS = [h.strip() for h in os.getenv('DJANGO_ALLOWED_HOSTS', 'localhost,127.0.0.1').split(',') if h.strip()]

INSTALLED_APPS = [
    'core',
    'finance',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
    'core.middleware.FirebaseTokenMiddleware',
    'core.middleware.ExceptionHandlingMiddleware',
]

ROOT_URLCONF = 'finance_tracker.urls'

WSGI_APPLICATION = 'finance_tracker.wsgi.application'

# No relational database: every document lives in MongoDB
DATABASES = {}

# Dates are stored as naive IST datetimes (see core.utils.dates)
USE_TZ = False
TIME_ZONE = 'Asia/Kolkata'
LANGUAGE_CODE = 'en-us'
USE_I18N = False

APPEND_SLASH = False

# MongoDB
# MONGO_URI wins; otherwise the Atlas URI is built from MONGO_USER/MONGO_PASS.
MONGO_USER = urllib.parse.quote_plus(os.getenv('MONGO_USER', ''))
MONGO_PASS = urllib.parse.quote_plus(os.getenv('MONGO_PASS', ''))
MONGO_HOST = os.getenv('MONGO_HOST', '')

if os.getenv('MONGO_URI'):
    MONGO_URI = os.getenv('MONGO_URI')
elif MONGO_USER and MONGO_PASS and MONGO_HOST:
    MONGO_URI = "mongodb+srv://%s:%s@%s/?retryWrites=true&w=majority" % (MONGO_USER, MONGO_PASS, MONGO_HOST)
else:
    MONGO_URI = 'mongodb://localhost:27017'

MONGO_DB_NAME = os.getenv('MONGO_DB_NAME', 'finance_tracker')
MONGO_SERVER_SELECTION_TIMEOUT_MS = int(os.getenv('MONGO_SERVER_SELECTION_TIMEOUT_MS', '5000'))

# Identity
GOOGLE_CLIENT_IDS = [c.strip() for c in os.getenv('GOOGLE_CLIENT_IDS', '').split(',') if c.strip()]
FIREBASE_CREDENTIALS_BASE64 = os.getenv('FIREBASE_CREDENTIALS_BASE64', '')
FIREBASE_CREDENTIALS_PATH = os.getenv('FIREBASE_CREDENTIALS_PATH', '')

# Dotted paths, swapped for doubles in tests
IDENTITY_VERIFIER = 'core.services.identity_service.FirebaseIdentityVerifier'
GOOGLE_TOKEN_VERIFIER = 'core.services.identity_service.GoogleTokenVerifier'
FIREBASE_UID_RESOLVER = 'core.services.identity_service.FirebaseUidResolver'

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '%(asctime)s %(levelname)s %(name)s %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': LOG_LEVEL,
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'WARNING',
            'propagate': False,
        },
    },
}
