"""
Test settings for the Daily Horoscope API.
"""
from .base import *

DEBUG = False

SECRET_KEY = 'test-secret-key-not-for-production-use-only-in-the-test-suite'
SIMPLE_JWT['SIGNING_KEY'] = SECRET_KEY

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    },
}

# Fast hashing in tests
PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

STORAGES = {
    "default": {
        "BACKEND": "django.core.files.storage.FileSystemStorage",
    },
    "staticfiles": {
        "BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage",
    },
}

LOGGING['loggers']['apps']['level'] = 'WARNING'
LOGGING['loggers']['api']['level'] = 'WARNING'
