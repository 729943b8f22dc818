"""
Development settings for the Daily Horoscope API.
"""
from .base import *

DEBUG = True

# Use SQLite for development if no DATABASE_URL is set
DATABASES = {
    'default': env.db('DATABASE_URL', default=f'sqlite:///{BASE_DIR}/db.sqlite3'),
}

# Plain storage so runserver works without collectstatic
STORAGES = {
    "default": {
        "BACKEND": "django.core.files.storage.FileSystemStorage",
    },
    "staticfiles": {
        "BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage",
    },
}

LOGGING['loggers']['apps']['level'] = 'DEBUG'
LOGGING['loggers']['api']['level'] = 'DEBUG'
