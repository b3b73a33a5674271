"""Test settings: file-backed SQLite, eager Celery, locmem email."""

from .base import *  # noqa: F401,F403

DEBUG = False

SECRET_KEY = 'test-secret-key'

# File-backed so threaded tests get real SQLite locking; an in-memory
# database shares one cache between connections and locks per table.
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'test-db.sqlite3',  # noqa: F405
        'OPTIONS': SQLITE_OPTIONS,  # noqa: F405
        'TEST': {'NAME': BASE_DIR / 'test-db.sqlite3'},  # noqa: F405
    }
}

STORAGES = {
    'default': {'BACKEND': 'django.core.files.storage.FileSystemStorage'},
    'staticfiles': {'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage'},
}

EMAIL_BACKEND = 'django.core.mail.backends.locmem.EmailBackend'

RENTALS = {
    'STORE_BACKEND': 'orm',
    'ADMIN_EMAIL': 'admin@heater-rental.test',
    'NOTIFY_ON_SUBMIT': True,
}

CELERY_TASK_ALWAYS_EAGER = True
CELERY_TASK_EAGER_PROPAGATES = True
CELERY_BROKER_URL = 'memory://'
CELERY_RESULT_BACKEND = 'cache+memory://'

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']
