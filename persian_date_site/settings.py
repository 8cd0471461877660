"""
Django settings for the persian_date example project.

Used to run the app's test suite and management commands.
"""

from pathlib import Path
import os

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent

# ------------------------------
# Environment
# ------------------------------

SECRET_KEY = os.environ.get('SECRET_KEY', 'default-safe-secret-key-for-local')

DEBUG = os.environ.get('DEBUG', 'False').lower() in ('true', '1', 't')

ALLOWED_HOSTS = os.environ.get('ALLOWED_HOSTS', 'localhost,127.0.0.1').split(',')

# ------------------------------
# Application definition
# ------------------------------

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'django.contrib.auth',
    'persian_date',
]

MIDDLEWARE = []

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [],
        },
    },
]

# ------------------------------
# Database
# ------------------------------
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': os.environ.get('DATABASE_NAME', BASE_DIR / 'db.sqlite3'),
    }
}

# ------------------------------
# Internationalization
# ------------------------------
LANGUAGE_CODE = 'fa'
TIME_ZONE = os.environ.get('TIME_ZONE', 'UTC')
USE_I18N = True
USE_TZ = True

# ------------------------------
# Persian date
# ------------------------------
PERSIAN_DATE = {
    'TIME_ZONE': os.environ.get('PERSIAN_DATE_TIME_ZONE', 'Asia/Tehran'),
    'STORAGE_FORMAT': 'Y-m-d H:i:s',
    'PERSIAN_DIGITS': True,
}

# ------------------------------
# Logging
# ------------------------------
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '{levelname} {name}: {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'loggers': {
        'persian_date': {
            'handlers': ['console'],
            'level': os.environ.get('PERSIAN_DATE_LOG_LEVEL', 'WARNING'),
        },
    },
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'
