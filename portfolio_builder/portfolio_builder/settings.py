"""
Django settings for portfolio_builder project.

Values come from the environment; a ``.env`` file next to ``manage.py`` (or in
the repository root) is loaded first.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / '.env')
load_dotenv(BASE_DIR.parent / '.env')


def env_bool(name, default=False):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


DEV_SECRET_KEY = 'django-insecure-portfolio-builder-dev-key'

SECRET_KEY = os.getenv('DJANGO_SECRET_KEY', DEV_SECRET_KEY)

DEBUG = env_bool('DJANGO_DEBUG', True)

ALLOWED_HOSTS = [h.strip() for h in os.getenv('DJANGO_ALLOWED_HOSTS', 'localhost,127.0.0.1,testserver').split(',') if h.strip()]


# Application definition

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'portfolio',
    'profile_setup',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
]

ROOT_URLCONF = 'portfolio_builder.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
            ],
        },
    },
]

WSGI_APPLICATION = 'portfolio_builder.wsgi.application'


# Portfolios live in the per-browser session store, the database only backs
# the session table when the db engine is selected.

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'db.sqlite3',
    }
}

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'portfolio-builder',
    }
}

SESSION_ENGINE = os.getenv('SESSION_ENGINE', 'django.contrib.sessions.backends.cache')
SESSION_COOKIE_AGE = 60 * 60 * 24 * 365

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'


# Internationalization

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True


# Application

APP_URL = os.getenv('APP_URL', 'http://localhost:8000')

ASSET_FETCH_TIMEOUT = float(os.getenv('ASSET_FETCH_TIMEOUT', '10'))

FEATURES = {
    'analytics': env_bool('ENABLE_ANALYTICS', False),
    'darkMode': env_bool('ENABLE_DARK_MODE', True),
    'notifications': env_bool('ENABLE_NOTIFICATIONS', True),
}


# Logging

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(asctime)s %(levelname)s %(name)s: %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'loggers': {
        'portfolio': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
        },
        'profile_setup': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
        },
    },
}
