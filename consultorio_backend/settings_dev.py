"""
Development Settings für das Consultório-Backend (SQLite).

Verwendung:
    export DJANGO_SETTINGS_MODULE=consultorio_backend.settings_dev
    python manage.py migrate
    python manage.py seed
    python manage.py runserver

Die Test-Suite läuft ebenfalls mit diesen Settings.
"""

from .settings import *

# ---------------------------------------------------------
# DEVELOPMENT SETTINGS (SQLITE)
# ---------------------------------------------------------

DEBUG = True

ALLOWED_HOSTS = ['localhost', '127.0.0.1', '[::1]', 'testserver', '*']

# ---------------------------------------------------------
# DATABASES: SQLite für lokale Entwicklung
# ---------------------------------------------------------

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'dev.sqlite3',
        'OPTIONS': {
            'timeout': 20,
        },
    },
}

# ---------------------------------------------------------
# REST FRAMEWORK: Browsable API für Entwicklung
# ---------------------------------------------------------

REST_FRAMEWORK = {
    **REST_FRAMEWORK,
    'DEFAULT_AUTHENTICATION_CLASSES': (
        'rest_framework_simplejwt.authentication.JWTAuthentication',
        'rest_framework.authentication.SessionAuthentication',  # Für Browsable API
    ),
    'DEFAULT_RENDERER_CLASSES': (
        'rest_framework.renderers.JSONRenderer',
        'rest_framework.renderers.BrowsableAPIRenderer',
    ),
}

# ---------------------------------------------------------
# SIMPLE JWT: Token-Konfiguration
# ---------------------------------------------------------

SIMPLE_JWT = {
    **SIMPLE_JWT,
    'ACCESS_TOKEN_LIFETIME': timedelta(hours=2),  # Länger für DEV
}

# ---------------------------------------------------------
# CORS: Alle Origins für lokale Entwicklung erlauben
# ---------------------------------------------------------

CORS_ALLOW_ALL_ORIGINS = True  # Nur für DEV!
CORS_ALLOW_CREDENTIALS = True

CSRF_TRUSTED_ORIGINS = [
    'http://localhost:3000',
    'http://127.0.0.1:3000',
    'http://localhost:8000',
    'http://127.0.0.1:8000',
]

# Schnellere Passwort-Hashes, damit die Tests nicht bremsen
PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.PBKDF2PasswordHasher',
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

# ---------------------------------------------------------
# LOGGING: Ausführliches Logging für Entwicklung
# ---------------------------------------------------------

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '{levelname} {asctime} {module}: {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'INFO',
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': False,
        },
        'django.db.backends': {
            'handlers': ['console'],
            'level': 'WARNING',  # Auf DEBUG setzen für SQL-Queries
            'propagate': False,
        },
        'consultorio_backend': {
            'handlers': ['console'],
            'level': 'DEBUG',
            'propagate': False,
        },
    },
}

EMAIL_BACKEND = 'django.core.mail.backends.console.EmailBackend'

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'consultorio-dev',
    }
}
