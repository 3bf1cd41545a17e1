"""
Django project settings for the Picnic localized portal
========================================================

Configuration for the locale-aware front-end layer: supported languages,
portal authorization, vote podium sources, security and logging.

Language configuration:
- LANGUAGES: ordered set of supported locale codes (first segment of every URL)
- LANGUAGE_CODE: default locale, must be one of LANGUAGES
- LANGUAGE_COOKIE_NAME: cookie remembering the viewer's last choice

Portal configuration:
- PORTAL_AUTHORIZER: dotted path to the authorization callable
- PORTAL_AUTH_TIMEOUT: seconds before a pending check is denied
- PORTAL_DENIED_URL: where denied viewers are sent ('' = plain 403)
"""

import os
from pathlib import Path
from decouple import config, Csv # pyright: ignore[reportMissingImports]
import dj_database_url # pyright: ignore[reportMissingImports]

# Build paths inside the project
BASE_DIR = Path(__file__).resolve().parent.parent

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = config('SECRET_KEY', default='django-insecure-dev-key-change-in-production')

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = config('DEBUG', default=False, cast=bool)

ALLOWED_HOSTS = config('ALLOWED_HOSTS', default='localhost,127.0.0.1').split(',')

# Application definition
INSTALLED_APPS = [
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'django.contrib.sitemaps',
    'corsheaders',
    'portal',  # Locale routing, portal guards, vote podium
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'portal.middleware.LocaleRedirectMiddleware',  # Locale prefix enforcement
    'corsheaders.middleware.CorsMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',  # CSRF protection
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',  # Clickjacking protection
]

ROOT_URLCONF = 'picnic_project.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [os.path.join(BASE_DIR, 'portal', 'templates')],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
                'django.template.context_processors.csrf',  # CSRF token in context
                'portal.context_processors.locale',  # Current locale, portal + switch links
            ],
        },
    },
]

WSGI_APPLICATION = 'picnic_project.wsgi.application'
ASGI_APPLICATION = 'picnic_project.asgi.application'

# Database configuration
# Default: SQLite (development)
# Production: PostgreSQL (set DATABASE_URL environment variable)
DATABASE_URL = config('DATABASE_URL', default='')

if DATABASE_URL:
    DATABASES = {
        'default': dj_database_url.config(
            default=DATABASE_URL,
            conn_max_age=600,
            conn_health_checks=True,
        )
    }
else:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': os.path.join(BASE_DIR, 'db', 'db.sqlite3'),
        }
    }

# Internationalization
# Locale codes are matched case-sensitively against the first URL segment.
LANGUAGE_CODE = config('LANGUAGE_CODE', default='ko')
LANGUAGES = [
    ('ko', '한국어'),
    ('en', 'English'),
    ('ja', '日本語'),
    ('zh', '中文'),
    ('id', 'Bahasa Indonesia'),
]
LANGUAGE_COOKIE_NAME = 'locale'
LANGUAGE_COOKIE_AGE = 60 * 60 * 24 * 365  # 1 year (seconds)
LOCALE_PATHS = [
    os.path.join(BASE_DIR, 'locale'),
]
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

# Static files (CSS, JavaScript, Images)
STATIC_URL = '/static/'
STATIC_ROOT = os.path.join(BASE_DIR, 'staticfiles')

# Media files (User uploads)
MEDIA_URL = '/media-files/'
MEDIA_ROOT = os.path.join(BASE_DIR, 'media')

# Site configuration
SITE_URL = config('SITE_URL', default='http://localhost:8000').rstrip('/')
SITE_NAME = 'Picnic'

# Build process runs collectstatic with a dummy key
IS_BUILD_PROCESS = SECRET_KEY == 'dummy-key-for-build'

STORAGES = {
    'default': {
        'BACKEND': 'django.core.files.storage.FileSystemStorage',
    },
    'staticfiles': {
        # Production: whitenoise with manifest for efficiency
        'BACKEND': (
            'django.contrib.staticfiles.storage.StaticFilesStorage'
            if DEBUG or IS_BUILD_PROCESS
            else 'whitenoise.storage.CompressedManifestStaticFilesStorage'
        ),
    },
}

# Default primary key field type
DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# ============================================================================
# PORTAL SETTINGS
# ============================================================================

# Callable (capability, viewer) -> bool, sync or async
PORTAL_AUTHORIZER = config(
    'PORTAL_AUTHORIZER', default='portal.authorization.session_authorizer'
)

# Pending authorization checks are denied after this many seconds
PORTAL_AUTH_TIMEOUT = config('PORTAL_AUTH_TIMEOUT', default=3.0, cast=float)

# Portals any viewer may enter; everything else needs a signed-in user
PORTAL_PUBLIC_CAPABILITIES = config(
    'PORTAL_PUBLIC_CAPABILITIES',
    default='public,vote,pic,community,novel,media,auth',
    cast=Csv(),
)

# Locale-less path denied viewers are redirected to ('' = plain 403 response)
PORTAL_DENIED_URL = config('PORTAL_DENIED_URL', default='/login/')

# Callable () -> iterable of vote item payloads ('' = no items)
PORTAL_VOTE_ITEM_SOURCE = config('PORTAL_VOTE_ITEM_SOURCE', default='')

# Number of ranked slots shown on the vote podium
PORTAL_PODIUM_SIZE = config('PORTAL_PODIUM_SIZE', default=3, cast=int)

# ============================================================================
# SECURITY SETTINGS (CRITICAL FOR PRODUCTION)
# ============================================================================

# Trust the X-Forwarded-Proto header coming from the proxy
SECURE_PROXY_SSL_HEADER = config('SECURE_PROXY_SSL_HEADER', default=None)
if SECURE_PROXY_SSL_HEADER:
    SECURE_PROXY_SSL_HEADER = tuple(SECURE_PROXY_SSL_HEADER.split(','))

if not DEBUG:
    SECURE_SSL_REDIRECT = config('SECURE_SSL_REDIRECT', default=True, cast=bool)
    SESSION_COOKIE_SECURE = config('SESSION_COOKIE_SECURE', default=True, cast=bool)
    CSRF_COOKIE_SECURE = config('CSRF_COOKIE_SECURE', default=True, cast=bool)
    SESSION_COOKIE_SAMESITE = config('SESSION_COOKIE_SAMESITE', default='Strict')
    CSRF_COOKIE_SAMESITE = config('CSRF_COOKIE_SAMESITE', default='Strict')
else:
    SESSION_COOKIE_SECURE = config('SESSION_COOKIE_SECURE', default=False, cast=bool)
    CSRF_COOKIE_SECURE = config('CSRF_COOKIE_SECURE', default=False, cast=bool)
    SESSION_COOKIE_SAMESITE = config('SESSION_COOKIE_SAMESITE', default='Lax')
    CSRF_COOKIE_SAMESITE = config('CSRF_COOKIE_SAMESITE', default='Lax')

# Session & Cookie settings
SESSION_COOKIE_AGE = config('SESSION_COOKIE_AGE', default=1209600, cast=int)  # 2 weeks
SESSION_COOKIE_HTTPONLY = config('SESSION_COOKIE_HTTPONLY', default=True, cast=bool)
CSRF_COOKIE_HTTPONLY = config('CSRF_COOKIE_HTTPONLY', default=True, cast=bool)

# Security Headers
SECURE_HSTS_SECONDS = config('SECURE_HSTS_SECONDS', default=31536000, cast=int)  # 1 year
SECURE_HSTS_INCLUDE_SUBDOMAINS = config('SECURE_HSTS_INCLUDE_SUBDOMAINS', default=True, cast=bool)
SECURE_HSTS_PRELOAD = config('SECURE_HSTS_PRELOAD', default=True, cast=bool)
X_FRAME_OPTIONS = config('X_FRAME_OPTIONS', default='DENY')

# CORS configuration (the podium API is called from the app shell)
CORS_ALLOWED_ORIGINS = config(
    'CORS_ALLOWED_ORIGINS',
    default='http://localhost:3000,http://127.0.0.1:8000'
).split(',')
CORS_URLS_REGEX = r'^/api/.*$'

CSRF_TRUSTED_ORIGINS = config(
    'CSRF_TRUSTED_ORIGINS',
    default='http://localhost:8000,http://127.0.0.1:8000,http://localhost:3000'
).split(',')

# Logging configuration
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '[{levelname}] {asctime} {module} - {message}',
            'style': '{',
        },
        'simple': {
            'format': '{levelname} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'level': 'INFO' if not DEBUG else 'DEBUG',
            'class': 'logging.StreamHandler',
            'formatter': 'verbose' if not DEBUG else 'simple',
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
        'portal': {
            'handlers': ['console'],
            'level': 'DEBUG' if DEBUG else 'INFO',
            'propagate': False,
        },
    },
}
