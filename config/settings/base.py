"""
Django settings for the Newsroom CMS project.
Base settings shared across all environments.
"""

import os
from datetime import timedelta
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Build paths inside the project
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = os.getenv('SECRET_KEY', 'django-insecure-change-this-in-production')

DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'

ALLOWED_HOSTS = []

# Application definition
INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',

    # Third-party apps
    'rest_framework',
    'rest_framework_simplejwt',

    # Newsroom apps
    'apps.core',
    'apps.articles',
    'apps.promotions',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'whitenoise.middleware.WhiteNoiseMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
    # Custom middleware
    'apps.core.middleware.RequestIDMiddleware',  # Request ID tracing
]

ROOT_URLCONF = 'config.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'config.wsgi.application'

# Database
# Each write request runs in one transaction on its own pooled connection.
if os.getenv('DB_NAME'):
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.postgresql',
            'NAME': os.getenv('DB_NAME'),
            'USER': os.getenv('DB_USER'),
            'PASSWORD': os.getenv('DB_PASSWORD'),
            'HOST': os.getenv('DB_HOST', 'localhost'),
            'PORT': os.getenv('DB_PORT', '5432'),
            'CONN_MAX_AGE': int(os.getenv('DB_CONN_MAX_AGE', '60')),
            'CONN_HEALTH_CHECKS': True,
            'OPTIONS': {
                'connect_timeout': 10,
            },
        }
    }
else:
    # SQLite fallback for local development
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': BASE_DIR / 'db.sqlite3',
        }
    }

# Password validation
AUTH_PASSWORD_VALIDATORS = [
    {
        'NAME': 'django.contrib.auth.password_validation.UserAttributeSimilarityValidator',
    },
    {
        'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator',
    },
    {
        'NAME': 'django.contrib.auth.password_validation.CommonPasswordValidator',
    },
    {
        'NAME': 'django.contrib.auth.password_validation.NumericPasswordValidator',
    },
]

# Internationalization
LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

# Static and media files
STATIC_URL = '/static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'
MEDIA_URL = '/media/'
MEDIA_ROOT = BASE_DIR / 'media'

STORAGES = {
    'default': {
        'BACKEND': 'django.core.files.storage.FileSystemStorage',
    },
    'staticfiles': {
        'BACKEND': 'whitenoise.storage.CompressedManifestStaticFilesStorage',
    },
}

# Default primary key field type
DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# Django REST Framework
REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [
        'rest_framework_simplejwt.authentication.JWTAuthentication',
        'rest_framework.authentication.SessionAuthentication',
    ],
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.IsAuthenticated',
    ],
    'DEFAULT_PARSER_CLASSES': [
        'rest_framework.parsers.JSONParser',
        'rest_framework.parsers.MultiPartParser',
        'rest_framework.parsers.FormParser',
    ],
    'DEFAULT_THROTTLE_RATES': {
        'bulk': os.getenv('THROTTLE_BULK_RATE', '10/minute'),
        'surface': os.getenv('THROTTLE_SURFACE_RATE', '120/minute'),
    },
    # Standardized {success: false, message} error envelope
    'EXCEPTION_HANDLER': 'apps.core.exceptions.newsroom_exception_handler',
}

# Simple JWT Configuration (tokens are issued by the auth service)
SIMPLE_JWT = {
    'ACCESS_TOKEN_LIFETIME': timedelta(minutes=60),
    'REFRESH_TOKEN_LIFETIME': timedelta(days=7),
    'ALGORITHM': 'HS256',
    'SIGNING_KEY': SECRET_KEY,
    'AUTH_HEADER_TYPES': ('Bearer',),
    'AUTH_HEADER_NAME': 'HTTP_AUTHORIZATION',
    'USER_ID_FIELD': 'id',
    'USER_ID_CLAIM': 'user_id',
}

# Logging
LOG_DIR = Path(os.getenv('LOG_DIR', BASE_DIR / 'logs'))

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'filters': {
        'request_id': {
            '()': 'apps.core.middleware.RequestIDFilter',
        },
    },
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} [{request_id}] {module} {message}',
            'style': '{',
        },
        'simple': {
            'format': '{levelname} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
            'filters': ['request_id'],
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
        'apps': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': False,
        },
    },
}


def add_file_logging(logging_config, log_dir, rotating=True):
    """Attach a file handler to the django and apps loggers."""
    os.makedirs(log_dir, exist_ok=True)
    handler = {
        'class': 'logging.handlers.RotatingFileHandler' if rotating else 'logging.FileHandler',
        'filename': Path(log_dir) / 'newsroom.log',
        'formatter': 'verbose',
        'filters': ['request_id'],
    }
    if rotating:
        handler['maxBytes'] = 1024 * 1024 * 5  # 5MB
        handler['backupCount'] = 5
    logging_config['handlers']['file'] = handler
    for name in ('django', 'apps'):
        logging_config['loggers'][name]['handlers'] = ['console', 'file']


# =============================================================================
# Newsroom: roles and publishing
# =============================================================================

# Capability oracle consumed by the publish gate and the write permissions.
# Loaded once per process (see apps.core.permissions.get_role_capabilities).
NEWSROOM_ROLE_CAPABILITIES = {
    'publish_directly': ['super_admin', 'admin'],
    'write_articles': ['super_admin', 'admin', 'editor', 'moderator'],
    'hard_delete': ['super_admin', 'admin'],
}

# Role assumed for authenticated users without a staff profile
NEWSROOM_DEFAULT_ROLE = 'moderator'


# =============================================================================
# Newsroom: article aggregate
# =============================================================================

# Tables outside the ORM that reference articles in some deployments.
# Each entry is (table_name, article_column). Missing tables are skipped.
ARTICLE_EXTRA_DEPENDENT_TABLES = [
    ('post_promotions', 'news_id'),
    ('featured_news', 'news_id'),
]

# Media ingestion collaborator (dotted path to a class)
MEDIA_INGESTOR = os.getenv('MEDIA_INGESTOR', 'apps.articles.media.DefaultStorageIngestor')

# Public base for media urls stored as relative paths
MEDIA_PUBLIC_BASE_URL = os.getenv('MEDIA_PUBLIC_BASE_URL', '')

MAX_UPLOAD_IMAGES = int(os.getenv('MAX_UPLOAD_IMAGES', '10'))


# =============================================================================
# Newsroom: surfaces
# =============================================================================

SURFACE_DEFAULT_LIMIT = int(os.getenv('SURFACE_DEFAULT_LIMIT', '50'))
SURFACE_MAX_LIMIT = int(os.getenv('SURFACE_MAX_LIMIT', '100'))

# Include raw error text in API error responses (never in production)
EXPOSE_ERROR_DETAIL = os.getenv('EXPOSE_ERROR_DETAIL', 'false').lower() == 'true'

# Application version
VERSION = os.getenv('APP_VERSION', '1.0.0')
