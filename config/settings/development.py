"""
Development settings for the Newsroom CMS project.
"""

from .base import *

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = True

ALLOWED_HOSTS = ['localhost', '127.0.0.1', '[::1]', 'testserver']

# Disable HTTPS redirect in development
SECURE_SSL_REDIRECT = False
SESSION_COOKIE_SECURE = False
CSRF_COOKIE_SECURE = False

# Show error detail in API responses
EXPOSE_ERROR_DETAIL = True

# Development logging - more verbose, plain file handler (no rotation)
LOGGING['root']['level'] = 'DEBUG'
LOGGING['loggers']['apps']['level'] = 'DEBUG'
add_file_logging(LOGGING, LOG_DIR, rotating=False)
