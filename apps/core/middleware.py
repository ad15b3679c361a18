"""
Request ID Middleware for the Newsroom CMS.

Generates and propagates unique request IDs for tracing.

Features:
- Generates UUID-based request ID for each request
- Accepts incoming X-Request-ID header
- Adds request ID to response headers
- Injects request ID into thread-local logging context

Usage:
    Add to MIDDLEWARE in settings:

    MIDDLEWARE = [
        ...
        'apps.core.middleware.RequestIDMiddleware',
        ...
    ]

Access request ID in views:
    from apps.core.middleware import get_request_id

    def my_view(request):
        request_id = get_request_id()
        # or
        request_id = request.request_id
"""

import uuid
import threading
import logging
from django.utils.deprecation import MiddlewareMixin

logger = logging.getLogger(__name__)

# Thread-local storage for request context
_request_context = threading.local()


def get_request_id():
    """
    Get the current request ID from thread-local storage.

    Returns None if called outside of a request context.
    """
    return getattr(_request_context, 'request_id', None)


def clear_request_context():
    """Clear request context from thread-local storage."""
    _request_context.request_id = None
    _request_context.path = None


def get_client_ip(request):
    """
    Best-effort client address for audit rows.

    Order: first X-Forwarded-For hop, X-Real-IP, REMOTE_ADDR.
    """
    forwarded = request.META.get('HTTP_X_FORWARDED_FOR', '')
    if forwarded:
        return forwarded.split(',')[0].strip()
    return request.META.get('HTTP_X_REAL_IP') or request.META.get('REMOTE_ADDR', '')


class RequestIDMiddleware(MiddlewareMixin):
    """
    Middleware to handle request IDs for tracing.

    Flow:
    1. Check for incoming X-Request-ID header
    2. Generate new UUID if not present or malformed
    3. Store in thread-local for logging
    4. Attach to request object as request.request_id
    5. Add to response headers
    """

    REQUEST_ID_HEADER = 'HTTP_X_REQUEST_ID'
    RESPONSE_HEADER = 'X-Request-ID'

    def process_request(self, request):
        """Extract or generate request ID."""
        request_id = request.META.get(self.REQUEST_ID_HEADER)

        if request_id:
            try:
                uuid.UUID(request_id)
            except (ValueError, TypeError):
                request_id = str(uuid.uuid4())
        else:
            request_id = str(uuid.uuid4())

        _request_context.request_id = request_id
        _request_context.path = request.path

        request.request_id = request_id
        return None

    def process_response(self, request, response):
        """Add request ID to response headers."""
        request_id = getattr(request, 'request_id', None)

        if request_id:
            response[self.RESPONSE_HEADER] = request_id

        clear_request_context()
        return response


class RequestIDFilter(logging.Filter):
    """
    Logging filter that adds request_id to log records.

    Records emitted outside a request get '-'.
    """

    def filter(self, record):
        """Add request_id to log record."""
        record.request_id = get_request_id() or '-'
        return True
