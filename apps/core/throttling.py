"""
Rate Limiting / Throttling for the Newsroom API.

Custom DRF throttle classes for different endpoint types.

Usage in views:
    from apps.core.throttling import BulkActionThrottle

    class ArticleBulkDeleteView(APIView):
        throttle_classes = [BulkActionThrottle]

Usage in settings:
    REST_FRAMEWORK = {
        'DEFAULT_THROTTLE_RATES': {
            'bulk': '10/minute',      # Bulk deletes
            'surface': '120/minute',  # Public breaking/pinned surfaces
        }
    }
"""

from rest_framework.throttling import UserRateThrottle, AnonRateThrottle
import logging

logger = logging.getLogger(__name__)


class BulkActionThrottle(UserRateThrottle):
    """
    Throttle for bulk action endpoints.

    Applies to:
    - POST /api/admin/posts/bulk-delete/

    Default: 10 requests/minute
    """
    scope = 'bulk'

    def get_rate(self):
        try:
            return super().get_rate()
        except Exception:
            return '10/minute'


class SurfaceThrottle(AnonRateThrottle):
    """
    Throttle for the anonymous live surfaces.

    Applies to:
    - GET /api/updates/breaking/
    - GET /api/updates/pinned/

    Default: 120 requests/minute
    """
    scope = 'surface'

    def get_rate(self):
        try:
            return super().get_rate()
        except Exception:
            return '120/minute'
