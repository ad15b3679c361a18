"""
Health check views for the Newsroom CMS.
"""

import logging
import time

from django.conf import settings
from django.db import connection, DatabaseError
from django.http import JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

logger = logging.getLogger(__name__)


def check_database():
    """Run SELECT 1 against the default database."""
    start = time.time()
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
    except DatabaseError as e:
        logger.error(f"Database health check failed: {e}")
        return {
            "status": "unhealthy",
            "message": "Database unreachable",
            "duration_ms": round((time.time() - start) * 1000, 2),
        }
    return {
        "status": "healthy",
        "message": "Database reachable",
        "duration_ms": round((time.time() - start) * 1000, 2),
    }


@method_decorator(csrf_exempt, name='dispatch')
class HealthCheckView(View):
    """
    Health check endpoint.

    GET /health/ - 200 when the database answers, 503 otherwise
    """

    def get(self, request):
        database = check_database()
        healthy = database["status"] == "healthy"
        return JsonResponse({
            "status": "healthy" if healthy else "unhealthy",
            "version": getattr(settings, 'VERSION', 'unknown'),
            "checks": {"database": database},
        }, status=200 if healthy else 503)


@method_decorator(csrf_exempt, name='dispatch')
class LivenessView(View):
    """
    Liveness probe endpoint.

    Returns 200 if the application is running.
    """

    def get(self, request):
        return JsonResponse({"status": "alive"})
