"""
Live surface API views.

GET /api/updates/breaking/?page=&limit=
GET /api/updates/pinned/?page=&limit=&category=

Public, uncached. A failing query answers 500 with the same envelope, empty
lists and default pagination.
"""

import logging

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.core.throttling import SurfaceThrottle

from .serializers import BreakingEntrySerializer, PinnedEntrySerializer
from .surfaces import SurfaceQueryService

logger = logging.getLogger(__name__)


NO_CACHE_HEADERS = {
    'Cache-Control': 'no-cache, no-store, must-revalidate',
    'Pragma': 'no-cache',
    'Expires': '0',
}


class SurfaceView(APIView):
    """Base view: runs a surface query and renders the envelope."""
    authentication_classes = []
    permission_classes = [AllowAny]
    throttle_classes = [SurfaceThrottle]

    # Override in subclasses
    list_key = None
    entry_serializer_class = None

    def run_query(self, request, page, limit):
        raise NotImplementedError

    def get(self, request):
        result = self.run_query(
            request,
            request.query_params.get('page'),
            request.query_params.get('limit'),
        )

        news = self.entry_serializer_class(result.entries, many=True).data if result.success else []
        body = {
            'success': result.success,
            'news': news,
            self.list_key: news,
            'pagination': result.pagination,
        }
        if not result.success:
            body['message'] = result.message

        return Response(
            body,
            status=status.HTTP_200_OK if result.success else status.HTTP_500_INTERNAL_SERVER_ERROR,
            headers=NO_CACHE_HEADERS,
        )


class BreakingSurfaceView(SurfaceView):
    list_key = 'breakingNews'
    entry_serializer_class = BreakingEntrySerializer

    def run_query(self, request, page, limit):
        return SurfaceQueryService().breaking(page=page, limit=limit)


class PinnedSurfaceView(SurfaceView):
    list_key = 'pinnedNews'
    entry_serializer_class = PinnedEntrySerializer

    def run_query(self, request, page, limit):
        return SurfaceQueryService().pinned(
            page=page,
            limit=limit,
            category=request.query_params.get('category') or None,
        )
