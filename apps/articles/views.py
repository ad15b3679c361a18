"""
Article write API views.

POST   /api/admin/posts/               - Create article (multipart)
PUT    /api/admin/posts/{id}/          - Update article (multipart)
DELETE /api/admin/posts/{id}/          - Permanently delete article
POST   /api/admin/posts/bulk-delete/   - Permanently delete several articles
"""

import logging

from rest_framework import status
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.core.middleware import get_client_ip
from apps.core.permissions import CanDeleteArticles, CanWriteArticles, get_user_role
from apps.core.throttling import BulkActionThrottle

from .serializers import parse_submission
from .services import Actor, ArticleAggregateManager

logger = logging.getLogger(__name__)


CREATE_MESSAGES = {
    'approval': 'Post created and submitted for approval',
    'published': 'Post published successfully',
    'other': 'Draft created successfully',
}

UPDATE_MESSAGES = {
    'approval': 'Post updated and submitted for approval',
    'published': 'Post updated successfully',
    'other': 'Draft updated successfully',
}


def actor_from_request(request) -> Actor:
    return Actor(
        id=request.user.pk,
        role=get_user_role(request.user),
        ip=get_client_ip(request),
    )


def write_response_body(result, messages):
    if result.requires_approval:
        message = messages['approval']
    elif result.status == 'published':
        message = messages['published']
    else:
        message = messages['other']
    return {
        'success': True,
        'message': message,
        'news_id': result.article.pk,
        'slug': result.article.slug,
        'status': result.status,
        'requires_approval': result.requires_approval,
    }


class ArticleCreateView(APIView):
    """
    Create an article with its categories, media and social links.

    Authors without the direct-publish capability asking for 'published'
    get 'pending_approval' instead.
    """
    permission_classes = [IsAuthenticated, CanWriteArticles]
    parser_classes = [MultiPartParser, FormParser, JSONParser]

    def post(self, request):
        submission = parse_submission(request)
        result = ArticleAggregateManager().create(submission, actor_from_request(request))
        return Response(write_response_body(result, CREATE_MESSAGES), status=status.HTTP_201_CREATED)


class ArticleDetailView(APIView):
    """
    Update or permanently delete one article.

    PUT requires the write capability, DELETE the hard-delete capability.
    """
    permission_classes = [IsAuthenticated, CanWriteArticles]
    parser_classes = [MultiPartParser, FormParser, JSONParser]

    def get_permissions(self):
        """Apply CanDeleteArticles for DELETE."""
        if self.request.method == 'DELETE':
            return [IsAuthenticated(), CanDeleteArticles()]
        return super().get_permissions()

    def put(self, request, pk):
        submission = parse_submission(request)
        result = ArticleAggregateManager().update(pk, submission, actor_from_request(request))
        return Response(write_response_body(result, UPDATE_MESSAGES))

    def delete(self, request, pk):
        report = ArticleAggregateManager().delete(pk, actor_from_request(request))
        return Response({
            'success': True,
            'message': 'Article permanently deleted',
            'action': 'delete',
            'news_id': report.article_id,
            'title': report.title,
            'deleted_records': report.deleted_records,
        })


class ArticleBulkDeleteView(APIView):
    """
    Permanently delete several articles.

    POST /api/admin/posts/bulk-delete/  {"news_ids": [5, 9]}

    Each id succeeds or fails on its own; the response is 200 either way.
    """
    permission_classes = [IsAuthenticated, CanDeleteArticles]
    throttle_classes = [BulkActionThrottle]

    def post(self, request):
        news_ids = request.data.get('news_ids')
        result = ArticleAggregateManager().bulk_delete(news_ids, actor_from_request(request))

        return Response({
            'success': True,
            'message': (
                f"Bulk operation completed: {len(result.success)} succeeded, "
                f"{len(result.failed)} failed"
            ),
            'results': result.to_dict(),
        })
