"""
URL patterns for article write endpoints.
"""

from django.urls import path

from .views import ArticleBulkDeleteView, ArticleCreateView, ArticleDetailView

app_name = 'articles'

urlpatterns = [
    path('', ArticleCreateView.as_view(), name='article-create'),
    path('bulk-delete/', ArticleBulkDeleteView.as_view(), name='article-bulk-delete'),
    path('<int:pk>/', ArticleDetailView.as_view(), name='article-detail'),
]
