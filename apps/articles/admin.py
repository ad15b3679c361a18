"""
Admin interface for Article management.
"""

from django.contrib import admin
from django.utils.html import format_html

from apps.core.middleware import get_client_ip
from apps.core.permissions import get_user_role
from .models import Article, ArticleApproval, ArticleCategory, ArticleMedia, ArticleSocialLink, Category
from .services import Actor, ArticleAggregateManager


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ['name', 'slug', 'parent', 'is_active', 'display_order']
    list_filter = ['is_active']
    search_fields = ['name', 'slug']
    prepopulated_fields = {'slug': ('name',)}


class ArticleCategoryInline(admin.TabularInline):
    model = ArticleCategory
    extra = 0
    raw_id_fields = ['category']


class ArticleMediaInline(admin.TabularInline):
    model = ArticleMedia
    extra = 0
    fields = ['url', 'caption', 'display_order', 'is_featured', 'mime_type']
    readonly_fields = ['url', 'mime_type']


class ArticleSocialLinkInline(admin.TabularInline):
    model = ArticleSocialLink
    extra = 0


@admin.register(Article)
class ArticleAdmin(admin.ModelAdmin):
    """
    Admin interface for Article model.

    Deletions go through ArticleAggregateManager so dependent records are
    cleared the same way as through the API.
    """

    list_display = [
        'title_short',
        'status_badge',
        'priority',
        'primary_category',
        'author',
        'views',
        'published_at',
    ]

    list_filter = [
        'status',
        'priority',
        ('published_at', admin.DateFieldListFilter),
    ]

    search_fields = [
        'title',
        'slug',
        'tags',
    ]

    readonly_fields = [
        'id',
        'slug',
        'processed_content',
        'quotes_data',
        'reading_time',
        'image_url',
        'published_at',
        'created_at',
        'updated_at',
    ]

    raw_id_fields = ['author', 'primary_category']

    date_hierarchy = 'created_at'

    inlines = [ArticleCategoryInline, ArticleMediaInline, ArticleSocialLinkInline]

    fieldsets = (
        ('Basic Information', {
            'fields': (
                'title',
                'slug',
                'author',
                'primary_category',
                'priority',
                'status',
                'published_at',
            )
        }),
        ('Content', {
            'fields': (
                'content',
                'processed_content',
                'excerpt',
                'quotes_data',
                'reading_time',
                'image_url',
            ),
            'classes': ('collapse',),
        }),
        ('SEO', {
            'fields': (
                'tags',
                'meta_description',
                'seo_keywords',
            )
        }),
        ('Engagement', {
            'fields': (
                'views',
                'likes_count',
                'comments_count',
                'share_count',
            )
        }),
        ('System Fields', {
            'fields': (
                'id',
                'created_at',
                'updated_at',
            ),
            'classes': ('collapse',),
        }),
    )

    @admin.display(description='Title')
    def title_short(self, obj):
        return obj.title[:60] + ('...' if len(obj.title) > 60 else '')

    @admin.display(description='Status')
    def status_badge(self, obj):
        colors = {
            'draft': '#6b7280',
            'pending_approval': '#d97706',
            'published': '#059669',
            'archived': '#4b5563',
        }
        return format_html(
            '<span style="color: {}; font-weight: bold;">{}</span>',
            colors.get(obj.status, '#6b7280'),
            obj.get_status_display(),
        )

    def _actor(self, request):
        return Actor(id=request.user.pk, role=get_user_role(request.user), ip=get_client_ip(request))

    def delete_model(self, request, obj):
        ArticleAggregateManager().delete(obj.pk, self._actor(request))

    def delete_queryset(self, request, queryset):
        ArticleAggregateManager().bulk_delete(list(queryset.values_list('pk', flat=True)), self._actor(request))


@admin.register(ArticleApproval)
class ArticleApprovalAdmin(admin.ModelAdmin):
    list_display = ['article', 'workflow_status', 'submitted_by', 'submitted_at', 'reviewed_by']
    list_filter = ['workflow_status']
    raw_id_fields = ['article', 'submitted_by', 'reviewed_by']
