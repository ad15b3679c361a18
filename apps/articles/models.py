"""
Article models for the Newsroom CMS.
The article aggregate (body, category links, media, social links) and the
record sets that hang off an article.
"""

from django.conf import settings
from django.db import models
from django.db.models import Q
from django.core.validators import MinValueValidator
from django.utils import timezone
from apps.core.models import BaseModel


class Category(BaseModel):
    """
    Editorial category. Read-only for the article write path.
    """

    name = models.CharField(
        max_length=100,
        verbose_name='Name'
    )

    slug = models.SlugField(
        max_length=120,
        unique=True,
        verbose_name='Slug'
    )

    description = models.TextField(
        blank=True,
        verbose_name='Description'
    )

    color = models.CharField(
        max_length=20,
        blank=True,
        verbose_name='Color',
        help_text='Hex color used by the front end, e.g. #6366f1'
    )

    icon = models.CharField(
        max_length=20,
        blank=True,
        verbose_name='Icon'
    )

    parent = models.ForeignKey(
        'self',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='children',
        verbose_name='Parent Category'
    )

    is_active = models.BooleanField(
        default=True,
        db_index=True,
        verbose_name='Active'
    )

    display_order = models.IntegerField(
        default=0,
        verbose_name='Display Order'
    )

    class Meta:
        db_table = 'categories'
        ordering = ['display_order', 'name']
        verbose_name = 'Category'
        verbose_name_plural = 'Categories'

    def __str__(self):
        return self.name


class Article(BaseModel):
    """
    A newsroom article: the root of the article aggregate.
    """

    STATUS_DRAFT = 'draft'
    STATUS_PENDING_APPROVAL = 'pending_approval'
    STATUS_PUBLISHED = 'published'
    STATUS_ARCHIVED = 'archived'

    STATUS_CHOICES = [
        (STATUS_DRAFT, 'Draft'),
        (STATUS_PENDING_APPROVAL, 'Pending Approval'),
        (STATUS_PUBLISHED, 'Published'),
        (STATUS_ARCHIVED, 'Archived'),
    ]

    PRIORITY_CHOICES = [
        ('low', 'Low'),
        ('medium', 'Medium'),
        ('high', 'High'),
        ('urgent', 'Urgent'),
    ]

    # Basic Article Information
    title = models.CharField(
        max_length=500,
        verbose_name='Title'
    )

    slug = models.SlugField(
        max_length=200,
        unique=True,
        verbose_name='Slug',
        help_text='Derived from the title plus a base36 timestamp suffix'
    )

    content = models.TextField(
        verbose_name='Content',
        help_text='Raw body as submitted, including formatting markers'
    )

    processed_content = models.TextField(
        blank=True,
        verbose_name='Processed Content',
        help_text='Display body with formatting markers rendered to HTML'
    )

    excerpt = models.TextField(
        blank=True,
        verbose_name='Excerpt'
    )

    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='articles',
        verbose_name='Author'
    )

    primary_category = models.ForeignKey(
        Category,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='primary_articles',
        verbose_name='Primary Category',
        help_text='Mirrors the primary category link'
    )

    priority = models.CharField(
        max_length=10,
        choices=PRIORITY_CHOICES,
        default='medium',
        verbose_name='Priority'
    )

    reading_time = models.PositiveIntegerField(
        default=1,
        validators=[MinValueValidator(1)],
        verbose_name='Reading Time',
        help_text='Estimated reading time in minutes'
    )

    status = models.CharField(
        max_length=20,
        choices=STATUS_CHOICES,
        default=STATUS_DRAFT,
        db_index=True,
        verbose_name='Status'
    )

    # Engagement counters
    views = models.PositiveIntegerField(default=0, verbose_name='Views')
    likes_count = models.PositiveIntegerField(default=0, verbose_name='Likes')
    comments_count = models.PositiveIntegerField(default=0, verbose_name='Comments')
    share_count = models.PositiveIntegerField(default=0, verbose_name='Shares')

    quotes_data = models.JSONField(
        default=list,
        blank=True,
        verbose_name='Quotes',
        help_text='Quotes extracted from the raw body on the last write'
    )

    image_url = models.CharField(
        max_length=1000,
        blank=True,
        verbose_name='Cover Image URL',
        help_text='Mirror of the featured media asset url'
    )

    tags = models.TextField(
        blank=True,
        verbose_name='Tags',
        help_text='Comma separated'
    )

    meta_description = models.TextField(
        blank=True,
        verbose_name='Meta Description'
    )

    seo_keywords = models.TextField(
        blank=True,
        verbose_name='SEO Keywords'
    )

    published_at = models.DateTimeField(
        null=True,
        blank=True,
        db_index=True,
        verbose_name='Published At',
        help_text='Set the first time the article is published, never cleared'
    )

    class Meta:
        db_table = 'articles'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['status', 'published_at'], name='articles_status_pub_idx'),
            models.Index(fields=['priority'], name='articles_priority_idx'),
        ]
        verbose_name = 'Article'
        verbose_name_plural = 'Articles'

    def __str__(self):
        return self.title[:50]

    @property
    def is_published(self):
        return self.status == self.STATUS_PUBLISHED

    @property
    def tag_list(self):
        return [tag.strip() for tag in (self.tags or '').split(',') if tag.strip()]


class ArticleCategory(models.Model):
    """
    Membership of an article in a category. Exactly one link per article is
    primary.
    """

    article = models.ForeignKey(
        Article,
        on_delete=models.CASCADE,
        related_name='category_links',
        verbose_name='Article'
    )

    category = models.ForeignKey(
        Category,
        on_delete=models.CASCADE,
        related_name='article_links',
        verbose_name='Category'
    )

    is_primary = models.BooleanField(
        default=False,
        verbose_name='Primary'
    )

    class Meta:
        db_table = 'article_categories'
        verbose_name = 'Article Category'
        verbose_name_plural = 'Article Categories'
        constraints = [
            models.UniqueConstraint(
                fields=['article', 'category'],
                name='unique_article_category',
            ),
            models.UniqueConstraint(
                fields=['article'],
                condition=Q(is_primary=True),
                name='unique_primary_category_per_article',
            ),
        ]

    def __str__(self):
        return f"{self.article_id} -> {self.category_id}{' (primary)' if self.is_primary else ''}"


class ArticleMedia(BaseModel):
    """
    Image attached to an article. At most one per article is featured.
    """

    article = models.ForeignKey(
        Article,
        on_delete=models.CASCADE,
        related_name='media',
        verbose_name='Article'
    )

    url = models.CharField(
        max_length=1000,
        verbose_name='URL'
    )

    caption = models.TextField(
        blank=True,
        verbose_name='Caption'
    )

    alt_text = models.CharField(
        max_length=500,
        blank=True,
        verbose_name='Alt Text'
    )

    display_order = models.IntegerField(
        default=0,
        verbose_name='Display Order'
    )

    is_featured = models.BooleanField(
        default=False,
        verbose_name='Featured'
    )

    width = models.PositiveIntegerField(null=True, blank=True)
    height = models.PositiveIntegerField(null=True, blank=True)
    file_size = models.PositiveBigIntegerField(null=True, blank=True)

    mime_type = models.CharField(
        max_length=100,
        blank=True,
        verbose_name='MIME Type'
    )

    storage_provider = models.CharField(
        max_length=50,
        blank=True,
        verbose_name='Storage Provider'
    )

    storage_id = models.CharField(
        max_length=500,
        blank=True,
        verbose_name='Storage ID',
        help_text='Provider-side identifier of the stored file'
    )

    metadata = models.JSONField(
        default=dict,
        blank=True,
        verbose_name='Metadata',
        help_text='originalname, filename, has_watermark'
    )

    class Meta:
        db_table = 'article_media'
        ordering = ['display_order', 'id']
        verbose_name = 'Article Media'
        verbose_name_plural = 'Article Media'
        constraints = [
            models.UniqueConstraint(
                fields=['article'],
                condition=Q(is_featured=True),
                name='unique_featured_media_per_article',
            ),
        ]

    def __str__(self):
        return f"Media {self.pk} for {self.article_id}"


class ArticleSocialLink(BaseModel):
    """
    Embedded social media post shown alongside an article.
    """

    article = models.ForeignKey(
        Article,
        on_delete=models.CASCADE,
        related_name='social_links',
        verbose_name='Article'
    )

    platform = models.CharField(
        max_length=50,
        default='youtube_video',
        verbose_name='Platform'
    )

    post_type = models.CharField(
        max_length=50,
        default='video',
        verbose_name='Post Type'
    )

    url = models.CharField(
        max_length=1000,
        verbose_name='URL'
    )

    display_order = models.IntegerField(
        default=1,
        verbose_name='Display Order'
    )

    auto_embed = models.BooleanField(default=True, verbose_name='Auto Embed')
    show_full_embed = models.BooleanField(default=True, verbose_name='Show Full Embed')
    is_featured = models.BooleanField(default=False, verbose_name='Featured')

    caption = models.TextField(
        null=True,
        blank=True,
        verbose_name='Caption'
    )

    class Meta:
        db_table = 'article_social_links'
        ordering = ['display_order', 'id']
        verbose_name = 'Article Social Link'
        verbose_name_plural = 'Article Social Links'

    def __str__(self):
        return f"{self.platform}: {self.url[:50]}"


class ArticleApproval(BaseModel):
    """
    Approval queue entry. workflow_status is advanced by the review
    workflow, independently of Article.status.
    """

    WORKFLOW_STATUS_CHOICES = [
        ('pending_approval', 'Pending Approval'),
        ('approved', 'Approved'),
        ('rejected', 'Rejected'),
        ('changes_requested', 'Changes Requested'),
    ]

    article = models.OneToOneField(
        Article,
        on_delete=models.CASCADE,
        related_name='approval',
        verbose_name='Article'
    )

    workflow_status = models.CharField(
        max_length=30,
        choices=WORKFLOW_STATUS_CHOICES,
        default='pending_approval',
        db_index=True,
        verbose_name='Workflow Status'
    )

    submitted_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='submitted_approvals',
        verbose_name='Submitted By'
    )

    submitted_at = models.DateTimeField(
        default=timezone.now,
        verbose_name='Submitted At'
    )

    reviewed_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='reviewed_approvals',
        verbose_name='Reviewed By'
    )

    reviewed_at = models.DateTimeField(null=True, blank=True)

    notes = models.TextField(blank=True)

    class Meta:
        db_table = 'article_approvals'
        verbose_name = 'Article Approval'
        verbose_name_plural = 'Article Approvals'

    def __str__(self):
        return f"Approval for {self.article_id}: {self.workflow_status}"


class ArticleComment(BaseModel):
    """Reader comment on an article."""

    article = models.ForeignKey(
        Article,
        on_delete=models.CASCADE,
        related_name='comments',
        verbose_name='Article'
    )

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='article_comments'
    )

    author_name = models.CharField(max_length=200, blank=True)
    body = models.TextField()
    is_approved = models.BooleanField(default=False)

    class Meta:
        db_table = 'article_comments'
        verbose_name = 'Article Comment'
        verbose_name_plural = 'Article Comments'

    def __str__(self):
        return f"Comment {self.pk} on {self.article_id}"


class ArticleLike(models.Model):
    """Reader like on an article."""

    article = models.ForeignKey(
        Article,
        on_delete=models.CASCADE,
        related_name='likes',
        verbose_name='Article'
    )

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='article_likes'
    )

    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'article_likes'
        constraints = [
            models.UniqueConstraint(fields=['article', 'user'], name='unique_article_like'),
        ]

    def __str__(self):
        return f"Like {self.user_id} -> {self.article_id}"


class ArticleView(models.Model):
    """Single view/engagement record."""

    article = models.ForeignKey(
        Article,
        on_delete=models.CASCADE,
        related_name='view_records',
        verbose_name='Article'
    )

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='article_views'
    )

    ip_address = models.CharField(max_length=100, blank=True)
    viewed_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        db_table = 'article_views'

    def __str__(self):
        return f"View of {self.article_id} at {self.viewed_at}"


class SavedArticle(models.Model):
    """Reader bookmark."""

    article = models.ForeignKey(
        Article,
        on_delete=models.CASCADE,
        related_name='saved_by',
        verbose_name='Article'
    )

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='saved_articles'
    )

    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'saved_articles'
        constraints = [
            models.UniqueConstraint(fields=['article', 'user'], name='unique_saved_article'),
        ]

    def __str__(self):
        return f"Saved {self.article_id} by {self.user_id}"
