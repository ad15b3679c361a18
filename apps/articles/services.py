"""
Article aggregate services: validation, transactional create/update/delete.

ArticleAggregateManager is the only writer of an article together with its
category links, media, social links and quote snapshot. Every write runs in a
single transaction.atomic() block; any failure leaves the database as it was.
"""

import logging
import math
import re
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import DatabaseError, IntegrityError, connection, transaction
from django.utils import timezone

from apps.core import audit
from apps.core.exceptions import (
    ConflictError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from apps.core.metrics import increment_article_deletion, increment_article_write
from apps.core.permissions import RoleCapabilities
from .formatting import format_content
from .media import get_media_ingestor
from .models import (
    Article,
    ArticleApproval,
    ArticleCategory,
    ArticleMedia,
    ArticleSocialLink,
    Category,
)
from .publish_gate import ArticleStatus, PublishDecision, decide

logger = logging.getLogger(__name__)


SLUG_MAX_BASE_LENGTH = 180
WORDS_PER_MINUTE = 200
EXCERPT_FROM_TITLE_LENGTH = 200
VALID_PRIORITIES = {choice for choice, _ in Article.PRIORITY_CHOICES}

# Columns an update rewrites. Engagement counters are written elsewhere and
# must not be reset from a stale copy.
UPDATABLE_FIELDS = [
    'title',
    'slug',
    'content',
    'processed_content',
    'excerpt',
    'primary_category',
    'priority',
    'reading_time',
    'status',
    'quotes_data',
    'tags',
    'meta_description',
    'seo_keywords',
    'published_at',
    'updated_at',
]

_BASE36 = '0123456789abcdefghijklmnopqrstuvwxyz'


# =============================================================================
# Derived fields
# =============================================================================

def to_base36(number: int) -> str:
    if number == 0:
        return '0'
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(_BASE36[remainder])
    return ''.join(reversed(digits))


def generate_slug(title: str, now_ms: Optional[int] = None) -> str:
    """
    Build a url slug from the title plus a base36 millisecond timestamp.

    'Hello, World!' -> 'hello-world-lq3x9k2a'
    """
    base = (title or '').lower().strip()
    base = re.sub(r'[^a-z0-9\s-]', '', base)
    base = re.sub(r'\s+', '-', base)
    base = re.sub(r'-+', '-', base)
    base = base[:SLUG_MAX_BASE_LENGTH]
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"{base}-{to_base36(now_ms)}"


def calculate_reading_time(content: str) -> int:
    """Minutes at 200 words per minute, at least 1."""
    if not content:
        return 1
    return max(1, math.ceil(len(content.split()) / WORDS_PER_MINUTE))


def parse_positive_int(value) -> Optional[int]:
    """Return value as a positive int, or None if it is not one."""
    if value is None or isinstance(value, bool):
        return None
    try:
        parsed = int(str(value).strip())
    except (TypeError, ValueError):
        return None
    return parsed if parsed > 0 else None


# =============================================================================
# Inputs and results
# =============================================================================

@dataclass
class Actor:
    """Who is performing a write, as seen by the audit log and publish gate."""
    id: Optional[int]
    role: Optional[str]
    ip: str = ''


@dataclass
class MediaUpload:
    """An uploaded file with its optional per-image metadata."""
    file: Any
    caption: str = ''
    order: Optional[int] = None
    is_featured: bool = False
    has_watermark: bool = False


@dataclass
class ArticleSubmission:
    """Parsed create/update payload."""
    title: Optional[str] = None
    content: Optional[str] = None
    category_ids: Optional[List[Any]] = None
    primary_category_id: Any = None
    author_id: Any = None
    excerpt: str = ''
    priority: str = 'medium'
    tags: str = ''
    meta_description: str = ''
    seo_keywords: str = ''
    status: Optional[str] = 'draft'
    social_links: List[Dict[str, Any]] = field(default_factory=list)
    media: List[MediaUpload] = field(default_factory=list)


@dataclass
class WriteResult:
    """Outcome of a create or update."""
    article: Article
    decision: PublishDecision

    @property
    def status(self) -> str:
        return self.decision.final_status.value

    @property
    def requires_approval(self) -> bool:
        return self.decision.requires_approval


@dataclass
class DeletionReport:
    """Outcome of a hard delete: rows removed per table."""
    article_id: int
    title: str
    deleted_records: Dict[str, int] = field(default_factory=dict)


@dataclass
class BulkDeleteResult:
    success: List[Dict[str, Any]] = field(default_factory=list)
    failed: List[Dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {'success': self.success, 'failed': self.failed}


@dataclass
class _ValidatedFields:
    title: str
    content: str
    category_ids: List[int]
    primary_category_id: int
    author_id: Optional[int]
    priority: str


# =============================================================================
# Aggregate manager
# =============================================================================

class ArticleAggregateManager:
    """
    Transactional writer for the article aggregate.

    Usage:
        manager = ArticleAggregateManager()
        result = manager.create(submission, actor)
        report = manager.delete(article_id, actor)
    """

    def __init__(self, ingestor=None, capabilities: Optional[RoleCapabilities] = None):
        self.ingestor = ingestor or get_media_ingestor()
        self.capabilities = capabilities

    # -------------------------------------------------------------------------
    # Create
    # -------------------------------------------------------------------------

    def create(self, submission: ArticleSubmission, actor: Actor) -> WriteResult:
        fields = self._validate(submission, require_author=True)
        decision = decide(submission.status, actor.role, self.capabilities)
        final_status = decision.final_status.value
        formatted = format_content(fields.content)
        stored_ids: List[str] = []

        try:
            with transaction.atomic():
                now = timezone.now()
                article = Article.objects.create(
                    title=fields.title,
                    slug=generate_slug(fields.title),
                    content=fields.content,
                    processed_content=formatted.display,
                    excerpt=self._excerpt(submission, fields.title),
                    author_id=fields.author_id,
                    primary_category_id=fields.primary_category_id,
                    priority=fields.priority,
                    reading_time=calculate_reading_time(fields.content),
                    status=final_status,
                    quotes_data=[quote.to_dict() for quote in formatted.quotes],
                    tags=(submission.tags or '').strip(),
                    meta_description=(submission.meta_description or '').strip(),
                    seo_keywords=(submission.seo_keywords or '').strip(),
                    published_at=now if decision.final_status is ArticleStatus.PUBLISHED else None,
                )

                self._write_category_links(article, fields.category_ids, fields.primary_category_id)
                self._write_social_links(article, submission.social_links)
                self._attach_media(article, submission.media, stored_ids, has_featured=False)

                if decision.requires_approval:
                    self._queue_for_approval(article, actor)

                audit.log_activity(
                    actor.id,
                    audit.ACTION_CREATE_POST,
                    'news',
                    article.pk,
                    {
                        'title': article.title,
                        'status': final_status,
                        'requires_approval': decision.requires_approval,
                    },
                    actor.ip,
                )
        except IntegrityError as e:
            self._discard_after_rollback(stored_ids)
            increment_article_write(action='create', status='error')
            logger.warning(f"Article create conflict: {e}")
            raise ConflictError("Conflicting article write, please retry", details={'error': str(e)})
        except DatabaseError as e:
            self._discard_after_rollback(stored_ids)
            increment_article_write(action='create', status='error')
            logger.error(f"Article create failed: {e}")
            raise PersistenceError("Failed to create post", details={'error': str(e)})
        except Exception:
            self._discard_after_rollback(stored_ids)
            increment_article_write(action='create', status='error')
            raise

        increment_article_write(action='create', status=final_status)
        logger.info(
            f"Article {article.pk} created by actor={actor.id} status={final_status} "
            f"requires_approval={decision.requires_approval}"
        )
        return WriteResult(article=article, decision=decision)

    # -------------------------------------------------------------------------
    # Update
    # -------------------------------------------------------------------------

    def update(self, article_id, submission: ArticleSubmission, actor: Actor) -> WriteResult:
        article_pk = parse_positive_int(article_id)
        article = Article.objects.filter(pk=article_pk).first() if article_pk else None
        if article is None:
            raise NotFoundError("Post not found")

        fields = self._validate(submission, require_author=False)
        decision = decide(submission.status, actor.role, self.capabilities)
        final_status = decision.final_status.value
        formatted = format_content(fields.content)
        stored_ids: List[str] = []

        try:
            with transaction.atomic():
                article.title = fields.title
                article.slug = generate_slug(fields.title)
                article.content = fields.content
                article.processed_content = formatted.display
                article.excerpt = self._excerpt(submission, fields.title)
                article.primary_category_id = fields.primary_category_id
                article.priority = fields.priority
                article.reading_time = calculate_reading_time(fields.content)
                article.status = final_status
                article.quotes_data = [quote.to_dict() for quote in formatted.quotes]
                article.tags = (submission.tags or '').strip()
                article.meta_description = (submission.meta_description or '').strip()
                article.seo_keywords = (submission.seo_keywords or '').strip()
                if decision.final_status is ArticleStatus.PUBLISHED and article.published_at is None:
                    article.published_at = timezone.now()
                article.save(update_fields=UPDATABLE_FIELDS)

                article.category_links.all().delete()
                self._write_category_links(article, fields.category_ids, fields.primary_category_id)

                article.social_links.all().delete()
                self._write_social_links(article, submission.social_links)

                has_featured = article.media.filter(is_featured=True).exists()
                self._attach_media(article, submission.media, stored_ids, has_featured=has_featured)

                if decision.requires_approval:
                    self._queue_for_approval(article, actor)

                audit.log_activity(
                    actor.id,
                    audit.ACTION_UPDATE_POST,
                    'news',
                    article.pk,
                    {
                        'title': article.title,
                        'status': final_status,
                        'requires_approval': decision.requires_approval,
                    },
                    actor.ip,
                )
        except IntegrityError as e:
            self._discard_after_rollback(stored_ids)
            increment_article_write(action='update', status='error')
            logger.warning(f"Article {article_pk} update conflict: {e}")
            raise ConflictError("Conflicting article write, please retry", details={'error': str(e)})
        except DatabaseError as e:
            self._discard_after_rollback(stored_ids)
            increment_article_write(action='update', status='error')
            logger.error(f"Article {article_pk} update failed: {e}")
            raise PersistenceError("Failed to update post", details={'error': str(e)})
        except Exception:
            self._discard_after_rollback(stored_ids)
            increment_article_write(action='update', status='error')
            raise

        increment_article_write(action='update', status=final_status)
        logger.info(f"Article {article.pk} updated by actor={actor.id} status={final_status}")
        return WriteResult(article=article, decision=decision)

    # -------------------------------------------------------------------------
    # Delete
    # -------------------------------------------------------------------------

    def delete(self, article_id, actor: Actor, audit_entry: bool = True) -> DeletionReport:
        """
        Permanently delete an article and every record that references it.

        Dependent rows are removed explicitly, one savepoint per table, before
        the article row itself. If the article row is not removed the whole
        deletion is rolled back.
        """
        article_pk = parse_positive_int(article_id)
        if article_pk is None:
            raise ValidationError("Valid news ID is required", field='news_id')

        article = Article.objects.filter(pk=article_pk).only('id', 'title').first()
        if article is None:
            increment_article_deletion(status='not_found')
            raise NotFoundError("News article not found")

        stored_ids = [
            storage_id for storage_id in
            ArticleMedia.objects.filter(article_id=article_pk).values_list('storage_id', flat=True)
            if storage_id
        ]
        report = DeletionReport(article_id=article_pk, title=article.title)

        try:
            with transaction.atomic():
                report.deleted_records = self._delete_dependents(article_pk)

                removed = self._delete_root(article_pk)
                if removed == 0:
                    raise PersistenceError("Failed to delete news article - no rows affected")
                report.deleted_records[Article._meta.db_table] = removed

                if audit_entry:
                    audit.log_activity(
                        actor.id,
                        audit.ACTION_DELETE_NEWS,
                        'news',
                        article_pk,
                        {'title': article.title, 'deleted_records': report.deleted_records},
                        actor.ip,
                    )

                if stored_ids:
                    transaction.on_commit(lambda: self.ingestor.discard(stored_ids))
        except PersistenceError:
            increment_article_deletion(status='error')
            logger.error(f"Article {article_pk} delete rolled back: root row not removed")
            raise
        except DatabaseError as e:
            increment_article_deletion(status='error')
            logger.error(f"Article {article_pk} delete failed: {e}")
            raise PersistenceError("Failed to delete news article", details={'error': str(e)})

        increment_article_deletion(status='success')
        logger.info(f"Article {article_pk} deleted by actor={actor.id}: {report.deleted_records}")
        return report

    def bulk_delete(self, ids, actor: Actor) -> BulkDeleteResult:
        """
        Delete each id as its own unit of work.

        A failing id does not affect the others; one audit row summarizes the
        batch.
        """
        if not isinstance(ids, (list, tuple)) or len(ids) == 0:
            raise ValidationError("Valid news IDs array is required", field='news_ids')

        result = BulkDeleteResult()
        for raw_id in ids:
            article_pk = parse_positive_int(raw_id)
            if article_pk is None:
                result.failed.append({'id': raw_id, 'reason': 'Invalid id'})
                continue
            try:
                report = self.delete(article_pk, actor, audit_entry=False)
            except NotFoundError:
                result.failed.append({'id': raw_id, 'reason': 'Not found'})
            except (PersistenceError, ConflictError) as e:
                result.failed.append({'id': raw_id, 'reason': e.message})
            else:
                result.success.append({
                    'id': raw_id,
                    'title': report.title,
                    'deleted_records': report.deleted_records,
                })

        audit.log_activity(
            actor.id,
            audit.ACTION_BULK_DELETE,
            'news',
            None,
            {
                'deleted': [entry['id'] for entry in result.success],
                'failed': [entry['id'] for entry in result.failed],
            },
            actor.ip,
        )
        logger.info(
            f"Bulk delete by actor={actor.id}: {len(result.success)} succeeded, "
            f"{len(result.failed)} failed"
        )
        return result

    def dependent_tables(self):
        """
        (table, column) pairs of every record set that references an article.

        Reverse foreign keys come from the ORM; deployment-specific tables
        from settings.ARTICLE_EXTRA_DEPENDENT_TABLES.
        """
        tables = []
        for relation in Article._meta.related_objects:
            if relation.many_to_many:
                continue
            tables.append((relation.related_model._meta.db_table, relation.field.column))
        for table, column in getattr(settings, 'ARTICLE_EXTRA_DEPENDENT_TABLES', []):
            tables.append((table, column))

        seen = set()
        unique = []
        for entry in tables:
            if entry not in seen:
                seen.add(entry)
                unique.append(entry)
        return unique

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _validate(self, submission: ArticleSubmission, require_author: bool) -> _ValidatedFields:
        """Fail-fast validation. Nothing has been written when this raises."""
        title = (submission.title or '').strip()
        content = submission.content or ''

        missing = [
            name for name, present in (
                ('title', bool(title)),
                ('content', bool(content.strip())),
                ('category_ids', submission.category_ids is not None),
                ('primary_category_id', submission.primary_category_id not in (None, '')),
                ('author_id', not require_author or submission.author_id not in (None, '')),
            )
            if not present
        ]
        if missing:
            required = 'title, content, category_ids, primary_category_id'
            if require_author:
                required += ', author_id'
            raise ValidationError(
                f"Missing required fields: {required}",
                details={'missing': missing},
            )

        author_id = None
        if require_author:
            author_id = parse_positive_int(submission.author_id)
            if author_id is None:
                raise ValidationError("Invalid author_id", field='author_id')

        if not isinstance(submission.category_ids, (list, tuple)) or len(submission.category_ids) == 0:
            raise ValidationError("At least one category must be selected", field='category_ids')

        category_ids = []
        for raw in submission.category_ids:
            category_id = parse_positive_int(raw)
            if category_id is None:
                raise ValidationError(f"Invalid category id: {raw}", field='category_ids')
            if category_id not in category_ids:
                category_ids.append(category_id)

        primary_category_id = parse_positive_int(submission.primary_category_id)
        if primary_category_id is None:
            raise ValidationError("Primary category ID is required", field='primary_category_id')

        if primary_category_id not in category_ids:
            raise ValidationError(
                "Primary category must be one of the selected categories",
                field='primary_category_id',
            )

        priority = (submission.priority or 'medium').strip().lower()
        if priority not in VALID_PRIORITIES:
            raise ValidationError(f"Invalid priority: {priority}", field='priority')

        # Existence checks, still before any write
        if author_id is not None and not get_user_model().objects.filter(pk=author_id).exists():
            raise ValidationError("Author not found", field='author_id')

        found = set(Category.objects.filter(pk__in=category_ids).values_list('pk', flat=True))
        unknown = [category_id for category_id in category_ids if category_id not in found]
        if unknown:
            raise ValidationError(
                "One or more categories do not exist",
                field='category_ids',
                details={'unknown': unknown},
            )

        return _ValidatedFields(
            title=title,
            content=content,
            category_ids=category_ids,
            primary_category_id=primary_category_id,
            author_id=author_id,
            priority=priority,
        )

    def _excerpt(self, submission: ArticleSubmission, title: str) -> str:
        excerpt = (submission.excerpt or '').strip()
        return excerpt or title[:EXCERPT_FROM_TITLE_LENGTH]

    def _write_category_links(self, article, category_ids, primary_category_id):
        ArticleCategory.objects.bulk_create([
            ArticleCategory(
                article=article,
                category_id=category_id,
                is_primary=category_id == primary_category_id,
            )
            for category_id in category_ids
        ])

    def _write_social_links(self, article, links):
        rows = []
        for link in links or []:
            url = (link.get('url') or '').strip()
            if not url:
                continue
            rows.append(ArticleSocialLink(
                article=article,
                platform=link.get('platform') or 'youtube_video',
                post_type=link.get('post_type') or 'video',
                url=url,
                display_order=link.get('display_order') or 1,
                auto_embed=link.get('auto_embed', True) is not False,
                show_full_embed=link.get('show_full_embed', True) is not False,
                is_featured=bool(link.get('is_featured', False)),
                caption=link.get('caption') or None,
            ))
        if rows:
            ArticleSocialLink.objects.bulk_create(rows)

    def _attach_media(self, article, uploads: List[MediaUpload], stored_ids: List[str], has_featured: bool):
        """
        Store uploads and add media rows.

        The first upload marked featured wins. Without one, the first upload
        becomes featured only if the article has no featured media yet.
        """
        if not uploads:
            return

        featured_index = next((i for i, upload in enumerate(uploads) if upload.is_featured), None)
        if featured_index is None and not has_featured:
            featured_index = 0

        if featured_index is not None and has_featured:
            article.media.filter(is_featured=True).update(is_featured=False)

        offset = article.media.count()
        featured_url = None
        for index, upload in enumerate(uploads):
            try:
                stored = self.ingestor.ingest(upload.file)
            except OSError as e:
                raise PersistenceError("Media upload failed", details={'error': str(e)})
            stored_ids.append(stored.provider_id)

            is_featured = index == featured_index
            ArticleMedia.objects.create(
                article=article,
                url=stored.url,
                caption=upload.caption or '',
                alt_text=(upload.caption or stored.original_name or '')[:500],
                display_order=upload.order if upload.order is not None else offset + index,
                is_featured=is_featured,
                width=stored.width,
                height=stored.height,
                file_size=stored.size,
                mime_type=stored.mimetype,
                storage_provider=stored.provider,
                storage_id=stored.provider_id,
                metadata={
                    'originalname': stored.original_name,
                    'filename': stored.filename,
                    'has_watermark': bool(upload.has_watermark),
                },
            )
            if is_featured:
                featured_url = stored.url

        if featured_url:
            article.image_url = featured_url
            article.save(update_fields=['image_url', 'updated_at'])

    def _queue_for_approval(self, article, actor: Actor):
        """
        Put the article in the review queue.

        There is one queue entry per article; re-submitting resets it to
        pending and clears the previous review.
        """
        ArticleApproval.objects.update_or_create(
            article=article,
            defaults={
                'workflow_status': 'pending_approval',
                'submitted_by_id': actor.id,
                'submitted_at': timezone.now(),
                'reviewed_by': None,
                'reviewed_at': None,
            },
        )

    def _delete_dependents(self, article_pk) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        existing = set(connection.introspection.table_names())

        for table, column in self.dependent_tables():
            if table not in existing:
                logger.info(f"Skipping dependent table {table}: does not exist")
                continue
            try:
                with transaction.atomic():
                    with connection.cursor() as cursor:
                        cursor.execute(
                            f"DELETE FROM {connection.ops.quote_name(table)} "
                            f"WHERE {connection.ops.quote_name(column)} = %s",
                            [article_pk],
                        )
                        counts[table] = counts.get(table, 0) + max(cursor.rowcount, 0)
            except DatabaseError as e:
                logger.warning(f"Could not clear {table} for article {article_pk}: {e}")
                counts.setdefault(table, 0)
        return counts

    def _delete_root(self, article_pk) -> int:
        """Delete the article row itself; returns the affected row count."""
        table = connection.ops.quote_name(Article._meta.db_table)
        column = connection.ops.quote_name(Article._meta.pk.column)
        with connection.cursor() as cursor:
            cursor.execute(f"DELETE FROM {table} WHERE {column} = %s", [article_pk])
            return cursor.rowcount

    def _discard_after_rollback(self, stored_ids: List[str]):
        if stored_ids:
            self.ingestor.discard(stored_ids)
