"""
Tests for the article aggregate manager.

Tests cover:
- Derived fields (slug, reading time, excerpt)
- Fail-fast validation order, with nothing written on failure
- Create/update with category links, social links, media and approval queue
- Transaction rollback and media cleanup on failure
- Hard delete of the aggregate and every dependent record
- Bulk delete with per-id outcomes
"""

import pytest
from datetime import timedelta
from unittest.mock import patch

from django.core.files.uploadedfile import SimpleUploadedFile
from django.db import DatabaseError, connection
from django.db.models import F
from django.utils import timezone

from apps.articles.formatting import format_content
from apps.articles.media import DefaultStorageIngestor, IngestedMedia
from apps.articles.models import (
    Article,
    ArticleApproval,
    ArticleCategory,
    ArticleComment,
    ArticleLike,
    ArticleMedia,
    ArticleSocialLink,
    ArticleView,
    SavedArticle,
)
from apps.articles.services import (
    Actor,
    ArticleAggregateManager,
    ArticleSubmission,
    MediaUpload,
    calculate_reading_time,
    generate_slug,
    parse_positive_int,
    to_base36,
)
from apps.core.exceptions import (
    ConflictError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from apps.core.models import ActivityLog
from apps.promotions.models import BreakingPromotion, PinnedPromotion


# ============================================================================
# Fixtures
# ============================================================================

class RecordingIngestor:
    """In-memory ingestor that records what was stored and discarded."""

    provider = 'memory'

    def __init__(self):
        self.stored = []
        self.discarded = []

    def ingest(self, upload):
        name = f'news/test/{len(self.stored)}-{upload.name}'
        self.stored.append(name)
        return IngestedMedia(
            url=f'/media/{name}',
            size=upload.size,
            mimetype=upload.content_type,
            provider=self.provider,
            provider_id=name,
            original_name=upload.name,
            filename=name.rsplit('/', 1)[-1],
        )

    def discard(self, provider_ids):
        self.discarded.extend(provider_ids)
        return len(provider_ids)


@pytest.fixture
def ingestor():
    return RecordingIngestor()


@pytest.fixture
def manager(ingestor):
    return ArticleAggregateManager(ingestor=ingestor)


@pytest.fixture
def editor_actor(editor):
    return Actor(id=editor.pk, role='editor', ip='10.0.0.5')


@pytest.fixture
def admin_actor(admin_staff):
    return Actor(id=admin_staff.pk, role='admin', ip='10.0.0.6')


def image(name='photo.jpg'):
    return SimpleUploadedFile(name, b'\xff\xd8\xff\xe0fake-jpeg', content_type='image/jpeg')


def submission(author, **overrides):
    data = {
        'title': 'Budget vote passes',
        'content': 'The house voted. [QUOTE sayer="Speaker"]Order![/QUOTE]',
        'category_ids': [3, 7],
        'primary_category_id': 7,
        'author_id': author.pk,
        'status': 'draft',
    }
    data.update(overrides)
    return ArticleSubmission(**data)


# ============================================================================
# Derived fields
# ============================================================================

class TestDerivedFields:

    def test_to_base36(self):
        assert to_base36(0) == '0'
        assert to_base36(35) == 'z'
        assert to_base36(36) == '10'

    def test_generate_slug(self):
        assert generate_slug('Hello, World!', now_ms=36) == 'hello-world-10'
        assert generate_slug('  Many   spaces -- here ', now_ms=0) == 'many-spaces-here-0'

    def test_generate_slug_truncates_base(self):
        slug = generate_slug('a' * 300, now_ms=0)
        assert slug == 'a' * 180 + '-0'

    def test_reading_time(self):
        assert calculate_reading_time('') == 1
        assert calculate_reading_time('word ' * 10) == 1
        assert calculate_reading_time('word ' * 401) == 3

    @pytest.mark.parametrize('value,expected', [
        (5, 5), ('12', 12), (' 3 ', 3), (0, None), (-1, None),
        ('abc', None), (None, None), (True, None), ('1.5', None),
    ])
    def test_parse_positive_int(self, value, expected):
        assert parse_positive_int(value) == expected


# ============================================================================
# Validation
# ============================================================================

@pytest.mark.django_db
class TestValidation:

    def test_missing_fields(self, manager, editor, editor_actor, categories):
        with pytest.raises(ValidationError) as exc_info:
            manager.create(submission(editor, title='  ', category_ids=None), editor_actor)

        assert exc_info.value.message == (
            'Missing required fields: title, content, category_ids, primary_category_id, author_id'
        )
        assert exc_info.value.error_details['missing'] == ['title', 'category_ids']

    def test_invalid_author(self, manager, editor, editor_actor, categories):
        with pytest.raises(ValidationError, match='Invalid author_id'):
            manager.create(submission(editor, author_id='abc'), editor_actor)

    def test_author_checked_before_categories(self, manager, editor, editor_actor, categories):
        with pytest.raises(ValidationError, match='Invalid author_id'):
            manager.create(submission(editor, author_id=0, category_ids=[]), editor_actor)

    def test_empty_category_set(self, manager, editor, editor_actor, categories):
        with pytest.raises(ValidationError, match='At least one category must be selected'):
            manager.create(submission(editor, category_ids=[]), editor_actor)

    def test_primary_not_a_valid_id(self, manager, editor, editor_actor, categories):
        with pytest.raises(ValidationError, match='Primary category ID is required'):
            manager.create(submission(editor, primary_category_id='abc'), editor_actor)

    def test_primary_outside_set_writes_nothing(self, manager, editor, editor_actor, categories):
        with pytest.raises(ValidationError) as exc_info:
            manager.create(submission(editor, category_ids=[3], primary_category_id=7), editor_actor)

        assert exc_info.value.message == 'Primary category must be one of the selected categories'
        assert exc_info.value.field == 'primary_category_id'
        assert Article.objects.count() == 0
        assert ArticleCategory.objects.count() == 0
        assert ActivityLog.objects.count() == 0

    def test_unknown_category(self, manager, editor, editor_actor, categories):
        with pytest.raises(ValidationError) as exc_info:
            manager.create(submission(editor, category_ids=[3, 99], primary_category_id=3), editor_actor)

        assert exc_info.value.error_details['unknown'] == [99]
        assert Article.objects.count() == 0

    def test_unknown_author(self, manager, editor, editor_actor, categories):
        with pytest.raises(ValidationError, match='Author not found'):
            manager.create(submission(editor, author_id=424242), editor_actor)

    def test_unknown_status(self, manager, editor, editor_actor, categories):
        with pytest.raises(ValidationError):
            manager.create(submission(editor, status='live'), editor_actor)
        assert Article.objects.count() == 0

    def test_invalid_priority(self, manager, editor, editor_actor, categories):
        with pytest.raises(ValidationError, match='Invalid priority'):
            manager.create(submission(editor, priority='critical'), editor_actor)


# ============================================================================
# Create
# ============================================================================

@pytest.mark.django_db
class TestCreate:

    def test_editor_publish_goes_to_approval(self, manager, editor, editor_actor, categories):
        result = manager.create(submission(editor, status='published'), editor_actor)
        article = result.article

        assert result.status == 'pending_approval'
        assert result.requires_approval is True
        assert article.status == 'pending_approval'
        assert article.published_at is None

        approval = ArticleApproval.objects.get(article=article)
        assert approval.workflow_status == 'pending_approval'
        assert approval.submitted_by_id == editor.pk

    def test_admin_publish_is_immediate(self, manager, admin_staff, admin_actor, categories):
        result = manager.create(submission(admin_staff, status='published'), admin_actor)

        assert result.status == 'published'
        assert result.requires_approval is False
        assert result.article.published_at is not None
        assert not ArticleApproval.objects.filter(article=result.article).exists()

    def test_aggregate_fields(self, manager, editor, editor_actor, categories):
        article = manager.create(submission(editor), editor_actor).article
        article.refresh_from_db()

        assert article.slug.startswith('budget-vote-passes-')
        assert article.excerpt == 'Budget vote passes'
        assert article.reading_time == 1
        assert article.primary_category_id == 7
        assert article.processed_content.startswith('The house voted. <blockquote')
        assert article.quotes_data == [
            {'text': 'Order!', 'sayer': 'Speaker', 'position': article.content.index('Order!')},
        ]

        links = {link.category_id: link.is_primary for link in article.category_links.all()}
        assert links == {3: False, 7: True}

    def test_audit_row(self, manager, editor, editor_actor, categories):
        article = manager.create(submission(editor), editor_actor).article

        entry = ActivityLog.objects.get(action='create_post')
        assert entry.actor_id == editor.pk
        assert entry.target_type == 'news'
        assert entry.target_id == article.pk
        assert entry.ip_address == '10.0.0.5'
        assert entry.details['status'] == 'draft'

    def test_social_links_without_url_are_dropped(self, manager, editor, editor_actor, categories):
        links = [
            {'platform': 'x_post', 'post_type': 'post', 'url': 'https://x.com/a/status/1'},
            {'platform': 'youtube_video', 'url': '   '},
        ]
        article = manager.create(submission(editor, social_links=links), editor_actor).article

        stored = list(ArticleSocialLink.objects.filter(article=article))
        assert len(stored) == 1
        assert stored[0].platform == 'x_post'
        assert stored[0].auto_embed is True

    def test_first_upload_featured_by_default(self, manager, ingestor, editor, editor_actor, categories):
        uploads = [MediaUpload(file=image('a.jpg')), MediaUpload(file=image('b.jpg'))]
        article = manager.create(submission(editor, media=uploads), editor_actor).article

        media = list(article.media.order_by('display_order'))
        assert [m.is_featured for m in media] == [True, False]
        assert [m.display_order for m in media] == [0, 1]
        assert Article.objects.get(pk=article.pk).image_url == media[0].url
        assert media[0].storage_id == ingestor.stored[0]

    def test_explicit_featured_upload_wins(self, manager, editor, editor_actor, categories):
        uploads = [
            MediaUpload(file=image('a.jpg'), caption='First'),
            MediaUpload(file=image('b.jpg'), caption='Cover', is_featured=True, has_watermark=True),
        ]
        article = manager.create(submission(editor, media=uploads), editor_actor).article

        featured = article.media.get(is_featured=True)
        assert featured.caption == 'Cover'
        assert featured.metadata['has_watermark'] is True
        assert article.media.filter(is_featured=True).count() == 1

    def test_default_storage_ingestor(self, editor, editor_actor, categories, settings, tmp_path):
        settings.MEDIA_ROOT = str(tmp_path)
        manager = ArticleAggregateManager(ingestor=DefaultStorageIngestor())

        article = manager.create(
            submission(editor, media=[MediaUpload(file=image('Front Page.JPG'))]),
            editor_actor,
        ).article

        media = article.media.get()
        assert media.storage_provider == 'default_storage'
        assert media.storage_id.startswith('news/')
        assert media.storage_id.endswith('.jpg')
        assert media.mime_type == 'image/jpeg'
        assert (tmp_path / media.storage_id).exists()

    def test_failure_rolls_back_and_discards_media(self, manager, ingestor, editor, editor_actor, categories):
        uploads = [MediaUpload(file=image('a.jpg'))]

        with patch.object(
            ArticleAggregateManager, '_queue_for_approval', side_effect=DatabaseError('disk full')
        ):
            with pytest.raises(PersistenceError):
                manager.create(submission(editor, status='published', media=uploads), editor_actor)

        assert Article.objects.count() == 0
        assert ArticleMedia.objects.count() == 0
        assert ArticleCategory.objects.count() == 0
        assert ingestor.discarded == ingestor.stored

    def test_upload_failure_is_persistence_error(self, manager, ingestor, editor, editor_actor, categories):
        with patch.object(RecordingIngestor, 'ingest', side_effect=OSError('bucket unavailable')):
            with pytest.raises(PersistenceError, match='Media upload failed'):
                manager.create(submission(editor, media=[MediaUpload(file=image())]), editor_actor)

        assert Article.objects.count() == 0

    def test_slug_collision_is_conflict(self, manager, editor, editor_actor, categories, make_article):
        make_article('Existing', slug='taken-slug')

        with patch('apps.articles.services.generate_slug', return_value='taken-slug'):
            with pytest.raises(ConflictError) as exc_info:
                manager.create(submission(editor), editor_actor)

        assert exc_info.value.status_code == 409
        assert Article.objects.count() == 1


# ============================================================================
# Update
# ============================================================================

@pytest.mark.django_db
class TestUpdate:

    def test_missing_article(self, manager, editor, editor_actor, categories):
        with pytest.raises(NotFoundError, match='Post not found'):
            manager.update(9999, submission(editor), editor_actor)

    def test_not_found_checked_before_validation(self, manager, editor, editor_actor):
        with pytest.raises(NotFoundError):
            manager.update(9999, ArticleSubmission(), editor_actor)

    def test_update_replaces_links_and_rederives(self, manager, editor, editor_actor, categories):
        created = manager.create(
            submission(editor, social_links=[{'url': 'https://youtu.be/old'}]),
            editor_actor,
        ).article
        old_slug = created.slug

        with patch('apps.articles.services.generate_slug', return_value='new-title-abc'):
            result = manager.update(
                created.pk,
                submission(
                    editor,
                    title='New title',
                    content='[BOLD]Fresh[/BOLD] body',
                    category_ids=[3],
                    primary_category_id=3,
                    author_id=None,
                    social_links=[{'url': 'https://youtu.be/new'}],
                ),
                editor_actor,
            )

        article = Article.objects.get(pk=created.pk)
        assert result.status == 'draft'
        assert article.slug == 'new-title-abc' != old_slug
        assert article.processed_content == '<strong>Fresh</strong> body'
        assert article.quotes_data == []
        assert list(article.category_links.values_list('category_id', 'is_primary')) == [(3, True)]
        assert list(article.social_links.values_list('url', flat=True)) == ['https://youtu.be/new']
        assert ActivityLog.objects.filter(action='update_post', target_id=article.pk).exists()

    def test_published_at_kept_on_republish(self, manager, admin_staff, admin_actor, categories):
        article = manager.create(submission(admin_staff, status='published'), admin_actor).article
        first_published = article.published_at

        manager.update(article.pk, submission(admin_staff, status='published'), admin_actor)

        assert Article.objects.get(pk=article.pk).published_at == first_published

    def test_editor_update_to_published_requeues(self, manager, editor, editor_actor, categories):
        article = manager.create(submission(editor), editor_actor).article

        result = manager.update(article.pk, submission(editor, status='published'), editor_actor)

        assert result.requires_approval is True
        assert ArticleApproval.objects.filter(article=article, workflow_status='pending_approval').count() == 1

    def test_new_uploads_keep_existing_featured(self, manager, editor, editor_actor, categories):
        article = manager.create(
            submission(editor, media=[MediaUpload(file=image('cover.jpg'))]), editor_actor
        ).article
        cover = article.media.get()

        manager.update(
            article.pk,
            submission(editor, media=[MediaUpload(file=image('extra.jpg'))]),
            editor_actor,
        )

        assert article.media.count() == 2
        assert article.media.get(is_featured=True).pk == cover.pk
        assert article.media.exclude(pk=cover.pk).get().display_order == 1

    def test_explicit_featured_upload_replaces_existing(self, manager, editor, editor_actor, categories):
        article = manager.create(
            submission(editor, media=[MediaUpload(file=image('cover.jpg'))]), editor_actor
        ).article

        manager.update(
            article.pk,
            submission(editor, media=[MediaUpload(file=image('new.jpg'), is_featured=True)]),
            editor_actor,
        )

        featured = article.media.get(is_featured=True)
        assert 'new.jpg' in featured.url
        assert Article.objects.get(pk=article.pk).image_url == featured.url

    def test_update_keeps_counter_increments_made_meanwhile(self, manager, editor, editor_actor, categories):
        article = manager.create(submission(editor), editor_actor).article
        Article.objects.filter(pk=article.pk).update(views=100, likes_count=10)

        def format_while_readers_engage(raw):
            Article.objects.filter(pk=article.pk).update(
                views=F('views') + 5, likes_count=F('likes_count') + 2
            )
            return format_content(raw)

        with patch('apps.articles.services.format_content', side_effect=format_while_readers_engage):
            manager.update(article.pk, submission(editor, title='Revised'), editor_actor)

        stored = Article.objects.get(pk=article.pk)
        assert stored.title == 'Revised'
        assert stored.views == 105
        assert stored.likes_count == 12

    @pytest.mark.parametrize('failing_step', ['_write_social_links', '_queue_for_approval'])
    def test_failed_update_rolls_back(self, manager, ingestor, editor, editor_actor, categories, failing_step):
        original = manager.create(
            submission(
                editor,
                social_links=[{'url': 'https://youtu.be/old'}],
                media=[MediaUpload(file=image('cover.jpg'))],
            ),
            editor_actor,
        ).article
        cover = original.media.get()
        stored_before = len(ingestor.stored)

        with patch.object(ArticleAggregateManager, failing_step, side_effect=DatabaseError('write failed')):
            with pytest.raises(PersistenceError):
                manager.update(
                    original.pk,
                    submission(
                        editor,
                        title='Rewritten',
                        category_ids=[3],
                        primary_category_id=3,
                        status='published',
                        social_links=[{'url': 'https://youtu.be/new'}],
                        media=[MediaUpload(file=image('extra.jpg'), is_featured=True)],
                    ),
                    editor_actor,
                )

        article = Article.objects.get(pk=original.pk)
        assert article.title == 'Budget vote passes'
        assert article.slug == original.slug
        assert article.status == 'draft'
        assert article.primary_category_id == 7
        links = {link.category_id: link.is_primary for link in article.category_links.all()}
        assert links == {3: False, 7: True}
        assert list(article.social_links.values_list('url', flat=True)) == ['https://youtu.be/old']
        assert list(article.media.values_list('pk', 'is_featured')) == [(cover.pk, True)]
        assert not ArticleApproval.objects.filter(article=article).exists()
        assert ingestor.discarded == ingestor.stored[stored_before:]

    def test_resubmission_resets_the_queue_entry(self, manager, editor, editor_actor, admin_staff, categories):
        article = manager.create(submission(editor, status='published'), editor_actor).article
        ArticleApproval.objects.filter(article=article).update(
            workflow_status='changes_requested',
            reviewed_by=admin_staff,
            reviewed_at=timezone.now(),
        )

        manager.update(article.pk, submission(editor, status='published'), editor_actor)

        approval = ArticleApproval.objects.get(article=article)
        assert approval.workflow_status == 'pending_approval'
        assert approval.reviewed_by is None
        assert approval.reviewed_at is None
        assert approval.submitted_by_id == editor.pk


# ============================================================================
# Delete
# ============================================================================

@pytest.fixture
def full_aggregate(manager, editor, editor_actor, categories):
    """An article with a row in every dependent table."""
    article = manager.create(
        submission(
            editor,
            status='published',
            media=[MediaUpload(file=image('a.jpg')), MediaUpload(file=image('b.jpg'))],
            social_links=[{'url': 'https://youtu.be/clip'}],
        ),
        editor_actor,
    ).article
    ArticleComment.objects.create(article=article, user=editor, body='Nice')
    ArticleLike.objects.create(article=article, user=editor)
    ArticleView.objects.create(article=article, ip_address='10.1.1.1')
    SavedArticle.objects.create(article=article, user=editor)
    BreakingPromotion.objects.create(article=article, priority='urgent')
    PinnedPromotion.objects.create(article=article, tier='gold', position=1)
    return article


DEPENDENT_MODELS = [
    ArticleCategory, ArticleMedia, ArticleSocialLink, ArticleApproval, ArticleComment,
    ArticleLike, ArticleView, SavedArticle, BreakingPromotion, PinnedPromotion,
]


@pytest.mark.django_db
class TestDelete:

    def test_delete_removes_every_dependent(
        self, manager, ingestor, admin_actor, full_aggregate, django_capture_on_commit_callbacks
    ):
        with django_capture_on_commit_callbacks(execute=True):
            report = manager.delete(full_aggregate.pk, admin_actor)

        assert report.article_id == full_aggregate.pk
        assert report.title == 'Budget vote passes'
        assert report.deleted_records['articles'] == 1
        assert report.deleted_records['article_categories'] == 2
        assert report.deleted_records['article_media'] == 2
        assert report.deleted_records['breaking_news'] == 1
        assert report.deleted_records['pinned_news'] == 1

        assert not Article.objects.filter(pk=full_aggregate.pk).exists()
        for model in DEPENDENT_MODELS:
            assert model.objects.filter(article_id=full_aggregate.pk).count() == 0, model.__name__

        assert sorted(ingestor.discarded) == sorted(ingestor.stored)
        assert ActivityLog.objects.filter(action='delete_news', target_id=full_aggregate.pk).exists()

    def test_missing_legacy_tables_are_skipped(self, manager, admin_actor, full_aggregate, settings):
        settings.ARTICLE_EXTRA_DEPENDENT_TABLES = [('post_promotions', 'news_id')]

        report = manager.delete(full_aggregate.pk, admin_actor)

        assert 'post_promotions' not in report.deleted_records
        assert ('post_promotions', 'news_id') in manager.dependent_tables()

    def test_failing_dependent_table_is_logged_and_delete_continues(
        self, manager, admin_actor, full_aggregate, settings
    ):
        settings.ARTICLE_EXTRA_DEPENDENT_TABLES = [('legacy_embeds', 'news_id')]
        # Listed by introspection but gone by the time it is cleared
        listed = connection.introspection.table_names() + ['legacy_embeds']

        with patch.object(connection.introspection, 'table_names', return_value=listed):
            report = manager.delete(full_aggregate.pk, admin_actor)

        assert report.deleted_records['legacy_embeds'] == 0
        assert report.deleted_records['article_comments'] == 1
        assert report.deleted_records['articles'] == 1
        assert not Article.objects.filter(pk=full_aggregate.pk).exists()
        for model in DEPENDENT_MODELS:
            assert model.objects.filter(article_id=full_aggregate.pk).count() == 0, model.__name__

    def test_root_row_not_removed_rolls_back(self, manager, ingestor, admin_actor, full_aggregate):
        with patch.object(ArticleAggregateManager, '_delete_root', return_value=0):
            with pytest.raises(PersistenceError, match='no rows affected'):
                manager.delete(full_aggregate.pk, admin_actor)

        assert Article.objects.filter(pk=full_aggregate.pk).exists()
        for model in DEPENDENT_MODELS:
            assert model.objects.filter(article_id=full_aggregate.pk).exists(), model.__name__
        assert ingestor.discarded == []
        assert not ActivityLog.objects.filter(action='delete_news').exists()

    def test_missing_article(self, manager, admin_actor):
        with pytest.raises(NotFoundError, match='News article not found'):
            manager.delete(9999, admin_actor)

    def test_invalid_id(self, manager, admin_actor):
        with pytest.raises(ValidationError):
            manager.delete('abc', admin_actor)

    def test_dependent_tables_cover_reverse_relations(self, manager):
        tables = dict(manager.dependent_tables())

        assert tables['article_categories'] == 'article_id'
        assert tables['article_media'] == 'article_id'
        assert tables['breaking_news'] == 'article_id'
        assert 'featured_news' in tables
        assert 'articles' not in tables


# ============================================================================
# Bulk delete
# ============================================================================

@pytest.mark.django_db
class TestBulkDelete:

    def test_mixed_outcomes(self, manager, admin_actor, make_article):
        article = make_article('Going away', pk=5)

        result = manager.bulk_delete([5, 9999, 'x'], admin_actor)

        assert [entry['id'] for entry in result.success] == [5]
        assert result.success[0]['title'] == 'Going away'
        assert result.failed == [
            {'id': 9999, 'reason': 'Not found'},
            {'id': 'x', 'reason': 'Invalid id'},
        ]
        assert not Article.objects.filter(pk=article.pk).exists()

    def test_one_audit_row_per_batch(self, manager, admin_actor, make_article):
        first = make_article('One')
        second = make_article('Two')

        manager.bulk_delete([first.pk, second.pk], admin_actor)

        assert ActivityLog.objects.filter(action='delete_news').count() == 0
        entry = ActivityLog.objects.get(action='bulk_delete')
        assert entry.details == {'deleted': [first.pk, second.pk], 'failed': []}

    def test_failure_does_not_affect_others(self, manager, admin_actor, make_article):
        first = make_article('One')
        second = make_article('Two')
        real_delete_root = ArticleAggregateManager._delete_root

        def flaky(self, article_pk):
            if article_pk == first.pk:
                return 0
            return real_delete_root(self, article_pk)

        with patch.object(ArticleAggregateManager, '_delete_root', flaky):
            result = manager.bulk_delete([first.pk, second.pk], admin_actor)

        assert result.failed == [
            {'id': first.pk, 'reason': 'Failed to delete news article - no rows affected'},
        ]
        assert Article.objects.filter(pk=first.pk).exists()
        assert not Article.objects.filter(pk=second.pk).exists()

    @pytest.mark.parametrize('ids', [[], None, 'not-a-list'])
    def test_requires_id_list(self, manager, admin_actor, ids):
        with pytest.raises(ValidationError, match='Valid news IDs array is required'):
            manager.bulk_delete(ids, admin_actor)
