"""
Shared pytest fixtures for the Newsroom CMS test suite.
"""

import itertools

import pytest
from django.contrib.auth import get_user_model
from django.utils import timezone
from django.utils.text import slugify
from rest_framework.test import APIClient

from apps.articles.models import Article, ArticleCategory, Category
from apps.core.models import StaffProfile


_slug_counter = itertools.count(1)


# ============================================================================
# Clients and staff
# ============================================================================

@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def make_staff(db):
    """Factory: a user with a StaffProfile carrying the given role."""
    User = get_user_model()

    def _make(username, role=StaffProfile.ROLE_EDITOR, **extra):
        user = User.objects.create_user(
            username=username,
            email=f'{username}@newsroom.test',
            password='testpass123',
            **extra,
        )
        StaffProfile.objects.create(user=user, role=role)
        return user

    return _make


@pytest.fixture
def editor(make_staff):
    return make_staff('editor', role=StaffProfile.ROLE_EDITOR, first_name='Wanjiru', last_name='Kamau')


@pytest.fixture
def admin_staff(make_staff):
    return make_staff('desk_admin', role=StaffProfile.ROLE_ADMIN)


@pytest.fixture
def moderator(make_staff):
    return make_staff('moderator', role=StaffProfile.ROLE_MODERATOR)


@pytest.fixture
def superuser(db):
    return get_user_model().objects.create_superuser(
        username='root',
        email='root@newsroom.test',
        password='testpass123',
    )


# ============================================================================
# Categories and articles
# ============================================================================

@pytest.fixture
def categories(db):
    """Two categories with fixed ids 3 (politics) and 7 (business)."""
    politics = Category.objects.create(
        pk=3, name='Politics', slug='politics', color='#ef4444', icon='P'
    )
    business = Category.objects.create(
        pk=7, name='Business', slug='business', color='#10b981', icon='B'
    )
    return {3: politics, 7: business}


@pytest.fixture
def make_article(db):
    """
    Factory: an article row written directly, bypassing the aggregate manager.

    categories: list of Category; the first one is primary.
    """

    def _make(title='Sample article', categories=None, **fields):
        fields.setdefault('content', 'Body text for the sample article.')
        fields.setdefault('status', Article.STATUS_PUBLISHED)
        if fields['status'] == Article.STATUS_PUBLISHED:
            fields.setdefault('published_at', timezone.now())
        fields.setdefault('slug', f'{slugify(title)}-{next(_slug_counter)}')
        if categories:
            fields.setdefault('primary_category', categories[0])

        article = Article.objects.create(title=title, **fields)
        for index, category in enumerate(categories or []):
            ArticleCategory.objects.create(
                article=article, category=category, is_primary=index == 0
            )
        return article

    return _make
