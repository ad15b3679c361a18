"""
Surface serializers.

Projects a SurfaceEntry into the public article shape. Every snake_case key
is followed by a camelCase alias carrying the same value, for clients that
read either form.
"""

from django.conf import settings
from rest_framework import serializers


DEFAULT_FIRST_NAME = 'Daily Vaibe'
DEFAULT_LAST_NAME = 'Editor'
DEFAULT_CATEGORY_NAME = 'Uncategorized'
DEFAULT_CATEGORY_SLUG = 'general'
DEFAULT_CATEGORY_COLOR = '#6366f1'
DEFAULT_CATEGORY_ICON = '\U0001F4F0'  # newspaper
DEFAULT_READING_TIME = 3

BREAKING_EMOJI = {
    'urgent': '\U0001F6A8',  # rotating light
    'high': '\u26A1',        # high voltage
    'medium': '\U0001F4E2',  # loudspeaker
}
BREAKING_EMOJI_DEFAULT = '\U0001F4F0'

PINNED_EMOJI = {
    'gold': '\U0001F4CC',    # pushpin
    'silver': '\U0001F4CD',  # round pushpin
}
PINNED_EMOJI_DEFAULT = '\U0001F4CE'  # paperclip


def camelize(key: str) -> str:
    head, *rest = key.split('_')
    return head + ''.join(part[:1].upper() + part[1:] for part in rest)


def with_camel_aliases(data):
    """Copy a dict, placing a camelCase alias after every snake_case key."""
    if isinstance(data, list):
        return [with_camel_aliases(item) for item in data]
    if not isinstance(data, dict):
        return data
    aliased = {}
    for key, value in data.items():
        value = with_camel_aliases(value)
        aliased[key] = value
        alias = camelize(key)
        if alias != key:
            aliased[alias] = value
    return aliased


def resolve_image_url(url):
    """Absolute urls pass through; relative ones are joined to MEDIA_PUBLIC_BASE_URL."""
    if not url:
        return None
    if url.startswith(('http://', 'https://')):
        return url
    base = getattr(settings, 'MEDIA_PUBLIC_BASE_URL', '')
    if base:
        return f"{base.rstrip('/')}/{url.lstrip('/')}"
    return url


_datetime_field = serializers.DateTimeField()


def _iso(value):
    return _datetime_field.to_representation(value) if value else None


class SurfaceEntrySerializer(serializers.Serializer):
    """Fields shared by the breaking and pinned surfaces."""

    news_id = serializers.IntegerField(source='article.pk')
    title = serializers.CharField(source='article.title')
    excerpt = serializers.SerializerMethodField()
    slug = serializers.CharField(source='article.slug')
    image_url = serializers.SerializerMethodField()
    published_at = serializers.DateTimeField(source='article.published_at')
    reading_time = serializers.SerializerMethodField()
    views = serializers.IntegerField(source='article.views')
    likes_count = serializers.IntegerField(source='article.likes_count')
    comments_count = serializers.IntegerField(source='article.comments_count')
    share_count = serializers.IntegerField(source='article.share_count')
    first_name = serializers.SerializerMethodField()
    last_name = serializers.SerializerMethodField()
    category_name = serializers.SerializerMethodField()
    category_slug = serializers.SerializerMethodField()
    category_color = serializers.SerializerMethodField()
    category_icon = serializers.SerializerMethodField()
    meta_description = serializers.CharField(source='article.meta_description')
    tags = serializers.ListField(source='article.tag_list', child=serializers.CharField())
    trending_score = serializers.FloatField()
    hours_ago = serializers.FloatField()

    def get_excerpt(self, entry):
        return entry.article.excerpt or entry.article.meta_description or ''

    def get_image_url(self, entry):
        return resolve_image_url(entry.article.image_url)

    def get_reading_time(self, entry):
        return entry.article.reading_time or DEFAULT_READING_TIME

    def get_first_name(self, entry):
        author = entry.article.author
        return (author.first_name if author else '') or DEFAULT_FIRST_NAME

    def get_last_name(self, entry):
        author = entry.article.author
        return (author.last_name if author else '') or DEFAULT_LAST_NAME

    def _category_attr(self, entry, attr, default):
        category = entry.article.primary_category
        return (getattr(category, attr, '') if category else '') or default

    def get_category_name(self, entry):
        return self._category_attr(entry, 'name', DEFAULT_CATEGORY_NAME)

    def get_category_slug(self, entry):
        return self._category_attr(entry, 'slug', DEFAULT_CATEGORY_SLUG)

    def get_category_color(self, entry):
        return self._category_attr(entry, 'color', DEFAULT_CATEGORY_COLOR)

    def get_category_icon(self, entry):
        return self._category_attr(entry, 'icon', DEFAULT_CATEGORY_ICON)

    def to_representation(self, instance):
        return with_camel_aliases(super().to_representation(instance))


class BreakingEntrySerializer(SurfaceEntrySerializer):
    breaking = serializers.SerializerMethodField()

    def get_breaking(self, entry):
        promotion = entry.promotion
        return {
            'priority': promotion.priority,
            'started_at': _iso(promotion.starts_at),
            'ends_at': _iso(promotion.ends_at),
            'emoji': BREAKING_EMOJI.get(promotion.priority, BREAKING_EMOJI_DEFAULT),
        }


class PinnedEntrySerializer(SurfaceEntrySerializer):
    pinned = serializers.SerializerMethodField()

    def get_pinned(self, entry):
        promotion = entry.promotion
        return {
            'position': promotion.position,
            'tier': promotion.tier,
            'started_at': _iso(promotion.starts_at),
            'ends_at': _iso(promotion.ends_at),
            'emoji': PINNED_EMOJI.get(promotion.tier, PINNED_EMOJI_DEFAULT),
        }
