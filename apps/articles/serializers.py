"""
Article write-path serializers.

Parses multipart (or JSON) create/update payloads into an ArticleSubmission.
JSON-in-form fields (category_ids, social_media_links, image_metadata_<i>)
are decoded leniently: undecodable values fall back to a default.
"""

import json
import logging

from django.conf import settings
from rest_framework import serializers

from apps.core.exceptions import ValidationError
from .services import ArticleSubmission, MediaUpload

logger = logging.getLogger(__name__)


def safe_json(value, default):
    """Decode a JSON string; non-strings pass through, bad JSON gives default."""
    if value is None or value == '':
        return default
    if not isinstance(value, str):
        return value
    try:
        return json.loads(value)
    except (TypeError, ValueError):
        logger.debug(f"Ignoring undecodable JSON field value: {value[:100]}")
        return default


class SocialLinkSerializer(serializers.Serializer):
    """One embedded social post. Entries with an empty url are dropped later."""

    platform = serializers.CharField(max_length=50, required=False, allow_blank=True, default='youtube_video')
    post_type = serializers.CharField(max_length=50, required=False, allow_blank=True, default='video')
    post_url = serializers.CharField(max_length=1000, required=False, allow_blank=True, default='')
    url = serializers.CharField(max_length=1000, required=False, allow_blank=True, default='')
    display_order = serializers.IntegerField(required=False, allow_null=True, default=1)
    auto_embed = serializers.BooleanField(required=False, default=True)
    show_full_embed = serializers.BooleanField(required=False, default=True)
    is_featured = serializers.BooleanField(required=False, default=False)
    caption = serializers.CharField(required=False, allow_blank=True, allow_null=True, default=None)

    def validate(self, attrs):
        attrs['url'] = (attrs.pop('post_url', '') or attrs.get('url') or '').strip()
        return attrs


class ImageMetadataSerializer(serializers.Serializer):
    """Per-image metadata sent as image_metadata_<index>."""

    caption = serializers.CharField(required=False, allow_blank=True, default='')
    order = serializers.IntegerField(required=False, allow_null=True, default=None)
    is_featured = serializers.BooleanField(required=False, default=False)
    has_watermark = serializers.BooleanField(required=False, default=False)


def _parse_social_links(raw):
    links = safe_json(raw, [])
    if not isinstance(links, list):
        return []

    parsed = []
    for index, link in enumerate(links):
        if not isinstance(link, dict):
            continue
        serializer = SocialLinkSerializer(data=link)
        if not serializer.is_valid():
            raise ValidationError(
                f"Invalid social media link at position {index}",
                field='social_media_links',
                details=serializer.errors,
            )
        if serializer.validated_data['url']:
            parsed.append(dict(serializer.validated_data))
    return parsed


def _parse_media(request):
    files = request.FILES.getlist('images') if hasattr(request, 'FILES') else []
    max_images = getattr(settings, 'MAX_UPLOAD_IMAGES', 10)
    if len(files) > max_images:
        raise ValidationError(f"At most {max_images} images can be uploaded", field='images')

    uploads = []
    for index, upload in enumerate(files):
        metadata = safe_json(request.data.get(f'image_metadata_{index}'), {})
        if not isinstance(metadata, dict):
            metadata = {}
        serializer = ImageMetadataSerializer(data=metadata)
        if not serializer.is_valid():
            raise ValidationError(
                f"Invalid metadata for image {index}",
                field=f'image_metadata_{index}',
                details=serializer.errors,
            )
        data = serializer.validated_data
        uploads.append(MediaUpload(
            file=upload,
            caption=data['caption'],
            order=data['order'],
            is_featured=data['is_featured'],
            has_watermark=data['has_watermark'],
        ))
    return uploads


def parse_submission(request) -> ArticleSubmission:
    """Build an ArticleSubmission from a DRF request."""
    data = request.data

    category_ids = data.get('category_ids')
    if category_ids is not None:
        category_ids = safe_json(category_ids, [])

    return ArticleSubmission(
        title=data.get('title'),
        content=data.get('content'),
        category_ids=category_ids,
        primary_category_id=data.get('primary_category_id'),
        author_id=data.get('author_id'),
        excerpt=data.get('excerpt') or '',
        priority=data.get('priority') or 'medium',
        tags=data.get('tags') or '',
        meta_description=data.get('meta_description') or '',
        seo_keywords=data.get('seo_keywords') or '',
        status=data.get('status') or 'draft',
        social_links=_parse_social_links(data.get('social_media_links')),
        media=_parse_media(request),
    )
