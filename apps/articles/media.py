"""
Media ingestion for article uploads.

The ingestor is a pluggable collaborator selected by settings.MEDIA_INGESTOR.
The default stores files through Django's default storage backend.
"""

import logging
import posixpath
import uuid
from dataclasses import dataclass
from typing import Iterable, Optional

from django.conf import settings
from django.core.files.storage import default_storage
from django.utils import timezone
from django.utils.module_loading import import_string
from django.utils.text import get_valid_filename

logger = logging.getLogger(__name__)


@dataclass
class IngestedMedia:
    """Descriptor of a stored upload."""
    url: str
    width: Optional[int] = None
    height: Optional[int] = None
    size: Optional[int] = None
    mimetype: str = ''
    provider: str = ''
    provider_id: str = ''
    original_name: str = ''
    filename: str = ''


class DefaultStorageIngestor:
    """
    Stores uploads under news/YYYY/MM/ in the default storage.

    Image dimensions are not probed here; width and height stay None.
    """

    provider = 'default_storage'

    def __init__(self, storage=None):
        self.storage = storage or default_storage

    def ingest(self, upload) -> IngestedMedia:
        original_name = getattr(upload, 'name', '') or 'upload'
        stem, ext = posixpath.splitext(get_valid_filename(posixpath.basename(original_name)))
        now = timezone.now()
        target = f"news/{now:%Y}/{now:%m}/{stem[:80]}-{uuid.uuid4().hex[:12]}{ext.lower()}"

        stored_name = self.storage.save(target, upload)
        logger.debug(f"Stored upload {original_name} as {stored_name}")

        return IngestedMedia(
            url=self.storage.url(stored_name),
            size=getattr(upload, 'size', None),
            mimetype=getattr(upload, 'content_type', '') or '',
            provider=self.provider,
            provider_id=stored_name,
            original_name=original_name,
            filename=posixpath.basename(stored_name),
        )

    def discard(self, provider_ids: Iterable[str]) -> int:
        """Delete stored files. Best-effort; returns how many were removed."""
        removed = 0
        for name in provider_ids:
            if not name:
                continue
            try:
                self.storage.delete(name)
                removed += 1
            except Exception as e:
                logger.warning(f"Could not discard stored media {name}: {e}")
        return removed


def get_media_ingestor():
    """Instantiate the configured media ingestor."""
    return import_string(settings.MEDIA_INGESTOR)()
