"""
Publish Gate.

Decides the status an article is actually stored with, given the status the
author asked for and the author's role:

    requested      role can publish directly   final               requires_approval
    published      yes                         published           False
    published      no                          pending_approval    True
    anything else  -                           requested           False

The approval queue entry itself is written by the aggregate manager in the
same transaction as the article.

Usage:
    decision = decide('published', 'editor')
    decision.final_status        # ArticleStatus.PENDING_APPROVAL
    decision.requires_approval   # True
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from apps.core.exceptions import ValidationError
from apps.core.permissions import RoleCapabilities, can_publish_directly

logger = logging.getLogger(__name__)


class ArticleStatus(Enum):
    """Lifecycle states of an article."""
    DRAFT = 'draft'
    PENDING_APPROVAL = 'pending_approval'
    PUBLISHED = 'published'
    ARCHIVED = 'archived'

    @classmethod
    def from_string(cls, value: Optional[str]) -> 'ArticleStatus':
        """Convert string to ArticleStatus. Blank means draft."""
        if value is None or str(value).strip() == '':
            return cls.DRAFT
        value = str(value).strip().lower()
        for status in cls:
            if status.value == value:
                return status
        raise ValidationError(
            f"Unknown status: {value}",
            field='status',
            details={'allowed': [s.value for s in cls]},
        )


@dataclass(frozen=True)
class PublishDecision:
    """Result of the publish gate."""
    final_status: ArticleStatus
    requires_approval: bool


def decide(
    requested_status,
    role: Optional[str],
    capabilities: Optional[RoleCapabilities] = None,
) -> PublishDecision:
    """
    Map a requested status to the stored status for the given role.

    Raises:
        ValidationError: requested_status is not a known status
    """
    if not isinstance(requested_status, ArticleStatus):
        requested_status = ArticleStatus.from_string(requested_status)

    if requested_status is ArticleStatus.PUBLISHED and not can_publish_directly(role, capabilities):
        logger.info(f"Publish by role={role} routed to approval queue")
        return PublishDecision(ArticleStatus.PENDING_APPROVAL, True)

    return PublishDecision(requested_status, False)
