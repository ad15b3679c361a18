"""
Role-Based Permissions for the Newsroom CMS.

Maps StaffProfile.role to capabilities and DRF permission classes.

Roles:
- super_admin: Everything, including hard deletes
- admin: Publish directly, hard delete
- editor: Write articles; publishing goes through approval
- moderator: Write articles; publishing goes through approval

The role -> capability table lives in settings.NEWSROOM_ROLE_CAPABILITIES and
is loaded once per process.

Usage:
    from apps.core.permissions import CanWriteArticles, can_publish_directly

    class MyView(APIView):
        permission_classes = [IsAuthenticated, CanWriteArticles]
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import FrozenSet, Optional

from django.conf import settings
from django.core.signals import setting_changed
from django.dispatch import receiver
from rest_framework.permissions import BasePermission

logger = logging.getLogger(__name__)


PUBLISH_DIRECTLY = 'publish_directly'
WRITE_ARTICLES = 'write_articles'
HARD_DELETE = 'hard_delete'


@dataclass(frozen=True)
class RoleCapabilities:
    """Immutable role -> capability lookup."""

    publish_directly: FrozenSet[str]
    write_articles: FrozenSet[str]
    hard_delete: FrozenSet[str]

    def allows(self, role: Optional[str], capability: str) -> bool:
        if not role:
            return False
        return role in getattr(self, capability, frozenset())


@lru_cache(maxsize=1)
def get_role_capabilities() -> RoleCapabilities:
    """Load the capability table from settings (cached)."""
    table = getattr(settings, 'NEWSROOM_ROLE_CAPABILITIES', {})
    return RoleCapabilities(
        publish_directly=frozenset(table.get(PUBLISH_DIRECTLY, ())),
        write_articles=frozenset(table.get(WRITE_ARTICLES, ())),
        hard_delete=frozenset(table.get(HARD_DELETE, ())),
    )


@receiver(setting_changed)
def _reset_role_capabilities(setting, **kwargs):
    if setting == 'NEWSROOM_ROLE_CAPABILITIES':
        get_role_capabilities.cache_clear()


def can_publish_directly(role, capabilities: Optional[RoleCapabilities] = None) -> bool:
    capabilities = capabilities or get_role_capabilities()
    return capabilities.allows(role, PUBLISH_DIRECTLY)


def can_write_articles(role, capabilities: Optional[RoleCapabilities] = None) -> bool:
    capabilities = capabilities or get_role_capabilities()
    return capabilities.allows(role, WRITE_ARTICLES)


def can_hard_delete(role, capabilities: Optional[RoleCapabilities] = None) -> bool:
    capabilities = capabilities or get_role_capabilities()
    return capabilities.allows(role, HARD_DELETE)


def get_user_role(user):
    """
    Helper function to get user's role.

    Returns: 'super_admin', 'admin', 'editor', 'moderator', or None when
    the user is anonymous.
    """
    if not user or not user.is_authenticated:
        return None

    if user.is_superuser:
        return 'super_admin'

    from apps.core.models import StaffProfile
    try:
        return StaffProfile.objects.get(user=user).role
    except StaffProfile.DoesNotExist:
        return getattr(settings, 'NEWSROOM_DEFAULT_ROLE', 'moderator')


class RolePermission(BasePermission):
    """Base class for capability-based permissions."""

    # Override in subclasses
    capability = None

    def has_permission(self, request, view):
        """Check if user's role carries the required capability."""
        if not request.user or not request.user.is_authenticated:
            return False

        role = get_user_role(request.user)
        allowed = get_role_capabilities().allows(role, self.capability)
        if not allowed:
            logger.info(
                f"Permission denied: user={request.user.pk} role={role} "
                f"capability={self.capability}"
            )
        return allowed


class CanWriteArticles(RolePermission):
    """
    Allow staff who may create and edit articles.

    Whether the result is published right away is decided by the publish gate,
    not here.
    """
    capability = WRITE_ARTICLES
    message = "You do not have permission to write articles."


class CanDeleteArticles(RolePermission):
    """Allow staff who may permanently delete articles."""
    capability = HARD_DELETE
    message = "You do not have permission to delete articles."
