"""
Audit sink for staff actions.

Rows go to admin_activity_log. Writing is best-effort: a failing audit insert
is rolled back to its own savepoint and logged, the surrounding write carries
on.
"""

import logging

from django.db import DatabaseError, transaction

from apps.core.models import ActivityLog

logger = logging.getLogger(__name__)


ACTION_CREATE_POST = 'create_post'
ACTION_UPDATE_POST = 'update_post'
ACTION_DELETE_NEWS = 'delete_news'
ACTION_BULK_DELETE = 'bulk_delete'


def log_activity(actor_id, action, target_type, target_id=None, details=None, source_ip=''):
    """Record one audit row. Returns the row, or None if the insert failed."""
    try:
        with transaction.atomic():
            return ActivityLog.objects.create(
                actor_id=actor_id,
                action=action,
                target_type=target_type,
                target_id=target_id,
                details=details or {},
                ip_address=source_ip or '',
            )
    except DatabaseError as e:
        logger.warning(
            f"Audit write failed: action={action} target={target_type}:{target_id}: {e}"
        )
        return None
