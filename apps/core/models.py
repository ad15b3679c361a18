"""
Core models for the Newsroom CMS.
Base classes, staff roles and the activity audit log.
"""

from django.conf import settings
from django.db import models
from django.utils import timezone


class BaseModel(models.Model):
    """
    Abstract base model with timestamp tracking.
    Primary keys come from DEFAULT_AUTO_FIELD (numeric ids).
    """

    created_at = models.DateTimeField(
        default=timezone.now,
        editable=False,
        verbose_name='Created At',
        help_text='Timestamp when record was created'
    )

    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name='Updated At',
        help_text='Timestamp when record was last updated'
    )

    class Meta:
        abstract = True
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.__class__.__name__} ({self.pk})"


class StaffProfile(BaseModel):
    """
    Newsroom staff profile linked 1:1 with the Django user.
    The role drives the capability oracle in apps.core.permissions.
    """

    ROLE_SUPER_ADMIN = 'super_admin'
    ROLE_ADMIN = 'admin'
    ROLE_EDITOR = 'editor'
    ROLE_MODERATOR = 'moderator'

    ROLE_CHOICES = [
        (ROLE_SUPER_ADMIN, 'Super Administrator'),
        (ROLE_ADMIN, 'Administrator'),
        (ROLE_EDITOR, 'Editor'),
        (ROLE_MODERATOR, 'Moderator'),
    ]

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='staff_profile',
        verbose_name='User',
        help_text='The associated Django user account'
    )

    role = models.CharField(
        max_length=20,
        choices=ROLE_CHOICES,
        default=ROLE_MODERATOR,
        db_index=True,
        verbose_name='Role',
        help_text='Staff role determining capabilities'
    )

    class Meta:
        db_table = 'staff_profiles'
        verbose_name = 'Staff Profile'
        verbose_name_plural = 'Staff Profiles'

    def __str__(self):
        return f"{self.user.username} ({self.role})"


class ActivityLog(models.Model):
    """
    Append-only audit trail of staff actions.
    """

    actor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='activity_logs',
        verbose_name='Actor'
    )

    action = models.CharField(
        max_length=50,
        db_index=True,
        verbose_name='Action'
    )

    target_type = models.CharField(
        max_length=50,
        verbose_name='Target Type'
    )

    # Not a foreign key: audit rows outlive their targets
    target_id = models.BigIntegerField(
        null=True,
        blank=True,
        db_index=True,
        verbose_name='Target ID'
    )

    details = models.JSONField(
        default=dict,
        blank=True,
        verbose_name='Details'
    )

    ip_address = models.CharField(
        max_length=100,
        blank=True,
        verbose_name='IP Address'
    )

    created_at = models.DateTimeField(
        default=timezone.now,
        editable=False,
        db_index=True,
        verbose_name='Created At'
    )

    class Meta:
        db_table = 'admin_activity_log'
        ordering = ['-created_at']
        verbose_name = 'Activity Log Entry'
        verbose_name_plural = 'Activity Log'

    def __str__(self):
        return f"{self.action} {self.target_type}:{self.target_id}"
