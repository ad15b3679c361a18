"""
Promotion models for the Newsroom CMS.

Breaking and pinned promotions are written by the editorial promotion tools;
the live surfaces only read them.
"""

from django.conf import settings
from django.db import models
from django.db.models import Q
from django.utils import timezone


class PromotionQuerySet(models.QuerySet):

    def active(self, now=None):
        """Promotions that are not removed, not expired, on published articles."""
        now = now or timezone.now()
        return self.filter(
            Q(ends_at__isnull=True) | Q(ends_at__gt=now),
            manually_removed=False,
            article__status='published',
        )


class Promotion(models.Model):
    """
    Abstract promotion of an article onto a live surface.
    """

    starts_at = models.DateTimeField(
        default=timezone.now,
        db_index=True,
        verbose_name='Starts At'
    )

    ends_at = models.DateTimeField(
        null=True,
        blank=True,
        verbose_name='Ends At',
        help_text='Leave empty for no expiry'
    )

    manually_removed = models.BooleanField(
        default=False,
        verbose_name='Manually Removed'
    )

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+',
        verbose_name='Created By'
    )

    created_at = models.DateTimeField(default=timezone.now, editable=False)

    objects = PromotionQuerySet.as_manager()

    class Meta:
        abstract = True

    def is_active(self, now=None):
        now = now or timezone.now()
        return not self.manually_removed and (self.ends_at is None or self.ends_at > now)


class BreakingPromotion(Promotion):
    """Article promoted to the breaking surface."""

    PRIORITY_CHOICES = [
        ('urgent', 'Urgent'),
        ('high', 'High'),
        ('medium', 'Medium'),
        ('low', 'Low'),
    ]

    article = models.ForeignKey(
        'articles.Article',
        on_delete=models.CASCADE,
        related_name='breaking_promotions',
        verbose_name='Article'
    )

    priority = models.CharField(
        max_length=10,
        choices=PRIORITY_CHOICES,
        null=True,
        blank=True,
        verbose_name='Priority'
    )

    class Meta:
        db_table = 'breaking_news'
        verbose_name = 'Breaking Promotion'
        verbose_name_plural = 'Breaking Promotions'

    def __str__(self):
        return f"Breaking {self.priority or '-'}: {self.article_id}"


class PinnedPromotion(Promotion):
    """Article pinned to the pinned surface."""

    TIER_CHOICES = [
        ('gold', 'Gold'),
        ('silver', 'Silver'),
        ('bronze', 'Bronze'),
    ]

    article = models.ForeignKey(
        'articles.Article',
        on_delete=models.CASCADE,
        related_name='pinned_promotions',
        verbose_name='Article'
    )

    tier = models.CharField(
        max_length=10,
        choices=TIER_CHOICES,
        null=True,
        blank=True,
        verbose_name='Tier'
    )

    position = models.IntegerField(
        null=True,
        blank=True,
        verbose_name='Position',
        help_text='Lower positions show first; empty positions show last'
    )

    class Meta:
        db_table = 'pinned_news'
        verbose_name = 'Pinned Promotion'
        verbose_name_plural = 'Pinned Promotions'

    def __str__(self):
        return f"Pinned {self.tier or '-'}@{self.position}: {self.article_id}"
