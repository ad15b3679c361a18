"""
Admin interface for promotions.
"""

from django.contrib import admin
from .models import BreakingPromotion, PinnedPromotion


@admin.register(BreakingPromotion)
class BreakingPromotionAdmin(admin.ModelAdmin):
    list_display = ['article', 'priority', 'starts_at', 'ends_at', 'manually_removed']
    list_filter = ['priority', 'manually_removed']
    raw_id_fields = ['article', 'created_by']


@admin.register(PinnedPromotion)
class PinnedPromotionAdmin(admin.ModelAdmin):
    list_display = ['article', 'tier', 'position', 'starts_at', 'ends_at', 'manually_removed']
    list_filter = ['tier', 'manually_removed']
    raw_id_fields = ['article', 'created_by']
