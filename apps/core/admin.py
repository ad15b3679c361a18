"""
Admin interface for staff profiles and the activity log.
"""

from django.contrib import admin
from .models import ActivityLog, StaffProfile


@admin.register(StaffProfile)
class StaffProfileAdmin(admin.ModelAdmin):
    list_display = ['user', 'role', 'created_at']
    list_filter = ['role']
    search_fields = ['user__username', 'user__email']
    raw_id_fields = ['user']


@admin.register(ActivityLog)
class ActivityLogAdmin(admin.ModelAdmin):
    list_display = ['created_at', 'actor', 'action', 'target_type', 'target_id', 'ip_address']
    list_filter = ['action', 'target_type']
    search_fields = ['actor__username']
    readonly_fields = ['actor', 'action', 'target_type', 'target_id', 'details', 'ip_address', 'created_at']

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
