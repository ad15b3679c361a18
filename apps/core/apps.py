from django.apps import AppConfig


class CoreConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.core'
    verbose_name = 'Core'

    def ready(self):
        """Initialize app on Django startup."""
        # Registers the capability cache reset on setting_changed
        from apps.core import permissions  # noqa: F401
