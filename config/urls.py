"""
URL configuration for the Newsroom CMS project.
"""

from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static

urlpatterns = [
    path('admin/', admin.site.urls),
    # Article write endpoints (create / update / delete / bulk delete)
    path('api/admin/posts/', include('apps.articles.urls')),
    # Live surfaces (breaking / pinned)
    path('api/updates/', include('apps.promotions.urls')),
    # Observability endpoints
    path('', include('apps.core.urls')),
]

# Serve media files in development
if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)

# Customize admin site
admin.site.site_header = "Newsroom Administration"
admin.site.site_title = "Newsroom Admin Portal"
admin.site.index_title = "Welcome to Newsroom Administration"
