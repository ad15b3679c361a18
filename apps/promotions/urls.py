"""
URL patterns for the live surfaces.
"""

from django.urls import path

from .views import BreakingSurfaceView, PinnedSurfaceView

app_name = 'promotions'

urlpatterns = [
    path('breaking/', BreakingSurfaceView.as_view(), name='breaking'),
    path('pinned/', PinnedSurfaceView.as_view(), name='pinned'),
]
