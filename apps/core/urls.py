"""
URL patterns for core app observability endpoints.
"""

from django.urls import path
from .metrics import metrics_view
from .views import HealthCheckView, LivenessView

app_name = 'core'

urlpatterns = [
    # Health checks
    path('health/', HealthCheckView.as_view(), name='health'),
    path('livez/', LivenessView.as_view(), name='liveness'),

    # Metrics
    path('metrics/', metrics_view, name='metrics'),
]
