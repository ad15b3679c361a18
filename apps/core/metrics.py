"""
Prometheus Metrics for the Newsroom CMS.

Metrics included:
- newsroom_article_writes_total: Counter for article create/update
- newsroom_article_deletions_total: Counter for hard deletes
- newsroom_surface_queries_total: Counter for breaking/pinned queries
- newsroom_surface_query_duration_seconds: Histogram for surface latency

Cardinality Guidelines:
- All labels MUST be low-cardinality (small, bounded set of values)
- ALLOWED label values: action enums, status enums, surface names
- FORBIDDEN label values: article ids, slugs, category slugs, user ids

Usage:
    from apps.core.metrics import increment_article_write, observe_surface_duration

    increment_article_write(action='create', status='success')

    with observe_surface_duration('breaking'):
        ...
"""

import time
from contextlib import contextmanager
import logging

from django.http import HttpResponse
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST

logger = logging.getLogger(__name__)


# ============================================================================
# Metric Definitions
# ============================================================================

article_writes_total = Counter(
    'newsroom_article_writes_total',
    'Total article write operations',
    ['action', 'status']  # action: create/update, status: published/pending_approval/draft/archived/error
)

article_deletions_total = Counter(
    'newsroom_article_deletions_total',
    'Total article hard deletes',
    ['status']  # status: success/not_found/error
)

surface_queries_total = Counter(
    'newsroom_surface_queries_total',
    'Total live surface queries',
    ['surface', 'status']  # surface: breaking/pinned, status: success/error
)

surface_query_duration_seconds = Histogram(
    'newsroom_surface_query_duration_seconds',
    'Time spent answering live surface queries',
    ['surface'],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0]
)


# ============================================================================
# Helper Functions
# ============================================================================

def increment_article_write(action='create', status='draft'):
    """Increment article write counter."""
    article_writes_total.labels(action=action, status=status).inc()


def increment_article_deletion(status='success'):
    """Increment article deletion counter."""
    article_deletions_total.labels(status=status).inc()


def increment_surface_query(surface='breaking', status='success'):
    """Increment surface query counter."""
    surface_queries_total.labels(surface=surface, status=status).inc()


@contextmanager
def observe_surface_duration(surface='breaking'):
    """Context manager to time surface queries."""
    start = time.time()
    try:
        yield
    finally:
        surface_query_duration_seconds.labels(surface=surface).observe(time.time() - start)


# ============================================================================
# Metrics View
# ============================================================================

def metrics_view(request):
    """
    Django view to expose Prometheus metrics.

    Returns metrics in Prometheus text format.
    """
    return HttpResponse(generate_latest(), content_type=CONTENT_TYPE_LATEST)
