"""
Surface Query Service.

Answers the public breaking and pinned surfaces: active promotions on
published articles, ordered by the ranking rules, paginated, each entry
carrying its trending score.

A failing query never raises out of the service; the caller gets an empty
SurfaceResult with success=False and the fault is logged.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from django.conf import settings
from django.utils import timezone

from apps.core.metrics import increment_surface_query, observe_surface_duration
from .models import BreakingPromotion, PinnedPromotion
from .ranking import breaking_order, pinned_order, trending_score

logger = logging.getLogger(__name__)


BREAKING = 'breaking'
PINNED = 'pinned'


@dataclass
class SurfaceEntry:
    """A promotion, its article and the article's score at query time."""
    promotion: Any
    article: Any
    trending_score: float
    hours_ago: float


@dataclass
class SurfaceResult:
    success: bool
    entries: List[SurfaceEntry] = field(default_factory=list)
    total: int = 0
    pagination: Dict[str, Any] = field(default_factory=dict)
    message: str = ''


def build_pagination(page: int, limit: int, total: int) -> Dict[str, Any]:
    total_pages = math.ceil(total / limit) if limit else 0
    return {
        'current_page': page,
        'per_page': limit,
        'total_items': total,
        'total_pages': total_pages,
        'has_next': page < total_pages,
        'has_prev': page > 1,
    }


def empty_pagination() -> Dict[str, Any]:
    return build_pagination(1, getattr(settings, 'SURFACE_DEFAULT_LIMIT', 50), 0)


def normalize_page(value) -> int:
    try:
        return max(1, int(value))
    except (TypeError, ValueError):
        return 1


def normalize_limit(value) -> int:
    default = getattr(settings, 'SURFACE_DEFAULT_LIMIT', 50)
    maximum = getattr(settings, 'SURFACE_MAX_LIMIT', 100)
    try:
        limit = int(value)
    except (TypeError, ValueError):
        limit = default
    return min(maximum, max(1, limit))


class SurfaceQueryService:
    """
    Usage:
        result = SurfaceQueryService().breaking(page=1, limit=20)
        result = SurfaceQueryService().pinned(page=1, limit=20, category='politics')
    """

    def breaking(self, page=1, limit=None) -> SurfaceResult:
        return self._query(
            BREAKING,
            lambda: breaking_order(BreakingPromotion.objects.active()),
            page,
            limit,
            'Failed to fetch breaking news',
        )

    def pinned(self, page=1, limit=None, category: Optional[str] = None) -> SurfaceResult:
        def queryset():
            promotions = PinnedPromotion.objects.active()
            if category:
                # One link per (article, category), so the join cannot duplicate rows
                promotions = promotions.filter(article__category_links__category__slug=category)
            return pinned_order(promotions)

        return self._query(PINNED, queryset, page, limit, 'Failed to fetch pinned news')

    def _query(self, surface, build_queryset, page, limit, failure_message) -> SurfaceResult:
        page = normalize_page(page)
        limit = normalize_limit(limit)
        offset = (page - 1) * limit

        try:
            with observe_surface_duration(surface):
                promotions = build_queryset().select_related(
                    'article',
                    'article__author',
                    'article__primary_category',
                )
                total = promotions.count()
                now = timezone.now()
                entries = []
                for promotion in promotions[offset:offset + limit]:
                    score = trending_score(promotion.article, now)
                    entries.append(SurfaceEntry(
                        promotion=promotion,
                        article=promotion.article,
                        trending_score=score.score,
                        hours_ago=score.hours_ago,
                    ))
        except Exception:
            increment_surface_query(surface=surface, status='error')
            logger.exception(f"Surface query failed: surface={surface} page={page} limit={limit}")
            return SurfaceResult(
                success=False,
                pagination=empty_pagination(),
                message=failure_message,
            )

        increment_surface_query(surface=surface, status='success')
        return SurfaceResult(
            success=True,
            entries=entries,
            total=total,
            pagination=build_pagination(page, limit, total),
        )
