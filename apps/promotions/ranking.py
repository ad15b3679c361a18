"""
Trending Ranking Engine.

Scores are computed at query time and are informational: surface order is
decided by promotion priority/position first (see breaking_order and
pinned_order).

    engagement = views*1 + likes*5 + comments*10 + shares*15
    score      = engagement * decay(hours since publish)
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from django.db.models import Case, F, IntegerField, Value, When
from django.utils import timezone


VIEW_WEIGHT = 1
LIKE_WEIGHT = 5
COMMENT_WEIGHT = 10
SHARE_WEIGHT = 15

# (upper bound in hours, multiplier), checked in order
DECAY_STEPS = [
    (1, 3.0),
    (3, 2.0),
    (6, 1.5),
    (12, 1.2),
    (24, 1.0),
    (48, 0.5),
]
DECAY_FLOOR = 0.2

BREAKING_PRIORITY_RANK = {'urgent': 0, 'high': 1, 'medium': 2, 'low': 3}
BREAKING_PRIORITY_UNSET = 4

PINNED_TIER_RANK = {'gold': 1, 'silver': 2, 'bronze': 3}
PINNED_TIER_UNSET = 4


@dataclass(frozen=True)
class TrendingScore:
    engagement: int
    hours_ago: float
    decay: float
    score: float


def engagement(views=0, likes=0, comments=0, shares=0) -> int:
    return (
        (views or 0) * VIEW_WEIGHT
        + (likes or 0) * LIKE_WEIGHT
        + (comments or 0) * COMMENT_WEIGHT
        + (shares or 0) * SHARE_WEIGHT
    )


def decay(hours: Optional[float]) -> float:
    """Freshness multiplier. Unknown age gets the floor."""
    if hours is None:
        return DECAY_FLOOR
    for bound, multiplier in DECAY_STEPS:
        if hours < bound:
            return multiplier
    return DECAY_FLOOR


def hours_since(published_at: Optional[datetime], now: Optional[datetime] = None) -> Optional[float]:
    if published_at is None:
        return None
    now = now or timezone.now()
    return (now - published_at).total_seconds() / 3600


def trending_score(article, now: Optional[datetime] = None) -> TrendingScore:
    """Score an article from its counters and publish time."""
    points = engagement(
        views=article.views,
        likes=article.likes_count,
        comments=article.comments_count,
        shares=article.share_count,
    )
    hours = hours_since(article.published_at, now)
    multiplier = decay(hours)
    return TrendingScore(
        engagement=points,
        hours_ago=hours if hours is not None else 0.0,
        decay=multiplier,
        score=points * multiplier,
    )


def _rank_case(field_name, ranks, default):
    return Case(
        *[When(**{field_name: key}, then=Value(rank)) for key, rank in ranks.items()],
        default=Value(default),
        output_field=IntegerField(),
    )


def breaking_order(queryset):
    """Priority (urgent first, unset last), newest start, newest publish."""
    return queryset.annotate(
        priority_rank=_rank_case('priority', BREAKING_PRIORITY_RANK, BREAKING_PRIORITY_UNSET),
    ).order_by(
        'priority_rank',
        F('starts_at').desc(),
        F('article__published_at').desc(nulls_last=True),
        '-id',
    )


def pinned_order(queryset):
    """Position (nulls last), tier (gold first, unset last), newest start, newest publish."""
    return queryset.annotate(
        tier_rank=_rank_case('tier', PINNED_TIER_RANK, PINNED_TIER_UNSET),
    ).order_by(
        F('position').asc(nulls_last=True),
        'tier_rank',
        F('starts_at').desc(),
        F('article__published_at').desc(nulls_last=True),
        '-id',
    )
