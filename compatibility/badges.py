#!/usr/bin/env python3
"""
Badge Deriver.

One fixed threshold table; every row is evaluated independently and every
threshold comparison is inclusive (>=), except the response-time row which
is a strict upper bound. A factor that is absent skips its row.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, FrozenSet, Optional, Tuple
import logging

from compatibility.models import Badge, CompatibilityResult, ListingRecord, PreferenceProfile
from compatibility.scorer.availability import URGENT_LEVELS, normalize_urgency
from compatibility.utils import as_float

logger = logging.getLogger(__name__)

PERFECT_MATCH_MIN_SCORE = 95
SKILL_EXPERT_MIN_FACTOR = 0.90
LOCATION_PERFECT_MIN_FACTOR = 0.95
TOP_RATED_MIN_FACTOR = 0.90
QUICK_RESPONDER_MAX_MINUTES = 15
CLIENT_FAVORITE_MIN_RATING = 4.8


@dataclass(frozen=True)
class BadgeFactors:
    """Everything the badge table reads besides the overall score."""
    skill_match: Optional[float] = None
    location_proximity: Optional[float] = None
    reputation_score: Optional[float] = None
    response_time_minutes: Optional[float] = None
    urgency: Optional[str] = None
    is_verified: Optional[bool] = None
    is_premium: Optional[bool] = None
    counterpart_rating: Optional[float] = None

    @classmethod
    def from_result(
        cls,
        result: CompatibilityResult,
        profile: PreferenceProfile,
        listing: ListingRecord,
    ) -> "BadgeFactors":
        factors = result.match_factors
        premium = None
        if profile.is_premium is not None or listing.is_premium is not None:
            premium = bool(profile.is_premium) or bool(listing.is_premium)
        return cls(
            skill_match=factors.skill_match if factors else None,
            location_proximity=factors.location_proximity if factors else None,
            reputation_score=factors.reputation_score if factors else None,
            response_time_minutes=as_float(listing.response_time_minutes),
            urgency=listing.urgency,
            is_verified=listing.is_verified,
            is_premium=premium,
            counterpart_rating=as_float(listing.owner_rating),
        )


def _at_least(value: Optional[float], threshold: float) -> bool:
    return value is not None and value >= threshold


BadgeRule = Callable[[int, BadgeFactors], bool]

BADGE_TABLE: Tuple[Tuple[Badge, BadgeRule], ...] = (
    (Badge.PERFECT_MATCH, lambda score, f: score >= PERFECT_MATCH_MIN_SCORE),
    (Badge.SKILL_EXPERT, lambda score, f: _at_least(f.skill_match, SKILL_EXPERT_MIN_FACTOR)),
    (Badge.LOCATION_PERFECT, lambda score, f: _at_least(f.location_proximity, LOCATION_PERFECT_MIN_FACTOR)),
    (Badge.TOP_RATED, lambda score, f: _at_least(f.reputation_score, TOP_RATED_MIN_FACTOR)),
    (Badge.QUICK_RESPONDER, lambda score, f: (
        f.response_time_minutes is not None and f.response_time_minutes < QUICK_RESPONDER_MAX_MINUTES
    )),
    (Badge.URGENT_MATCH, lambda score, f: normalize_urgency(f.urgency) in URGENT_LEVELS),
    (Badge.VERIFIED, lambda score, f: f.is_verified is True),
    (Badge.PREMIUM, lambda score, f: f.is_premium is True),
    (Badge.CLIENT_FAVORITE, lambda score, f: _at_least(f.counterpart_rating, CLIENT_FAVORITE_MIN_RATING)),
)


def derive_badges(overall_score: int, factors: Optional[BadgeFactors] = None) -> FrozenSet[Badge]:
    """
    Derive the badge set for a result.

    Args:
        overall_score: Aggregated score (0-100)
        factors: Per-dimension factors and listing flags; None means only the
            overall score is known

    Returns:
        Frozen set of badges whose condition holds
    """
    factors = factors or BadgeFactors()
    badges = frozenset(badge for badge, rule in BADGE_TABLE if rule(overall_score, factors))
    logger.debug("Derived badges %s for score %s", sorted(b.value for b in badges), overall_score)
    return badges
