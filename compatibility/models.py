#!/usr/bin/env python3
"""
Data models for compatibility scoring.

Profiles and listings are explicit records with named optional fields; a
field left as None means "unknown" and scores neutrally. Results are frozen
and only ever copied with dataclasses.replace().
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, FrozenSet, List, Literal, Optional, Tuple
import logging

from compatibility.utils import as_float, clamp, warn_correct

logger = logging.getLogger(__name__)

Category = Literal["jobs", "services", "rentals"]
SUPPORTED_CATEGORIES: Tuple[str, ...] = ("jobs", "services", "rentals")

NEUTRAL_SCORE = 50.0


class Badge(str, Enum):
    """Qualitative match tags derived from fixed score thresholds."""
    PERFECT_MATCH = "perfect-match"
    SKILL_EXPERT = "skill-expert"
    LOCATION_PERFECT = "location-perfect"
    TOP_RATED = "top-rated"
    QUICK_RESPONDER = "quick-responder"
    URGENT_MATCH = "urgent-match"
    VERIFIED = "verified"
    PREMIUM = "premium"
    CLIENT_FAVORITE = "client-favorite"


@dataclass(frozen=True)
class GeoPoint:
    lat: float
    lng: float


@dataclass(frozen=True)
class PreferenceProfile:
    """What the requester is looking for."""
    user_id: str
    skills: Optional[List[str]] = None
    target_price: Optional[float] = None
    price_min: Optional[float] = None
    price_max: Optional[float] = None
    location: Optional[GeoPoint] = None
    max_distance_km: Optional[float] = None
    available_from: Optional[date] = None
    available_until: Optional[date] = None
    available_immediately: Optional[bool] = None
    preferred_subcategories: Optional[List[str]] = None
    required_amenities: Optional[List[str]] = None
    is_premium: Optional[bool] = None
    experience_level: Optional[str] = None  # entry, junior, mid, senior, expert, lead
    # scorer key -> weight, merged over the configured table for this requester
    weight_overrides: Optional[Dict[str, float]] = None
    version: Optional[str] = None


@dataclass(frozen=True)
class ListingRecord:
    """
    A job, service or rental listing.

    required_skills=None means the listing carries no skill data at all;
    an empty list means it explicitly requires nothing.
    """
    listing_id: str
    subcategory: str = ""
    required_skills: Optional[List[str]] = None
    price: Optional[float] = None
    location: Optional[GeoPoint] = None
    remote_eligible: Optional[bool] = None
    available_from: Optional[date] = None
    available_until: Optional[date] = None
    urgency: Optional[str] = None  # low, medium, high, urgent
    owner_rating: Optional[float] = None  # 0-5 stars
    response_time_minutes: Optional[float] = None
    is_verified: Optional[bool] = None
    is_premium: Optional[bool] = None
    amenities: Optional[List[str]] = None
    experience_level: Optional[str] = None
    version: Optional[str] = None


@dataclass(frozen=True)
class Dimension:
    """
    One axis of fit.

    score is clamped to [0, 100] and weight to [0, 1]; a non-numeric score
    becomes the neutral score and a non-numeric weight becomes 0.
    """
    name: str
    score: float
    weight: float
    description: str = ""
    key: str = ""

    def __post_init__(self):
        raw_score = as_float(self.score)
        if raw_score is None:
            logger.warning("Non-numeric score %r for dimension %s; using %s", self.score, self.name, NEUTRAL_SCORE)
            score = NEUTRAL_SCORE
        else:
            score = clamp(raw_score, 0.0, 100.0)
            warn_correct(f"{self.name}.score", raw_score, score)

        raw_weight = as_float(self.weight)
        if raw_weight is None:
            logger.warning("Non-numeric weight %r for dimension %s; using 0", self.weight, self.name)
            weight = 0.0
        else:
            weight = clamp(raw_weight, 0.0, 1.0)
            warn_correct(f"{self.name}.weight", raw_weight, weight)

        object.__setattr__(self, "score", score)
        object.__setattr__(self, "weight", weight)


@dataclass(frozen=True)
class MatchFactors:
    """Fractional [0,1] view of a jobs result, keyed the way the badge table reads it."""
    skill_match: Optional[float] = None
    location_proximity: Optional[float] = None
    price_match: Optional[float] = None
    availability_match: Optional[float] = None
    reputation_score: Optional[float] = None

    # dimension key -> factor field
    KEY_MAP = {
        "skills": "skill_match",
        "location": "location_proximity",
        "price": "price_match",
        "availability": "availability_match",
        "quality": "reputation_score",
    }

    @classmethod
    def from_dimensions(cls, dimensions) -> "MatchFactors":
        values: Dict[str, float] = {}
        for dim in dimensions:
            factor = cls.KEY_MAP.get(dim.key)
            if factor and factor not in values:
                values[factor] = dim.score / 100.0
        return cls(**values)


@dataclass(frozen=True)
class CompatibilityResult:
    overall_score: int
    dimensions: Tuple[Dimension, ...]
    category: str
    subcategory: str
    listing_id: str
    user_id: str
    timestamp: datetime
    primary_match_reason: str
    improvement_suggestions: Tuple[str, ...] = ()
    badges: FrozenSet[Badge] = field(default_factory=frozenset)

    @property
    def match_factors(self) -> Optional[MatchFactors]:
        """Jobs-only projection of the dimension list; None for other categories."""
        if self.category != "jobs":
            return None
        return MatchFactors.from_dimensions(self.dimensions)

    def dimension(self, key: str) -> Optional[Dimension]:
        """First dimension produced by the given scorer key, if any."""
        for dim in self.dimensions:
            if dim.key == key:
                return dim
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "overall_score": self.overall_score,
            "dimensions": [
                {
                    "name": d.name,
                    "score": d.score,
                    "weight": d.weight,
                    "description": d.description,
                    "key": d.key,
                }
                for d in self.dimensions
            ],
            "category": self.category,
            "subcategory": self.subcategory,
            "listing_id": self.listing_id,
            "user_id": self.user_id,
            "timestamp": self.timestamp.isoformat(),
            "primary_match_reason": self.primary_match_reason,
            "improvement_suggestions": list(self.improvement_suggestions),
            "badges": sorted(b.value for b in self.badges),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CompatibilityResult":
        return cls(
            overall_score=int(data["overall_score"]),
            dimensions=tuple(Dimension(**d) for d in data.get("dimensions", [])),
            category=data["category"],
            subcategory=data.get("subcategory", ""),
            listing_id=data["listing_id"],
            user_id=data["user_id"],
            timestamp=datetime.fromisoformat(data["timestamp"]),
            primary_match_reason=data.get("primary_match_reason", ""),
            improvement_suggestions=tuple(data.get("improvement_suggestions", [])),
            badges=frozenset(Badge(b) for b in data.get("badges", [])),
        )
