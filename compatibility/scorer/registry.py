#!/usr/bin/env python3
"""
Per-category scorer sets.

Registration order is the dimension order of every result for that category.
Weights are not stored here; they come from EngineConfig.weights, keyed by
scorer key.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Tuple

from compatibility.config_loader import ScorerConfig
from compatibility.exceptions import UnsupportedCategoryError
from compatibility.models import Dimension, ListingRecord, PreferenceProfile
from compatibility.scorer.availability import score_urgency, score_window
from compatibility.scorer.experience import score_experience
from compatibility.scorer.location import score_location
from compatibility.scorer.preferences import score_amenities, score_type
from compatibility.scorer.price import score_price
from compatibility.scorer.quality import score_quality
from compatibility.scorer.skills import score_skills

ScoreFn = Callable[[PreferenceProfile, ListingRecord, ScorerConfig], Tuple[float, str]]


@dataclass(frozen=True)
class DimensionScorer:
    """One named, keyed axis of fit for a category."""
    key: str
    name: str
    score_fn: ScoreFn

    def score(
        self,
        profile: PreferenceProfile,
        listing: ListingRecord,
        config: ScorerConfig,
        weight: float,
    ) -> Dimension:
        value, description = self.score_fn(profile, listing, config)
        return Dimension(
            name=self.name,
            score=value,
            weight=weight,
            description=description,
            key=self.key,
        )


SCORER_SETS: Dict[str, Tuple[DimensionScorer, ...]] = {
    "jobs": (
        DimensionScorer("skills", "Skills Match", score_skills),
        DimensionScorer("price", "Pay Match", score_price),
        DimensionScorer("location", "Location Match", score_location),
        DimensionScorer("availability", "Availability", score_urgency),
        DimensionScorer("quality", "Client Reputation", score_quality),
        DimensionScorer("experience", "Experience Level", score_experience),
    ),
    "services": (
        DimensionScorer("type", "Service Type", score_type),
        DimensionScorer("skills", "Skills Match", score_skills),
        DimensionScorer("price", "Price", score_price),
        DimensionScorer("location", "Location", score_location),
        DimensionScorer("availability", "Availability", score_window),
        DimensionScorer("quality", "Provider Rating", score_quality),
    ),
    "rentals": (
        DimensionScorer("type", "Rental Type", score_type),
        DimensionScorer("price", "Price", score_price),
        DimensionScorer("location", "Location", score_location),
        DimensionScorer("amenities", "Amenities", score_amenities),
        DimensionScorer("availability", "Duration", score_window),
        DimensionScorer("quality", "Owner Rating", score_quality),
    ),
}


def get_scorer_set(category: str) -> Tuple[DimensionScorer, ...]:
    """
    Get the ordered scorer set for a category.

    Raises:
        UnsupportedCategoryError: If no scorer set is registered for the category.
    """
    scorers = SCORER_SETS.get(category) if isinstance(category, str) else None
    if scorers is None:
        raise UnsupportedCategoryError(category)
    return scorers
