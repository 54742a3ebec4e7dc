#!/usr/bin/env python3
"""
Quality / reputation match from the counterpart's star rating.
"""

from __future__ import annotations

from typing import Tuple
import logging

from compatibility.config_loader import ScorerConfig
from compatibility.models import ListingRecord, PreferenceProfile
from compatibility.utils import as_float, clamp, warn_correct

logger = logging.getLogger(__name__)


def score_quality(
    profile: PreferenceProfile,
    listing: ListingRecord,
    config: ScorerConfig,
) -> Tuple[float, str]:
    rating = as_float(listing.owner_rating)
    if rating is None:
        return config.neutral_score, "No ratings yet"

    max_rating = config.max_rating if config.max_rating > 0 else 5.0
    clamped = clamp(rating, 0.0, max_rating)
    warn_correct("owner_rating", rating, clamped)

    score = round(100.0 * clamped / max_rating, 2)
    if score >= 90:
        description = f"Highly rated ({clamped:.1f}/{max_rating:g})"
    elif score >= 70:
        description = f"Well rated ({clamped:.1f}/{max_rating:g})"
    else:
        description = f"Rated {clamped:.1f}/{max_rating:g}"
    return score, description
