#!/usr/bin/env python3
"""
Experience level match (jobs).

Levels form one ordinal ladder; the score falls linearly with the number of
rungs between the requester's level and the listing's, reaching 0 only at
opposite ends of the ladder.
"""

from __future__ import annotations

from typing import Optional, Tuple
import logging

from compatibility.config_loader import ScorerConfig
from compatibility.models import ListingRecord, PreferenceProfile

logger = logging.getLogger(__name__)

EXPERIENCE_LEVELS: Tuple[str, ...] = ("entry", "junior", "mid", "senior", "expert", "lead")


def experience_rank(level: Optional[str]) -> Optional[int]:
    """Position of a level on the ladder, or None when missing or unknown."""
    if not isinstance(level, str):
        return None
    try:
        return EXPERIENCE_LEVELS.index(level.strip().lower())
    except ValueError:
        logger.debug("Unknown experience level %r", level)
        return None


def score_experience(
    profile: PreferenceProfile,
    listing: ListingRecord,
    config: ScorerConfig,
) -> Tuple[float, str]:
    wanted = experience_rank(profile.experience_level)
    required = experience_rank(listing.experience_level)
    if wanted is None or required is None:
        return config.neutral_score, "Experience level not specified"

    if wanted == required:
        return 100.0, f"This role is looking for your level ({EXPERIENCE_LEVELS[required]})"

    gap = abs(wanted - required)
    score = round(100.0 * (1 - gap / (len(EXPERIENCE_LEVELS) - 1)), 2)
    direction = "above" if required > wanted else "below"
    return score, f"This role is {gap} level{'s' if gap > 1 else ''} {direction} your experience"
