#!/usr/bin/env python3
"""
Location / distance match using great-circle distance.
"""

from __future__ import annotations

from typing import Tuple
import logging

from compatibility.config_loader import ScorerConfig
from compatibility.models import ListingRecord, PreferenceProfile
from compatibility.utils import as_float, clamp01, haversine_km

logger = logging.getLogger(__name__)


def describe(score: float, distance_km: float) -> str:
    if score >= 90:
        return f"Very close to you ({distance_km:.1f} km away)"
    if score >= 70:
        return f"Close to you ({distance_km:.1f} km away)"
    if score >= 50:
        return f"A moderate distance away ({distance_km:.1f} km)"
    return f"Far from your preferred area ({distance_km:.1f} km away)"


def score_location(
    profile: PreferenceProfile,
    listing: ListingRecord,
    config: ScorerConfig,
) -> Tuple[float, str]:
    if listing.remote_eligible:
        return 100.0, "Can be done remotely"

    if profile.location is None or listing.location is None:
        logger.debug("Missing location for listing %s or profile %s; neutral location score",
                     listing.listing_id, profile.user_id)
        return config.neutral_score, "Location information is incomplete"

    max_distance = as_float(profile.max_distance_km)
    if max_distance is None or max_distance <= 0:
        max_distance = config.default_max_distance_km

    distance = haversine_km(
        profile.location.lat, profile.location.lng,
        listing.location.lat, listing.location.lng,
        radius_km=config.earth_radius_km,
    )

    score = round(100.0 * clamp01(1.0 - distance / max_distance), 2)
    return score, describe(score, distance)
