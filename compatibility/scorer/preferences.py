#!/usr/bin/env python3
"""
Requester preference matches: listing type and rental amenities.
"""

from __future__ import annotations

from typing import Tuple
import logging

from compatibility.config_loader import ScorerConfig
from compatibility.models import ListingRecord, PreferenceProfile
from compatibility.utils import normalize_terms

logger = logging.getLogger(__name__)


def score_type(
    profile: PreferenceProfile,
    listing: ListingRecord,
    config: ScorerConfig,
) -> Tuple[float, str]:
    """Listing subcategory (work arrangement, service type, rental type) vs preferred ones."""
    subcategory = (listing.subcategory or "").strip().lower()
    preferred = normalize_terms(profile.preferred_subcategories)

    if not subcategory or not preferred:
        return config.neutral_score, "No type preference to compare"

    if subcategory in preferred:
        return 100.0, f"{listing.subcategory} is one of your preferred types"
    return 0.0, f"{listing.subcategory} is not one of your preferred types"


def score_amenities(
    profile: PreferenceProfile,
    listing: ListingRecord,
    config: ScorerConfig,
) -> Tuple[float, str]:
    """Share of the requester's required amenities the listing offers."""
    required = normalize_terms(profile.required_amenities)
    if not required:
        return 100.0, "You have no required amenities"

    if listing.amenities is None:
        logger.debug("Listing %s has no amenity data; neutral amenities score", listing.listing_id)
        return config.neutral_score, "This listing does not list its amenities"

    offered = set(normalize_terms(listing.amenities))
    present = [a for a in required if a in offered]

    score = round(100.0 * len(present) / len(required), 2)
    if len(present) == len(required):
        description = "Has all the amenities you need"
    else:
        description = f"Has {len(present)} of {len(required)} amenities you need"
    return score, description
