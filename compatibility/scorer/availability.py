#!/usr/bin/env python3
"""
Availability / timing match.

Two flavours:
- score_urgency (jobs): an urgent listing needs someone available now.
- score_window (services, rentals): share of the listing's date window that
  the requester's availability window covers, in whole days, inclusive.
"""

from __future__ import annotations

from datetime import date
from typing import Optional, Tuple
import logging

from compatibility.config_loader import ScorerConfig
from compatibility.models import ListingRecord, PreferenceProfile
from compatibility.utils import clamp01

logger = logging.getLogger(__name__)

URGENT_LEVELS = frozenset({"high", "urgent"})
FLEXIBLE_LEVELS = frozenset({"low", "medium"})


def normalize_urgency(urgency: Optional[str]) -> str:
    return (urgency or "").strip().lower()


def score_urgency(
    profile: PreferenceProfile,
    listing: ListingRecord,
    config: ScorerConfig,
) -> Tuple[float, str]:
    urgency = normalize_urgency(listing.urgency)

    if not urgency:
        return config.neutral_score, "No timing information for this listing"

    if urgency in FLEXIBLE_LEVELS:
        return 100.0, "The timing of this listing is flexible"

    if urgency not in URGENT_LEVELS:
        logger.debug("Unknown urgency %r on listing %s; neutral availability score",
                     listing.urgency, listing.listing_id)
        return config.neutral_score, "No timing information for this listing"

    if profile.available_immediately is None:
        return config.neutral_score, "This listing is urgent; set your availability to compare"

    if profile.available_immediately:
        return 100.0, "This listing is urgent and you are available now"
    return 0.0, "This listing is urgent but you are not available now"


def _window_days(start: date, end: date) -> int:
    return (end - start).days + 1


def score_window(
    profile: PreferenceProfile,
    listing: ListingRecord,
    config: ScorerConfig,
) -> Tuple[float, str]:
    start, end = listing.available_from, listing.available_until
    if start is None or end is None or end < start:
        logger.debug("Listing %s has no usable date window; neutral availability score", listing.listing_id)
        return config.neutral_score, "This listing does not state its dates"

    if profile.available_from is None and profile.available_until is None:
        return config.neutral_score, "Set your dates to compare availability"

    # An open-ended side of the requester's window is unbounded
    p_start = profile.available_from or start
    p_end = profile.available_until or end
    if p_end < p_start:
        logger.debug("Profile %s has an inverted date window; neutral availability score", profile.user_id)
        return config.neutral_score, "Your dates could not be compared"

    overlap_start = max(start, p_start)
    overlap_end = min(end, p_end)
    overlap = max(0, _window_days(overlap_start, overlap_end))

    score = round(100.0 * clamp01(overlap / _window_days(start, end)), 2)
    if score >= 100:
        description = "Your dates cover the whole period"
    elif score > 0:
        description = f"Your dates cover {overlap} of {_window_days(start, end)} days"
    else:
        description = "Your dates do not overlap this listing"
    return score, description
