#!/usr/bin/env python3
"""
Price / budget match.

Score is 100 at the requester's target price and decays linearly to 0 at
the edge of their acceptable range, each side toward its own edge. Prices
outside the range score 0.
"""

from __future__ import annotations

from typing import Tuple
import logging

from compatibility.config_loader import ScorerConfig
from compatibility.models import ListingRecord, PreferenceProfile
from compatibility.utils import as_float, clamp, clamp01, warn_correct

logger = logging.getLogger(__name__)


def describe(score: float) -> str:
    if score >= 90:
        return "The price is right at your target"
    if score >= 70:
        return "The price is close to your target"
    if score >= 50:
        return "The price is within your range"
    if score > 0:
        return "The price is near the edge of your range"
    return "The price is outside your range"


def score_price(
    profile: PreferenceProfile,
    listing: ListingRecord,
    config: ScorerConfig,
) -> Tuple[float, str]:
    price = as_float(listing.price)
    lo = as_float(profile.price_min)
    hi = as_float(profile.price_max)

    if price is None or lo is None or hi is None:
        logger.debug("Missing price data for listing %s; neutral price score", listing.listing_id)
        return config.neutral_score, "Not enough pricing information to compare"

    if lo > hi:
        logger.warning("Price range inverted (%r > %r); swapping bounds", lo, hi)
        lo, hi = hi, lo

    target = as_float(profile.target_price)
    if target is None:
        target = (lo + hi) / 2.0
    else:
        clamped = clamp(target, lo, hi)
        warn_correct("target_price", target, clamped)
        target = clamped

    if price < lo or price > hi:
        return 0.0, describe(0.0)

    if price >= target:
        span = hi - target
        ratio = 1.0 if span <= 0 else 1.0 - (price - target) / span
    else:
        span = target - lo
        ratio = 1.0 - (target - price) / span

    score = round(100.0 * clamp01(ratio), 2)
    return score, describe(score)
