#!/usr/bin/env python3
"""
Compatibility Engine - scores one requester profile against one listing.

Flow: category -> scorer set -> dimensions -> aggregate -> badges -> result.

The engine holds only read-only configuration after construction, so one
instance can be shared across threads without locking.
"""

from __future__ import annotations

from concurrent.futures import Executor
from dataclasses import replace
from datetime import datetime, timezone
from functools import lru_cache
from typing import Callable, Dict, Optional, Tuple
import logging

from compatibility.badges import BadgeFactors, derive_badges
from compatibility.config_loader import EngineConfig
from compatibility.exceptions import CompatibilityError, ConfigurationError
from compatibility.models import CompatibilityResult, Dimension, ListingRecord, PreferenceProfile
from compatibility.scorer.aggregator import aggregate
from compatibility.scorer.registry import SCORER_SETS, DimensionScorer, get_scorer_set
from compatibility.utils import as_float

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CompatibilityEngine:
    """
    Engine facade.

    Args:
        config: Per-category weight tables plus scorer and aggregator settings
        clock: Returns the creation instant stamped on each result (UTC)
        executor: Optional concurrent.futures executor to run a category's
            scorers on; results are merged in registration order either way

    Raises:
        ConfigurationError: If a weight table names a scorer that is not
            registered for its category, or omits a registered one
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        clock: Optional[Clock] = None,
        executor: Optional[Executor] = None,
    ):
        self.config = config or EngineConfig()
        self._clock = clock or _utc_now
        self._executor = executor
        self._validate_config()

    def _validate_config(self) -> None:
        for category, table in self.config.weights.items():
            scorers = SCORER_SETS.get(category)
            if scorers is None:
                logger.warning("Ignoring weight table for unsupported category %r", category)
                continue
            self._check_table(category, scorers, table)

    @staticmethod
    def _check_table(category: str, scorers: Tuple[DimensionScorer, ...], table: Dict[str, float]) -> None:
        registered = {s.key for s in scorers}
        unknown = sorted(set(table) - registered)
        if unknown:
            raise ConfigurationError(
                f"Weight table for {category!r} names unregistered scorers: {', '.join(unknown)}"
            )
        missing = [s.key for s in scorers if s.key not in table]
        if missing:
            raise ConfigurationError(
                f"Weight table for {category!r} is missing weights for: {', '.join(missing)}"
            )

    def _weights_for(self, category: str, profile: Optional[PreferenceProfile] = None) -> Dict[str, float]:
        table = self.config.weights.get(category)
        if table is None:
            raise ConfigurationError(f"No weight table configured for category {category!r}")
        overrides = profile.weight_overrides if profile is not None else None
        if not overrides:
            return table

        merged = dict(table)
        for key, value in overrides.items():
            if key not in table:
                logger.warning("Ignoring weight override for unknown %s scorer %r", category, key)
                continue
            weight = as_float(value)
            if weight is None:
                logger.warning("Ignoring non-numeric weight override %r for %s", value, key)
                continue
            merged[key] = weight
        return merged

    def _score_dimensions(
        self,
        scorers: Tuple[DimensionScorer, ...],
        weights: Dict[str, float],
        profile: PreferenceProfile,
        listing: ListingRecord,
    ) -> Tuple[Dimension, ...]:
        scorer_config = self.config.scorer

        def run(scorer: DimensionScorer) -> Dimension:
            return scorer.score(profile, listing, scorer_config, weights[scorer.key])

        if self._executor is not None:
            # map() yields in submission order regardless of completion order
            return tuple(self._executor.map(run, scorers))
        return tuple(run(s) for s in scorers)

    def compute_compatibility(
        self,
        category: str,
        profile: PreferenceProfile,
        listing: ListingRecord,
    ) -> CompatibilityResult:
        """
        Score a profile against a listing.

        The profile's weight_overrides, if any, replace the configured weight
        of each scorer key they name; unknown keys are logged and ignored.

        Raises:
            UnsupportedCategoryError: If the category has no scorer set
            ConfigurationError: If the category has no weight table
        """
        scorers = get_scorer_set(category)
        weights = self._weights_for(category, profile)

        dimensions = self._score_dimensions(scorers, weights, profile, listing)
        summary = aggregate(dimensions, self.config.aggregator)

        result = CompatibilityResult(
            overall_score=summary.overall_score,
            dimensions=dimensions,
            category=category,
            subcategory=listing.subcategory or "",
            listing_id=listing.listing_id,
            user_id=profile.user_id,
            timestamp=self._clock(),
            primary_match_reason=summary.primary_match_reason,
            improvement_suggestions=summary.improvement_suggestions,
        )
        badges = derive_badges(result.overall_score, BadgeFactors.from_result(result, profile, listing))

        logger.debug(
            "Compatibility %s/%s for user %s: %s",
            category, listing.listing_id, profile.user_id, result.overall_score
        )
        return replace(result, badges=badges)

    def try_compute_compatibility(
        self,
        category: str,
        profile: PreferenceProfile,
        listing: ListingRecord,
    ) -> Optional[CompatibilityResult]:
        """Like compute_compatibility, but returns None instead of raising."""
        try:
            return self.compute_compatibility(category, profile, listing)
        except CompatibilityError as e:
            logger.warning("Compatibility unavailable for listing %s: %s", listing.listing_id, e)
            return None


@lru_cache(maxsize=1)
def get_default_engine() -> CompatibilityEngine:
    """Shared engine with the default configuration."""
    return CompatibilityEngine(EngineConfig())


def compute_compatibility(
    category: str,
    profile: PreferenceProfile,
    listing: ListingRecord,
    config: Optional[EngineConfig] = None,
) -> CompatibilityResult:
    """Score a profile against a listing with the given (or default) configuration."""
    engine = CompatibilityEngine(config) if config is not None else get_default_engine()
    return engine.compute_compatibility(category, profile, listing)
