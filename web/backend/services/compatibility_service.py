#!/usr/bin/env python3
"""
Compatibility service - scores and ranks listings for a requester.

Ranking is a caller concern: the engine scores one pair at a time, this
service orders the results and applies the result policy.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from compatibility.cache.result_cache import CompatibilityResultCache, content_version
from compatibility.config_loader import AppConfig
from compatibility.engine import CompatibilityEngine
from compatibility.exceptions import CompatibilityError
from compatibility.models import CompatibilityResult, ListingRecord, PreferenceProfile
from compatibility.scorer.registry import get_scorer_set

from ..exceptions import InvalidPolicyException

logger = logging.getLogger(__name__)


@dataclass
class ResultPolicy:
    """Result policy for ranking."""
    min_score: float = 55.0
    top_k: int = 50


# Policy presets
POLICY_PRESETS: Dict[str, ResultPolicy] = {
    "strict": ResultPolicy(min_score=70.0, top_k=25),
    "balanced": ResultPolicy(min_score=55.0, top_k=50),
    "discovery": ResultPolicy(min_score=40.0, top_k=100),
}


def resolve_policy(
    preset: Optional[str] = None,
    min_score: Optional[float] = None,
    top_k: Optional[int] = None
) -> ResultPolicy:
    """
    Build a result policy from a preset plus explicit overrides.

    Without a preset, unset values mean "keep everything": min_score 0, top_k 500.

    Raises:
        InvalidPolicyException: If the preset is unknown or a value is out of range.
    """
    if preset is not None:
        preset_name = preset.lower()
        if preset_name not in POLICY_PRESETS:
            raise InvalidPolicyException(
                f"Invalid preset '{preset}'. "
                f"Valid options: {', '.join(POLICY_PRESETS.keys())}"
            )
        base = POLICY_PRESETS[preset_name]
    else:
        base = ResultPolicy(min_score=0.0, top_k=500)

    policy = ResultPolicy(
        min_score=base.min_score if min_score is None else min_score,
        top_k=base.top_k if top_k is None else top_k
    )

    if not (0 <= policy.min_score <= 100):
        raise InvalidPolicyException(
            f"min_score must be between 0 and 100, got {policy.min_score}"
        )
    if not (1 <= policy.top_k <= 500):
        raise InvalidPolicyException(
            f"top_k must be between 1 and 500, got {policy.top_k}"
        )
    return policy


class CompatibilityService:
    """Service for computing and ranking compatibility results."""

    def __init__(
        self,
        engine: CompatibilityEngine,
        cache: Optional[CompatibilityResultCache] = None
    ):
        self.engine = engine
        self.cache = cache

    def score(
        self,
        category: str,
        profile: PreferenceProfile,
        listing: ListingRecord
    ) -> CompatibilityResult:
        """
        Score one listing, reading through the result cache when one is configured.

        Raises:
            UnsupportedCategoryError: If the category has no scorer set.
        """
        if self.cache is None:
            return self.engine.compute_compatibility(category, profile, listing)

        profile_version = profile.version or content_version(profile)
        listing_version = listing.version or content_version(listing)
        cached = self.cache.get(
            profile.user_id, category, listing.listing_id,
            profile_version, listing_version
        )
        if cached is not None:
            return cached

        result = self.engine.compute_compatibility(category, profile, listing)
        self.cache.set(result, profile_version, listing_version)
        return result

    def rank(
        self,
        category: str,
        profile: PreferenceProfile,
        listings: Sequence[ListingRecord],
        policy: ResultPolicy
    ) -> Tuple[List[CompatibilityResult], List[str]]:
        """
        Score listings and order them by overall score, best first.

        Ties keep input order. Listings whose score cannot be computed are
        reported separately instead of failing the whole request.

        Returns:
            Tuple of (ranked results after policy, unavailable listing ids)

        Raises:
            UnsupportedCategoryError: If the category has no scorer set.
        """
        # Fail the whole request up front for a bad category
        get_scorer_set(category)

        scored: List[CompatibilityResult] = []
        unavailable: List[str] = []
        for listing in listings:
            try:
                scored.append(self.score(category, profile, listing))
            except CompatibilityError as e:
                logger.warning(f"Compatibility unavailable for listing {listing.listing_id}: {e}")
                unavailable.append(listing.listing_id)

        ranked = sorted(scored, key=lambda r: r.overall_score, reverse=True)
        ranked = [r for r in ranked if r.overall_score >= policy.min_score]

        logger.info(
            f"Ranked {len(scored)} listings for user {profile.user_id}: "
            f"{len(ranked)} above {policy.min_score}, returning top {policy.top_k}"
        )
        return ranked[:policy.top_k], unavailable


def build_compatibility_service(config: AppConfig) -> CompatibilityService:
    """Create a service from application configuration."""
    cache = None
    if config.cache.enabled:
        cache = CompatibilityResultCache(
            redis_url=config.cache.redis_url,
            password=config.cache.password,
            ttl_seconds=config.cache.ttl_seconds
        )
    return CompatibilityService(CompatibilityEngine(config.engine), cache)


# Global service instance
_compatibility_service: Optional[CompatibilityService] = None


def get_compatibility_service() -> CompatibilityService:
    """Get the global compatibility service instance."""
    global _compatibility_service
    if _compatibility_service is None:
        from ..config import get_config
        _compatibility_service = build_compatibility_service(get_config())
    return _compatibility_service
