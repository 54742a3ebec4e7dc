#!/usr/bin/env python3
"""
Compatibility endpoints - score and rank listings for a requester.
"""

from fastapi import APIRouter, Depends

from ..services.compatibility_service import (
    CompatibilityService,
    get_compatibility_service,
    resolve_policy
)
from ..models.requests import CompatibilityRequest, RankRequest
from ..models.responses import CompatibilityResponse, RankResponse, ScoringWeightsResponse

router = APIRouter(prefix="/api", tags=["compatibility"])


@router.post("/v1/compatibility", response_model=CompatibilityResponse)
def compute_compatibility(
    request: CompatibilityRequest,
    service: CompatibilityService = Depends(get_compatibility_service)
):
    """
    Score one requester profile against one listing.

    Returns the overall score (0-100), the per-dimension breakdown, the
    primary match reason, improvement suggestions and badges.
    An unknown category is rejected with 400.
    """
    result = service.score(
        request.category,
        request.profile.to_record(),
        request.listing.to_record()
    )
    return CompatibilityResponse(**result.to_dict())


@router.post("/v1/compatibility/rank", response_model=RankResponse)
def rank_listings(
    request: RankRequest,
    service: CompatibilityService = Depends(get_compatibility_service)
):
    """
    Score several listings for one profile and rank them, best first.

    - preset: strict (min 70, top 25), balanced (min 55, top 50), discovery (min 40, top 100)
    - min_score / top_k: override the preset, or filter on their own
    """
    policy = resolve_policy(request.preset, request.min_score, request.top_k)

    results, unavailable = service.rank(
        request.category,
        request.profile.to_record(),
        [listing.to_record() for listing in request.listings],
        policy
    )

    return RankResponse(
        count=len(results),
        min_score=policy.min_score,
        top_k=policy.top_k,
        results=[CompatibilityResponse(**r.to_dict()) for r in results],
        unavailable=unavailable
    )


@router.get("/config/scoring-weights", response_model=ScoringWeightsResponse)
def get_scoring_weights(
    service: CompatibilityService = Depends(get_compatibility_service)
):
    """
    Get current scoring weights configuration.

    Returns the per-category dimension weights and suggestion settings.
    """
    engine_config = service.engine.config

    return ScoringWeightsResponse(
        weights=engine_config.weights,
        suggestion_threshold=engine_config.aggregator.suggestion_threshold,
        max_suggestions=engine_config.aggregator.max_suggestions
    )
