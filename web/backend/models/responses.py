#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Dict


class DimensionResponse(BaseModel):
    """One scored axis of fit."""
    name: str
    score: float = Field(ge=0, le=100)
    weight: float = Field(ge=0, le=1)
    description: str = ""
    key: str = ""


class CompatibilityResponse(BaseModel):
    """Compatibility of one profile with one listing."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "overall_score": 86,
                "dimensions": [
                    {"name": "Skills Match", "score": 100.0, "weight": 0.4,
                     "description": "Your skills closely match what this listing asks for", "key": "skills"}
                ],
                "category": "jobs",
                "subcategory": "web-development",
                "listing_id": "job-42",
                "user_id": "user-1",
                "timestamp": "2026-02-01T12:00:00+00:00",
                "primary_match_reason": "Strong match on Skills Match",
                "improvement_suggestions": ["This listing's price differs from your preferred range."],
                "badges": ["skill-expert", "top-rated"]
            }
        }
    )

    overall_score: int = Field(ge=0, le=100)
    dimensions: List[DimensionResponse]
    category: str
    subcategory: str
    listing_id: str
    user_id: str
    timestamp: str
    primary_match_reason: str
    improvement_suggestions: List[str]
    badges: List[str]


class RankResponse(BaseModel):
    """Ranked compatibility results for one profile."""
    success: bool = True
    count: int = Field(ge=0)
    min_score: float = Field(ge=0, le=100)
    top_k: int = Field(ge=1)
    results: List[CompatibilityResponse]
    unavailable: List[str] = Field(
        default_factory=list,
        description="Listing ids whose compatibility could not be computed"
    )


class ScoringWeightsResponse(BaseModel):
    """Per-category dimension weights."""
    weights: Dict[str, Dict[str, float]]
    suggestion_threshold: float
    max_suggestions: int
