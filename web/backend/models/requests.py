#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

from datetime import date
from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional

from compatibility.models import GeoPoint, ListingRecord, PreferenceProfile


class GeoPointModel(BaseModel):
    """A latitude/longitude pair in decimal degrees."""
    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)

    def to_record(self) -> GeoPoint:
        return GeoPoint(lat=self.lat, lng=self.lng)


class ProfileModel(BaseModel):
    """Requester preference profile. Omitted fields score neutrally."""
    user_id: str
    skills: Optional[List[str]] = None
    target_price: Optional[float] = None
    price_min: Optional[float] = None
    price_max: Optional[float] = None
    location: Optional[GeoPointModel] = None
    max_distance_km: Optional[float] = None
    available_from: Optional[date] = None
    available_until: Optional[date] = None
    available_immediately: Optional[bool] = None
    preferred_subcategories: Optional[List[str]] = None
    required_amenities: Optional[List[str]] = None
    is_premium: Optional[bool] = None
    experience_level: Optional[str] = Field(None, description="entry, junior, mid, senior, expert or lead")
    weight_overrides: Optional[Dict[str, float]] = Field(
        None, description="Scorer key to weight (0-1), merged over the configured weights"
    )
    version: Optional[str] = None

    def to_record(self) -> PreferenceProfile:
        data = self.model_dump(exclude={"location"})
        return PreferenceProfile(
            location=self.location.to_record() if self.location else None,
            **data
        )


class ListingModel(BaseModel):
    """A job, service or rental listing. Omitted fields score neutrally."""
    listing_id: str
    subcategory: str = ""
    required_skills: Optional[List[str]] = None
    price: Optional[float] = None
    location: Optional[GeoPointModel] = None
    remote_eligible: Optional[bool] = None
    available_from: Optional[date] = None
    available_until: Optional[date] = None
    urgency: Optional[str] = Field(None, description="low, medium, high or urgent")
    owner_rating: Optional[float] = Field(None, description="Counterpart rating, 0-5 stars")
    response_time_minutes: Optional[float] = None
    is_verified: Optional[bool] = None
    is_premium: Optional[bool] = None
    amenities: Optional[List[str]] = None
    experience_level: Optional[str] = Field(None, description="entry, junior, mid, senior, expert or lead")
    version: Optional[str] = None

    def to_record(self) -> ListingRecord:
        data = self.model_dump(exclude={"location"})
        return ListingRecord(
            location=self.location.to_record() if self.location else None,
            **data
        )


class CompatibilityRequest(BaseModel):
    """Request to score one profile against one listing."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "category": "jobs",
                "profile": {
                    "user_id": "user-1",
                    "skills": ["React", "TypeScript"],
                    "target_price": 100,
                    "price_min": 80,
                    "price_max": 130
                },
                "listing": {
                    "listing_id": "job-42",
                    "subcategory": "web-development",
                    "required_skills": ["react", "typescript"],
                    "price": 120,
                    "remote_eligible": True,
                    "owner_rating": 4.9
                }
            }
        }
    )

    category: str = Field(..., description="Listing category: jobs, services or rentals")
    profile: ProfileModel
    listing: ListingModel


class RankRequest(BaseModel):
    """Request to score and rank several listings for one profile."""
    category: str = Field(..., description="Listing category: jobs, services or rentals")
    profile: ProfileModel
    listings: List[ListingModel] = Field(default_factory=list)
    preset: Optional[str] = Field(None, description="Policy preset: strict, balanced, discovery")
    min_score: Optional[float] = Field(None, ge=0, le=100, description="Minimum overall score (0-100)")
    top_k: Optional[int] = Field(None, ge=1, le=500, description="Maximum results to return (1-500)")
