#!/usr/bin/env python3
"""
Test fixtures for compatibility scoring.

Builders for profiles and listings plus a fixed clock, so results are
comparable field by field across calls.
"""
from datetime import date, datetime, timezone

from compatibility.models import GeoPoint, ListingRecord, PreferenceProfile

FIXED_NOW = datetime(2026, 2, 1, 12, 0, 0, tzinfo=timezone.utc)

BERLIN = GeoPoint(lat=52.5200, lng=13.4050)
POTSDAM = GeoPoint(lat=52.3906, lng=13.0645)      # ~27 km from Berlin
HAMBURG = GeoPoint(lat=53.5511, lng=9.9937)       # ~255 km from Berlin


def fixed_clock() -> datetime:
    return FIXED_NOW


def make_profile(**overrides) -> PreferenceProfile:
    """Web-development requester from the end-to-end example."""
    data = dict(
        user_id="user-1",
        skills=["React", "TypeScript"],
        target_price=100.0,
        price_min=80.0,
        price_max=130.0,
        preferred_subcategories=["web-development"],
    )
    data.update(overrides)
    return PreferenceProfile(**data)


def make_listing(**overrides) -> ListingRecord:
    """Remote React/TypeScript job from the end-to-end example."""
    data = dict(
        listing_id="job-42",
        subcategory="web-development",
        required_skills=["react", "typescript"],
        price=120.0,
        remote_eligible=True,
        owner_rating=4.9,
    )
    data.update(overrides)
    return ListingRecord(**data)


def make_rental(**overrides) -> ListingRecord:
    data = dict(
        listing_id="rental-7",
        subcategory="apartment",
        price=1200.0,
        location=POTSDAM,
        available_from=date(2026, 3, 1),
        available_until=date(2026, 3, 31),
        owner_rating=4.5,
        amenities=["WiFi", "Parking", "Washer"],
    )
    data.update(overrides)
    return ListingRecord(**data)


def make_renter(**overrides) -> PreferenceProfile:
    data = dict(
        user_id="renter-1",
        target_price=1100.0,
        price_min=900.0,
        price_max=1500.0,
        location=BERLIN,
        max_distance_km=50.0,
        available_from=date(2026, 3, 1),
        available_until=date(2026, 3, 31),
        preferred_subcategories=["apartment", "studio"],
        required_amenities=["wifi", "parking"],
    )
    data.update(overrides)
    return PreferenceProfile(**data)
