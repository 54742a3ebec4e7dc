"""Compatibility scoring engine for jobs, services and rentals listings."""

from compatibility.config_loader import EngineConfig, load_config
from compatibility.engine import CompatibilityEngine, compute_compatibility
from compatibility.exceptions import CompatibilityError, ConfigurationError, UnsupportedCategoryError
from compatibility.models import (
    Badge,
    CompatibilityResult,
    Dimension,
    GeoPoint,
    ListingRecord,
    MatchFactors,
    PreferenceProfile,
    SUPPORTED_CATEGORIES,
)

__all__ = [
    'Badge',
    'CompatibilityEngine',
    'CompatibilityError',
    'CompatibilityResult',
    'ConfigurationError',
    'Dimension',
    'EngineConfig',
    'GeoPoint',
    'ListingRecord',
    'MatchFactors',
    'PreferenceProfile',
    'SUPPORTED_CATEGORIES',
    'UnsupportedCategoryError',
    'compute_compatibility',
    'load_config',
]
