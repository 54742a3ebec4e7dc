"""Business logic services."""

from .compatibility_service import CompatibilityService, ResultPolicy, get_compatibility_service
