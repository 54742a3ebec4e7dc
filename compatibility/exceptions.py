#!/usr/bin/env python3
"""
Exceptions raised by the compatibility engine.

Missing or out-of-range profile/listing data never raises; it is recovered
inside the scorers. Only a broken configuration or an unknown category does.
"""


class CompatibilityError(Exception):
    """Base exception for compatibility engine errors."""
    pass


class ConfigurationError(CompatibilityError):
    """Raised when the engine configuration is invalid or incomplete."""
    pass


class UnsupportedCategoryError(ConfigurationError):
    """Raised when a listing category has no registered scorer set."""

    def __init__(self, category):
        self.category = category
        super().__init__(f"Unsupported listing category: {category!r}")
