#!/usr/bin/env python3
"""
Scoring Module - dimension scorers and aggregation.

Public API:
- get_scorer_set: Ordered scorer set for a category
- aggregate: Overall score, primary match reason, improvement suggestions

Modules:
- skills.py: Skill/requirement overlap (with synonyms)
- price.py: Price/budget match
- location.py: Distance match
- availability.py: Urgency (jobs) and date-window (services, rentals) match
- quality.py: Rating match
- preferences.py: Listing type and amenities match
- experience.py: Experience level match (jobs)
- registry.py: Per-category scorer sets
- aggregator.py: Weighted mean, match reason, suggestions
"""

from compatibility.scorer.aggregator import Aggregate, aggregate
from compatibility.scorer.registry import DimensionScorer, SCORER_SETS, get_scorer_set

__all__ = ['Aggregate', 'aggregate', 'DimensionScorer', 'SCORER_SETS', 'get_scorer_set']
