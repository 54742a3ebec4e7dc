#!/usr/bin/env python3
"""
Skill / requirement match.

Key behavior:
- Case-insensitive, whitespace-trimmed comparison of skill names.
- Listing without skill data -> neutral; listing requiring nothing -> 100.
- Requester without declared skills -> neutral.
- Otherwise Jaccard overlap, with configured synonym pairs counted as a
  partial match (synonym_match_weight) and merged into one union element.
"""

from __future__ import annotations

from typing import Dict, List, Set, Tuple
import logging

from compatibility.config_loader import ScorerConfig
from compatibility.models import ListingRecord, PreferenceProfile
from compatibility.utils import clamp01, normalize_terms

logger = logging.getLogger(__name__)


def _synonym_index(config: ScorerConfig) -> Dict[str, Set[int]]:
    index: Dict[str, Set[int]] = {}
    for group_id, group in enumerate(config.skill_synonyms or []):
        for term in normalize_terms(group):
            index.setdefault(term, set()).add(group_id)
    return index


def _pair_synonyms(
    unmatched_required: List[str],
    unmatched_declared: List[str],
    index: Dict[str, Set[int]],
) -> int:
    """Greedily pair leftover required skills with leftover declared synonyms."""
    if not index:
        return 0
    available = list(unmatched_declared)
    pairs = 0
    for req in unmatched_required:
        groups = index.get(req)
        if not groups:
            continue
        for i, have in enumerate(available):
            if groups & index.get(have, set()):
                pairs += 1
                del available[i]
                break
    return pairs


def describe(score: float) -> str:
    if score >= 90:
        return "Your skills closely match what this listing asks for"
    if score >= 70:
        return "You have most of the skills this listing asks for"
    if score >= 50:
        return "You have some of the skills this listing asks for"
    return "Few of your skills match this listing"


def score_skills(
    profile: PreferenceProfile,
    listing: ListingRecord,
    config: ScorerConfig,
) -> Tuple[float, str]:
    """
    Score requester skills against listing requirements.

    Returns:
        Tuple of (score 0-100, description)
    """
    if listing.required_skills is None:
        logger.debug("Listing %s has no skill data; neutral skill score", listing.listing_id)
        return config.neutral_score, "This listing does not state its skill requirements"

    required = normalize_terms(listing.required_skills)
    if not required:
        return 100.0, "This listing has no specific skill requirements"

    declared = normalize_terms(profile.skills)
    if not declared:
        logger.debug("Profile %s declares no skills; neutral skill score", profile.user_id)
        return config.neutral_score, "Add your skills to see how well you match"

    required_set = set(required)
    declared_set = set(declared)
    exact = required_set & declared_set

    pairs = _pair_synonyms(
        [r for r in required if r not in exact],
        [d for d in declared if d not in exact],
        _synonym_index(config),
    )

    union_size = len(required_set | declared_set) - pairs
    synonym_weight = clamp01(float(config.synonym_match_weight))
    ratio = (len(exact) + synonym_weight * pairs) / union_size

    score = round(100.0 * clamp01(ratio), 2)
    return score, describe(score)
