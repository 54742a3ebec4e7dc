#!/usr/bin/env python3
"""
Aggregator: overall score, primary match reason, improvement suggestions.

overall = round_half_up(sum(score * weight) / sum(weight)), an int in [0, 100].
If every weight is zero the unweighted mean is used instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
import logging

import numpy as np

from compatibility.config_loader import AggregatorConfig
from compatibility.models import Dimension
from compatibility.utils import clamp, round_half_up

logger = logging.getLogger(__name__)

SUGGESTIONS_BY_KEY = {
    "skills": "Consider adding more relevant skills to your profile.",
    "price": "This listing's price differs from your preferred range.",
    "location": "This listing is outside your preferred location range.",
    "availability": "Your availability doesn't fully match this listing's schedule.",
    "quality": "This listing has fewer or lower ratings than you might prefer.",
    "type": "This listing's type is not among your preferences.",
    "amenities": "This listing is missing some of the amenities you need.",
    "experience": "This role asks for a different experience level than yours.",
}

# Fallback for dimensions built without a scorer key: first keyword found in the name wins
NAME_KEYWORDS: Tuple[Tuple[str, str], ...] = (
    ("skill", "skills"),
    ("price", "price"),
    ("budget", "price"),
    ("salary", "price"),
    ("pay", "price"),
    ("location", "location"),
    ("distance", "location"),
    ("availab", "availability"),
    ("duration", "availability"),
    ("schedule", "availability"),
    ("rating", "quality"),
    ("reputation", "quality"),
    ("quality", "quality"),
    ("amenit", "amenities"),
    ("experience", "experience"),
    ("type", "type"),
)


@dataclass(frozen=True)
class Aggregate:
    overall_score: int
    primary_match_reason: str
    improvement_suggestions: Tuple[str, ...]


def weighted_overall_score(dimensions: Sequence[Dimension]) -> int:
    """
    Weighted mean of dimension scores, rounded half-up.

    Raises:
        ValueError: If dimensions is empty.
    """
    if not dimensions:
        raise ValueError("Cannot aggregate an empty dimension list")

    scores = np.array([d.score for d in dimensions], dtype=np.float64)
    weights = np.array([d.weight for d in dimensions], dtype=np.float64)

    total_weight = float(weights.sum())
    if total_weight <= 0.0:
        logger.warning("All dimension weights are zero; using unweighted mean")
        mean = float(scores.mean())
    else:
        mean = float(np.dot(scores, weights) / total_weight)

    return int(clamp(round_half_up(mean), 0, 100))


def primary_match_reason(dimensions: Sequence[Dimension]) -> str:
    """'Strong match on {name}' for the largest score*weight; ties go to the first declared."""
    best: Optional[Dimension] = None
    best_product = -1.0
    for dim in dimensions:
        product = dim.score * dim.weight
        if product > best_product:
            best, best_product = dim, product
    if best is None:
        raise ValueError("Cannot pick a match reason from an empty dimension list")
    return f"Strong match on {best.name}"


def _suggestion_for(dim: Dimension) -> str:
    key = dim.key
    if not key:
        lowered = dim.name.lower()
        for keyword, mapped in NAME_KEYWORDS:
            if keyword in lowered:
                key = mapped
                break
    text = SUGGESTIONS_BY_KEY.get(key)
    if text is None:
        text = f"Improve your {dim.name} match by updating your preferences."
    return text


def improvement_suggestions(
    dimensions: Sequence[Dimension],
    config: Optional[AggregatorConfig] = None,
) -> Tuple[str, ...]:
    """
    One suggestion per weak dimension, weakest first, ties in declaration order.

    Identical texts are kept once; the list is capped at config.max_suggestions.
    """
    config = config or AggregatorConfig()
    weak = [d for d in dimensions if d.score < config.suggestion_threshold]
    weak.sort(key=lambda d: d.score)  # stable: ties keep declaration order

    suggestions: List[str] = []
    for dim in weak:
        text = _suggestion_for(dim)
        if text not in suggestions:
            suggestions.append(text)
        if len(suggestions) >= max(0, config.max_suggestions):
            break
    return tuple(suggestions[:max(0, config.max_suggestions)])


def aggregate(
    dimensions: Sequence[Dimension],
    config: Optional[AggregatorConfig] = None,
) -> Aggregate:
    return Aggregate(
        overall_score=weighted_overall_score(dimensions),
        primary_match_reason=primary_match_reason(dimensions),
        improvement_suggestions=improvement_suggestions(dimensions, config),
    )
