import math
import logging
from typing import Any, Iterable, List, Optional

logger = logging.getLogger(__name__)


def clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def clamp01(x: float) -> float:
    return clamp(x, 0.0, 1.0)


def warn_correct(name: str, old: Any, new: Any) -> None:
    if old != new:
        logger.warning("Corrected %s from %r to %r", name, old, new)


def as_float(value: Any) -> Optional[float]:
    """Coerce a numeric-looking value to float, or None if it is missing or not a number."""
    if value is None or isinstance(value, bool):
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(result):
        return None
    return result


def round_half_up(x: float) -> int:
    """Round to the nearest integer, halves away from zero for non-negative input."""
    return int(math.floor(x + 0.5))


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float, radius_km: float = 6371.0) -> float:
    """
    Great-circle distance between two points given in decimal degrees.

    Args:
        lat1, lng1: First point
        lat2, lng2: Second point
        radius_km: Sphere radius (Earth by default)

    Returns:
        Distance in kilometers
    """
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lng2 - lng1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    # rounding can push a just past 1 for near-antipodal points
    a = clamp01(a)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return radius_km * c


def normalize_terms(items: Optional[Iterable[Any]]) -> List[str]:
    """
    Lowercase and trim a list of free-text terms (skills, amenities, types).

    Blank entries are dropped and duplicates removed, first occurrence wins.
    """
    if not items:
        return []
    seen = set()
    result = []
    for item in items:
        if item is None:
            continue
        term = str(item).strip().lower()
        if term and term not in seen:
            seen.add(term)
            result.append(term)
    return result
