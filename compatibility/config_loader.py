import yaml
import os
import logging
from typing import List, Optional, Dict
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


def _default_category_weights() -> Dict[str, Dict[str, float]]:
    return {
        "jobs": {
            "skills": 0.40,
            "price": 0.10,
            "location": 0.20,
            "availability": 0.10,
            "quality": 0.15,
            "experience": 0.05,
        },
        "services": {
            "type": 0.20,
            "skills": 0.20,
            "price": 0.20,
            "location": 0.15,
            "availability": 0.10,
            "quality": 0.15,
        },
        "rentals": {
            "type": 0.15,
            "price": 0.30,
            "location": 0.25,
            "amenities": 0.10,
            "availability": 0.10,
            "quality": 0.10,
        },
    }


class ScorerConfig(BaseModel):
    """
    Configuration shared by the dimension scorers.

    Every scorer falls back to neutral_score when the data it needs is missing.
    """
    neutral_score: float = 50.0
    default_max_distance_km: float = 50.0
    earth_radius_km: float = 6371.0
    max_rating: float = 5.0

    # Skill synonyms: each group is a set of interchangeable skill names.
    # Example: [["javascript", "js"], ["postgres", "postgresql"]]
    skill_synonyms: List[List[str]] = Field(default_factory=list)
    synonym_match_weight: float = 0.5


class AggregatorConfig(BaseModel):
    """Configuration for the overall score, match reason and suggestions."""
    suggestion_threshold: float = 70.0  # dimensions scoring below this get a suggestion
    max_suggestions: int = 5


class EngineConfig(BaseModel):
    """
    Configuration injected into the CompatibilityEngine.

    weights maps category -> {scorer key -> weight}. Every table must give a
    weight to each scorer registered for its category, and nothing else.
    """
    weights: Dict[str, Dict[str, float]] = Field(default_factory=_default_category_weights)
    scorer: ScorerConfig = Field(default_factory=ScorerConfig)
    aggregator: AggregatorConfig = Field(default_factory=AggregatorConfig)


class CacheConfig(BaseModel):
    """Result cache configuration (Redis)."""
    enabled: bool = False
    redis_url: str = "redis://localhost:6379/0"
    password: Optional[str] = None
    ttl_seconds: int = 3600


class WebConfig(BaseModel):
    """Web server configuration."""
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080)


class AppConfig(BaseModel):
    engine: EngineConfig = Field(default_factory=EngineConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    web: WebConfig = Field(default_factory=WebConfig)


def _apply_env_overrides(data: Dict) -> Dict:
    # Allow env var override for Redis URL
    env_redis_url = os.environ.get("REDIS_URL")
    if env_redis_url:
        if data.get('cache') is None:
            data['cache'] = {}
        data['cache']['redis_url'] = env_redis_url

    env_cache_enabled = os.environ.get("COMPAT_CACHE_ENABLED")
    if env_cache_enabled:
        if data.get('cache') is None:
            data['cache'] = {}
        data['cache']['enabled'] = env_cache_enabled.strip().lower() in ("true", "1", "yes", "on")

    # Web server overrides
    if 'WEB_HOST' in os.environ:
        if data.get('web') is None:
            data['web'] = {}
        data['web']['host'] = os.environ['WEB_HOST']

    if 'WEB_PORT' in os.environ:
        if data.get('web') is None:
            data['web'] = {}
        data['web']['port'] = int(os.environ['WEB_PORT'])

    return data


def load_config(config_path: str = "config.yaml") -> AppConfig:
    # If not found at relative path (e.g. running from another directory), try the project root
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")

    data: Dict = {}
    if os.path.exists(config_path):
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}
    else:
        logger.info("No config file found, using default configuration")

    data = _apply_env_overrides(data)

    return AppConfig(**data)
