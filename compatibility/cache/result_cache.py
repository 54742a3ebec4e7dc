"""Compatibility Result Cache - Redis caching for computed results."""
import hashlib
import json
import logging
from dataclasses import asdict
from typing import Optional, Dict, Any
from datetime import datetime, timezone
from urllib.parse import urlparse

from redis import Redis

from compatibility.models import CompatibilityResult

logger = logging.getLogger(__name__)

CACHE_TTL_SECONDS = 60 * 60  # 1 hour
KEY_PREFIX = "compat"


def _sanitize_url(url: str) -> str:
    """Remove credentials from URL for safe logging."""
    try:
        parsed = urlparse(url)
        if parsed.password:
            sanitized = parsed._replace(
                netloc=f"{parsed.username or ''}:*@{parsed.hostname}:{parsed.port or 6379}"
            )
            return sanitized.geturl()
        return url
    except ValueError:
        return url


def content_version(record: Any) -> str:
    """Hash of a profile or listing record, for records that carry no version of their own."""
    content_str = json.dumps(asdict(record), sort_keys=True, default=str)
    return hashlib.sha256(content_str.encode('utf-8')).hexdigest()[:32]


class CompatibilityResultCache:
    """
    Caller-side cache for compatibility results.

    Keys include the profile and listing versions, so editing either one
    naturally misses the cache. Callers pass content_version() for a record
    that has no version. When Redis is unreachable every operation is
    a logged no-op and callers compute fresh results.
    """

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379/0",
        password: Optional[str] = None,
        ttl_seconds: int = CACHE_TTL_SECONDS
    ):
        self.redis_url = redis_url
        self.password = password
        self.ttl_seconds = ttl_seconds
        self._redis: Optional[Redis] = None
        self._available = False

        try:
            self._redis = Redis.from_url(
                redis_url,
                password=password,
                decode_responses=True,
                socket_connect_timeout=5,
                socket_timeout=5
            )
            self._redis.ping()
            self._available = True
            logger.info(f"Result cache connected to Redis at {_sanitize_url(redis_url)}")
        except Exception as e:
            logger.warning(f"Result cache Redis unavailable: {e}")
            self._redis = None
            self._available = False

    @property
    def is_available(self) -> bool:
        """Check if cache is available."""
        if not self._available or not self._redis:
            return False
        try:
            return bool(self._redis.ping())
        except Exception:
            return False

    @staticmethod
    def make_key(
        user_id: str,
        category: str,
        listing_id: str,
        profile_version: Optional[str] = None,
        listing_version: Optional[str] = None
    ) -> str:
        """Create cache key from every input that can change a result."""
        return (
            f"{KEY_PREFIX}:{user_id}:{category}:{listing_id}:"
            f"{profile_version or '-'}:{listing_version or '-'}"
        )

    def get(
        self,
        user_id: str,
        category: str,
        listing_id: str,
        profile_version: Optional[str] = None,
        listing_version: Optional[str] = None
    ) -> Optional[CompatibilityResult]:
        """Get a cached result, or None on miss."""
        if not self.is_available:
            return None

        key = self.make_key(user_id, category, listing_id, profile_version, listing_version)
        try:
            data = self._redis.get(key)
            if data:
                cache_entry = json.loads(data)
                logger.debug(f"Cache hit for {key}")
                return CompatibilityResult.from_dict(cache_entry["data"])
            logger.debug(f"Cache miss for {key}")
            return None

        except Exception as e:
            logger.warning(f"Error reading from result cache: {e}")
            return None

    def set(
        self,
        result: CompatibilityResult,
        profile_version: Optional[str] = None,
        listing_version: Optional[str] = None,
        ttl_seconds: Optional[int] = None
    ) -> bool:
        """Cache a result with TTL."""
        if not self.is_available:
            return False

        key = self.make_key(
            result.user_id, result.category, result.listing_id, profile_version, listing_version
        )
        ttl = ttl_seconds or self.ttl_seconds
        try:
            cache_entry = {
                "data": result.to_dict(),
                "cached_at": datetime.now(timezone.utc).isoformat(),
                "ttl_seconds": ttl
            }

            self._redis.setex(key, ttl, json.dumps(cache_entry))
            logger.debug(f"Cached {key} (TTL: {ttl}s)")
            return True

        except Exception as e:
            logger.warning(f"Error writing to result cache: {e}")
            return False

    def _delete_matching(self, pattern: str) -> int:
        cursor = 0
        deleted = 0
        while True:
            cursor, keys = self._redis.scan(cursor=cursor, match=pattern, count=100)
            if keys:
                self._redis.delete(*keys)
                deleted += len(keys)
            if cursor == 0:
                break
        return deleted

    def invalidate(self, user_id: str, category: str, listing_id: str) -> bool:
        """Remove every cached version of one user/listing result."""
        return self._invalidate_pattern(f"{KEY_PREFIX}:{user_id}:{category}:{listing_id}:*")

    def invalidate_user(self, user_id: str) -> bool:
        """Remove all cached results for a user."""
        return self._invalidate_pattern(f"{KEY_PREFIX}:{user_id}:*")

    def invalidate_listing(self, listing_id: str) -> bool:
        """Remove all cached results for a listing."""
        return self._invalidate_pattern(f"{KEY_PREFIX}:*:*:{listing_id}:*")

    def clear_all(self) -> bool:
        """Clear all cached results. Use with caution."""
        return self._invalidate_pattern(f"{KEY_PREFIX}:*")

    def _invalidate_pattern(self, pattern: str) -> bool:
        if not self.is_available:
            return False
        try:
            deleted = self._delete_matching(pattern)
            logger.info(f"Invalidated {deleted} cached results matching {pattern}")
            return True
        except Exception as e:
            logger.warning(f"Error invalidating result cache: {e}")
            return False

    def get_cache_stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        if not self.is_available:
            return {"available": False}

        try:
            info = self._redis.info()
            key_count = 0
            cursor = 0
            while True:
                cursor, keys = self._redis.scan(cursor=cursor, match=f"{KEY_PREFIX}:*", count=1000)
                key_count += len(keys)
                if cursor == 0:
                    break
            return {
                "available": True,
                "used_memory_human": info.get("used_memory_human", "unknown"),
                "result_cache_keys": key_count,
                "ttl_seconds": self.ttl_seconds
            }
        except Exception as e:
            logger.warning(f"Error getting cache stats: {e}")
            return {"available": False, "error": str(e)}


# Global instance for application use
_result_cache: Optional[CompatibilityResultCache] = None


def get_result_cache() -> Optional[CompatibilityResultCache]:
    """Get global result cache instance."""
    return _result_cache


def init_result_cache(
    redis_url: str,
    password: Optional[str] = None,
    ttl_seconds: int = CACHE_TTL_SECONDS
) -> CompatibilityResultCache:
    """Initialize global result cache."""
    global _result_cache
    _result_cache = CompatibilityResultCache(redis_url, password, ttl_seconds)
    return _result_cache
