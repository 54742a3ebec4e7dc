"""Cache Module - Caching services."""
from compatibility.cache.result_cache import (
    CompatibilityResultCache,
    content_version,
    get_result_cache,
    init_result_cache,
    CACHE_TTL_SECONDS
)

__all__ = [
    'CompatibilityResultCache',
    'content_version',
    'get_result_cache',
    'init_result_cache',
    'CACHE_TTL_SECONDS'
]
