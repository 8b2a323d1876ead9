"""
Redis client manager for the Content Analyzer
Handles connection pooling, analysis result caching, and health checks
"""

import json
import re
import redis
from typing import Optional, Any, List
import logging

from config import settings
from analyzer.insights import PAGE_TYPES

logger = logging.getLogger(__name__)

ANALYSIS_KEY_PREFIX = "cache:analysis"
GLOB_SPECIAL = re.compile(r"([*?\[\]\\])")


def escape_glob(value: str) -> str:
    """Escape Redis glob metacharacters so a URL matches literally"""
    return GLOB_SPECIAL.sub(r"\\\1", value)


def analysis_cache_key(url: str, page_type: str, digest: Optional[str] = None) -> str:
    """
    Build the cache key for an analysis result.

    Page analyses are keyed by (url, page_type); content analyses also carry
    a digest of the analyzed text so edited content is never served stale.
    """
    key = f"{ANALYSIS_KEY_PREFIX}:{url}:{page_type}"
    return f"{key}:{digest}" if digest else key


class RedisClient:
    """
    Redis connection manager with connection pooling.
    """

    def __init__(self, redis_url: Optional[str] = None):
        redis_url = redis_url or settings.REDIS_URL

        try:
            # Create connection pool for efficiency
            self.pool = redis.ConnectionPool.from_url(
                redis_url,
                max_connections=20,
                decode_responses=True,  # Auto-decode bytes to strings
                socket_timeout=5,
                socket_connect_timeout=5,
                retry_on_timeout=True,
            )
            self.client = redis.Redis(connection_pool=self.pool)

            # Test connection
            self.client.ping()
            logger.info(f"✅ Redis connected successfully: {redis_url}")
        except redis.RedisError as e:
            logger.error(f"❌ Redis connection failed: {str(e)}")
            raise RuntimeError(f"Failed to connect to Redis: {str(e)}") from e

    def ping(self) -> bool:
        """Check if Redis is available"""
        try:
            return bool(self.client.ping())
        except redis.RedisError:
            return False

    def set(self, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        """
        Store a value in Redis with optional TTL (Time To Live).

        Args:
            key: Redis key
            value: Value to store (will be JSON-encoded if not a string)
            ttl: Time to live in seconds (None = no expiration)

        Returns:
            True if successful
        """
        try:
            if not isinstance(value, str):
                value = json.dumps(value)

            if ttl:
                return bool(self.client.setex(key, ttl, value))
            return bool(self.client.set(key, value))
        except redis.RedisError as e:
            logger.error(f"Redis SET failed for key '{key}': {str(e)}")
            return False

    def get(self, key: str, decode_json: bool = True) -> Optional[Any]:
        """
        Retrieve a value from Redis.

        Args:
            key: Redis key
            decode_json: If True, attempt to JSON-decode the value

        Returns:
            Value if found, None otherwise
        """
        try:
            value = self.client.get(key)
        except redis.RedisError as e:
            logger.error(f"Redis GET failed for key '{key}': {str(e)}")
            return None

        if value is None or not decode_json:
            return value

        try:
            return json.loads(value)
        except (json.JSONDecodeError, TypeError):
            # Not JSON, return as-is
            return value

    def delete(self, *keys: str) -> int:
        """Delete keys from Redis, returning how many were removed"""
        if not keys:
            return 0
        try:
            return int(self.client.delete(*keys))
        except redis.RedisError as e:
            logger.error(f"Redis DELETE failed for keys {list(keys)}: {str(e)}")
            return 0

    def cache_analysis(
        self,
        url: str,
        page_type: str,
        analysis_result: dict,
        digest: Optional[str] = None,
        ttl: Optional[int] = None,
    ) -> bool:
        """
        Cache an analysis result.

        Args:
            url: Page URL
            page_type: Normalized page type
            analysis_result: Complete analysis result dictionary
            digest: Content digest for content analyses
            ttl: Time to live in seconds (default: CACHE_TTL)

        Returns:
            True if cached successfully
        """
        cache_key = analysis_cache_key(url, page_type, digest)
        return self.set(cache_key, analysis_result, ttl=ttl or settings.CACHE_TTL)

    def get_cached_analysis(self, url: str, page_type: str, digest: Optional[str] = None) -> Optional[dict]:
        """
        Retrieve a cached analysis result.

        Returns:
            Cached analysis result if found, None otherwise
        """
        cached = self.get(analysis_cache_key(url, page_type, digest), decode_json=True)
        return cached if isinstance(cached, dict) else None

    def _analysis_keys(self, url: str) -> List[str]:
        keys = []
        for page_type in PAGE_TYPES:
            page_key = analysis_cache_key(url, page_type)
            keys.append(page_key)
            keys.extend(self.client.scan_iter(match=f"{escape_glob(page_key)}:*", count=100))
        return keys

    def clear_analysis_cache(self, url: str) -> int:
        """
        Clear every cached analysis for a URL (all page types and content digests).

        Args:
            url: Page URL

        Returns:
            Number of keys deleted
        """
        try:
            keys = self._analysis_keys(url)
        except redis.RedisError as e:
            logger.error(f"Redis cache clear failed for '{url}': {str(e)}")
            return 0
        return self.delete(*keys)

    def get_stats(self) -> dict:
        """
        Get Redis connection and memory stats.

        Returns:
            Dictionary with Redis statistics
        """
        try:
            info = self.client.info()
            return {
                "connected_clients": info.get("connected_clients", 0),
                "used_memory_human": info.get("used_memory_human", "unknown"),
                "total_commands_processed": info.get("total_commands_processed", 0),
            }
        except redis.RedisError as e:
            logger.error(f"Failed to get Redis stats: {str(e)}")
            return {"error": str(e)}

    def close(self):
        """Close Redis connection pool"""
        try:
            self.pool.disconnect()
            logger.info("Redis connection closed")
        except redis.RedisError as e:
            logger.error(f"Error closing Redis connection: {str(e)}")


# Global Redis client instance
redis_client: Optional[RedisClient] = None


def get_redis_client() -> RedisClient:
    """
    Get or create the global Redis client instance.

    Returns:
        RedisClient instance

    Raises:
        RuntimeError: If Redis is unreachable
    """
    global redis_client

    if redis_client is None:
        redis_client = RedisClient()

    return redis_client


def close_redis_client():
    """Close the global Redis client"""
    global redis_client

    if redis_client is not None:
        redis_client.close()
        redis_client = None
