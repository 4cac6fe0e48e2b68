import logging
from typing import Optional

import redis.exceptions
from qrcodeid.core.config import settings
from qrcodeid.db.Connection import database

logger = logging.getLogger(__name__)


def _cache_key(code: str) -> str:
    return f"code:{code}"


def get(code: str) -> Optional[str]:
    if not settings.REDIS_ENABLED:
        return None

    try:
        cached = database.redis_client.get(_cache_key(code))
    except redis.exceptions.RedisError:
        logger.warning(f"Redis connection failed for {code}")
        return None

    if cached:
        cached_decoded = cached.decode() if isinstance(cached, (bytes, bytearray)) else str(cached)
        logger.info(f"Lookup cache HIT for {code} -> {cached_decoded}")
        return cached_decoded

    return None


def put(code: str, identifier: str):
    if not settings.REDIS_ENABLED:
        return

    try:
        database.redis_client.setex(_cache_key(code), settings.LOOKUP_CACHE_TTL, identifier)
        logger.debug(f"Cached {code} -> {identifier}")
    except redis.exceptions.RedisError:
        logger.warning(f"Failed to cache {code}, Redis unavailable")
