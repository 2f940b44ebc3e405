"""
Two-tier completion cache: Redis (preferred) → Local Memory (fallback).

Keys are SHA-256 digests of everything that shapes a completion (model,
system prompt, user text, temperature, max tokens), so identical requests skip the
paid API call. Only successful completions are stored.
"""

import hashlib
import json
import time
import logging
from collections import OrderedDict
from typing import Optional

from humanizer.config import settings
from humanizer.integrations import redis_client as redis_module

logger = logging.getLogger(__name__)

local_cache: OrderedDict = OrderedDict()


def completion_key(
    model: str,
    system_prompt: str,
    user_text: str,
    temperature: Optional[float],
    max_tokens: Optional[int] = None,
) -> str:
    material = json.dumps([model, system_prompt, user_text, temperature, max_tokens], ensure_ascii=False)
    return hashlib.sha256(material.encode("utf-8")).hexdigest()


def get_cached_completion(key: str) -> Optional[str]:
    """Retrieve a completion from Redis (preferred) or Local Memory (fallback)."""
    rc = redis_module.client
    if rc:
        try:
            data = rc.get(f"completion:{key}")
        except Exception as e:
            logger.warning(f"[CACHE] Redis get failed: {e}")
            return None
        logger.info(f"[CACHE] Redis {'HIT' if data else 'MISS'} for key: {key[:12]}")
        return data or None

    entry = local_cache.get(key)
    if entry is None:
        logger.info(f"[CACHE] Local Memory MISS for key: {key[:12]}")
        return None

    value, timestamp = entry
    if time.time() - timestamp >= settings.local_cache_ttl_sec:
        logger.info(f"[CACHE] Local Memory EXPIRED for key: {key[:12]}")
        del local_cache[key]
        return None

    logger.info(f"[CACHE] Local Memory HIT for key: {key[:12]}")
    local_cache.move_to_end(key)
    return value


def set_cached_completion(key: str, value: str) -> None:
    """Store a completion in Redis (TTL) or Local Memory (LRU)."""
    rc = redis_module.client
    if rc:
        try:
            rc.set(f"completion:{key}", value, ex=settings.completion_cache_ttl_sec)
        except Exception as e:
            logger.warning(f"[CACHE] Redis set failed: {e}")
        return

    if key in local_cache:
        local_cache.move_to_end(key)
    local_cache[key] = (value, time.time())
    if len(local_cache) > settings.local_cache_max_size:
        local_cache.popitem(last=False)
