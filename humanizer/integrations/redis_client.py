"""
Upstash Redis integration.

`client` starts as None. Call `initialize()` inside the FastAPI lifespan
context manager. The completion cache and the rate limiter reference
`redis_client.client` at call time and fall back to process memory when
it is None.
"""

import os
import logging
from upstash_redis import Redis

logger = logging.getLogger(__name__)

# Set by initialize(). None when Redis credentials are absent or init fails.
client = None  # Redis | None


def initialize() -> None:
    """Create the Upstash Redis client and bind it to the module-level `client`."""
    global client

    redis_url = os.getenv("UPSTASH_REDIS_REST_URL")
    redis_token = os.getenv("UPSTASH_REDIS_REST_TOKEN")

    if not (redis_url and redis_token):
        logger.warning(
            "[STARTUP] Redis credentials not found. Cache and rate limiting will use memory."
        )
        return

    try:
        client = Redis(url=redis_url, token=redis_token)
        logger.info("[STARTUP] Upstash Redis client initialized")
    except Exception as e:
        logger.error(f"[STARTUP] Failed to initialize Upstash Redis client: {e}")
