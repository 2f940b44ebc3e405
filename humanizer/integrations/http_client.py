"""
Shared aiohttp ClientSession, initialized once during FastAPI lifespan.

Completion calls and remote detector calls all go through this session so
connections to the same provider are pooled across requests.

Usage:
    async with http_client.request_session() as sess:
        async with sess.post(url, json=payload, timeout=http_client.timeout(30)) as response:
            ...

The context manager yields the shared session when available, otherwise
creates and closes a temporary one (covers tests and pre-init calls).
"""

import logging
from contextlib import asynccontextmanager

import aiohttp

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SEC = 30

session: aiohttp.ClientSession | None = None


def timeout(total_sec: float) -> aiohttp.ClientTimeout:
    """Per-request timeout overriding the session default."""
    return aiohttp.ClientTimeout(total=total_sec)


async def initialize() -> None:
    global session
    session = aiohttp.ClientSession(timeout=timeout(DEFAULT_TIMEOUT_SEC))
    logger.info("[STARTUP] Shared HTTP session initialized")


async def close() -> None:
    global session
    if session and not session.closed:
        await session.close()
        session = None
        logger.info("[SHUTDOWN] Shared HTTP session closed")


@asynccontextmanager
async def request_session():
    """
    Yields the shared session if available, otherwise a temporary one that is
    closed on exit. Never closes the shared session.
    """
    if session and not session.closed:
        yield session
    else:
        tmp = aiohttp.ClientSession(timeout=timeout(DEFAULT_TIMEOUT_SEC))
        try:
            yield tmp
        finally:
            await tmp.close()
