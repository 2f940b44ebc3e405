"""
Shared pytest fixtures for all test modules.

IMPORTANT: environment variables are pinned before the app is imported so
Settings never picks up real API keys from the shell or a .env file, and no
test can reach a real completion or detection API.
"""

import os

os.environ["TESTING"] = "true"
for _var in (
    "DEEPSEEK_API_KEY",
    "GEMINI_API_KEY",
    "GPTZERO_API_KEY",
    "ORIGINALITY_API_KEY",
    "UPSTASH_REDIS_REST_URL",
    "UPSTASH_REDIS_REST_TOKEN",
):
    os.environ[_var] = ""

import random
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from tests.mocks.redis_mock import MockRedis

# App import happens AFTER the environment is pinned above.
from humanizer.main import app  # noqa: E402
from humanizer.core.dependencies import get_aggregator  # noqa: E402
from humanizer.detection.aggregator import build_aggregator  # noqa: E402

SEED = 1234


# ---------------------------------------------------------------------------
# Core infrastructure fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_process_state():
    """Clear in-memory rate-limit and cache state between tests."""
    from humanizer.core import cache, rate_limiter

    rate_limiter._rate_limits.clear()
    cache.local_cache.clear()
    yield
    rate_limiter._rate_limits.clear()
    cache.local_cache.clear()


@pytest.fixture
def mock_redis(monkeypatch):
    """Replace redis_client.client with an in-memory MockRedis."""
    from humanizer.integrations import redis_client as rc

    mock_rc = MockRedis()
    monkeypatch.setattr(rc, "client", mock_rc)
    return mock_rc


@pytest.fixture
def null_redis(monkeypatch):
    """Force the memory fallbacks by removing the Redis client."""
    from humanizer.integrations import redis_client as rc

    monkeypatch.setattr(rc, "client", None)


@pytest.fixture
def seeded_aggregator():
    return build_aggregator(rng=random.Random(SEED))


@pytest.fixture
def client(mock_redis, seeded_aggregator):
    """
    FastAPI TestClient with mocked Redis and a seeded detector roster.

    initialize() calls for Redis and Gemini are patched to no-ops so they can't
    overwrite our mocks during the lifespan startup.
    """
    app.dependency_overrides[get_aggregator] = lambda: seeded_aggregator
    with (
        patch("humanizer.integrations.redis_client.initialize"),
        patch("humanizer.integrations.gemini.client.initialize"),
    ):
        with TestClient(app, raise_server_exceptions=False) as c:
            yield c
    app.dependency_overrides.clear()

