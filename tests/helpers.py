"""
Test-data and aiohttp-mocking helpers shared across test modules.
"""

from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock, patch

HUMAN_TEXT = "I think this is really great, you know?"
ROBOTIC_TEXT = "The quarterly report shows revenue increased."

HUMANIZE_PAYLOAD = {
    "text": "Artificial intelligence is transforming many industries around the world.",
    "style": "casual",
    "emotion": "neutral",
}


def deepseek_payload(content: str) -> dict:
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def make_response(status=200, json_data=None, text="", json_error=None):
    """A mock aiohttp response usable as `async with session.post(...) as resp`."""
    resp = MagicMock()
    resp.__aenter__ = AsyncMock(return_value=resp)
    resp.__aexit__ = AsyncMock(return_value=None)
    resp.status = status
    if json_error is not None:
        resp.json = AsyncMock(side_effect=json_error)
    else:
        resp.json = AsyncMock(return_value=json_data if json_data is not None else {})
    resp.text = AsyncMock(return_value=text)
    return resp


def make_session(*responses, post_side_effect=None):
    """A mock session whose .post() returns `responses` in order."""
    session = MagicMock()
    session.post = MagicMock(side_effect=post_side_effect if post_side_effect is not None else list(responses))
    return session


def patch_session(session):
    """
    Patch http_client.request_session to yield `session` directly,
    bypassing aiohttp.ClientSession construction entirely.
    """
    @asynccontextmanager
    async def _fake_request_session():
        yield session

    return patch(
        "humanizer.integrations.http_client.request_session",
        side_effect=_fake_request_session,
    )
