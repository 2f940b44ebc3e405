"""
Tests for humanizer/integrations/deepseek/client.py.

The shared aiohttp session is replaced with a MagicMock whose .post() yields
canned responses, and retry delays are set to zero.
"""

import aiohttp
import pytest

from humanizer.config import settings
from humanizer.integrations.deepseek.client import _extract_content, chat_completion
from humanizer.integrations.errors import CompletionError, TransientCompletionError
from tests.helpers import deepseek_payload, make_response, make_session, patch_session

MESSAGES = [{"role": "system", "content": "Be human."}, {"role": "user", "content": "Hello there."}]


@pytest.fixture(autouse=True)
def _configured(monkeypatch):
    monkeypatch.setattr(settings, "deepseek_api_key", "sk-test")
    monkeypatch.setattr(settings, "completion_max_retries", 2)
    monkeypatch.setattr(settings, "completion_retry_initial_delay", 0)
    monkeypatch.setattr(settings, "completion_retry_max_delay", 0)


async def test_returns_first_choice_text():
    session = make_session(make_response(200, deepseek_payload("  Hey, so basically...  ")))
    with patch_session(session):
        text = await chat_completion("deepseek-chat", MESSAGES)

    assert text == "Hey, so basically..."
    kwargs = session.post.call_args.kwargs
    assert kwargs["json"]["model"] == "deepseek-chat"
    assert kwargs["json"]["messages"] == MESSAGES
    assert kwargs["json"]["temperature"] == settings.completion_temperature
    assert kwargs["json"]["max_tokens"] == settings.completion_max_tokens
    assert kwargs["headers"]["Authorization"] == "Bearer sk-test"


async def test_explicit_temperature_zero_is_sent():
    session = make_session(make_response(200, deepseek_payload("ok")))
    with patch_session(session):
        await chat_completion("deepseek-chat", MESSAGES, temperature=0.0, max_tokens=50)

    payload = session.post.call_args.kwargs["json"]
    assert payload["temperature"] == 0.0
    assert payload["max_tokens"] == 50


async def test_missing_key_raises_without_calling_api(monkeypatch):
    monkeypatch.setattr(settings, "deepseek_api_key", "")
    session = make_session()
    with patch_session(session):
        with pytest.raises(CompletionError, match="DEEPSEEK_API_KEY"):
            await chat_completion("deepseek-chat", MESSAGES)
    session.post.assert_not_called()


async def test_retries_transient_status_then_succeeds():
    session = make_session(
        make_response(503),
        make_response(429),
        make_response(200, deepseek_payload("third time lucky")),
    )
    with patch_session(session):
        assert await chat_completion("deepseek-chat", MESSAGES) == "third time lucky"
    assert session.post.call_count == 3


async def test_gives_up_after_max_retries():
    session = make_session(make_response(502), make_response(502), make_response(502))
    with patch_session(session):
        with pytest.raises(TransientCompletionError):
            await chat_completion("deepseek-chat", MESSAGES)
    assert session.post.call_count == 3


async def test_no_retry_when_disabled(monkeypatch):
    monkeypatch.setattr(settings, "completion_max_retries", 0)
    session = make_session(make_response(500), make_response(200, deepseek_payload("late")))
    with patch_session(session):
        with pytest.raises(CompletionError):
            await chat_completion("deepseek-chat", MESSAGES)
    assert session.post.call_count == 1


async def test_retries_connection_errors():
    responses = iter([aiohttp.ClientConnectionError("reset"), make_response(200, deepseek_payload("back"))])

    def _post(*args, **kwargs):
        item = next(responses)
        if isinstance(item, Exception):
            raise item
        return item

    session = make_session(post_side_effect=_post)
    with patch_session(session):
        assert await chat_completion("deepseek-chat", MESSAGES) == "back"


async def test_permanent_error_is_not_retried():
    session = make_session(make_response(401, text="invalid api key"))
    with patch_session(session):
        with pytest.raises(CompletionError, match="401") as exc_info:
            await chat_completion("deepseek-chat", MESSAGES)
    assert not isinstance(exc_info.value, TransientCompletionError)
    assert session.post.call_count == 1


async def test_non_json_body_raises():
    session = make_session(make_response(200, json_error=ValueError("Expecting value")))
    with patch_session(session):
        with pytest.raises(CompletionError, match="non-JSON"):
            await chat_completion("deepseek-chat", MESSAGES)


@pytest.mark.parametrize(
    "data",
    [
        {},
        {"choices": []},
        {"choices": [{"message": {}}]},
        {"choices": [{"message": {"content": "   "}}]},
        {"choices": [{"message": {"content": None}}]},
        {"choices": None},
    ],
)
def test_extract_content_rejects_malformed_payloads(data):
    with pytest.raises(CompletionError):
        _extract_content(data)
