"""
DeepSeek chat-completions client over the shared aiohttp session.

`chat_completion` is the public entry point. It retries transient failures
(timeouts, connection errors, 408/429/5xx) with exponential back-off and
raises CompletionError once attempts are exhausted or on any permanent error.
"""

import asyncio
import logging
from typing import Optional

import aiohttp

from humanizer.config import settings
from humanizer.integrations import http_client as http_module
from humanizer.integrations.errors import CompletionError, TransientCompletionError

logger = logging.getLogger(__name__)

TRANSIENT_STATUS_CODES = frozenset({408, 429, 500, 502, 503, 504})


def _extract_content(data: dict) -> str:
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as e:
        raise CompletionError(f"Malformed completion payload: missing {e}") from e
    if not isinstance(content, str) or not content.strip():
        raise CompletionError("Completion payload contained no text")
    return content.strip()


async def _post_once(payload: dict, headers: dict) -> dict:
    async with http_module.request_session() as session:
        try:
            async with session.post(
                settings.deepseek_api_url,
                json=payload,
                headers=headers,
                timeout=http_module.timeout(settings.completion_timeout_sec),
            ) as response:
                if response.status in TRANSIENT_STATUS_CODES:
                    raise TransientCompletionError(f"DeepSeek returned HTTP {response.status}")
                if response.status != 200:
                    body = await response.text()
                    raise CompletionError(f"DeepSeek returned HTTP {response.status}: {body[:200]}")
                try:
                    return await response.json()
                except (aiohttp.ContentTypeError, ValueError) as e:
                    raise CompletionError(f"DeepSeek returned a non-JSON body: {e}") from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransientCompletionError(f"DeepSeek request failed: {e!r}") from e


async def chat_completion(
    model: str,
    messages: list[dict],
    temperature: Optional[float] = None,
    max_tokens: Optional[int] = None,
) -> str:
    """Sends `messages` to DeepSeek and returns the first choice's text."""
    if not settings.deepseek_api_key:
        raise CompletionError("DEEPSEEK_API_KEY is not configured")

    payload = {
        "model": model,
        "messages": messages,
        "temperature": settings.completion_temperature if temperature is None else temperature,
        "max_tokens": max_tokens or settings.completion_max_tokens,
    }
    headers = {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {settings.deepseek_api_key}",
    }

    attempts = settings.completion_max_retries + 1
    delay = settings.completion_retry_initial_delay

    for attempt in range(1, attempts + 1):
        try:
            data = await _post_once(payload, headers)
            return _extract_content(data)
        except TransientCompletionError as e:
            if attempt == attempts:
                logger.error(f"[DEEPSEEK] Giving up after {attempts} attempt(s): {e}")
                raise
            logger.warning(f"[DEEPSEEK] Attempt {attempt}/{attempts} failed ({e}); retrying in {delay:.1f}s")
            await asyncio.sleep(delay)
            delay = min(delay * settings.completion_retry_exp_base, settings.completion_retry_max_delay)
        except CompletionError as e:
            logger.error(f"[DEEPSEEK] {e}")
            raise
