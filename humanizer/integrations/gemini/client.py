"""
Gemini API client: text completions for `gemini-*` model ids.

`client` starts as None and is created by `initialize()` during the FastAPI
lifespan when GEMINI_API_KEY is set. `generate_text` is the public entry
point used by the completion dispatcher.
"""

import logging
from typing import Optional

from google import genai
from google.genai import types

from humanizer.config import settings
from humanizer.integrations.errors import CompletionError

logger = logging.getLogger(__name__)

client = None  # genai.Client | None


def initialize() -> None:
    """Create the google-genai client when an API key is configured."""
    global client

    if not settings.gemini_api_key:
        logger.warning("[STARTUP] GEMINI_API_KEY not set. Gemini models are disabled.")
        return

    client = genai.Client(
        api_key=settings.gemini_api_key,
        http_options=types.HttpOptions(
            timeout=settings.gemini_http_timeout_ms,
            retry_options=types.HttpRetryOptions(
                attempts=settings.gemini_max_retries,
                initial_delay=settings.completion_retry_initial_delay,
                max_delay=settings.completion_retry_max_delay,
                exp_base=settings.completion_retry_exp_base,
                http_status_codes=[408, 429, 500, 502, 503, 504]
            )
        )
    )
    logger.info("[STARTUP] Gemini client initialized")


async def generate_text(
    model: str,
    system_instruction: str,
    user_text: str,
    temperature: Optional[float] = None,
    max_tokens: Optional[int] = None,
) -> str:
    if client is None:
        raise CompletionError("Gemini client is not initialized")

    config = types.GenerateContentConfig(
        system_instruction=system_instruction,
        temperature=settings.completion_temperature if temperature is None else temperature,
        max_output_tokens=max_tokens or settings.completion_max_tokens,
    )

    try:
        response = await client.aio.models.generate_content(
            model=model,
            contents=user_text,
            config=config,
        )
    except Exception as e:
        logger.error(f"[GEMINI] generate_text error: {e}")
        raise CompletionError(f"Gemini request failed: {e}") from e

    usage = getattr(response, "usage_metadata", None)
    if usage is not None:
        logger.info(
            f"[GEMINI] {model} tokens: prompt={usage.prompt_token_count} "
            f"completion={usage.candidates_token_count} total={usage.total_token_count}"
        )

    text = response.text
    if not text or not text.strip():
        raise CompletionError("Gemini returned an empty response")
    return text.strip()
