"""
Completion dispatcher: routes a prompt to the provider that serves `model`.

  - gemini-*   → integrations/gemini/client.py (google-genai)
  - otherwise  → integrations/deepseek/client.py (aiohttp)

Successful completions are cached (core/cache.py). Every failure surfaces
as CompletionError so callers have one thing to catch.
"""

import logging
from typing import Optional

from humanizer.core.cache import completion_key, get_cached_completion, set_cached_completion
from humanizer.integrations.deepseek import client as deepseek_client
from humanizer.integrations.gemini import client as gemini_client

logger = logging.getLogger(__name__)

GEMINI_PREFIX = "gemini-"


def provider_for(model: str) -> str:
    return "gemini" if model.startswith(GEMINI_PREFIX) else "deepseek"


async def complete(
    model: str,
    system_prompt: str,
    user_text: str,
    temperature: Optional[float] = None,
    max_tokens: Optional[int] = None,
    use_cache: bool = True,
) -> str:
    key = completion_key(model, system_prompt, user_text, temperature, max_tokens)
    if use_cache:
        cached = get_cached_completion(key)
        if cached is not None:
            return cached

    if provider_for(model) == "gemini":
        text = await gemini_client.generate_text(model, system_prompt, user_text, temperature, max_tokens)
    else:
        text = await deepseek_client.chat_completion(
            model,
            [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_text},
            ],
            temperature=temperature,
            max_tokens=max_tokens,
        )

    logger.info(f"[COMPLETION] {model}: {len(user_text)} chars in → {len(text)} chars out")
    if use_cache:
        set_cached_completion(key, text)
    return text
