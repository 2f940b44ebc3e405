"""
Central application configuration.

Every tunable value lives here as a typed, documented field.
Any field can be overridden at runtime via an environment variable of the
same name (case-insensitive), e.g.:

    HUMAN_PASS_THRESHOLD=70 uvicorn humanizer.main:app   # stricter verdicts
    export DEEPSEEK_API_KEY=sk-...                        # enable completions

A `.env` file at the project root is loaded automatically.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,   # DEEPSEEK_API_KEY == deepseek_api_key
        extra="ignore",         # silently drop unknown env vars
    )

    # ------------------------------------------------------------------ #
    # Completion service: DeepSeek                                        #
    # ------------------------------------------------------------------ #
    deepseek_api_key: str = Field(
        "", description="Bearer token for the DeepSeek chat-completions API"
    )
    deepseek_api_url: str = Field(
        "https://api.deepseek.com/v1/chat/completions",
        description="DeepSeek chat-completions endpoint",
    )
    completion_temperature: float = Field(
        0.7, description="Sampling temperature for rewrite prompts"
    )
    completion_max_tokens: int = Field(
        2000, description="Max tokens returned by a single completion"
    )
    completion_timeout_sec: int = Field(
        60, description="Total timeout for one completion HTTP call (seconds)"
    )
    completion_max_retries: int = Field(
        2, description="Retries on transient completion errors (0 = single attempt)"
    )
    completion_retry_initial_delay: float = Field(
        1.0, description="First retry delay (seconds)"
    )
    completion_retry_max_delay: float = Field(
        5.0, description="Max retry back-off delay (seconds)"
    )
    completion_retry_exp_base: float = Field(
        2.0, description="Exponential back-off multiplier"
    )

    # ------------------------------------------------------------------ #
    # Completion service: Gemini                                          #
    # ------------------------------------------------------------------ #
    gemini_api_key: str = Field(
        "", description="API key for google-genai; Gemini models are disabled when empty"
    )
    gemini_http_timeout_ms: int = Field(
        30_000, description="HTTP client total timeout (ms)"
    )
    gemini_max_retries: int = Field(
        2, description="Max retry attempts on transient errors"
    )

    # ------------------------------------------------------------------ #
    # Heuristic detector                                                  #
    # ------------------------------------------------------------------ #
    heuristic_base_score: int = Field(
        25, description="Human score before any pattern category is matched"
    )
    human_score_min: int = Field(
        15, description="Lower clamp for the human score"
    )
    human_score_max: int = Field(
        98, description="Upper clamp for the human score"
    )
    human_pass_threshold: int = Field(
        65, description="Human score >= this → detector verdict 'passed'"
    )
    detector_roster: list[str] = Field(
        ["GPTZero", "Originality.ai", "Copyleaks", "Turnitin", "Writer.com"],
        description="Ordered detector names evaluated for every text (JSON list in env)",
    )

    # ------------------------------------------------------------------ #
    # Remote detectors                                                    #
    # ------------------------------------------------------------------ #
    remote_detection_enabled: bool = Field(
        True, description="Call real detection APIs when their key is configured"
    )
    gptzero_api_key: str = Field("", description="GPTZero x-api-key")
    originality_api_key: str = Field("", description="Originality.ai X-OAI-API-KEY")
    remote_detection_timeout_sec: int = Field(
        30, description="Timeout for a single remote detector call (seconds)"
    )

    # ------------------------------------------------------------------ #
    # Completion cache                                                    #
    # ------------------------------------------------------------------ #
    completion_cache_ttl_sec: int = Field(
        86_400, description="24 h: cached completion (completion:{hash})"
    )
    local_cache_max_size: int = Field(
        100, description="Max entries in the in-memory LRU cache"
    )
    local_cache_ttl_sec: int = Field(
        3_600, description="1 h: local cache entry lifetime"
    )

    # ------------------------------------------------------------------ #
    # Rate Limiting                                                       #
    # ------------------------------------------------------------------ #
    rate_limit_request_window_sec: int = Field(
        60, description="Sliding window for per-client request rate (seconds)"
    )
    rate_limit_max_requests: int = Field(
        10, description="Max requests allowed within the rate-limit window"
    )
    rate_limit_memory_limit: int = Field(
        1000, description="Max keys before in-memory rate-limit map is pruned"
    )

    # ------------------------------------------------------------------ #
    # Request limits                                                      #
    # ------------------------------------------------------------------ #
    min_text_length: int = Field(
        10, description="Minimum characters accepted by /api/humanize"
    )
    max_text_length: int = Field(
        20_000, description="Maximum characters accepted by any text endpoint"
    )
    reading_words_per_minute: int = Field(
        200, description="Average reading speed used for readingTime"
    )


# Single shared instance; import this everywhere.
settings = Settings()
