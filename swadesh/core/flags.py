"""
Central feature flags.

Set via environment variables (prefix FF_) or .env file.
When a flag is OFF, the related surface is skipped. Nothing crashes.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .config import get_settings


class FeatureFlags(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── LLM Provider ─────────────────────────────────────────────────
    llm_provider: str = Field(default="gemini", alias="FF_LLM_PROVIDER")
    # "gemini" → Google Gemini OpenAI-compatible endpoint. Needs GEMINI_API_KEY.
    # "openai" → Direct OpenAI. Needs OPENAI_API_KEY.

    # ── Identity ─────────────────────────────────────────────────────
    enable_guest_mode: bool = Field(default=True, alias="FF_ENABLE_GUEST_MODE")
    # ON  → X-Guest-Mode: true unlocks tools without a user row.
    # OFF → The header is ignored; such requests resolve as anonymous.

    enable_dev_login: Optional[bool] = Field(default=None, alias="FF_ENABLE_DEV_LOGIN")
    # UNSET → ON only when ENV=development.
    # ON  → GET /api/login signs in a fixed dev user. Needs DATABASE_URL.
    # OFF → /api/login returns 404.

    # ── Observability ────────────────────────────────────────────────
    log_requests: bool = Field(default=True, alias="FF_LOG_REQUESTS")
    # ON  → One access log line per /api request.


@lru_cache
def get_flags() -> FeatureFlags:
    return FeatureFlags()


def dev_login_enabled() -> bool:
    flags = get_flags()
    if flags.enable_dev_login is not None:
        return flags.enable_dev_login
    return get_settings().env == "development"
