"""
Central configuration. All API keys and settings in one place.
"""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Environment ---
    env: str = Field(default="development", alias="ENV")
    log_level: str = Field(default="info", alias="LOG_LEVEL")
    debug: bool = Field(default=False, alias="DEBUG")
    app_name: str = Field(default="Swadesh AI", alias="APP_NAME")
    app_version: str = Field(default="2.0.0", alias="APP_VERSION")

    # --- Database ---
    # Empty → memories, profiles and sign-in are unavailable. Tools still work.
    database_url: str = Field(default="", alias="DATABASE_URL")

    # --- LLM ---
    gemini_api_key: str = Field(default="", alias="GEMINI_API_KEY")
    gemini_base_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta/openai",
        alias="GEMINI_BASE_URL",
    )
    openai_api_key: str = Field(default="", alias="OPENAI_API_KEY")
    openai_base_url: str = Field(default="https://api.openai.com/v1", alias="OPENAI_BASE_URL")
    default_llm_model: str = Field(default="gemini-2.5-pro", alias="DEFAULT_LLM_MODEL")
    default_llm_temperature: float = Field(default=0.7, alias="DEFAULT_LLM_TEMPERATURE")
    default_llm_max_tokens: int = Field(default=4096, alias="DEFAULT_LLM_MAX_TOKENS")
    llm_timeout_seconds: float = Field(default=45.0, alias="LLM_TIMEOUT_SECONDS")
    llm_max_retries: int = Field(default=0, ge=0, alias="LLM_MAX_RETRIES")

    # --- Sessions ---
    session_secret: str = Field(
        default="swadesh_dev_secret_change_in_prod", alias="SESSION_SECRET"
    )
    session_max_age: int = Field(default=7 * 24 * 60 * 60, alias="SESSION_MAX_AGE")

    # --- API ---
    base_url: str = Field(default="http://localhost:5000", alias="BASE_URL")
    api_host: str = Field(default="0.0.0.0", alias="API_HOST")
    api_port: int = Field(default=5000, alias="PORT")
    cors_origins: str = Field(default="*", alias="CORS_ORIGINS")


@lru_cache
def get_settings() -> Settings:
    return Settings()
