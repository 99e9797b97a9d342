"""
External generation client.

Features:
  - One attempt per user request by default (LLM_MAX_RETRIES opts into backoff)
  - Whole-call timeout (LLM_TIMEOUT_SECONDS)
  - Vision input via inline base64 images
  - Reusable client (connection pooling)
  - Structured logging

Every failure (no key, transport error, non-2xx, timeout, empty answer)
surfaces as GenerationFailed.
"""

import asyncio
import logging
import random
import time
from dataclasses import dataclass
from typing import Any, Optional, Sequence

import httpx

from ..core.config import get_settings
from ..core.errors import GenerationFailed
from ..core.flags import get_flags

logger = logging.getLogger(__name__)

# ── Reusable client (connection pool) ────────────────────────────────

_client: Optional[httpx.AsyncClient] = None


def _get_client() -> httpx.AsyncClient:
    global _client
    if _client is None or _client.is_closed:
        _client = httpx.AsyncClient(
            timeout=httpx.Timeout(connect=10, read=120, write=30, pool=10),
            limits=httpx.Limits(max_connections=50, max_keepalive_connections=20),
        )
    return _client


async def close_client():
    """Close the shared HTTP client. Call on app shutdown."""
    global _client
    if _client and not _client.is_closed:
        await _client.aclose()
        _client = None


# ── Provider config ──────────────────────────────────────────────────

def _get_provider_config() -> tuple[str, str, str]:
    """Returns (base_url, api_key, model) for the active provider."""
    settings = get_settings()
    p = get_flags().llm_provider.lower()

    if p == "openai":
        return settings.openai_base_url, settings.openai_api_key, settings.default_llm_model
    return settings.gemini_base_url, settings.gemini_api_key, settings.default_llm_model


def is_configured() -> bool:
    """True when the active provider has an API key."""
    _, api_key, _ = _get_provider_config()
    return bool(api_key)


# ── Attachments ──────────────────────────────────────────────────────

@dataclass(frozen=True)
class Attachment:
    """Inline binary input (images) for vision-style calls."""
    data: str                      # base64, no data: prefix
    mime_type: str = "image/jpeg"

    def as_content_part(self) -> dict:
        data = self.data
        if data.startswith("data:"):
            data = data.split(",", 1)[-1]
        return {
            "type": "image_url",
            "image_url": {"url": f"data:{self.mime_type};base64,{data}"},
        }


# ── Retry logic (opt-in) ─────────────────────────────────────────────

RETRYABLE_STATUS = {429, 500, 502, 503, 504}
BASE_DELAY = 1.0
MAX_DELAY = 16.0


async def _request_with_retry(
    client: httpx.AsyncClient,
    url: str,
    max_retries: int,
    **kwargs,
) -> httpx.Response:
    """POST with exponential backoff + jitter. max_retries=0 means a single attempt."""
    for attempt in range(max_retries + 1):
        last_attempt = attempt == max_retries
        try:
            resp = await client.post(url, **kwargs)
        except httpx.TimeoutException:
            if last_attempt:
                raise
            delay = min(MAX_DELAY, BASE_DELAY * (2 ** attempt) + random.uniform(0, 1))
            logger.warning(
                "LLM timeout (attempt %d/%d) — retrying in %.1fs",
                attempt + 1, max_retries + 1, delay,
            )
            await asyncio.sleep(delay)
            continue

        if resp.status_code in RETRYABLE_STATUS and not last_attempt:
            retry_after = resp.headers.get("retry-after")
            delay = float(retry_after) if retry_after else min(
                MAX_DELAY, BASE_DELAY * (2 ** attempt) + random.uniform(0, 1)
            )
            logger.warning(
                "LLM %d (attempt %d/%d) — retrying in %.1fs",
                resp.status_code, attempt + 1, max_retries + 1, delay,
            )
            await asyncio.sleep(delay)
            continue

        if resp.status_code >= 400:
            logger.error("LLM API error %d: %s", resp.status_code, resp.text[:500])
        resp.raise_for_status()
        return resp

    raise RuntimeError("unreachable")


# ── Main generate function ───────────────────────────────────────────

def _build_messages(
    system_instruction: str,
    content: str,
    attachments: Optional[Sequence[Attachment]],
) -> list[dict]:
    messages: list[dict] = []
    if system_instruction:
        messages.append({"role": "system", "content": system_instruction})

    if attachments:
        parts: list[dict] = [a.as_content_part() for a in attachments]
        parts.append({"type": "text", "text": content})
        messages.append({"role": "user", "content": parts})
    else:
        messages.append({"role": "user", "content": content})
    return messages


def _extract_text(data: Any) -> str:
    """First choice's message text. Raises ValueError on a reply that isn't a chat completion."""
    if not isinstance(data, dict):
        raise ValueError(f"Unexpected LLM response body: {type(data).__name__}")
    choices = data.get("choices") or [{}]
    first = choices[0] if isinstance(choices, list) else None
    message = first.get("message") if isinstance(first, dict) else None
    if message is None:
        return ""
    if not isinstance(message, dict):
        raise ValueError("Unexpected LLM message shape")
    text = message.get("content") or ""
    if not isinstance(text, str):
        raise ValueError("Unexpected LLM content shape")
    return text


def _usage(data: dict) -> dict:
    usage = data.get("usage") or {}
    return usage if isinstance(usage, dict) else {}


async def generate(
    system_instruction: str,
    content: str,
    attachments: Optional[Sequence[Attachment]] = None,
) -> str:
    """
    Send one prompt to the model and return its text.
    Raises GenerationFailed on any failure, including an empty answer.
    """
    settings = get_settings()
    base_url, api_key, model = _get_provider_config()

    if not api_key:
        logger.warning("LLM call skipped: no API key for provider '%s'", get_flags().llm_provider)
        raise GenerationFailed("AI features are not configured")

    payload: dict[str, Any] = {
        "model": model,
        "messages": _build_messages(system_instruction, content, attachments),
        "temperature": settings.default_llm_temperature,
        "max_tokens": settings.default_llm_max_tokens,
    }
    url = f"{base_url.rstrip('/')}/chat/completions"
    headers = {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }

    start = time.monotonic()
    client = _get_client()

    try:
        resp = await asyncio.wait_for(
            _request_with_retry(
                client, url, settings.llm_max_retries, json=payload, headers=headers,
            ),
            timeout=settings.llm_timeout_seconds,
        )
        data = resp.json()
        text = _extract_text(data)
    except asyncio.TimeoutError as e:
        logger.error("LLM timed out after %.1fs", time.monotonic() - start)
        raise GenerationFailed() from e
    except (httpx.HTTPError, ValueError) as e:
        logger.error("LLM failed after %.1fs: %s", time.monotonic() - start, e)
        raise GenerationFailed() from e

    elapsed = time.monotonic() - start
    usage = _usage(data)
    logger.info(
        "LLM generate: %dms | in=%d out=%d tokens | model=%s | attachments=%d",
        int(elapsed * 1000),
        usage.get("prompt_tokens") or 0,
        usage.get("completion_tokens") or 0,
        model,
        len(attachments or ()),
    )

    if not text.strip():
        logger.warning("LLM returned an empty response (model=%s)", model)
        raise GenerationFailed()
    return text
