"""OpenAI completion helper used by the text-to-tickets conversion."""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Any, Dict, List, Optional

from openai import OpenAI
from openai import APIStatusError, APIConnectionError, RateLimitError

from logic.errors import ConfigurationMissingError, UpstreamError

logger = logging.getLogger(__name__)


DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_TEMPERATURE = 0.3
DEFAULT_MAX_TOKENS = 4000
GENERIC_FAILURE_MESSAGE = "Failed to generate tickets from text."

# Stop before the model starts a new human turn, or at the end of the array.
STOP_SEQUENCES: List[str] = ["\n\nHuman:", "]"]


def get_api_key() -> Optional[str]:
    return os.getenv("OPENAI_API_KEY") or None


@lru_cache(maxsize=1)
def _get_openai_client(api_key: Optional[str] = None) -> OpenAI:
    """Return a cached OpenAI client instance.

    Parameters
    ----------
    api_key:
        Optional override for the API key. Primarily used for testing.
    """

    key = api_key or get_api_key()
    if not key:
        raise ConfigurationMissingError(
            "OPENAI_API_KEY environment variable is not configured."
        )
    return OpenAI(api_key=key)


def reset_cached_client() -> None:
    """Clear the cached OpenAI client. Intended for use in tests."""

    _get_openai_client.cache_clear()


def _upstream_message(exc: Exception) -> str:
    body = getattr(exc, "body", None)
    if isinstance(body, dict):
        error = body.get("error", body)
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
    message = str(exc)
    return message or GENERIC_FAILURE_MESSAGE


def _normalize_api_error(exc: Exception) -> UpstreamError:
    if isinstance(exc, RateLimitError):
        logger.warning("OpenAI API rate limit exceeded")
    elif isinstance(exc, APIConnectionError):
        logger.warning("Unable to reach OpenAI API: %s", exc)
    elif isinstance(exc, APIStatusError):
        logger.warning("OpenAI API returned status %s", getattr(exc, "status_code", None))
    return UpstreamError(_upstream_message(exc), details=f"{type(exc).__name__}: {exc}")


def _extract_text_from_response(response: Any) -> str:
    choices = getattr(response, "choices", None) or []
    for choice in choices:
        message = getattr(choice, "message", None)
        text = getattr(message, "content", None)
        if text is not None and str(text).strip():
            return str(text)

    raise UpstreamError("OpenAI response did not include any text output.")


def generate_completion(prompt: str, llm_options: Optional[Dict[str, Any]] = None) -> str:
    """Send ``prompt`` to the model and return the raw completion text.

    Parameters
    ----------
    prompt:
        Full prompt text, already built.
    llm_options:
        Optional overrides for model, temperature, max_tokens or api_key.
    """

    options = dict(llm_options or {})
    model = options.get("model") or os.getenv("OPENAI_MODEL") or DEFAULT_MODEL
    temperature = float(options.get("temperature", DEFAULT_TEMPERATURE))
    max_tokens = int(options.get("max_tokens", DEFAULT_MAX_TOKENS))

    client = _get_openai_client(options.get("api_key") or get_api_key())
    try:
        response = client.chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": prompt}],
            temperature=temperature,
            max_tokens=max_tokens,
            stop=STOP_SEQUENCES,
        )
    except (APIStatusError, APIConnectionError, RateLimitError) as exc:
        raise _normalize_api_error(exc) from exc
    except Exception as exc:  # pragma: no cover - safeguard
        raise _normalize_api_error(exc) from exc

    return _extract_text_from_response(response)
