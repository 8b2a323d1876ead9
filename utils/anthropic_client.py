"""
Anthropic API client utilities for the Content Analyzer.

This module contains functions for interacting with the Anthropic Claude API
with automatic retry logic for transient failures.
"""

from typing import Dict, Optional

import anthropic
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)

from config import settings

# Lazily created clients, one per API key
_anthropic_clients: Dict[str, anthropic.Anthropic] = {}


def get_anthropic_client(api_key: Optional[str] = None):
    """Get or create the Anthropic client for an API key (defaults to ANTHROPIC_API_KEY)."""
    key = settings.ANTHROPIC_API_KEY if api_key is None else api_key
    if key not in _anthropic_clients:
        _anthropic_clients[key] = anthropic.Anthropic(api_key=key)
    return _anthropic_clients[key]


def reset_anthropic_client():
    """Drop the cached clients so the next call picks up new settings."""
    _anthropic_clients.clear()


@retry(
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=2, max=10),
    retry=retry_if_exception_type(
        (anthropic.APIConnectionError, anthropic.RateLimitError)
    ),
    reraise=True,
)
def call_anthropic_api_with_retry(
    prompt: str, model: str = None, max_tokens: int = None, api_key: Optional[str] = None
):
    """
    Calls Anthropic API with automatic retry logic for transient failures.

    Retries up to 3 times for:
    - APIConnectionError (network issues)
    - RateLimitError (rate limit exceeded)

    Does NOT retry for:
    - AuthenticationError (bad API key)
    - BadRequestError (malformed request)
    - Other permanent errors

    Args:
        prompt: The full analysis prompt including page content
        model: Claude model name (defaults to ANTHROPIC_MODEL)
        max_tokens: Response token limit (defaults to MAX_TOKENS)
        api_key: API key for this call (defaults to ANTHROPIC_API_KEY)

    Returns:
        Anthropic message response
    """
    client = get_anthropic_client(api_key)

    return client.messages.create(
        model=model or settings.ANTHROPIC_MODEL,
        max_tokens=max_tokens or settings.MAX_TOKENS,
        messages=[
            {
                "role": "user",
                "content": prompt,
            }
        ],
    )


def extract_text(message) -> str:
    """Concatenate the text blocks of a Claude message."""
    return "".join(
        getattr(block, "text", "")
        for block in getattr(message, "content", []) or []
        if getattr(block, "type", "text") == "text"
    )
