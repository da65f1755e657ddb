"""
Text-generation adapter around the Groq chat completions API.

Every call returns a GenerationResult instead of raising, so the content
services decide about fallbacks in one place.
"""
import asyncio
import logging
import weakref
from enum import Enum
from typing import Optional

from groq import APITimeoutError, AsyncGroq
from pydantic import BaseModel

from app.config import get_settings

logger = logging.getLogger(__name__)


class FailureReason(str, Enum):
    NOT_CONFIGURED = "not_configured"
    TIMEOUT = "timeout"
    SERVICE_ERROR = "service_error"
    EMPTY_RESPONSE = "empty_response"


class GenerationResult(BaseModel):
    text: Optional[str] = None
    failure: Optional[FailureReason] = None
    detail: str = ""

    class Config:
        frozen = True

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, text: str) -> "GenerationResult":
        return cls(text=text)

    @classmethod
    def failed(cls, reason: FailureReason, detail: str = "") -> "GenerationResult":
        return cls(failure=reason, detail=detail)


# One client per event loop; a client's connection pool is bound to the loop
# that opened it.
_clients: "weakref.WeakKeyDictionary[asyncio.AbstractEventLoop, AsyncGroq]" = weakref.WeakKeyDictionary()


def get_client() -> AsyncGroq:
    """Groq client for the running event loop, created on first use"""
    loop = asyncio.get_running_loop()
    client = _clients.get(loop)
    if client is None:
        settings = get_settings()
        client = AsyncGroq(
            api_key=settings.GROQ_API_KEY,
            timeout=settings.GENERATION_TIMEOUT_SECONDS,
        )
        _clients[loop] = client
    return client


async def generate(
    prompt: str,
    system_prompt: str,
    max_tokens: int = 500,
    temperature: float = 0.7,
    json_mode: bool = False
) -> GenerationResult:
    """
    Run one chat completion with a bounded wait

    Args:
        prompt: User message
        system_prompt: System message
        max_tokens: Completion token limit
        temperature: Sampling temperature
        json_mode: Ask the model for a JSON object response

    Returns:
        GenerationResult: text on success, failure reason otherwise
    """
    settings = get_settings()

    if not settings.GROQ_API_KEY:
        logger.warning("Text generation skipped: GROQ_API_KEY is not set")
        return GenerationResult.failed(FailureReason.NOT_CONFIGURED, "GROQ_API_KEY is not set")

    request = {
        "model": settings.GROQ_MODEL,
        "messages": [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": prompt},
        ],
        "temperature": temperature,
        "max_tokens": max_tokens,
    }
    if json_mode:
        request["response_format"] = {"type": "json_object"}

    try:
        response = await asyncio.wait_for(
            get_client().chat.completions.create(**request),
            timeout=settings.GENERATION_TIMEOUT_SECONDS
        )
    except (asyncio.TimeoutError, APITimeoutError):
        logger.warning(
            "Text generation timed out after %.1fs (model=%s)",
            settings.GENERATION_TIMEOUT_SECONDS, settings.GROQ_MODEL
        )
        return GenerationResult.failed(FailureReason.TIMEOUT, "request timed out")
    except Exception as e:
        logger.warning("Text generation failed: %s (%s)", e, type(e).__name__)
        return GenerationResult.failed(FailureReason.SERVICE_ERROR, str(e))

    content = response.choices[0].message.content if response.choices else None
    if not content or not content.strip():
        logger.warning("Text generation returned an empty response")
        return GenerationResult.failed(FailureReason.EMPTY_RESPONSE, "empty response")

    return GenerationResult.success(content.strip())
