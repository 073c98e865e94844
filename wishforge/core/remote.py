# =============================================================================
# core/remote.py  —  Remote Generation Client (best-effort LLM calls)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Asks a real LLM to write the text, when one is configured.  Two
#   interchangeable backends, tried in order:
#
#     A. ChatCompletionBackend  — OpenAI chat completions through litellm
#                                 (enabled by OPENAI_API_KEY)
#     B. TextGenerationBackend  — Gemini generate_content through google-genai
#                                 (enabled by GEMINI_API_KEY)
#
#   The first backend that returns non-empty text wins.
#
# THE FAILURE POLICY:
#   Remote generation is an OPTIMIZATION, never a dependency.  Missing key,
#   network error, HTTP error, odd response shape, empty text — every one of
#   those becomes `None` here and is logged, nothing is raised.  The caller
#   then uses core/templates.py, which cannot fail.
#
#   Deliberately absent: retries, backoff, timeouts beyond the client
#   libraries' defaults, concurrent racing.  One attempt per backend per call.
#
# TWO-STAGE PIPELINE:
#   generate()              → Optional[str]   (attempt remote)
#   generate_or_fallback()  → str             (attempt remote, else template)
# =============================================================================

import logging
from typing import Callable, Optional, Protocol, Sequence

import litellm
from google import genai
from google.genai import types

from wishforge.core.config import Settings
from wishforge.core.prompts import SYSTEM_INSTRUCTION

logger = logging.getLogger(__name__)


class Backend(Protocol):
    name: str

    @property
    def available(self) -> bool: ...

    async def complete(self, prompt: str) -> Optional[str]: ...


def _usable(text: object) -> Optional[str]:
    """Trimmed text, or None if it is not a non-empty string."""
    if not isinstance(text, str):
        return None
    text = text.strip()
    return text or None


# =============================================================================
# Backend A: chat completions (litellm)
# =============================================================================
class ChatCompletionBackend:
    """OpenAI-style chat completion, system + user message."""

    name = "chat"

    def __init__(self, api_key: Optional[str], model: str):
        self._api_key = api_key
        self.model = model

    @property
    def available(self) -> bool:
        return bool(self._api_key)

    async def complete(self, prompt: str) -> Optional[str]:
        if not self.available:
            return None
        try:
            response = await litellm.acompletion(
                model=self.model,
                api_key=self._api_key,
                messages=[
                    {"role": "system", "content": SYSTEM_INSTRUCTION},
                    {"role": "user", "content": prompt},
                ],
            )
            text = response.choices[0].message.content
        except Exception as e:
            # litellm maps provider/HTTP errors onto its own exception types,
            # and a malformed payload shows up as Attribute/Index/TypeError.
            logger.warning("chat backend (%s) failed: %s", self.model, e)
            return None
        result = _usable(text)
        if result is None:
            logger.warning("chat backend (%s) returned no usable text", self.model)
        return result


# =============================================================================
# Backend B: text generation (google-genai)
# =============================================================================
class TextGenerationBackend:
    """Gemini generate_content with a system instruction."""

    name = "text"

    def __init__(self, api_key: Optional[str], model: str):
        self._api_key = api_key
        self.model = model

    @property
    def available(self) -> bool:
        return bool(self._api_key)

    async def complete(self, prompt: str) -> Optional[str]:
        if not self.available:
            return None
        try:
            client = genai.Client(api_key=self._api_key)
            response = await client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=types.GenerateContentConfig(system_instruction=SYSTEM_INSTRUCTION),
            )
            text = response.text
        except Exception as e:
            logger.warning("text backend (%s) failed: %s", self.model, e)
            return None
        result = _usable(text)
        if result is None:
            logger.warning("text backend (%s) returned no usable text", self.model)
        return result


# =============================================================================
# The client the dispatcher talks to
# =============================================================================
class RemoteGenerator:
    """Tries each configured backend in order; first usable text wins."""

    def __init__(self, backends: Sequence[Backend]):
        self.backends = list(backends)

    @classmethod
    def from_settings(cls, settings: Settings) -> "RemoteGenerator":
        """Chat backend first, then text; only the ones with credentials."""
        backends: list[Backend] = []
        if settings.chat_backend_enabled:
            backends.append(ChatCompletionBackend(settings.openai_api_key, settings.openai_model))
        if settings.text_backend_enabled:
            backends.append(TextGenerationBackend(settings.gemini_api_key, settings.gemini_model))
        return cls(backends)

    @property
    def configured(self) -> list[str]:
        """Names of backends that have credentials."""
        return [b.name for b in self.backends if b.available]

    async def generate(self, prompt: str) -> Optional[str]:
        for backend in self.backends:
            if not backend.available:
                logger.debug("%s backend not configured, skipping", backend.name)
                continue
            text = await backend.complete(prompt)
            if text:
                logger.info("remote text from %s backend", backend.name)
                return text.strip()
        return None

    async def generate_or_fallback(self, prompt: str, fallback: Callable[[], str]) -> str:
        """Remote text if any backend delivers, else fallback()."""
        text = await self.generate(prompt)
        if text is not None:
            return text
        logger.info("using template fallback")
        return fallback()
