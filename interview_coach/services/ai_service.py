"""Gemini AI service for interview interactions."""
import base64
import logging
import time

import httpx
from google import genai
from google.genai import types
from google.genai.errors import ClientError, ServerError

from interview_coach.config import settings

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """The provider failed or returned nothing usable."""


def build_genai_client() -> genai.Client:
    """Create the process-wide Gemini client from configuration."""
    settings.validate_config()
    logger.info("[GENAI] Using AI Studio API key, model=%s", settings.GEMINI_MODEL)
    return genai.Client(api_key=settings.API_KEY)


def _is_transient(exc: Exception) -> bool:
    if isinstance(exc, (ServerError, httpx.TimeoutException)):
        return True
    if isinstance(exc, ClientError):
        return getattr(exc, "code", None) == 429 or "RESOURCE_EXHAUSTED" in str(exc)
    return False


def _first_inline_image(resp):
    """Return the first inline image payload among the response parts, or None."""
    candidates = getattr(resp, "candidates", None) or []
    if not candidates:
        return None
    content = getattr(candidates[0], "content", None)
    for part in getattr(content, "parts", None) or []:
        inline = getattr(part, "inline_data", None)
        data = getattr(inline, "data", None) if inline else None
        if data:
            return data
    return None


class AIService:
    """Handles AI model interactions."""

    def __init__(self, client, text_model: str = None, image_model: str = None,
                 timeout_sec: float = None, max_retries: int = None, backoff_sec: float = 0.5):
        self.client = client
        self.text_model = text_model or settings.GEMINI_MODEL
        self.image_model = image_model or settings.GEMINI_IMAGE_MODEL
        self.timeout_sec = settings.LLM_TIMEOUT_SEC if timeout_sec is None else timeout_sec
        self.max_retries = settings.LLM_MAX_RETRIES if max_retries is None else max_retries
        self.backoff_sec = backoff_sec

    @classmethod
    def from_settings(cls) -> "AIService":
        return cls(build_genai_client())

    def _http_options(self) -> types.HttpOptions:
        # HttpOptions.timeout is in milliseconds
        return types.HttpOptions(timeout=int(self.timeout_sec * 1000))

    def _call(self, model: str, prompt: str, config: types.GenerateContentConfig):
        last_error = None
        for attempt in range(self.max_retries + 1):
            try:
                return self.client.models.generate_content(model=model, contents=prompt, config=config)
            except Exception as e:
                last_error = e
                if not _is_transient(e) or attempt >= self.max_retries:
                    break
                logger.warning("[LLM] transient error on attempt %d, retrying: %r", attempt + 1, e)
                time.sleep(self.backoff_sec * (attempt + 1))
        logger.error("[LLM] error from %s: %r", model, last_error)
        raise GenerationError(f"generation failed on {model}") from last_error

    def generate_text(self, prompt: str) -> str:
        """Generate a text reply for a single prompt."""
        resp = self._call(
            self.text_model,
            prompt,
            types.GenerateContentConfig(http_options=self._http_options()),
        )
        txt = (getattr(resp, "text", "") or "").strip()
        if not txt:
            raise GenerationError("empty text response")
        return txt

    def generate_image(self, prompt: str) -> str:
        """Generate an image and return its payload base64-encoded."""
        resp = self._call(
            self.image_model,
            prompt,
            types.GenerateContentConfig(
                response_modalities=["TEXT", "IMAGE"],
                http_options=self._http_options(),
            ),
        )
        data = _first_inline_image(resp)
        if not data:
            raise GenerationError("no image data returned")
        if isinstance(data, (bytes, bytearray)):
            return base64.b64encode(data).decode("ascii")
        return str(data)
