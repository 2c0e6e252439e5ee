import logging

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types as genai_types

from ..exceptions import ProviderError
from .base import Provider
from ...core.config import LLMConfig

logger = logging.getLogger(__name__)


class GeminiProvider(Provider):
    """Gemini generate-content provider constrained to a JSON MIME type."""

    name = "gemini"

    def __init__(self, config: LLMConfig):
        self._config = config
        self.model = config.model
        http_options = genai_types.HttpOptions(
            timeout=int(config.timeout * 1000),
            base_url=config.base_url,
        )
        self._client = genai.Client(api_key=config.api_key, http_options=http_options)
        logger.info(f"Initialized GeminiProvider with model={self.model}")

    async def analyze(self, system_message: str, user_message: str) -> str:
        generation_config = genai_types.GenerateContentConfig(
            system_instruction=system_message,
            temperature=self._config.temperature,
            max_output_tokens=self._config.max_tokens,
            response_mime_type="application/json",
        )
        try:
            response = await self._client.aio.models.generate_content(
                model=self.model,
                contents=user_message,
                config=generation_config,
            )
        except genai_errors.APIError as e:
            logger.error(f"Gemini generation error: code={e.code}, message={e.message}")
            raise ProviderError(f"Gemini - Error generating response: {e}") from e
        except httpx.HTTPError as e:
            logger.error(f"Gemini transport error: {type(e).__name__}: {e}")
            raise ProviderError(f"Gemini - Error generating response: {e}") from e

        text = response.text
        if not text:
            raise ProviderError("Gemini - Empty response content")
        return text
