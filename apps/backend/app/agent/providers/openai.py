import logging

from openai import AsyncOpenAI, APIError

from ..exceptions import ProviderError
from .base import Provider
from ...core.config import LLMConfig

logger = logging.getLogger(__name__)


class OpenAIProvider(Provider):
    """OpenAI chat-completions provider constrained to JSON-object replies."""

    name = "openai"

    def __init__(self, config: LLMConfig):
        self._config = config
        self.model = config.model
        # Retries are disabled: a failed call surfaces immediately
        self._client = AsyncOpenAI(
            api_key=config.api_key,
            base_url=config.base_url,
            timeout=config.timeout,
            max_retries=0,
        )
        logger.info(f"Initialized OpenAIProvider with model={self.model}")

    async def analyze(self, system_message: str, user_message: str) -> str:
        try:
            completion = await self._client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_message},
                    {"role": "user", "content": user_message},
                ],
                response_format={"type": "json_object"},
                temperature=self._config.temperature,
                max_completion_tokens=self._config.max_tokens,
            )
        except APIError as e:
            logger.error(f"OpenAI request failed: {type(e).__name__}: {e}")
            raise ProviderError(f"OpenAI - Error generating response: {e}") from e

        if not completion.choices:
            raise ProviderError("OpenAI - Response contained no choices")
        content = completion.choices[0].message.content
        if not content:
            logger.error(
                f"OpenAI returned empty content, finish_reason={completion.choices[0].finish_reason}"
            )
            raise ProviderError("OpenAI - Empty response content")
        return content
