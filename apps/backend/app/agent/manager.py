import asyncio
import logging
from typing import Any, Dict, Optional

from ..core.config import LLMConfig
from .exceptions import ConfigurationError, ProviderError
from .strategies.wrapper import JSONWrapper
from .providers.base import Provider

logger = logging.getLogger(__name__)


def build_provider(config: LLMConfig) -> Provider:
    match config.provider:
        case 'openai':
            from .providers.openai import OpenAIProvider
            return OpenAIProvider(config)
        case 'gemini':
            from .providers.gemini import GeminiProvider
            return GeminiProvider(config)
        case _:
            raise ConfigurationError(f"Unknown LLM provider '{config.provider}'")


class AgentManager:
    """
    Owns the configured provider for the lifetime of the process and runs
    one bounded request per call.
    """

    def __init__(self,
                 config: Optional[LLMConfig] = None,
                 provider: Optional[Provider] = None,
                 timeout: Optional[float] = None,
                 ) -> None:
        if provider is None:
            if config is None:
                raise ConfigurationError("AgentManager needs either an LLMConfig or a Provider")
            provider = build_provider(config)
        self.provider = provider
        self.timeout = timeout if timeout is not None else (config.timeout if config else 60.0)
        self.strategy = JSONWrapper()

    @property
    def provider_name(self) -> str:
        return self.provider.name

    async def run(self, system_message: str, user_message: str) -> Dict[str, Any]:
        """
        Send the prompt pair to the provider and return the parsed JSON object.
        """
        try:
            return await asyncio.wait_for(
                self.strategy(system_message, user_message, self.provider),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as e:
            logger.error(f"{self.provider_name} did not answer within {self.timeout}s")
            raise ProviderError(
                f"{self.provider_name} - No response within {self.timeout} seconds"
            ) from e
