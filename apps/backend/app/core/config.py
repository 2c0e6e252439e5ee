import logging
import sys
from dataclasses import dataclass
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from ..agent.exceptions import ConfigurationError

SUPPORTED_PROVIDERS = ("openai", "gemini")

# Used when LL_MODEL is left empty
DEFAULT_MODELS = {
    "openai": "gpt-4o",
    "gemini": "gemini-2.5-flash",
}


class Settings(BaseSettings):
    PROJECT_NAME: str = "ATS Resume Analyzer"
    ALLOWED_ORIGINS: List[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    LLM_PROVIDER: str = "openai"
    LL_MODEL: Optional[str] = None
    LLM_API_KEY: Optional[str] = None
    LLM_BASE_URL: Optional[str] = None
    LLM_TEMPERATURE: float = 0.7
    LLM_MAX_TOKENS: int = 4000
    LLM_TIMEOUT_SECONDS: float = 60.0

    # Provider-flavored keys, consulted when LLM_API_KEY is empty
    OPENAI_API_KEY: Optional[str] = None
    GEMINI_API_KEY: Optional[str] = None

    RESPONSE_LANGUAGE: str = "Korean"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()


@dataclass(frozen=True)
class LLMConfig:
    """
    Resolved, validated configuration for a single LLM provider.

    Built once at startup and passed into the provider constructors so no
    provider reads process-wide state on its own.
    """

    provider: str
    api_key: str
    model: str
    base_url: Optional[str] = None
    temperature: float = 0.7
    max_tokens: int = 4000
    timeout: float = 60.0

    @classmethod
    def from_settings(cls, source: Settings) -> "LLMConfig":
        provider = (source.LLM_PROVIDER or "").lower().strip()
        if provider not in SUPPORTED_PROVIDERS:
            raise ConfigurationError(
                f"Unsupported LLM_PROVIDER '{source.LLM_PROVIDER}'. "
                f"Expected one of: {', '.join(SUPPORTED_PROVIDERS)}"
            )

        flavored_key = source.OPENAI_API_KEY if provider == "openai" else source.GEMINI_API_KEY
        api_key = source.LLM_API_KEY or flavored_key
        if not api_key:
            raise ConfigurationError(
                f"No API key configured for provider '{provider}'. "
                f"Set LLM_API_KEY or {provider.upper()}_API_KEY."
            )

        if source.LLM_TIMEOUT_SECONDS <= 0:
            raise ConfigurationError("LLM_TIMEOUT_SECONDS must be positive")

        return cls(
            provider=provider,
            api_key=api_key,
            model=source.LL_MODEL or DEFAULT_MODELS[provider],
            base_url=source.LLM_BASE_URL or None,
            temperature=source.LLM_TEMPERATURE,
            max_tokens=source.LLM_MAX_TOKENS,
            timeout=source.LLM_TIMEOUT_SECONDS,
        )


def setup_logging(level: str = settings.LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stdout,
    )
    # SDK request logs include full URLs and headers at DEBUG/INFO
    for noisy in ("httpx", "httpcore", "openai", "google_genai"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
