class ConfigurationError(RuntimeError):
    """Raised when the LLM provider cannot be configured (unknown provider, missing API key)"""


class ProviderError(RuntimeError):
    """Raised when the underlying LLM provider fails"""


class StrategyError(RuntimeError):
    """Raised when a Strategy cannot parse/return expected output"""
