from .config import settings, Settings, LLMConfig, setup_logging

__all__ = [
    "settings",
    "Settings",
    "LLMConfig",
    "setup_logging",
]
