from abc import ABC, abstractmethod


class Provider(ABC):
    """
    A single-shot LLM backend: one system message, one user message, one
    JSON text reply. No streaming, no retries, no conversation state.
    """

    name: str = "base"

    @abstractmethod
    async def analyze(self, system_message: str, user_message: str) -> str: ...
