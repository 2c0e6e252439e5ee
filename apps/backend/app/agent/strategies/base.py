from abc import ABC, abstractmethod
from typing import Any, Dict

from ..providers.base import Provider


class Strategy(ABC):
    @abstractmethod
    async def __call__(
        self, system_message: str, user_message: str, provider: Provider
    ) -> Dict[str, Any]:
        """
        Ask the provider and turn its raw reply into a Python object.
        """
        ...
