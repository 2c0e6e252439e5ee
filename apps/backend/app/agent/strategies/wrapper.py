import json
import logging
import re
from typing import Any, Dict

from ..exceptions import StrategyError
from ..providers.base import Provider
from .base import Strategy

logger = logging.getLogger(__name__)

# ```json ... ``` or ``` ... ``` around the whole reply
_FENCE_RE = re.compile(r"^\s*```(?:json)?\s*(.*?)\s*```\s*$", re.DOTALL | re.IGNORECASE)


class JSONWrapper(Strategy):
    async def __call__(
        self, system_message: str, user_message: str, provider: Provider
    ) -> Dict[str, Any]:
        response = await provider.analyze(system_message, user_message)
        return self.parse(response)

    @staticmethod
    def parse(response: str) -> Dict[str, Any]:
        fenced = _FENCE_RE.match(response)
        if fenced:
            response = fenced.group(1)
        try:
            parsed = json.loads(response)
        except json.JSONDecodeError as e:
            logger.error(f"JSON parsing error at pos {e.pos} in {len(response)} chars of provider output")
            raise StrategyError(f"JSON parsing error: {e}") from e
        if not isinstance(parsed, dict):
            raise StrategyError(f"Expected a JSON object, got {type(parsed).__name__}")
        return parsed
