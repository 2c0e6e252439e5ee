import logging
from typing import Optional

from fastapi.concurrency import run_in_threadpool
from pydantic import ValidationError

from ..agent.exceptions import StrategyError
from ..agent.manager import AgentManager
from ..core.config import settings
from ..prompt import build_prompt
from ..schemas.pydantic import AnalysisResult
from .exceptions import SchemaError
from .pdf_extractor import extract_text

logger = logging.getLogger(__name__)


class AtsAnalysisService:
    """
    Runs one ATS analysis: PDF text extraction, prompt construction, a single
    provider round trip and validation of the reply.

    Nothing is cached or stored; identical uploads produce independent calls.
    """

    def __init__(self, agent: AgentManager, language: Optional[str] = None):
        self.agent = agent
        self.language = language or settings.RESPONSE_LANGUAGE

    async def analyze(
        self,
        pdf_bytes: bytes,
        job_description: Optional[str] = None,
        filename: Optional[str] = None,
    ) -> AnalysisResult:
        """
        Raises:
            ExtractionError: the upload could not be read as a PDF
            ProviderError: the provider call failed or timed out
            SchemaError: the reply was not JSON or not an AnalysisResult
        """
        resume_text = await run_in_threadpool(extract_text, pdf_bytes, filename)
        system_message, user_message = build_prompt(
            resume_text, job_description or "", language=self.language
        )
        logger.info(
            f"Requesting analysis from {self.agent.provider_name}: "
            f"resume={len(resume_text)} chars, job_description={len(job_description or '')} chars"
        )

        try:
            payload = await self.agent.run(system_message, user_message)
        except StrategyError as e:
            raise SchemaError(str(e)) from e

        return self.validate(payload)

    @staticmethod
    def validate(payload: dict) -> AnalysisResult:
        try:
            return AnalysisResult.model_validate(payload)
        except ValidationError as e:
            fields = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
            logger.error(f"Provider reply failed schema validation on fields: {fields}")
            raise SchemaError(errors=e.errors()) from e
