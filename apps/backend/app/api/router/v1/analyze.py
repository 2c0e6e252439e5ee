import logging
from typing import Optional, Union

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from fastapi.responses import JSONResponse
from starlette.datastructures import UploadFile as StarletteUploadFile

from ....agent.exceptions import ProviderError
from ....schemas.pydantic import AnalysisResult
from ....services import (
    AtsAnalysisService,
    ClientInputError,
    ExtractionError,
    SchemaError,
)
from ....services.exceptions import (
    ANALYSIS_FAILED_MESSAGE,
    NOT_PDF_MESSAGE,
    NO_FILE_MESSAGE,
)

analyze_router = APIRouter()
logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"


def get_analysis_service(request: Request) -> AtsAnalysisService:
    return AtsAnalysisService(request.app.state.agent)


def _ensure_pdf(resume: Optional[UploadFile]) -> UploadFile:
    if resume is None or not resume.filename:
        raise ClientInputError(NO_FILE_MESSAGE)
    is_pdf_type = (resume.content_type or "").split(";")[0].strip() == PDF_CONTENT_TYPE
    if not (is_pdf_type or resume.filename.lower().endswith(".pdf")):
        raise ClientInputError(NOT_PDF_MESSAGE)
    return resume


async def _job_description_text(value: Union[str, UploadFile, None]) -> str:
    # Some clients send the job description as a file part
    if isinstance(value, StarletteUploadFile):
        return (await value.read()).decode("utf-8", errors="replace")
    return value or ""


@analyze_router.post(
    "/analyze",
    response_model=AnalysisResult,
    summary="Analyze an uploaded PDF resume for ATS compatibility",
    responses={
        400: {"description": "No file, or the file is not a PDF"},
        500: {"description": "Extraction, provider or schema failure"},
    },
)
async def analyze_resume(
    resume: Optional[UploadFile] = File(None),
    job_description: Union[str, UploadFile, None] = Form(None, alias="jobDescription"),
    service: AtsAnalysisService = Depends(get_analysis_service),
):
    """
    Accepts a multipart form with a `resume` PDF and an optional
    `jobDescription`, and returns the provider's ATS report.

    Every server-side failure is logged by kind and answered with the same
    generic 500 body.
    """
    upload = _ensure_pdf(resume)
    pdf_bytes = await upload.read()
    job_text = await _job_description_text(job_description)

    try:
        return await service.analyze(pdf_bytes, job_text, filename=upload.filename)
    except ExtractionError as e:
        logger.error(f"Extraction failure for '{upload.filename}': {e}", exc_info=True)
    except ProviderError as e:
        logger.error(f"Provider failure ({service.agent.provider_name}): {e}", exc_info=True)
    except SchemaError as e:
        logger.error(f"Schema failure: {e}", exc_info=True)
    except Exception as e:
        logger.exception(f"Unexpected analysis failure: {e}")
    return JSONResponse(status_code=500, content={"error": ANALYSIS_FAILED_MESSAGE})
