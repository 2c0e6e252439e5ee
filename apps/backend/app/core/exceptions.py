import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..services.exceptions import (
    ClientInputError,
    NO_FILE_MESSAGE,
    ANALYSIS_FAILED_MESSAGE,
)

logger = logging.getLogger(__name__)


async def client_input_error_handler(request: Request, exc: ClientInputError) -> JSONResponse:
    logger.info(f"Rejected upload on {request.url.path}: {exc.message}")
    return JSONResponse(status_code=400, content={"error": exc.message})


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # A `resume` part sent as plain text instead of a file is still "no file"
    for error in exc.errors():
        if "resume" in error.get("loc", ()):
            return JSONResponse(status_code=400, content={"error": NO_FILE_MESSAGE})
    logger.info(f"Invalid request on {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": "Invalid request"})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"error": ANALYSIS_FAILED_MESSAGE})
