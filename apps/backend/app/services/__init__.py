from .ats_analysis_service import AtsAnalysisService
from .pdf_extractor import extract_text
from .exceptions import (
    ClientInputError,
    ExtractionError,
    SchemaError,
)

__all__ = [
    "AtsAnalysisService",
    "extract_text",
    "ClientInputError",
    "ExtractionError",
    "SchemaError",
]
