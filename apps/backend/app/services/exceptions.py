from typing import Any, List, Optional

NO_FILE_MESSAGE = "No file uploaded"
NOT_PDF_MESSAGE = "Only PDF files are supported"
ANALYSIS_FAILED_MESSAGE = "Failed to analyze resume"


class ClientInputError(Exception):
    """
    Raised when the upload itself is unusable (missing or not a PDF).
    The message is returned to the caller verbatim.
    """

    def __init__(self, message: str = NO_FILE_MESSAGE):
        self.message = message
        super().__init__(message)


class ExtractionError(Exception):
    """
    Raised when text cannot be extracted from the uploaded PDF.
    """

    def __init__(
        self,
        message: Optional[str] = None,
        filename: Optional[str] = None,
        original_error: Optional[str] = None,
    ):
        self.filename = filename
        self.original_error = original_error
        if message is None:
            message = "Could not extract text from PDF"
            if filename:
                message += f" '{filename}'"
            if original_error:
                message += f": {original_error}"
        super().__init__(message)


class SchemaError(Exception):
    """
    Raised when the provider reply is not JSON, or is JSON that does not
    match the AnalysisResult shape.
    """

    def __init__(
        self,
        message: Optional[str] = None,
        errors: Optional[List[Any]] = None,
    ):
        self.errors = errors or []
        if message is None:
            message = "Provider reply does not match the analysis schema"
            if self.errors:
                message += f" ({len(self.errors)} field error(s))"
        super().__init__(message)
