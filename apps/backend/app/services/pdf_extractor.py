import logging
from typing import Optional

import pymupdf

from .exceptions import ExtractionError

logger = logging.getLogger(__name__)


def extract_text(data: bytes, filename: Optional[str] = None) -> str:
    """
    Extract plain text from in-memory PDF bytes, pages joined by newlines.

    Raises:
        ExtractionError: if the bytes are empty, not a PDF, encrypted, or
            contain no extractable text (e.g. a scanned image).
    """
    if not data:
        raise ExtractionError("Uploaded PDF is empty", filename=filename)

    try:
        doc = pymupdf.open(stream=data, filetype="pdf")
    except (RuntimeError, ValueError) as e:
        logger.error(f"PyMuPDF could not open '{filename}': {e}")
        raise ExtractionError(filename=filename, original_error=str(e)) from e

    with doc:
        if doc.needs_pass:
            raise ExtractionError("PDF is password protected", filename=filename)
        try:
            text = "\n".join(page.get_text("text") for page in doc)
        except (RuntimeError, ValueError) as e:
            logger.error(f"PyMuPDF failed while reading pages of '{filename}': {e}")
            raise ExtractionError(filename=filename, original_error=str(e)) from e
        page_count = doc.page_count

    text = text.strip()
    if not text:
        raise ExtractionError("PDF contains no extractable text", filename=filename)
    logger.debug(f"Extracted {len(text)} characters from {page_count} page(s)")
    return text
