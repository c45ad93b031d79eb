"""Plain-text extraction from uploaded resumes (PDF or text files)."""

import io
import logging
from pathlib import PurePath

import pdfplumber

from services.errors import ExtractionFailure

logger = logging.getLogger(__name__)

TEXT_EXTENSIONS = frozenset({"", ".txt", ".text", ".md"})


def extract_pdf_text(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file."""
    try:
        with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
            pages = [page.extract_text() or "" for page in pdf.pages]
    except Exception as e:
        logger.warning("PDF text extraction failed: %s", e)
        raise ExtractionFailure(f"Could not parse PDF file: {e}") from e
    return "\n".join(pages).strip()


def decode_text(data: bytes) -> str:
    """Decode UTF-8 bytes, replacing invalid sequences instead of failing."""
    return data.decode("utf-8", errors="replace")


def extract_text(filename: str, data: bytes) -> str:
    """Return the text of an uploaded document, chosen by file extension."""
    suffix = PurePath(filename).suffix.lower()
    if suffix == ".pdf":
        return extract_pdf_text(data)
    if suffix in TEXT_EXTENSIONS:
        return decode_text(data)
    raise ExtractionFailure(
        f"Unsupported file format {suffix!r}; expected .pdf or plain text"
    )
