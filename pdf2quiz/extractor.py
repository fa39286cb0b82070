"""
Text Extractor
==============
Extracts plain text from PDF bytes using PyMuPDF (fitz).
Pages are joined in document order, one newline between pages.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

INSTALL_HINT = "pip install PyMuPDF"


class ExtractorUnavailableError(RuntimeError):
    """PyMuPDF could not be imported."""


class ExtractionError(RuntimeError):
    """The PDF bytes could not be decoded into text."""


def load_backend():
    """Import PyMuPDF, raising ExtractorUnavailableError when it is missing."""
    try:
        import fitz  # PyMuPDF
    except ImportError as e:
        raise ExtractorUnavailableError(
            f"PyMuPDF module not found. Please install it: {INSTALL_HINT}"
        ) from e
    return fitz


class TextExtractor:
    """
    Converts a PDF binary blob into a single plain-text string.
    """

    def __init__(self):
        self._fitz = load_backend()

    def _open(self, data: bytes):
        try:
            return self._fitz.open(stream=data, filetype="pdf")
        except Exception as e:
            raise ExtractionError(f"Cannot open PDF data: {e}") from e

    def extract(self, data: bytes) -> str:
        """
        Extract the text of every page.

        Args:
            data: Raw PDF file content.

        Returns:
            Concatenated page text.

        Raises:
            ExtractionError: If the data is not a readable PDF.
        """
        with self._open(data) as doc:
            if doc.page_count == 0:
                raise ExtractionError("PDF has no pages")
            try:
                pages = [page.get_text("text") for page in doc]
            except Exception as e:
                raise ExtractionError(f"Text extraction failed: {e}") from e

        logger.debug(f"Extracted text from {len(pages)} pages")
        return "\n".join(pages)

    def page_count(self, data: bytes) -> int:
        with self._open(data) as doc:
            return doc.page_count

    def metadata(self, data: bytes) -> dict:
        with self._open(data) as doc:
            return dict(doc.metadata or {})
