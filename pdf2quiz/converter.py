"""
PDF to JSON Converter
=====================
Orchestrates a conversion run:

    PDF bytes → TextExtractor → raw text → segment_questions →
    questions.json (+ pdf-raw-text.txt for manual correction)

Usage:
    converter = PdfToJsonConverter(ConverterConfig())
    result = converter.convert()
"""

from __future__ import annotations

import logging
import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from . import storage
from .extractor import TextExtractor
from .models import ConversionResult
from .segmenter import segment_questions

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(asctime)s] %(levelname)-8s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass
class ConverterConfig:
    """Configuration for a conversion run."""

    # Files
    pdf_path: str = str(storage.DEFAULT_PDF_PATH)
    output_path: str = str(storage.DEFAULT_OUTPUT_PATH)
    raw_text_path: str = str(storage.DEFAULT_RAW_TEXT_PATH)

    # Reporting
    preview_chars: int = 500
    indent: int = 2

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None


def configure_logging(level: str = "INFO", log_file: Optional[str] = None):
    """Attach console (and optional file) handlers to the package logger."""
    log_level = getattr(logging, level.upper(), logging.INFO)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    package_logger = logging.getLogger("pdf2quiz")
    package_logger.setLevel(log_level)

    handlers = package_logger.handlers
    if not any(type(h) is logging.StreamHandler for h in handlers):
        console = logging.StreamHandler()
        console.setLevel(log_level)
        console.setFormatter(formatter)
        package_logger.addHandler(console)

    if log_file:
        # FileHandler stores baseFilename via os.path.abspath
        log_path = os.path.abspath(log_file)
        if any(
            isinstance(h, logging.FileHandler) and h.baseFilename == log_path
            for h in handlers
        ):
            return
        Path(log_path).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)


class PdfToJsonConverter:
    """
    Converts the configured PDF into a question bank.

    Errors from reading, extraction and writing are not handled here;
    the caller decides how to report them.
    """

    def __init__(
        self,
        config: Optional[ConverterConfig] = None,
        extractor: Optional[TextExtractor] = None,
    ):
        self.config = config or ConverterConfig()
        configure_logging(self.config.log_level, self.config.log_file)
        self.extractor = extractor or TextExtractor()

    def convert(self) -> ConversionResult:
        """
        Run the full read → extract → segment → write sequence.

        Returns:
            ConversionResult; output_path is None when no question was found.

        Raises:
            FileNotFoundError: If the PDF does not exist.
            ExtractionError: If the PDF cannot be decoded.
            OSError: If an output file cannot be written.
        """
        cfg = self.config
        start_time = time.time()

        logger.info(f"Reading PDF file: {cfg.pdf_path}")
        data = Path(cfg.pdf_path).read_bytes()

        logger.info("Parsing PDF content...")
        text = self.extractor.extract(data)
        self._log_preview(text)

        raw_text_path = storage.save_raw_text(text, cfg.raw_text_path)

        questions = segment_questions(text)

        result = ConversionResult(
            source_pdf=str(cfg.pdf_path),
            text_length=len(text),
            questions=questions,
            raw_text_path=str(raw_text_path),
        )

        if questions:
            logger.info(f"Found {len(questions)} potential questions.")
            output_path = storage.save_questions(
                questions, cfg.output_path, indent=cfg.indent
            )
            result.output_path = str(output_path)
            logger.info("Conversion complete")
        else:
            logger.info(
                "Automatic parsing found no questions. Please convert "
                f"manually using the raw text in {raw_text_path}"
            )

        elapsed = time.time() - start_time
        logger.info(f"Finished in {elapsed:.2f}s")
        return result

    def _log_preview(self, text: str):
        logger.info(f"Extracted text length: {len(text)}")
        if self.config.preview_chars > 0:
            logger.info(
                f"First {self.config.preview_chars} characters:\n"
                f"{text[:self.config.preview_chars]}"
            )
