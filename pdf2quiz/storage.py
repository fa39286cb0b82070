"""
Filesystem Storage
==================
Reads and writes the converter's files. Default locations are fixed
relative to the project root:

    GE_MCQ_UNIT_1,2.pdf        # source PDF
    pdf-raw-text.txt           # raw extracted text (manual fallback)
    public/
    └── questions.json         # question bank for the quiz app
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, Union

from .models import Question

logger = logging.getLogger(__name__)

# Project root: one level up from /pdf2quiz/ package
_PROJECT_ROOT = Path(__file__).parent.parent.absolute()

DEFAULT_PDF_PATH = _PROJECT_ROOT / "GE_MCQ_UNIT_1,2.pdf"
PUBLIC_DIR = _PROJECT_ROOT / "public"
DEFAULT_OUTPUT_PATH = PUBLIC_DIR / "questions.json"
DEFAULT_RAW_TEXT_PATH = _PROJECT_ROOT / "pdf-raw-text.txt"

PathLike = Union[str, Path]


def get_project_root() -> Path:
    return _PROJECT_ROOT


def save_raw_text(text: str, path: PathLike) -> Path:
    """Write the extracted text as-is."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    logger.info(f"Raw text saved to: {path}")
    return path


def save_questions(
    questions: Iterable[Question],
    path: PathLike,
    indent: int = 2,
) -> Path:
    """Write questions as a JSON array, creating the parent directory."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = [q.to_json_dict() for q in questions]
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent, ensure_ascii=False)
    logger.info(f"Saved {len(data)} questions: {path}")
    return path


def load_questions(path: PathLike) -> list[dict]:
    """
    Load the raw records of a questions JSON file.
    Records are returned unvalidated so hand-edited files can be checked.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(
            f"{path}: expected a JSON array of questions, "
            f"got {type(data).__name__}"
        )
    return data
