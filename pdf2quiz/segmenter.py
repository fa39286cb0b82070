"""
Question Segmenter
==================
Heuristic line scanner that turns extracted PDF text into Question records.

A question starts at a line like "12. Prompt", "12) Prompt" or "Q12 Prompt",
and collects the following "a)".."d)" option lines. Only questions holding
exactly four options when the next question starts (or the text ends) are
kept; everything else is dropped without notice. Lines matching neither
marker are ignored, so multi-line prompts and options are not supported.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator, Optional

from .models import OPTION_COUNT, Question

# ─── Marker Patterns ──────────────────────────────────────────────────────────

# "1. ", "42) " or "Q7", "q7:" at start of line
QUESTION_PATTERN = re.compile(r"^(?:\d+[.)]\s+|Q\d+)", re.IGNORECASE)

# What gets stripped off a question line: the numeral marker with its
# whitespace, or "Q<n>" with any trailing ".", ":" or whitespace
QUESTION_PREFIX = re.compile(r"^(?:\d+[.)]\s+|Q\d+[.:\s]*)", re.IGNORECASE)

# "a)", "B.", ... up to d
OPTION_PATTERN = re.compile(r"^[a-d][.)]", re.IGNORECASE)
OPTION_PREFIX = re.compile(r"^[a-d][.)]\s*", re.IGNORECASE)


@dataclass
class _OpenQuestion:
    """A question still collecting options."""
    text: str
    options: list[str] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return len(self.options) == OPTION_COUNT


def _content_lines(text: str) -> Iterator[str]:
    for line in text.splitlines():
        line = line.strip()
        if line:
            yield line


def _commit(current: Optional[_OpenQuestion], committed: list[Question]):
    """Append the open question if it is complete; otherwise drop it."""
    if current is None or not current.is_complete:
        return
    committed.append(Question(
        id=len(committed) + 1,
        text=current.text,
        options=list(current.options),
    ))


def is_question_line(line: str) -> bool:
    return bool(QUESTION_PATTERN.match(line))


def is_option_line(line: str) -> bool:
    return bool(OPTION_PATTERN.match(line))


def strip_question_marker(line: str) -> str:
    return QUESTION_PREFIX.sub("", line, count=1).strip()


def strip_option_marker(line: str) -> str:
    return OPTION_PREFIX.sub("", line, count=1).strip()


def segment_questions(text: Optional[str]) -> list[Question]:
    """
    Segment extracted text into complete four-option questions.

    Args:
        text: Plain text as produced by the extractor.

    Returns:
        Questions in order of appearance, numbered 1..n. Empty when no
        complete question was found.
    """
    committed: list[Question] = []
    if not text:
        return committed

    current: Optional[_OpenQuestion] = None

    for line in _content_lines(text):
        if is_question_line(line):
            _commit(current, committed)
            current = _OpenQuestion(text=strip_question_marker(line))
        elif current is not None and is_option_line(line):
            current.options.append(strip_option_marker(line))

    _commit(current, committed)
    return committed
