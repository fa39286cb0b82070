"""
Data Models
===========
Pydantic models for the quiz question bank and conversion reports.
Question JSON uses the keys the quiz app reads (question, answerIndex).
"""

from __future__ import annotations

from typing import Optional

from pydantic import AliasChoices, BaseModel, Field, computed_field

OPTION_COUNT = 4


# ─── Question Model ──────────────────────────────────────────────────────────


class Question(BaseModel):
    """A single multiple-choice question ready for the quiz app."""
    id: int = Field(ge=1)
    text: str = Field(
        validation_alias=AliasChoices("text", "question"),
        serialization_alias="question",
        description="Question prompt with its numbering marker stripped",
    )
    options: list[str] = Field(
        min_length=OPTION_COUNT,
        max_length=OPTION_COUNT,
    )
    answer_index: int = Field(
        default=0,
        ge=0,
        lt=OPTION_COUNT,
        validation_alias=AliasChoices("answer_index", "answerIndex"),
        serialization_alias="answerIndex",
        description="Index of the correct option; 0 until corrected by hand",
    )

    def to_json_dict(self) -> dict:
        return self.model_dump(by_alias=True)


# ─── Conversion Result ───────────────────────────────────────────────────────


class ConversionResult(BaseModel):
    """Outcome of a single PDF conversion run."""
    source_pdf: str
    text_length: int = 0
    questions: list[Question] = Field(default_factory=list)
    raw_text_path: str
    output_path: Optional[str] = Field(
        default=None,
        description="Path of the questions JSON, None when nothing was written",
    )

    @computed_field
    @property
    def question_count(self) -> int:
        return len(self.questions)


# ─── Validation Models ───────────────────────────────────────────────────────


class RecordIssue(BaseModel):
    """A record in a questions file that failed schema validation."""
    index: int = Field(ge=0, description="Position in the JSON array")
    record_id: Optional[int] = None
    message: str


class ValidationReport(BaseModel):
    """Report produced by checking a questions JSON file."""
    total_records: int = 0
    valid_records: int = 0
    issues: list[RecordIssue] = Field(default_factory=list)
    duplicate_ids: list[int] = Field(default_factory=list)
    missing_ids: list[int] = Field(
        default_factory=list,
        description="First missing ids in ascending order, capped",
    )
    missing_id_count: int = 0

    @computed_field
    @property
    def success_rate(self) -> float:
        if self.total_records == 0:
            return 0.0
        return round(self.valid_records / self.total_records * 100, 2)

    @property
    def is_clean(self) -> bool:
        return not (self.issues or self.duplicate_ids or self.missing_id_count)
