"""
Question File Validator
=======================
Checks a questions JSON file, typically one corrected by hand from the
raw-text dump, before it is handed to the quiz app.

Reports:
    - Total / valid records
    - Records failing the schema (option count, answer index, missing keys)
    - Duplicate ids
    - Gaps in the id sequence
"""

from __future__ import annotations

import logging
from collections import Counter

from pydantic import ValidationError

from .models import Question, RecordIssue, ValidationReport

logger = logging.getLogger(__name__)

MAX_REPORTED_MISSING_IDS = 50


def _describe(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "record"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


def find_missing_ids(
    ids: list[int],
    limit: int = MAX_REPORTED_MISSING_IDS,
) -> tuple[list[int], int]:
    """
    Find ids absent from the 1..max(ids) sequence.

    Works on the gaps between sorted distinct ids, so cost grows with the
    number of records rather than with the largest id.

    Returns:
        (first `limit` missing ids, total number of missing ids)
    """
    missing: list[int] = []
    total = 0
    previous = 0
    for current in sorted(set(i for i in ids if i >= 1)):
        gap_start, gap_end = previous + 1, current - 1
        if gap_end >= gap_start:
            total += gap_end - gap_start + 1
            room = limit - len(missing)
            if room > 0:
                stop = min(gap_end, gap_start + room - 1)
                missing.extend(range(gap_start, stop + 1))
        previous = current
    return missing, total


def _raw_id(record) -> object:
    if isinstance(record, dict):
        value = record.get("id")
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    return None


class QuizValidator:
    """
    Validates question records and produces a report.
    """

    def validate(self, records: list) -> ValidationReport:
        report = ValidationReport(total_records=len(records))

        if not records:
            logger.warning("No questions to validate")
            return report

        ids: list[int] = []
        for index, record in enumerate(records):
            record_id = _raw_id(record)
            if record_id is not None:
                ids.append(record_id)

            try:
                Question.model_validate(record)
            except ValidationError as e:
                report.issues.append(RecordIssue(
                    index=index,
                    record_id=record_id,
                    message=_describe(e),
                ))
                continue

            report.valid_records += 1

        counts = Counter(ids)
        report.duplicate_ids = sorted(
            num for num, count in counts.items() if count > 1
        )

        report.missing_ids, report.missing_id_count = find_missing_ids(ids)

        logger.info(
            f"Validated {report.total_records} records: "
            f"{report.valid_records} valid ({report.success_rate}%), "
            f"{len(report.issues)} invalid, "
            f"{len(report.duplicate_ids)} duplicate ids, "
            f"{report.missing_id_count} missing ids"
        )
        for issue in report.issues:
            logger.warning(f"Record {issue.index}: {issue.message}")

        return report
