"""Weighted letter grades.

The grade engine parses raw student lines into records and turns each
record's scores into a letter using an immutable ``GradingScheme``.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .errors import (
    InvalidScoreError,
    MissingNameError,
    ScoreCountMismatchError,
)
from .records import RecordStore, StudentRecord, require_store
from .tokenizer import TokenCursor, count_tokens

MINIMUM_SCORE = 0
MAXIMUM_SCORE = 100
SUM_PRECISION = 9
WEIGHT_TOLERANCE = 1e-9
SCORE_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class GradingScheme:
    """Test weights, grade thresholds and test column labels."""

    weights: Tuple[float, ...]
    thresholds: Tuple[Tuple[float, str], ...]
    test_names: Tuple[str, ...]

    def __post_init__(self):
        if not self.weights:
            raise ValueError("Grading scheme needs at least one weight")
        if any(weight < 0 for weight in self.weights):
            raise ValueError(f"Weights cannot be negative, got {self.weights}")
        if abs(math.fsum(self.weights) - 1.0) > WEIGHT_TOLERANCE:
            raise ValueError(f"Weights must sum to 1.0, got {math.fsum(self.weights)}")
        if len(self.test_names) != len(self.weights):
            raise ValueError(
                f"Expected {len(self.weights)} test names, got {len(self.test_names)}"
            )
        if not self.thresholds:
            raise ValueError("Grading scheme needs at least one threshold")
        minimums = [minimum for minimum, _ in self.thresholds]
        if any(a <= b for a, b in zip(minimums, minimums[1:])):
            raise ValueError("Thresholds must be strictly descending")
        if minimums[-1] != MINIMUM_SCORE:
            raise ValueError(f"Lowest threshold must be {MINIMUM_SCORE} so every sum gets a letter")

    @property
    def score_count(self) -> int:
        return len(self.weights)


DEFAULT_SCHEME = GradingScheme(
    weights=(0.1, 0.1, 0.1, 0.1, 0.2, 0.15, 0.25),
    thresholds=((90, "A"), (80, "B"), (70, "C"), (60, "D"), (0, "F")),
    test_names=("Quiz 1", "Quiz 2", "Quiz 3", "Quiz 4", "Mid 1", "Mid 2", "Final"),
)


def parse_score(token: Optional[str]) -> int:
    """Parse one score token, enforcing the 0..100 range."""
    text = (token or "").strip()
    if not SCORE_PATTERN.fullmatch(text):
        raise InvalidScoreError(text, MINIMUM_SCORE, MAXIMUM_SCORE)
    score = int(text)
    if score < MINIMUM_SCORE or score > MAXIMUM_SCORE:
        raise InvalidScoreError(score, MINIMUM_SCORE, MAXIMUM_SCORE)
    return score


def weighted_sum(scores: Sequence[int], weights: Sequence[float]) -> float:
    total = math.fsum(score * weight for score, weight in zip(scores, weights))
    return round(total, SUM_PRECISION)


def letter_for(total: float, thresholds: Sequence[Tuple[float, str]]) -> str:
    """Return the letter of the first threshold not above ``total``."""
    for minimum, letter in thresholds:
        if total >= minimum:
            return letter
    raise ValueError(f"No grade threshold covers a weighted sum of {total}")


class GradeEngine:
    def __init__(
        self,
        store: RecordStore,
        scheme: GradingScheme = DEFAULT_SCHEME,
        logger: Optional[logging.Logger] = None,
    ):
        self.store = require_store(store)
        self.scheme = scheme
        self.logger = logger or logging.getLogger(__name__)

    def create_student_record(self, raw_line: str) -> StudentRecord:
        """Parse ``name,score,...`` and append the record to the store."""
        field_count = count_tokens(raw_line)
        cursor = TokenCursor(raw_line)

        name = (cursor.next_token() or "").strip()
        if not name:
            raise MissingNameError(raw_line)

        scores = tuple(parse_score(cursor.next_token()) for _ in range(field_count - 1))

        record = StudentRecord(name=name, scores=scores)
        self.store.append(record)
        self.logger.debug(f"Parsed record for {name} with {len(scores)} scores")
        return record

    def compute_grade(self, record: StudentRecord) -> str:
        expected = self.scheme.score_count
        if len(record.scores) != expected:
            raise ScoreCountMismatchError(record.name, len(record.scores), expected)

        total = weighted_sum(record.scores, self.scheme.weights)
        record.grade = letter_for(total, self.scheme.thresholds)
        self.logger.debug(f"{record.name}: weighted sum {total} -> {record.grade}")
        return record.grade

    def compute_all_grades(self) -> int:
        """Grade every record in store order; the first failure aborts the batch."""
        for record in self.store:
            self.compute_grade(record)
        return len(self.store)
