"""Per-test class statistics and their console rendering."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .errors import EmptyStoreError, InvalidColumnError
from .grading import DEFAULT_SCHEME, MAXIMUM_SCORE, MINIMUM_SCORE, GradingScheme
from .records import RecordStore, require_store

STATS_HEADING = "Here is the class averages:"
STATS_COLUMN_WIDTH = 8
STATS_PRECISION = 2
ROW_LABELS = ("Average", "Minimum", "Maximum")


def _column(store: Optional[RecordStore], column: int, scheme: GradingScheme) -> List[int]:
    store = require_store(store)
    columns = scheme.score_count
    if column < 0 or column >= columns:
        raise InvalidColumnError(column, columns)
    return [record.scores[column] for record in store]


def average(store: Optional[RecordStore], column: int, scheme: GradingScheme = DEFAULT_SCHEME) -> float:
    values = _column(store, column, scheme)
    if not values:
        raise EmptyStoreError("Divide by zero attempted")
    return sum(values) / len(values)


def minimum(store: Optional[RecordStore], column: int, scheme: GradingScheme = DEFAULT_SCHEME) -> float:
    """Lowest score in ``column``; an empty store yields the score maximum."""
    return float(min(_column(store, column, scheme), default=MAXIMUM_SCORE))


def maximum(store: Optional[RecordStore], column: int, scheme: GradingScheme = DEFAULT_SCHEME) -> float:
    """Highest score in ``column``; an empty store yields the score minimum."""
    return float(max(_column(store, column, scheme), default=MINIMUM_SCORE))


@dataclass
class ClassStatistics:
    test_names: List[str]
    rows: Dict[str, List[float]] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        return {
            label: dict(zip(self.test_names, values))
            for label, values in self.rows.items()
        }


def summarize(store: Optional[RecordStore], scheme: GradingScheme = DEFAULT_SCHEME) -> ClassStatistics:
    """Compute the Average, Minimum and Maximum rows for every test column."""
    operations = (average, minimum, maximum)
    stats = ClassStatistics(test_names=list(scheme.test_names))
    for label, operation in zip(ROW_LABELS, operations):
        stats.rows[label] = [operation(store, column, scheme) for column in range(scheme.score_count)]
    return stats


def format_statistics(stats: ClassStatistics, width: int = STATS_COLUMN_WIDTH) -> str:
    lines = [STATS_HEADING]
    lines.append(" " * width + "".join(f"{name:<{width}}" for name in stats.test_names))
    for label, values in stats.rows.items():
        cells = "".join(f"{value:<{width}.{STATS_PRECISION}f}" for value in values)
        lines.append(f"{label:<{width}}{cells}")
    return "\n".join(lines)
