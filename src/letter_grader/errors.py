"""Exception hierarchy for the grading pipeline."""

from __future__ import annotations


class GraderError(Exception):
    """Base class for every failure the pipeline reports to the user."""


class EmptyInputError(GraderError):
    """Raised when a line or file has nothing to parse."""


class MissingNameError(GraderError):
    """Raised when a student line does not start with a name."""

    def __init__(self, line: str = ""):
        self.line = line
        super().__init__("Parsed name is empty")


class InvalidScoreError(GraderError):
    """Raised for a score token that is not an integer in the allowed range."""

    def __init__(self, score, minimum: int, maximum: int):
        self.score = score
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"Parsed score '{score}' is not within score range of '{minimum}' to '{maximum}'"
        )


class ScoreCountMismatchError(GraderError):
    def __init__(self, name: str, actual: int, expected: int):
        self.name = name
        self.actual = actual
        self.expected = expected
        super().__init__(
            f"Student {name} has {actual} scores, {expected} scores are required to calculate the grade"
        )


class EmptyStoreError(GraderError):
    """Raised when an operation needs records but the store is missing or empty."""


class InvalidColumnError(GraderError):
    def __init__(self, column: int, columns: int):
        self.column = column
        self.columns = columns
        super().__init__(f"Test column {column} is outside 0..{columns - 1}")


class GraderIOError(GraderError):
    """Raised when a file cannot be opened, read or written."""

    def __init__(self, message: str, path=None):
        self.path = path
        super().__init__(message)


class InputIOError(GraderIOError):
    pass


class ReportIOError(GraderIOError):
    pass
