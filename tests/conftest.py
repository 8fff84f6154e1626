import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import letter_grader
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from letter_grader.grading import GradeEngine  # noqa: E402
from letter_grader.records import RecordStore  # noqa: E402


ROSTER = "Alice,90,90,90,90,90,90,90\nBob,50,50,50,50,50,50,50\n"


@pytest.fixture
def store():
    return RecordStore()


@pytest.fixture
def engine(store):
    return GradeEngine(store)


@pytest.fixture
def roster_file(tmp_path: Path):
    """Two-student input file used by the end-to-end tests."""
    path = tmp_path / "input.txt"
    path.write_text(ROSTER, encoding="utf-8")
    return path
