from pathlib import Path
from typing import List, Union

from .errors import EmptyInputError, InputIOError


def read_student_lines(path: Union[str, Path]) -> List[str]:
    """Return the non-blank lines of the input file.

    An empty file is an error before any parsing happens.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except OSError as e:
        raise InputIOError(f"Failed to open '{path}' file for read operation: {e}", path) from e
    except UnicodeDecodeError as e:
        raise InputIOError(f"File '{path}' is not valid UTF-8 text: {e}", path) from e

    if not content:
        raise EmptyInputError(f"File '{path}' is empty")

    return [line for line in content.splitlines() if line.strip()]
