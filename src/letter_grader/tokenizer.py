"""Comma-separated line tokenizing.

Counting and consuming are separate passes: the caller needs the field count
before it knows how many score tokens to read. Every pass works on its own
copy of the line, so two cursors over the same text never interfere.
"""

from __future__ import annotations

from typing import Iterator, List, Optional

from .errors import EmptyInputError

DEFAULT_SEPARATOR = ","


def _split(line: Optional[str], separator: str) -> List[str]:
    if line is None:
        raise EmptyInputError("Cannot tokenize a missing line")
    stripped = line.rstrip("\r\n")
    if not stripped:
        raise EmptyInputError("Cannot tokenize an empty line")
    return stripped.split(separator)


def count_tokens(line: Optional[str], separator: str = DEFAULT_SEPARATOR) -> int:
    """Return how many fields ``line`` holds. Empty fields are counted."""
    return len(_split(line, separator))


class TokenCursor:
    """Sequential reader over the fields of one line."""

    def __init__(self, line: Optional[str], separator: str = DEFAULT_SEPARATOR):
        self._tokens = _split(line, separator)
        self._position = 0

    @property
    def remaining(self) -> int:
        return len(self._tokens) - self._position

    def next_token(self) -> Optional[str]:
        """Return the next field, or ``None`` once the line is used up."""
        if self._position >= len(self._tokens):
            return None
        token = self._tokens[self._position]
        self._position += 1
        return token

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token
