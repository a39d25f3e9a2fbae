"""
Interpreter error taxonomy.

Every failure is fatal to the run that raised it. The engine catches
BrainfuckError, records the message in a final error snapshot and stops;
callers branch on ``kind`` rather than on message text.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    POINTER_UNDERFLOW = "PointerUnderflow"
    UNMATCHED_OPEN_BRACKET = "UnmatchedOpenBracket"
    UNMATCHED_CLOSE_BRACKET = "UnmatchedCloseBracket"
    MEMORY_LIMIT_EXCEEDED = "MemoryLimitExceeded"
    EXECUTION_LIMIT_EXCEEDED = "ExecutionLimitExceeded"


class BrainfuckError(Exception):
    """Base class for run-terminating interpreter failures."""

    kind: Optional[ErrorKind] = None
    detail: str = "interpreter failure"

    def __init__(self, detail: Optional[str] = None):
        self.detail = detail or self.detail
        super().__init__(self.message)

    @property
    def message(self) -> str:
        return f"{self.kind.value}: {self.detail}"


class PointerUnderflow(BrainfuckError):
    kind = ErrorKind.POINTER_UNDERFLOW
    detail = "can't move the data pointer below cell 0"


class UnmatchedOpenBracket(BrainfuckError):
    kind = ErrorKind.UNMATCHED_OPEN_BRACKET
    detail = "hit end of instructions without finding matching ']'"


class UnmatchedCloseBracket(BrainfuckError):
    kind = ErrorKind.UNMATCHED_CLOSE_BRACKET
    detail = "hit beginning of instructions without finding matching '['"


class MemoryLimitExceeded(BrainfuckError):
    kind = ErrorKind.MEMORY_LIMIT_EXCEEDED
    detail = "tape can't grow past the configured memory limit"


class ExecutionLimitExceeded(BrainfuckError):
    kind = ErrorKind.EXECUTION_LIMIT_EXCEEDED
    detail = "execution limit reached"
