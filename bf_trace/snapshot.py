from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .errors import ErrorKind


class HaltState(Enum):
    RUNNING = "running"
    HALTED_NORMALLY = "halted_normally"
    HALTED_ON_ERROR = "halted_on_error"
    HALTED_ON_LIMIT = "halted_on_limit"


@dataclass(frozen=True)
class Snapshot:
    """Interpreter state captured right after one instruction ran.

    ``memory`` holds the tape up to the highest cell visited so far, not the
    whole allocated tape.
    """
    step: int
    instruction: str
    memory: bytes
    data_pointer: int
    instruction_pointer: int
    input_pointer: int
    output: bytes
    is_error: bool = False
    message: str = ""
    error_kind: Optional[ErrorKind] = None

    @property
    def cell(self) -> int:
        return self.memory[self.data_pointer]


@dataclass(frozen=True)
class ExecutionResult:
    """Everything one run produced."""
    snapshots: Tuple[Snapshot, ...]
    output: bytes
    execution_count: int
    elapsed: float
    halt_state: HaltState = HaltState.HALTED_NORMALLY

    @property
    def last(self) -> Optional[Snapshot]:
        return self.snapshots[-1] if self.snapshots else None

    @property
    def is_error(self) -> bool:
        return self.last is not None and self.last.is_error

    @property
    def error_kind(self) -> Optional[ErrorKind]:
        return self.last.error_kind if self.last is not None else None

    def output_text(self, encoding: str = "latin-1") -> str:
        return self.output.decode(encoding)
