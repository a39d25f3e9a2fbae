"""Tracing Brainfuck interpreter: runs a program and records a snapshot per instruction."""

from .config import EngineConfig, load_config
from .engine import Engine, run
from .errors import (
    BrainfuckError,
    ErrorKind,
    ExecutionLimitExceeded,
    MemoryLimitExceeded,
    PointerUnderflow,
    UnmatchedCloseBracket,
    UnmatchedOpenBracket,
)
from .snapshot import ExecutionResult, HaltState, Snapshot

__version__ = "0.1.0"

__all__ = [
    "BrainfuckError",
    "Engine",
    "EngineConfig",
    "ErrorKind",
    "ExecutionLimitExceeded",
    "ExecutionResult",
    "HaltState",
    "MemoryLimitExceeded",
    "PointerUnderflow",
    "Snapshot",
    "UnmatchedCloseBracket",
    "UnmatchedOpenBracket",
    "load_config",
    "run",
]
