"""numpy views over an execution trace, for plotting and quick statistics."""

from collections import Counter
from typing import Any, Dict

import numpy as np

from .program import COMMANDS
from .snapshot import ExecutionResult


def tape_matrix(result: ExecutionResult) -> np.ndarray:
    """(steps, width) uint8 array of each snapshot's tape, zero-padded on the right."""
    if not result.snapshots:
        return np.zeros((0, 0), dtype=np.uint8)
    width = max(len(s.memory) for s in result.snapshots)
    matrix = np.zeros((len(result.snapshots), width), dtype=np.uint8)
    for row, snapshot in enumerate(result.snapshots):
        matrix[row, :len(snapshot.memory)] = np.frombuffer(snapshot.memory, dtype=np.uint8)
    return matrix


def pointer_path(result: ExecutionResult) -> np.ndarray:
    return np.array([s.data_pointer for s in result.snapshots], dtype=np.int64)


def instruction_histogram(result: ExecutionResult) -> Dict[str, int]:
    """How many times each instruction ran. The limit marker snapshot is not counted."""
    counts = Counter(
        s.instruction for s in result.snapshots[:result.execution_count]
    )
    return {cmd: counts.get(cmd, 0) for cmd in COMMANDS}


def summarize(result: ExecutionResult) -> Dict[str, Any]:
    path = pointer_path(result)
    return {
        "steps": len(result.snapshots),
        "executed": result.execution_count,
        "output_length": len(result.output),
        "peak_tape_width": int(path.max()) + 1 if path.size else 0,
        "halt_state": result.halt_state.value,
        "error": result.last.message if result.is_error else None,
        "elapsed": result.elapsed,
    }
