#!/usr/bin/env python3
"""
Brainfuck Step-by-Step Debugger

Renders the trace recorded by the engine, showing the program with the
instruction pointer, the input stream, a window of the memory tape around
the data pointer, and the output after every step.
"""

from typing import List, Optional

from .engine import describe_halt
from .snapshot import ExecutionResult, Snapshot
from .streams import ByteSource, to_bytes


def _mark(items: List[str], index: int) -> str:
    return "".join(f"[{s}]" if i == index else s for i, s in enumerate(items))


def _printable(value: int) -> str:
    char = chr(value)
    return char if char.isprintable() and value < 128 else "."


def memory_window(snapshot: Snapshot, size: int) -> range:
    """Addresses shown for a snapshot: ``size`` cells focused around the pointer."""
    start = max(0, snapshot.data_pointer - size // 2)
    end = min(len(snapshot.memory), start + size)

    # Adjust start if we're near the end
    if end - start < size:
        start = max(0, end - size)
    return range(start, end)


def render_snapshot(program: str, input_data: ByteSource, snapshot: Snapshot,
                    window: int = 10) -> List[str]:
    """Lines describing one snapshot."""
    input_bytes = to_bytes(input_data)
    label = f"Step {snapshot.step}: '{snapshot.instruction}' -> {snapshot.message}"
    if snapshot.is_error:
        label = f"Step {snapshot.step}: '{snapshot.instruction}' !! {snapshot.message}"
    lines = [label]

    lines.append(f"Program:  {_mark(list(program), snapshot.instruction_pointer)}")

    input_display = _mark([_printable(b) for b in input_bytes], snapshot.input_pointer)
    if snapshot.input_pointer >= len(input_bytes):
        input_display += "[EOF]"
    lines.append(f"Input:    {input_display}")

    memory_vals = []
    memory_ptrs = []
    memory_addrs = []
    for i in memory_window(snapshot, window):
        memory_vals.append(f"{snapshot.memory[i]:3d}")
        memory_ptrs.append(" ^ " if i == snapshot.data_pointer else "   ")
        memory_addrs.append(f"{i:3d}")

    lines.append("Memory:   [" + "|".join(memory_vals) + "]")
    lines.append("Pointer:   " + " ".join(memory_ptrs))
    lines.append("Address:   " + " ".join(memory_addrs))

    if snapshot.output:
        text = "".join(_printable(b) for b in snapshot.output)
        lines.append(f"Output:   '{text}' -> {list(snapshot.output)}")
    else:
        lines.append("Output:   (empty)")
    return lines


def print_trace(result: ExecutionResult, program: str, input_data: ByteSource = b"",
                window: int = 10, max_steps: Optional[int] = None) -> None:
    """Print every snapshot of a run, then the final result."""
    input_bytes = to_bytes(input_data)
    print("BRAINFUCK TRACE")
    print(f"Program: {program}")
    print(f"Input: {list(input_bytes)}")
    print("=" * 80)

    shown = result.snapshots if max_steps is None else result.snapshots[:max_steps]
    for snapshot in shown:
        print()
        for line in render_snapshot(program, input_bytes, snapshot, window):
            print(line)

    hidden = len(result.snapshots) - len(shown)
    if hidden > 0:
        print(f"\n... {hidden} more steps not shown")

    print(f"\nFINAL RESULT: {describe_halt(result)}")
    print(f"Executed {result.execution_count} instructions in {result.elapsed * 1000:.2f} ms")
    print(f"Output: {list(result.output)}")
