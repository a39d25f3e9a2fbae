#!/usr/bin/env python3
"""
Tracing Brainfuck engine

Runs a program against an input byte string and records a Snapshot after
every instruction it executes:
    >   Move the data pointer right, growing the tape if needed
    <   Move the data pointer left (fails at cell 0)
    +   Increment the current cell, wrapping 255 -> 0
    -   Decrement the current cell, wrapping 0 -> 255
    .   Append the current cell to the output
    ,   Read the next input byte into the current cell (255 once input runs out)
    [   Jump to the matching ] if the current cell is 0
    ]   Jump back to the matching [ if the current cell is nonzero

All other characters are comments: skipped, with no snapshot.
Any failure ends the run; the last snapshot then carries the error.
"""

import time
from typing import Callable, List, Optional

from .brackets import RESOLVERS
from .config import EngineConfig
from .errors import BrainfuckError, ErrorKind, ExecutionLimitExceeded
from .program import Instruction, Program
from .snapshot import ExecutionResult, HaltState, Snapshot
from .streams import ByteSource, InputCursor, OutputSink
from .tape import Tape

Clock = Callable[[], float]

DEBUG_STEPS = 50  # debug output only covers the first steps


class Engine:
    """One run of one program. Create a new Engine for every run."""

    def __init__(self, program: str, input_bytes: ByteSource = b"",
                 config: Optional[EngineConfig] = None,
                 clock: Clock = time.perf_counter,
                 resolver: str = "scan"):
        if resolver not in RESOLVERS:
            raise ValueError(f"Unknown resolver '{resolver}'. Available: {sorted(RESOLVERS)}")
        self.config = config or EngineConfig()
        self.clock = clock
        self.program = Program(program)
        self.tape = Tape(memory_limit=self.config.memory_limit)
        self.input = InputCursor(input_bytes)
        self.output = OutputSink()
        self.resolver = RESOLVERS[resolver](self.program.instructions)
        self.state = HaltState.RUNNING
        self.snapshots: List[Snapshot] = []
        self._started = False

        self._handlers = {
            Instruction.MOVE_RIGHT: self._move_right,
            Instruction.MOVE_LEFT: self._move_left,
            Instruction.INCREMENT: self._increment,
            Instruction.DECREMENT: self._decrement,
            Instruction.OUTPUT: self._output,
            Instruction.INPUT: self._input,
            Instruction.LOOP_OPEN: self._loop_open,
            Instruction.LOOP_CLOSE: self._loop_close,
        }

    # -----------------------------
    # Instruction handlers
    # -----------------------------

    def _move_right(self) -> str:
        self.tape.move_right()
        return "incremented pointer by 1"

    def _move_left(self) -> str:
        self.tape.move_left()
        return "decremented pointer by 1"

    def _increment(self) -> str:
        if self.tape.increment():
            return "wrapped overflow byte back to 0x00"
        return "incremented byte by 1"

    def _decrement(self) -> str:
        if self.tape.decrement():
            return "wrapped underflow byte back to 0xFF"
        return "decremented byte by 1"

    def _output(self) -> str:
        self.output.write(self.tape.read_cell())
        return "copied byte from memory to output"

    def _input(self) -> str:
        exhausted = self.input.exhausted
        self.tape.write_cell(self.input.next_byte())
        if exhausted:
            return "input exhausted, wrote 0xFF to memory"
        return "copied byte from input to memory"

    def _loop_open(self) -> str:
        cell = self.tape.read_cell()
        if cell != 0:
            return "byte is non-zero, no bracket seek necessary"
        ip = self.program.instruction_pointer
        self.program.instruction_pointer = self.resolver.forward(ip, cell)
        return "found matching close bracket"

    def _loop_close(self) -> str:
        cell = self.tape.read_cell()
        if cell == 0:
            return "byte is zero, no bracket seek necessary"
        ip = self.program.instruction_pointer
        self.program.instruction_pointer = self.resolver.backward(ip, cell)
        return "found matching open bracket"

    # -----------------------------
    # Run loop
    # -----------------------------

    def _snapshot(self, instruction: str, message: str,
                  error: Optional[BrainfuckError] = None) -> Snapshot:
        snapshot = Snapshot(
            step=len(self.snapshots) + 1,
            instruction=instruction,
            memory=bytes(self.tape.visited_cells()),
            data_pointer=self.tape.data_pointer,
            instruction_pointer=self.program.instruction_pointer,
            input_pointer=self.input.input_pointer,
            output=self.output.getvalue(),
            is_error=error is not None,
            message=message,
            error_kind=error.kind if error is not None else None,
        )
        self.snapshots.append(snapshot)
        return snapshot

    def _limit_reached(self) -> bool:
        limit = self.config.execution_limit
        return bool(limit) and len(self.snapshots) >= limit

    def run(self, debug: bool = False) -> ExecutionResult:
        """Execute the program to completion or to the first fatal condition."""
        if self._started:
            raise RuntimeError("Engine has already run; create a new Engine for each run")
        self._started = True

        start = self.clock()
        program = self.program
        execution_count = 0

        while not program.finished:
            cmd = program.current()
            char = program.current_char()
            ip = program.instruction_pointer

            if self._limit_reached():
                err = ExecutionLimitExceeded(
                    f"stopped after {self.config.execution_limit} instructions"
                )
                snap = self._snapshot(char, err.message, err)
                if debug and snap.step <= DEBUG_STEPS:
                    self._debug_line(snap, ip)
                self.state = HaltState.HALTED_ON_LIMIT
                break

            if cmd is None:
                program.advance()
                continue

            try:
                message = self._handlers[cmd]()
            except BrainfuckError as err:
                execution_count += 1
                snap = self._snapshot(char, err.message, err)
                if debug and snap.step <= DEBUG_STEPS:
                    self._debug_line(snap, ip)
                self.state = HaltState.HALTED_ON_ERROR
                break

            execution_count += 1
            snap = self._snapshot(char, message)
            if debug and snap.step <= DEBUG_STEPS:
                self._debug_line(snap, ip)
            program.advance()

        if self.state is HaltState.RUNNING:
            self.state = HaltState.HALTED_NORMALLY

        return ExecutionResult(
            snapshots=tuple(self.snapshots),
            output=self.output.getvalue(),
            execution_count=execution_count,
            elapsed=self.clock() - start,
            halt_state=self.state,
        )

    def _debug_line(self, snap: Snapshot, ip: int) -> None:
        print(f"Step {snap.step:2d}: IP={ip:2d} CMD='{snap.instruction}' PTR={snap.data_pointer} "
              f"CELL={snap.cell} MEM={list(snap.memory[:5])} {snap.message}")


def run(program: str, input_bytes: ByteSource = b"", config: Optional[EngineConfig] = None,
        **kwargs) -> ExecutionResult:
    """Build a fresh Engine and run ``program`` once."""
    return Engine(program, input_bytes, config=config, **kwargs).run()


def describe_halt(result: ExecutionResult) -> str:
    if result.halt_state is HaltState.HALTED_NORMALLY:
        return "halted normally"
    kind = result.error_kind
    if kind is ErrorKind.EXECUTION_LIMIT_EXCEEDED:
        return f"halted on limit: {result.last.message}"
    return f"halted on error: {result.last.message}"
