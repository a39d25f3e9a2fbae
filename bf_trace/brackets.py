"""
Bracket resolution for structured loops.

``seek_forward`` and ``seek_backward`` scan the program one position at a
time, counting nesting, and return the partner position of the bracket they
start on. They are pure: the same (program, position, cell) always gives the
same answer or the same error.

``JumpTable`` precomputes matched pairs once. It returns exactly what the
scans return, including raising the unmatched errors only when a seek is
actually triggered.
"""

from typing import Dict, Optional, Sequence

from .errors import UnmatchedCloseBracket, UnmatchedOpenBracket
from .program import Instruction, decode

OPEN = Instruction.LOOP_OPEN
CLOSE = Instruction.LOOP_CLOSE


def _as_instructions(program) -> Sequence[Optional[Instruction]]:
    if isinstance(program, str):
        return decode(program)
    return program


def seek_forward(program, position: int, cell: int) -> int:
    """Position of the ']' matching the '[' at ``position`` when ``cell`` is zero.

    A nonzero cell needs no seek and returns ``position`` unchanged.
    """
    if cell != 0:
        return position
    instructions = _as_instructions(program)
    depth = 0
    for i in range(position + 1, len(instructions)):
        cmd = instructions[i]
        if cmd is OPEN:
            depth += 1
        elif cmd is CLOSE:
            if depth > 0:
                depth -= 1
            else:
                return i
    raise UnmatchedOpenBracket(
        f"hit end of instructions without finding ']' for '[' at {position}"
    )


def seek_backward(program, position: int, cell: int) -> int:
    """Position of the '[' matching the ']' at ``position`` when ``cell`` is nonzero.

    A zero cell needs no seek and returns ``position`` unchanged.
    """
    if cell == 0:
        return position
    instructions = _as_instructions(program)
    depth = 0
    for i in range(position - 1, -1, -1):
        cmd = instructions[i]
        if cmd is CLOSE:
            depth += 1
        elif cmd is OPEN:
            if depth > 0:
                depth -= 1
            else:
                return i
    raise UnmatchedCloseBracket(
        f"hit beginning of instructions without finding '[' for ']' at {position}"
    )


def build_jump_table(program) -> Dict[int, int]:
    """Build a table mapping bracket positions to their partners.

    Unmatched brackets are left out of the table rather than rejected, so a
    program only fails if execution actually reaches one.
    """
    instructions = _as_instructions(program)
    jump_table = {}
    stack = []

    for i, cmd in enumerate(instructions):
        if cmd is OPEN:
            stack.append(i)
        elif cmd is CLOSE and stack:
            start = stack.pop()
            jump_table[start] = i
            jump_table[i] = start

    return jump_table


class ScanResolver:
    """Resolves brackets by rescanning the program on every jump."""

    def __init__(self, program):
        self.instructions = _as_instructions(program)

    def forward(self, position: int, cell: int) -> int:
        return seek_forward(self.instructions, position, cell)

    def backward(self, position: int, cell: int) -> int:
        return seek_backward(self.instructions, position, cell)


class JumpTable:
    """Resolves brackets from a table of matched pairs built up front."""

    def __init__(self, program):
        self.table = build_jump_table(program)

    def forward(self, position: int, cell: int) -> int:
        if cell != 0:
            return position
        if position not in self.table:
            raise UnmatchedOpenBracket(
                f"hit end of instructions without finding ']' for '[' at {position}"
            )
        return self.table[position]

    def backward(self, position: int, cell: int) -> int:
        if cell == 0:
            return position
        if position not in self.table:
            raise UnmatchedCloseBracket(
                f"hit beginning of instructions without finding '[' for ']' at {position}"
            )
        return self.table[position]


RESOLVERS = {
    "scan": ScanResolver,
    "table": JumpTable,
}
