from enum import Enum
from typing import Optional, Tuple


class Instruction(Enum):
    MOVE_RIGHT = ">"
    MOVE_LEFT = "<"
    INCREMENT = "+"
    DECREMENT = "-"
    OUTPUT = "."
    INPUT = ","
    LOOP_OPEN = "["
    LOOP_CLOSE = "]"


COMMANDS = "".join(i.value for i in Instruction)
_BY_CHAR = {i.value: i for i in Instruction}


def decode(text: str) -> Tuple[Optional[Instruction], ...]:
    """Decode program text into instructions. Comment characters decode to None."""
    return tuple(_BY_CHAR.get(c) for c in text)


class Program:
    """Instruction text plus an instruction pointer.

    Comments are kept in place (as None) so positions match the source text.
    """

    def __init__(self, text: str):
        self.text = text
        self.instructions = decode(text)
        self.instruction_pointer = 0

    def __len__(self):
        return len(self.instructions)

    @property
    def finished(self) -> bool:
        return self.instruction_pointer >= len(self.instructions)

    def current(self) -> Optional[Instruction]:
        return self.instructions[self.instruction_pointer]

    def current_char(self) -> str:
        return self.text[self.instruction_pointer]

    def advance(self) -> None:
        self.instruction_pointer += 1
