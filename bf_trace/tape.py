from typing import List

from .errors import MemoryLimitExceeded, PointerUnderflow


class Tape:
    """Growable strip of byte cells with a single data pointer.

    Starts as one zero cell. Moving right past the end grows the strip by
    half its length plus one, clamped to ``memory_limit`` cells when a
    nonzero limit is set. Cell values wrap modulo 256.
    """

    def __init__(self, memory_limit: int = 0):
        self.cells: List[int] = [0]
        self.data_pointer = 0
        self.high_water = 0
        self.memory_limit = memory_limit

    def __len__(self):
        return len(self.cells)

    def read_cell(self) -> int:
        return self.cells[self.data_pointer]

    def write_cell(self, value: int) -> None:
        self.cells[self.data_pointer] = value % 256

    def increment(self) -> bool:
        """Add one to the current cell. Returns True if it wrapped to 0."""
        value = (self.cells[self.data_pointer] + 1) % 256
        self.cells[self.data_pointer] = value
        return value == 0

    def decrement(self) -> bool:
        """Subtract one from the current cell. Returns True if it wrapped to 255."""
        value = (self.cells[self.data_pointer] - 1) % 256
        self.cells[self.data_pointer] = value
        return value == 255

    def move_right(self) -> None:
        if self.data_pointer + 1 >= len(self.cells):
            if not self._grow():
                raise MemoryLimitExceeded(
                    f"tape is at its limit of {self.memory_limit} cells"
                )
        self.data_pointer += 1
        if self.data_pointer > self.high_water:
            self.high_water = self.data_pointer

    def move_left(self) -> None:
        if self.data_pointer <= 0:
            raise PointerUnderflow()
        self.data_pointer -= 1

    def visited_cells(self) -> List[int]:
        """Copy of the cells up to the high-water mark."""
        return self.cells[:self.high_water + 1]

    def _grow(self) -> bool:
        additional = len(self.cells) // 2 + 1
        if self.memory_limit:
            additional = min(additional, max(0, self.memory_limit - len(self.cells)))
        if additional == 0:
            return False
        self.cells.extend([0] * additional)
        return True
