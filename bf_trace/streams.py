from typing import List, Sequence, Union

# Returned once input is exhausted. Indistinguishable from a real 255 byte.
EOF_SENTINEL = 255

ByteSource = Union[bytes, bytearray, str, Sequence[int]]


def to_bytes(data: ByteSource) -> bytes:
    """Coerce input data to bytes. Strings are taken as latin-1 so each char is one byte."""
    if data is None:
        return b""
    if isinstance(data, str):
        return data.encode("latin-1")
    return bytes(data)


class InputCursor:
    def __init__(self, input_bytes: ByteSource = b""):
        self.input_bytes = to_bytes(input_bytes)
        self.input_pointer = 0

    def __len__(self):
        return len(self.input_bytes)

    @property
    def exhausted(self) -> bool:
        return self.input_pointer >= len(self.input_bytes)

    def next_byte(self) -> int:
        if self.exhausted:
            return EOF_SENTINEL
        value = self.input_bytes[self.input_pointer]
        self.input_pointer += 1
        return value


class OutputSink:
    def __init__(self):
        self._data: List[int] = []

    def __len__(self):
        return len(self._data)

    def write(self, value: int) -> None:
        self._data.append(value % 256)

    def getvalue(self) -> bytes:
        return bytes(self._data)
