"""Circular, fixed-length memory tape."""

from typing import List, Tuple

import numpy as np

from .config import DEFAULT_CELL_MAX, DEFAULT_TAPE_LENGTH


class Memory:
    def __init__(self, length: int = DEFAULT_TAPE_LENGTH, cell_max: int = DEFAULT_CELL_MAX):
        self.length = length
        self.cell_max = cell_max
        # Raw byte writes ignore cell_max, so cells must always fit 0-255 too
        self.cells = np.zeros(length, dtype=np.min_scalar_type(max(cell_max, 255)))
        self.pointer = 0

    def reset(self):
        self.cells.fill(0)
        self.pointer = 0

    def move_left(self):
        if self.pointer == 0:
            self.pointer = self.length - 1
        else:
            self.pointer -= 1

    def move_right(self):
        self.pointer += 1
        if self.pointer >= self.length:
            self.pointer = 0

    def increment(self):
        self.cells[self.pointer] = (self.read() + 1) % (self.cell_max + 1)

    def decrement(self):
        value = self.read()
        self.cells[self.pointer] = self.cell_max if value == 0 else value - 1

    def write(self, byte: int):
        """Store a raw byte (0-255) in the current cell."""
        self.cells[self.pointer] = byte & 0xFF

    def read(self) -> int:
        return int(self.cells[self.pointer])

    def window(self, size: int) -> List[Tuple[int, int]]:
        """(address, value) pairs for ``size`` cells around the pointer, clamped to the tape."""
        size = min(size, self.length)
        start = max(0, self.pointer - size // 2)
        end = min(self.length, start + size)
        start = max(0, end - size)
        return [(i, int(self.cells[i])) for i in range(start, end)]

    def __len__(self):
        return self.length
