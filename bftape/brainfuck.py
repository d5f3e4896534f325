"""
Brainfuck Interpreter

Runs a decoded program against a circular tape until the instruction pointer
moves past the last instruction. Loop jumps are resolved on every jump by
scanning the program for the matching bracket; nothing is cached.
"""

import sys
from typing import BinaryIO, Optional, Union

from .config import InterpreterConfig
from .errors import UnbalancedBracketError
from .instructions import Op, Program, parse
from .memory import Memory


class BrainfuckInterpreter:
    def __init__(self, config: Optional[InterpreterConfig] = None, output: Optional[BinaryIO] = None,
                 collect_output: Optional[bool] = None):
        self.config = config or InterpreterConfig()
        self.memory = Memory(self.config.tape_length, self.config.cell_max)
        self.sink = output
        # Output is only buffered when nothing else receives it, unless asked for
        self.collect_output = output is None if collect_output is None else collect_output
        self.program: Program = ()
        self.instruction_pointer = 0
        self.input_data = b""
        self.input_index = 0
        self.output = bytearray()
        self.input_reads = 0
        self.output_writes = 0
        self.step_count = 0

    def load(self, program: Union[str, Program], input_data: Union[str, bytes] = b""):
        """Reset all state and prepare to run ``program`` against ``input_data``."""
        if isinstance(program, str):
            program = parse(program)
        if isinstance(input_data, str):
            input_data = input_data.encode("utf-8", "surrogateescape")

        self.program = tuple(program)
        self.input_data = bytes(input_data)
        self.input_index = 0
        self.instruction_pointer = 0
        self.output = bytearray()
        self.input_reads = 0
        self.output_writes = 0
        self.step_count = 0
        self.memory.reset()

    @property
    def halted(self) -> bool:
        return self.instruction_pointer >= len(self.program)

    def run(self, program: Union[str, Program], input_data: Union[str, bytes] = b"",
            debug: bool = False) -> bytes:
        """Execute a program to completion.

        Returns the bytes it wrote when output is collected, otherwise b"".
        """
        self.load(program, input_data)

        while not self.halted:
            if debug:
                self._trace()
            self.step()

        return bytes(self.output)

    def step(self) -> bool:
        """Execute one instruction. Returns False once the program has halted."""
        if self.halted:
            return False

        op = self.program[self.instruction_pointer].op
        memory = self.memory

        if op is Op.INCREMENT:
            memory.increment()
        elif op is Op.DECREMENT:
            memory.decrement()
        elif op is Op.MOVE_LEFT:
            memory.move_left()
        elif op is Op.MOVE_RIGHT:
            memory.move_right()
        elif op is Op.INPUT:
            if self.input_index < len(self.input_data):
                memory.write(self.input_data[self.input_index])
                self.input_reads += 1
            else:
                # EOF reads as zero
                memory.write(0)
            self.input_index += 1
        elif op is Op.OUTPUT:
            self._emit(memory.read() & 0xFF)
        elif op is Op.LOOP_START:
            if memory.read() == 0:
                self.instruction_pointer = self.find_matching_close(self.instruction_pointer)
        elif op is Op.LOOP_END:
            if memory.read() != 0:
                self.instruction_pointer = self.find_matching_open(self.instruction_pointer)

        self.instruction_pointer += 1
        self.step_count += 1
        return True

    def find_matching_close(self, index: int) -> int:
        """Index of the ']' matching the '[' at ``index``."""
        depth = 0
        i = index + 1
        while i < len(self.program):
            op = self.program[i].op
            if op is Op.LOOP_START:
                depth += 1
            elif op is Op.LOOP_END:
                if depth == 0:
                    return i
                depth -= 1
            i += 1
        raise UnbalancedBracketError(index, "[")

    def find_matching_open(self, index: int) -> int:
        """Index of the '[' matching the ']' at ``index``."""
        depth = 0
        i = index - 1
        while i >= 0:
            op = self.program[i].op
            if op is Op.LOOP_END:
                depth += 1
            elif op is Op.LOOP_START:
                if depth == 0:
                    return i
                depth -= 1
            i -= 1
        raise UnbalancedBracketError(index, "]")

    def _emit(self, byte: int):
        if self.collect_output:
            self.output.append(byte)
        self.output_writes += 1
        if self.sink is not None:
            self.sink.write(bytes((byte,)))
            if hasattr(self.sink, "flush"):
                self.sink.flush()

    def _trace(self):
        ip = self.instruction_pointer
        print(f"Step {self.step_count:4d}: IP={ip:4d} CMD='{self.program[ip]}' "
              f"PTR={self.memory.pointer} CELL={self.memory.read()}", file=sys.stderr)
