"""
Brainfuck Step-by-Step Debugger

Shows the execution of a program one instruction at a time, displaying the
memory tape, input stream and output after each step. Everything is printed
to stderr by default so program output on stdout stays clean.
"""

import sys
from typing import Optional, TextIO, Union

from .brainfuck import BrainfuckInterpreter
from .instructions import Op, Program


class BrainfuckDebugger(BrainfuckInterpreter):
    """Interpreter that narrates each step."""

    def __init__(self, config=None, output=None, show_memory_range: int = 10,
                 log: Optional[TextIO] = None):
        super().__init__(config, output, collect_output=True)
        self.show_memory_range = show_memory_range
        self.log = log or sys.stderr

    def debug_run(self, program: Union[str, Program], input_data: Union[str, bytes] = b"") -> bytes:
        self.load(program, input_data)
        self._print(f"Program: {self._program_text()}")
        self._print(f"Input: {self.input_data!r} (as bytes: {list(self.input_data)})")
        self._print("=" * 80)
        self._show_state("INITIAL")

        while not self.halted:
            self._describe_next()
            self.step()
            self._show_state(f"AFTER STEP {self.step_count}")

        self._print("\nFINAL RESULT:")
        self._print(f"Output: {bytes(self.output)!r} -> {list(self.output)}")
        return bytes(self.output)

    def run(self, program, input_data=b"", debug=False) -> bytes:
        return self.debug_run(program, input_data)

    def _print(self, text: str):
        print(text, file=self.log)

    def _program_text(self) -> str:
        return "".join(str(instr) for instr in self.program)

    def _describe_next(self):
        """Print what the instruction at the instruction pointer is about to do."""
        ip = self.instruction_pointer
        instr = self.program[ip]
        ptr = self.memory.pointer
        cell = self.memory.read()

        self._print(f"\nStep {self.step_count + 1}: Execute '{instr}' at position {ip}")

        op = instr.op
        if op is Op.MOVE_RIGHT:
            self._print(f"  Move pointer right -> position {(ptr + 1) % len(self.memory)}")
        elif op is Op.MOVE_LEFT:
            self._print(f"  Move pointer left -> position {(ptr - 1) % len(self.memory)}")
        elif op is Op.INCREMENT:
            self._print(f"  Increment cell[{ptr}] = {cell}")
        elif op is Op.DECREMENT:
            self._print(f"  Decrement cell[{ptr}] = {cell}")
        elif op is Op.OUTPUT:
            self._print(f"  Output cell[{ptr}] = {cell} (byte {cell & 0xFF})")
        elif op is Op.INPUT:
            if self.input_index < len(self.input_data):
                byte = self.input_data[self.input_index]
                self._print(f"  Read input[{self.input_index}] = {byte} -> cell[{ptr}]")
            else:
                self._print(f"  Read input: EOF, cell[{ptr}] <- 0")
        elif op is Op.LOOP_START:
            if cell == 0:
                self._print(f"  Loop start: cell[{ptr}] = 0, skip past matching ']'")
            else:
                self._print(f"  Loop start: cell[{ptr}] != 0, enter loop")
        elif op is Op.LOOP_END:
            if cell != 0:
                self._print(f"  Loop end: cell[{ptr}] != 0, jump back after matching '['")
            else:
                self._print(f"  Loop end: cell[{ptr}] = 0, exit loop")
        else:
            self._print(f"  Comment {instr.char!r}, no effect")

    def _show_state(self, label: str):
        """Show current state of memory, pointer, and program."""
        self._print(f"\n{label}:")

        program_display = ""
        for i, instr in enumerate(self.program):
            if i == self.instruction_pointer:
                program_display += f"[{instr}]"
            else:
                program_display += str(instr)
        if self.halted:
            program_display += "[END]"
        self._print(f"Program:  {program_display}")

        input_display = ""
        for i, byte in enumerate(self.input_data):
            if i == self.input_index:
                input_display += f"[{byte}]"
            else:
                input_display += f" {byte} "
        if self.input_index >= len(self.input_data):
            input_display += "[EOF]"
        self._print(f"Input:    {input_display}")

        cells = self.memory.window(self.show_memory_range)
        self._print("Memory:   [" + "|".join(f"{value:3d}" for _, value in cells) + "]")
        self._print("Pointer:   " + " ".join(" ^ " if addr == self.memory.pointer else "   "
                                             for addr, _ in cells))
        self._print("Address:   " + " ".join(f"{addr:3d}" for addr, _ in cells))

        if self.output:
            self._print(f"Output:   {bytes(self.output)!r} -> {list(self.output)}")
        else:
            self._print("Output:   (empty)")
