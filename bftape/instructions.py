"""
Program loading: turn source text into instructions.

    >   Move the pointer to the right
    <   Move the pointer to the left
    +   Increment the memory cell at the pointer
    -   Decrement the memory cell at the pointer
    .   Output the byte in the cell at the pointer
    ,   Read one input byte into the cell at the pointer
    [   Jump past the matching ] if the cell at the pointer is 0
    ]   Jump back to the matching [ if the cell at the pointer is nonzero

All other characters become comment instructions with no runtime effect.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .config import InputMode, InterpreterConfig
from .errors import ConfigurationError


class Op(Enum):
    INCREMENT = "+"
    DECREMENT = "-"
    MOVE_LEFT = "<"
    MOVE_RIGHT = ">"
    INPUT = ","
    OUTPUT = "."
    LOOP_START = "["
    LOOP_END = "]"
    COMMENT = None


_OPS_BY_CHAR = {op.value: op for op in Op if op is not Op.COMMENT}


@dataclass(frozen=True)
class Instruction:
    op: Op
    char: str

    @property
    def is_comment(self) -> bool:
        return self.op is Op.COMMENT

    def __str__(self):
        return self.char


Program = Tuple[Instruction, ...]


def decode(char: str) -> Instruction:
    return Instruction(_OPS_BY_CHAR.get(char, Op.COMMENT), char)


def parse(source: str) -> Program:
    """Decode every character of the trimmed source. Brackets are not checked here."""
    return tuple(decode(c) for c in source.strip())


def split_combined(text: str, separator: str = "!") -> Tuple[str, str]:
    """Split ``program<separator>input`` into its two halves.

    Without a separator the whole text is the program and the input is empty.
    More than one separator is a ConfigurationError.
    """
    text = text.strip()
    count = text.count(separator)
    if count == 0:
        return text, ""
    if count > 1:
        raise ConfigurationError(
            f"Combined program text must contain exactly one '{separator}' separator, found {count}"
        )
    program, input_text = text.split(separator, 1)
    return program, input_text


def load_program(source: str, input_text: Optional[str] = None,
                 config: Optional[InterpreterConfig] = None) -> Tuple[Program, bytes]:
    """Apply the configured input mode and return (instructions, input bytes)."""
    config = config or InterpreterConfig()

    if config.input_mode is InputMode.COMBINED:
        if input_text:
            raise ConfigurationError("A separate input string cannot be used in combined mode")
        source, input_text = split_combined(source, config.separator)

    return parse(source), (input_text or "").encode("utf-8", "surrogateescape")
