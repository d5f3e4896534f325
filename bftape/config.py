"""
Interpreter configuration.

Values come from keyword arguments or from the environment (a ``.env`` file
is honoured through python-dotenv):

    BF_TAPE_LENGTH   number of cells on the tape (default 30000)
    BF_CELL_MAX      largest cell value before wraparound (default 255)
    BF_INPUT_MODE    "separate" or "combined" (default "separate")
"""

import os
from dataclasses import dataclass
from enum import Enum

from dotenv import find_dotenv, load_dotenv

from .errors import ConfigurationError

DEFAULT_TAPE_LENGTH = 30000
DEFAULT_CELL_MAX = 255
DEFAULT_SEPARATOR = "!"


class InputMode(Enum):
    """Where the program's input stream comes from."""
    SEPARATE = "separate"  # input passed alongside the program
    COMBINED = "combined"  # input follows a separator inside the program text


@dataclass(frozen=True)
class InterpreterConfig:
    """Startup-time constants for a run. Never mutated once built."""
    tape_length: int = DEFAULT_TAPE_LENGTH
    cell_max: int = DEFAULT_CELL_MAX
    input_mode: InputMode = InputMode.SEPARATE
    separator: str = DEFAULT_SEPARATOR

    def __post_init__(self):
        if not isinstance(self.input_mode, InputMode):
            try:
                object.__setattr__(self, "input_mode", InputMode(str(self.input_mode).lower()))
            except ValueError:
                modes = ", ".join(m.value for m in InputMode)
                raise ConfigurationError(
                    f"Unknown input mode {self.input_mode!r} (expected one of: {modes})"
                ) from None

        if self.tape_length < 1:
            raise ConfigurationError(f"tape_length must be positive, got {self.tape_length}")
        if self.cell_max < 1:
            raise ConfigurationError(f"cell_max must be at least 1, got {self.cell_max}")
        if len(self.separator) != 1:
            raise ConfigurationError(f"separator must be a single character, got {self.separator!r}")

    @classmethod
    def from_env(cls, **overrides) -> "InterpreterConfig":
        """Build a config from the environment; non-None overrides win."""
        load_dotenv(find_dotenv(usecwd=True))

        values = {
            "tape_length": _int_from_env("BF_TAPE_LENGTH", DEFAULT_TAPE_LENGTH),
            "cell_max": _int_from_env("BF_CELL_MAX", DEFAULT_CELL_MAX),
            "input_mode": os.environ.get("BF_INPUT_MODE", InputMode.SEPARATE.value),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


def _int_from_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None
