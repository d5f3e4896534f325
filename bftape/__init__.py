"""bftape: a Brainfuck interpreter with a fixed-size circular tape."""

from .brainfuck import BrainfuckInterpreter
from .brainfuck_debugger import BrainfuckDebugger
from .config import InputMode, InterpreterConfig
from .errors import BrainfuckError, ConfigurationError, UnbalancedBracketError
from .instructions import Instruction, Op, load_program, parse, split_combined
from .memory import Memory

__version__ = "0.1.0"
