from typing import BinaryIO, Optional

from .brainfuck import BrainfuckInterpreter
from .brainfuck_debugger import BrainfuckDebugger
from .config import InterpreterConfig
from .instructions import load_program


def read_source(path: str) -> str:
    with open(path, encoding="utf-8") as f:
        return f.read()


def run_source(source: str, input_text: Optional[str] = None,
               config: Optional[InterpreterConfig] = None,
               output: Optional[BinaryIO] = None, debug: bool = False) -> bytes:
    """Load source text according to the config's input mode and run it.
    Configuration errors surface before a single instruction executes.
    """
    config = config or InterpreterConfig()
    program, input_data = load_program(source, input_text, config)

    if debug:
        return BrainfuckDebugger(config, output).debug_run(program, input_data)
    return BrainfuckInterpreter(config, output).run(program, input_data)


def run_file(path: str, input_text: Optional[str] = None,
             config: Optional[InterpreterConfig] = None,
             output: Optional[BinaryIO] = None, debug: bool = False) -> bytes:
    return run_source(read_source(path), input_text, config, output, debug)
