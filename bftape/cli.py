"""
Command line entry point.

    bftape PROGRAM INPUT          program file plus a separate input string
    bftape --combined PROGRAM     input follows the '!' inside the program file
"""

import argparse
import sys

from .bf_runner import run_file
from .config import InputMode, InterpreterConfig
from .errors import BrainfuckError


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="bftape", description="Run a Brainfuck program on a circular tape")
    ap.add_argument("program", help="path to the program file")
    ap.add_argument("input", nargs="?", default=None,
                    help="input string (required unless --combined)")
    ap.add_argument("--combined", action="store_true",
                    help="take the input from after the '!' separator in the program file")
    ap.add_argument("--tape-length", type=int, default=None, help="number of tape cells")
    ap.add_argument("--cell-max", type=int, default=None, help="largest cell value before wraparound")
    ap.add_argument("--debug", action="store_true", help="print every step to stderr")
    return ap


def main(argv=None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    try:
        config = InterpreterConfig.from_env(
            tape_length=args.tape_length,
            cell_max=args.cell_max,
            input_mode=InputMode.COMBINED if args.combined else None,
        )
    except BrainfuckError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if config.input_mode is InputMode.SEPARATE and args.input is None:
        ap.error("the input argument is required unless --combined is given")
    if config.input_mode is InputMode.COMBINED and args.input is not None:
        ap.error("no input argument is accepted with --combined")

    out = sys.stdout.buffer
    try:
        run_file(args.program, args.input, config, output=out, debug=args.debug)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: unable to read {args.program}: {e}", file=sys.stderr)
        return 1
    except BrainfuckError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    out.write(b"\n")
    out.flush()
    return 0
