"""Command line entry point: run a program file."""

from __future__ import annotations

import sys

from .interpreter import Interpreter
from .ir import dump_ir, generate_ir, parse_chars
from .logutil import LogType, log_msg
from .source import read_source


def main(argv: list[str] | None = None) -> int:
    """Run the program named by the first argument; return the exit status."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        log_msg(LogType.CRITICAL_ERROR, "insufficient number of arguments provided\n")
        return 1
    try:
        text = read_source(args[0])
    except OSError:
        return 1
    try:
        instructions = generate_ir(parse_chars(text))
    except ValueError as exc:
        log_msg(LogType.CRITICAL_ERROR, "%s\n", exc)
        return 1
    dump_ir(instructions)
    Interpreter(instructions, sys.stdout).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())