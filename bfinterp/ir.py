"""Tokenising and lowering programs to a run-length encoded form."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from .logutil import LogType, log_msg

VALID_TOKENS = "><+-.,[]"


class IRType(str, Enum):
    """Instruction kinds, valued by their source character."""

    DEC_DP = "<"
    INC_DP = ">"
    ADD = "+"
    SUB = "-"
    OUT = "."
    IN = ","
    JIZ = "["
    JNZ = "]"


_JUMPS = frozenset({IRType.JIZ, IRType.JNZ})


@dataclass
class IRInstruction:
    """One instruction.

    For jumps ``operation`` is the index of the matching bracket; for all
    other kinds it is how many times the operation repeats.
    """

    type: IRType
    operation: int = 1


def parse_chars(text: str) -> str:
    """Keep only the characters that are program tokens."""
    return "".join(ch for ch in text if ch in VALID_TOKENS)


def generate_ir(tokens: Iterable[str]) -> list[IRInstruction]:
    """Collapse runs of equal tokens into instructions and resolve jumps."""
    instructions: list[IRInstruction] = []
    for token in tokens:
        kind = IRType(token)
        if kind not in _JUMPS and instructions and instructions[-1].type is kind:
            instructions[-1].operation += 1
        else:
            instructions.append(IRInstruction(kind))
    return backpatch(instructions)


def backpatch(instructions: list[IRInstruction]) -> list[IRInstruction]:
    """Point every bracket at its partner, in place; unbalanced brackets raise ValueError."""
    log_msg(LogType.INFO, "Starting backpatch!\n")
    open_brackets: list[int] = []
    for index, instruction in enumerate(instructions):
        if instruction.type is IRType.JIZ:
            open_brackets.append(index)
        elif instruction.type is IRType.JNZ:
            if not open_brackets:
                raise ValueError(f"unmatched ']' at instruction {index}")
            left = open_brackets.pop()
            instruction.operation = left
            instructions[left].operation = index
            log_msg(
                LogType.INFO,
                "Backpatch found closing bracket at %d with left bracket at index %d\n",
                index,
                left,
            )
    if open_brackets:
        raise ValueError(f"unmatched '[' at instruction {open_brackets[-1]}")
    return instructions


def dump_ir(instructions: list[IRInstruction]) -> None:
    """Print a listing of the instructions."""
    log_msg(LogType.DUMP, "IR DUMP: size: %d\n", len(instructions))
    for index, instruction in enumerate(instructions):
        char = instruction.type.value
        log_msg(
            LogType.DUMP,
            "%d: Type: %s, %d | Operation: %d\n",
            index,
            char,
            ord(char),
            instruction.operation,
        )
    print("\n")