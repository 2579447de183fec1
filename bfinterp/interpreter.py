"""Execution of lowered programs on a growable byte tape."""

from __future__ import annotations

import sys
from typing import TextIO

from .ir import IRInstruction, IRType, generate_ir, parse_chars
from .logutil import LogType, log_msg

_RULE = "----------------\n"


class Interpreter:
    """Runs a list of instructions against a tape of byte cells."""

    def __init__(self, instructions: list[IRInstruction], output: TextIO | None = None):
        log_msg(LogType.INFO, "INITIALIZING INTERPRETER\n")
        self.instructions = instructions
        self.output = output if output is not None else sys.stdout
        self.memory: list[int] = [0]
        self.memory_ptr = 0
        self.instruction_ptr = 0

    def _step(self, instruction: IRInstruction) -> None:
        count = instruction.operation
        kind = instruction.type
        if kind is IRType.DEC_DP:
            self.memory_ptr = max(self.memory_ptr - count, 0)
        elif kind is IRType.INC_DP:
            self.memory_ptr += count
            missing = self.memory_ptr + 1 - len(self.memory)
            if missing > 0:
                self.memory.extend([0] * missing)
        elif kind is IRType.ADD:
            self.memory[self.memory_ptr] = (self.memory[self.memory_ptr] + count) % 256
        elif kind is IRType.SUB:
            self.memory[self.memory_ptr] = (self.memory[self.memory_ptr] - count) % 256
        elif kind is IRType.OUT:
            self.output.write(chr(self.memory[self.memory_ptr]) * count)
        elif kind is IRType.JIZ:
            if self.memory[self.memory_ptr] == 0:
                self.instruction_ptr = count
        elif kind is IRType.JNZ:
            if self.memory[self.memory_ptr] != 0:
                self.instruction_ptr = count
        # Input instructions are accepted but do nothing.

    def run(self) -> None:
        """Execute every instruction, then end the output with a newline."""
        while self.instruction_ptr < len(self.instructions):
            self._step(self.instructions[self.instruction_ptr])
            self.instruction_ptr += 1
        self.output.write("\n")

    def dump_memory(self) -> str:
        """Write the tape, marking the current cell with '*', and return it."""
        cells = "".join(
            f"{'*' if index == self.memory_ptr else ' '}{value} |"
            for index, value in enumerate(self.memory)
        )
        text = f"{_RULE}{cells}\n{_RULE}"
        self.output.write(text)
        return text


def run_program(text: str, output: TextIO | None = None) -> Interpreter:
    """Parse, lower and run program ``text``; return the finished interpreter."""
    interpreter = Interpreter(generate_ir(parse_chars(text)), output)
    interpreter.run()
    return interpreter