# bfinterp

A small Brainfuck interpreter. It reads a program and keeps only the eight
command characters `><+-.,[]`. Runs of the same command are folded into one
instruction of an intermediate representation (IR), and each bracket is
linked to its partner. The IR is then executed on a tape of byte cells that
grows to the right as needed.

## Installation

```
pip install .
```

To also install the test dependencies:

```
pip install ".[test]"
```

## Command line

```
bfinterp program.bf
```

The file is read byte by byte, with each byte taken as one character. The
command prints a dump of the generated IR first. The dump starts with a line
`[D] IR DUMP: size: N` and then has one `[D]` line per instruction, which shows
its index, its command character and that character's code, and its operation
value. The dump is followed by blank lines. The command then runs the program,
writes the program's output to standard output, and prints a newline when the
program finishes.

The exit status is 1, with a `[CRIT_ERROR]` message, in these cases:

- no file is given;
- the file cannot be opened;
- the brackets are unbalanced.

Otherwise the exit status is 0.

## Library use

```python
import io

from bfinterp.interpreter import Interpreter, run_program
from bfinterp.ir import generate_ir, parse_chars

out = io.StringIO()
run_program("++++++++[>++++++++<-]>+.", out)
print(repr(out.getvalue()))  # 'A\n'

instructions = generate_ir(parse_chars("+++[->+<]"))
interp = Interpreter(instructions, out)
interp.run()
print(interp.memory)          # [0, 3]
text = interp.dump_memory()   # written to `out` and returned
```

### `bfinterp.ir`

- `parse_chars(text)` returns only the command characters of `text`.
- `generate_ir(tokens)` folds runs of equal commands into `IRInstruction`
  objects and links the brackets. Brackets are never folded together.
- `backpatch(instructions)` sets each bracket's `operation` to the index of
  its partner, in place, and returns the list. It raises `ValueError` for an
  unmatched `[` or `]`.
- `dump_ir(instructions)` prints the IR dump described above.
- `IRType` is an enum of the eight commands, with each command's character as
  its value.
- `IRInstruction` has a `type` and an `operation`. The `operation` is a repeat
  count, or for a bracket the index of its partner.

### `bfinterp.interpreter`

- `Interpreter(instructions, output=None)` runs instructions against a tape
  that starts as a single zero cell. Output goes to `output`, which is
  standard output when none is given. Its `memory`, `memory_ptr` and
  `instruction_ptr` attributes show its state.
- `Interpreter.run()` executes every instruction and then writes a newline.
- `Interpreter.dump_memory()` writes the tape between two rules of dashes,
  with the current cell marked by `*`, and returns that text.
- `run_program(text, output=None)` parses, lowers and runs `text`, and
  returns the finished `Interpreter`.

### `bfinterp.source`

- `SourceFile.open(path)` reads a file, with each byte taken as one
  character. It raises `OSError` if the file cannot be read. The result has
  `path`, `text` and `size` attributes.
- `read_source(path)` returns the file's text.

### `bfinterp.logutil`

- `log_msg(log_type, message, *args)` formats `message % args`, writes it to
  standard output with a tag such as `[ERROR]`, `[CRIT_ERROR]` or `[D]`, and
  returns the text. Messages of type `LogType.INFO` and `LogType.INTERP_DEBUG`
  are silenced, and for those it returns `None`.

## Behaviour notes

- Cells are unsigned bytes and wrap around modulo 256.
- Moving left from cell 0 leaves the pointer at cell 0.
- Output characters are written by their byte value.

## What it does not do

- It does not read input. The `,` command is accepted but does nothing, so a
  program that expects input sees its cell unchanged.
- It has no interactive mode and no step-by-step tracing. The tape can only
  be inspected from Python through `Interpreter.memory` or
  `Interpreter.dump_memory()`.