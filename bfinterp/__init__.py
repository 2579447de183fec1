"""A Brainfuck interpreter built on a run-length intermediate representation."""

__version__ = "0.1.0"
__all__ = ["cli", "interpreter", "ir", "logutil", "source"]