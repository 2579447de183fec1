"""Loading program source files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .logutil import LogType, log_msg


@dataclass(frozen=True)
class SourceFile:
    """A program file read into memory, one character per byte."""

    path: Path
    text: str

    @property
    def size(self) -> int:
        """Size of the file in bytes."""
        return len(self.text)

    @classmethod
    def open(cls, path: str | Path) -> "SourceFile":
        """Read the file at ``path``; an unreadable file raises OSError."""
        file_path = Path(path)
        log_msg(LogType.INFO, "filepath is: %s\n", file_path)
        try:
            data = file_path.read_bytes()
        except OSError:
            log_msg(LogType.CRITICAL_ERROR, "Error opening file")
            raise
        source = cls(path=file_path, text=data.decode("latin-1"))
        log_msg(LogType.INFO, "filesize is: %d\n", source.size)
        return source


def read_source(path: str | Path) -> str:
    """Return the contents of the program file at ``path``."""
    return SourceFile.open(path).text