"""Command history kept in a plain text file, one command per line."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

HISTORY_PATH = "../logs/history.log"


class History:
    """Appends commands to a history file and lists them with numbers."""

    def __init__(self, path: str | Path = HISTORY_PATH) -> None:
        self.path = Path(path)

    def record(self, command: str) -> None:
        """Append one command as a line."""
        with self.path.open("a", encoding="utf-8", newline="\n") as handle:
            handle.write(command)
            handle.write("\n")

    def format(self) -> str:
        """Return the numbered listing of the history file."""
        with self.path.open("r", encoding="utf-8", newline="") as handle:
            text = handle.read()
        parts: list[str] = []
        line_number = 1
        for position, char in enumerate(text):
            if char == "\n":
                if position + 1 < len(text):
                    parts.append(f"\n{line_number:2d} ")
                    line_number += 1
            elif line_number == 1:
                parts.append(f"{line_number:2d} {char}")
                line_number += 1
            else:
                parts.append(char)
        parts.append("\n")
        return "".join(parts)

    def show(self, stream: TextIO | None = None) -> None:
        """Write the numbered listing to a stream, standard output by default."""
        (stream or sys.stdout).write(self.format())