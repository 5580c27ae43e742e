"""Status sinks — where the game's narration goes."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Protocol, TextIO


class StatusSink(Protocol):
    """Receives formatted status lines as the game is played."""

    def emit(self, line: str) -> None: ...


@dataclass
class ConsoleSink:
    """Prints every line to a text stream (stdout by default)."""

    stream: TextIO | None = None

    def emit(self, line: str) -> None:
        print(line, file=self.stream or sys.stdout)


@dataclass
class ListSink:
    """Collects lines in memory."""

    lines: list[str] = field(default_factory=list)

    def emit(self, line: str) -> None:
        self.lines.append(line)

    def text(self) -> str:
        return "\n".join(self.lines)


class NullSink:
    """Discards everything; used for batch simulation."""

    def emit(self, line: str) -> None:
        pass
