"""Text rendering of the track."""

from __future__ import annotations

from dataclasses import dataclass

from goose_race.board import Track
from goose_race.players import Player

PAGE_BREAK = "\n" + "*" * 81 + "\n"


@dataclass
class Cell:
    """Everything a renderer needs to know about one space."""

    position: int
    symbol: str
    occupied: bool
    occupants: str
    terminal: bool

    @property
    def label(self) -> str:
        return self.occupants if self.occupied else str(self.position + 1)

    def render(self) -> str:
        open_, close = ("<", ">") if self.terminal else ("[", "]")
        return f"{self.symbol}{open_}{self.label}{close}"


def board_cells(track: Track, players: list[Player]) -> list[Cell]:
    cells = []
    for position, space in enumerate(track.spaces):
        occupants = ""
        if space.occupied:
            occupants = "".join(p.symbol for p in players if p.position == position)
        cells.append(Cell(
            position=position,
            symbol=space.effect.symbol,
            occupied=space.occupied,
            occupants=occupants,
            terminal=position == track.terminal,
        ))
    return cells


def render_board(track: Track, players: list[Player]) -> str:
    """Rows of ``row_width`` tab-separated cells, followed by a blank line."""
    width = track.layout.row_width
    cells = [cell.render() for cell in board_cells(track, players)]
    rows = ["\t".join(cells[i:i + width]) for i in range(0, len(cells), width)]
    return "\n".join(rows) + "\n"
