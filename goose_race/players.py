"""Players seated at the board and the round-robin turn order."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class PlayerKind(enum.Enum):
    HUMAN = "human"
    COMPUTER = "computer"


SYM_HUMAN = "$"
SYM_COMPUTER = "%"


@dataclass
class Player:
    """A participant: display identity plus a 0-based track position."""

    name: str
    symbol: str
    kind: PlayerKind = PlayerKind.HUMAN
    position: int = 0

    @property
    def is_computer(self) -> bool:
        return self.kind is PlayerKind.COMPUTER


def default_players() -> list[Player]:
    """The reference seating: one human against the computer."""
    return [
        Player("HUMAN", SYM_HUMAN, PlayerKind.HUMAN),
        Player("COMPUTER", SYM_COMPUTER, PlayerKind.COMPUTER),
    ]


def computer_players(count: int = 2) -> list[Player]:
    """Computer-only seating used for batch simulation."""
    symbols = [SYM_HUMAN, SYM_COMPUTER]
    return [
        Player(f"CPU{i + 1}", symbols[i % len(symbols)], PlayerKind.COMPUTER)
        for i in range(count)
    ]


def next_player(current: int, count: int) -> int:
    return 0 if current == count - 1 else current + 1


# ── Prompt text ─────────────────────────────────────────────────────

def turn_prompt(player: Player) -> str:
    if player.is_computer:
        return f"Player {player.name} turn. Press <Enter> to let them roll the dice..."
    return f"Player {player.name} turn. Press <Enter> to roll the dice..."


def first_roll_prompt(player: Player) -> str:
    if player.is_computer:
        return f"Press <Enter> to let player {player.name} roll the dice..."
    return f"Player {player.name}, press <Enter> to roll the dice..."
