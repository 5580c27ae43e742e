"""Game runner — orchestrates one round of the Game of the Goose."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol

from goose_race.board import DEFAULT_LAYOUT, BoardLayout, Effect, Track, reset_game
from goose_race.dice import DiceSource
from goose_race.log import LOGGER_NAME
from goose_race.movement import resolve_move
from goose_race.players import Player, next_player, turn_prompt
from goose_race.render import PAGE_BREAK, render_board
from goose_race.sink import NullSink, StatusSink
from goose_race.turn_order import Prompter, determine_first_player

logger = logging.getLogger(LOGGER_NAME)


# ── Structured types ────────────────────────────────────────────────

@dataclass
class TurnRecord:
    """Record of a single turn."""

    turn_number: int
    player: int
    dice: tuple[int, int]
    start: int
    end: int
    effects: list[Effect] = field(default_factory=list)
    bounced: bool = False
    is_winning_move: bool = False


@dataclass
class GameResult:
    winner: int | None  # seat index, or None when the turn cap was hit
    reason: str  # "win" | "max_turns"
    first_player: int = 0
    turns: int = 0


# ── Observer ────────────────────────────────────────────────────────

class GameObserver(Protocol):
    """Receives a record after every turn."""

    def on_turn(self, record: TurnRecord) -> None: ...


@dataclass
class ListObserver:
    """Default observer — collects records into a list."""

    records: list[TurnRecord] = field(default_factory=list)

    def on_turn(self, record: TurnRecord) -> None:
        self.records.append(record)


# ── Win detection ───────────────────────────────────────────────────

def find_winner(track: Track, players: list[Player]) -> int | None:
    """Seat index of the player on the terminal space, if any."""
    if not track.is_occupied(track.terminal):
        return None
    for idx, player in enumerate(players):
        if player.position == track.terminal:
            return idx
    return None


# ── Runner ──────────────────────────────────────────────────────────

class GameRunner:
    """Play one full round between the seated players.

    There is no turn limit unless *max_turns* is given; a round only ends
    when somebody reaches the terminal space.
    """

    def __init__(
        self,
        players: list[Player],
        dice: DiceSource,
        sink: StatusSink | None = None,
        layout: BoardLayout = DEFAULT_LAYOUT,
        prompter: Prompter | None = None,
        observer: GameObserver | None = None,
        max_turns: int | None = None,
    ):
        if not players:
            raise ValueError("A game needs at least one player.")
        self.players = players
        self.dice = dice
        self.sink = sink or NullSink()
        self.layout = layout
        self.prompter = prompter
        self.observer = observer or ListObserver()
        self.max_turns = max_turns
        self.track = reset_game(self.players, self.layout)

    def play(self) -> GameResult:
        self.track = reset_game(self.players, self.layout)
        current = determine_first_player(
            self.players, self.dice, self.sink, self.prompter,
        )
        first = current
        self.sink.emit(render_board(self.track, self.players))

        turn_number = 0
        while self.max_turns is None or turn_number < self.max_turns:
            turn_number += 1
            self._play_turn(current, turn_number)

            self.sink.emit(render_board(self.track, self.players))
            winner = find_winner(self.track, self.players)
            if winner is not None:
                self.sink.emit(f"*** Game Over! Player {self.players[winner].name} wins! ***")
                self.sink.emit(PAGE_BREAK)
                logger.info("%s wins after %d turns", self.players[winner].name, turn_number)
                return GameResult(
                    winner=winner, reason="win",
                    first_player=first, turns=turn_number,
                )

            current = next_player(current, len(self.players))

        logger.info("Turn cap of %d reached without a winner", self.max_turns)
        return GameResult(
            winner=None, reason="max_turns",
            first_player=first, turns=turn_number,
        )

    def _play_turn(self, player_idx: int, turn_number: int) -> TurnRecord:
        """Roll and move for one player; the record goes to the observer."""
        player = self.players[player_idx]
        if self.prompter is not None:
            self.prompter(player, turn_prompt(player))

        roll = self.dice.roll()
        self.sink.emit(roll.describe())
        move = resolve_move(self.track, self.players, player, roll.total, self.sink)
        self.sink.emit(PAGE_BREAK)

        record = TurnRecord(
            turn_number=turn_number,
            player=player_idx,
            dice=(roll.first, roll.second),
            start=move.start,
            end=move.end,
            effects=list(move.effects),
            bounced=move.bounced,
            is_winning_move=move.end == self.track.terminal,
        )
        self.observer.on_turn(record)
        return record
