"""Batch simulation of computer-vs-computer games."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field

from goose_race.board import DEFAULT_LAYOUT, BoardLayout
from goose_race.dice import RandomDice
from goose_race.game import GameRunner
from goose_race.log import LOGGER_NAME
from goose_race.players import computer_players

logger = logging.getLogger(LOGGER_NAME)


@dataclass
class SimulationSummary:
    """Aggregate outcome of many games."""

    games: int = 0
    wins: Counter[int] = field(default_factory=Counter)
    first_player_wins: int = 0
    unfinished: int = 0
    turn_counts: list[int] = field(default_factory=list)

    @property
    def finished(self) -> int:
        return self.games - self.unfinished

    @property
    def mean_turns(self) -> float:
        if not self.turn_counts:
            return 0.0
        return sum(self.turn_counts) / len(self.turn_counts)

    @property
    def first_player_win_rate(self) -> float:
        if not self.finished:
            return 0.0
        return self.first_player_wins / self.finished


def simulate(
    games: int,
    seed: int | None = None,
    layout: BoardLayout = DEFAULT_LAYOUT,
    max_turns: int | None = 1000,
    players: int = 2,
) -> SimulationSummary:
    """Play *games* rounds with one shared dice stream.

    A fixed *seed* makes the whole batch reproducible.
    """
    dice = RandomDice(seed)
    seats = computer_players(players)
    summary = SimulationSummary()

    for game_number in range(games):
        runner = GameRunner(seats, dice, layout=layout, max_turns=max_turns)
        result = runner.play()
        summary.games += 1

        if result.winner is None:
            summary.unfinished += 1
            logger.debug("Game %d hit the turn cap", game_number + 1)
            continue

        summary.wins[result.winner] += 1
        summary.turn_counts.append(result.turns)
        if result.winner == result.first_player:
            summary.first_player_wins += 1

    logger.info(
        "Simulated %d games, mean length %.1f turns",
        summary.games, summary.mean_turns,
    )
    return summary
