"""Pre-game roll-off: highest roll plays first, ties reroll among themselves."""

from __future__ import annotations

import logging
from typing import Callable

from goose_race.dice import DiceSource
from goose_race.log import LOGGER_NAME
from goose_race.players import Player, first_roll_prompt
from goose_race.render import PAGE_BREAK
from goose_race.sink import NullSink, StatusSink

logger = logging.getLogger(LOGGER_NAME)

Prompter = Callable[[Player, str], None]


def determine_first_player(
    players: list[Player],
    dice: DiceSource,
    sink: StatusSink | None = None,
    prompter: Prompter | None = None,
) -> int:
    """Return the index of the player who moves first.

    Contenders roll in seat order. A strictly higher roll takes the lead and
    clears any tie; an equal roll ties the roller with the leader; a lower
    roll drops out. Tied players go again until one roll stands alone.
    """
    if not players:
        raise ValueError("Need at least one player to pick a starter.")

    sink = sink or NullSink()
    contenders = list(range(len(players)))
    rounds = 0

    sink.emit("Everyone roll the dice. The highest roll plays first ...")
    sink.emit("")

    while True:
        rounds += 1
        rolls: dict[int, int] = {}
        leader = contenders[0]
        high = 0
        tied: set[int] = set()

        for idx in contenders:
            if prompter is not None:
                prompter(players[idx], first_roll_prompt(players[idx]))
            roll = dice.roll()
            sink.emit(roll.describe())
            rolls[idx] = roll.total

            if roll.total > high:
                high = roll.total
                leader = idx
                tied.clear()
            elif roll.total == high:
                tied.update((leader, idx))

        logger.debug("Roll-off round %d: %s", rounds, rolls)
        if not tied:
            break

        sink.emit("")
        sink.emit("Rerolling...The following players all tied:")
        for idx in sorted(tied):
            sink.emit(f"\tPlayer {players[idx].name} with roll of {rolls[idx]}")
        sink.emit(PAGE_BREAK)
        contenders = sorted(tied)

    sink.emit(f"Player {players[leader].name} goes first!")
    sink.emit(PAGE_BREAK)
    return leader
