"""Movement rules — bounce-back at the end of the track and chained space effects."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from goose_race.board import Effect, Track
from goose_race.log import LOGGER_NAME
from goose_race.players import Player
from goose_race.sink import NullSink, StatusSink

logger = logging.getLogger(LOGGER_NAME)

EFFECT_MESSAGES: dict[Effect, str] = {
    Effect.GOOSE: "Player landed on a goose! Moving the roll amount again!",
    Effect.BRIDGE: "Player landed on a bridge! Moving to space {target}!",
    Effect.MAZE: "Player landed on a maze! No movement this round!",
    Effect.SKULL: "Player landed on a skull! Moving back to start!",
}


@dataclass
class MoveResult:
    """What happened when a player moved."""

    start: int
    end: int
    roll: int
    effects: list[Effect] = field(default_factory=list)
    bounced: bool = False
    cycle_detected: bool = False


def reflect(position: int, terminal: int) -> int:
    """Bounce an overshoot back off the terminal space by the excess."""
    if position > terminal:
        return terminal - (position - terminal)
    return position


def resolve_move(
    track: Track,
    players: list[Player],
    player: Player,
    roll: int,
    sink: StatusSink | None = None,
) -> MoveResult:
    """Move *player* by *roll*, applying every effect it lands on.

    Mutates ``player.position`` and the track's occupancy. Narration for each
    effect goes to *sink*.
    """
    sink = sink or NullSink()
    original = player.position
    result = MoveResult(start=original, end=original, roll=roll)
    position = original
    visited: set[int] = set()

    while True:
        landed = reflect(position + roll, track.terminal)
        if landed != position + roll:
            result.bounced = True
            logger.debug("%s overshot to %d, bounced to %d", player.name, position + roll, landed)
        position = landed

        effect = track.effect_at(position)
        if effect is not Effect.NONE:
            result.effects.append(effect)
            sink.emit(EFFECT_MESSAGES[effect].format(target=track.layout.bridge_target + 1))

        if effect is Effect.GOOSE:
            if position in visited:
                # Only reachable with a custom layout where a goose bounces onto itself.
                logger.warning("Goose chain loops at %d for %s, stopping there", position, player.name)
                result.cycle_detected = True
                break
            visited.add(position)
            continue
        if effect is Effect.BRIDGE:
            position = track.layout.bridge_target
        elif effect is Effect.MAZE:
            position = original
        elif effect is Effect.SKULL:
            position = 0
        break

    player.position = position
    result.end = position
    track.mark_occupied(position)
    track.clear_if_vacant(original, players)

    logger.debug("%s: %d -> %d (roll %d, effects %s)", player.name, original, position, roll,
                 [e.name for e in result.effects])
    sink.emit(f"New space is: {position + 1}")
    return result
