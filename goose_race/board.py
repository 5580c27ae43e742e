"""Board layout, space effects and occupancy for the Game of the Goose."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable

from goose_race.log import LOGGER_NAME

if TYPE_CHECKING:
    from goose_race.players import Player

logger = logging.getLogger(LOGGER_NAME)

# Reference configuration. Positions are 1-based, as printed on the board.
NUM_SPACES = 24
GOOSE_SPACES: tuple[int, ...] = (7, 11, 15)
BRIDGE_SPACES: tuple[int, ...] = (6,)
MAZE_SPACES: tuple[int, ...] = (13, 30)
SKULL_SPACES: tuple[int, ...] = (23,)
BRIDGE_TARGET = 11  # 0-based, i.e. space 12
ROW_WIDTH = 12

# Largest total two dice can show. A shorter board could bounce a token
# below the start space.
MAX_ROLL = 12


class BoardConfigError(ValueError):
    """The special-space layout is inconsistent."""


class Effect(enum.Enum):
    """What happens when a token lands on a space."""

    NONE = ""
    GOOSE = "+"
    BRIDGE = "*"
    MAZE = "-"
    SKULL = "!"

    @property
    def symbol(self) -> str:
        return self.value


@dataclass(frozen=True)
class BoardLayout:
    """Static board configuration; effect lists use 1-based positions."""

    length: int = NUM_SPACES
    goose: tuple[int, ...] = GOOSE_SPACES
    bridge: tuple[int, ...] = BRIDGE_SPACES
    maze: tuple[int, ...] = MAZE_SPACES
    skull: tuple[int, ...] = SKULL_SPACES
    bridge_target: int = BRIDGE_TARGET
    row_width: int = ROW_WIDTH

    def __post_init__(self) -> None:
        if self.length < MAX_ROLL + 1:
            raise BoardConfigError(
                f"Board needs at least {MAX_ROLL + 1} spaces, got {self.length}.",
            )
        if not 0 <= self.bridge_target < self.length:
            raise BoardConfigError(
                f"Bridge target {self.bridge_target} is off the board.",
            )

        seen: dict[int, Effect] = {}
        for effect, spaces in self.effect_lists():
            for space in spaces:
                if space in seen:
                    raise BoardConfigError(
                        f"Space {space} is both {seen[space].name} and {effect.name}.",
                    )
                seen[space] = effect
                if not 1 <= space <= self.length:
                    logger.warning(
                        "Ignoring %s space %d: board only has %d spaces",
                        effect.name, space, self.length,
                    )

    def effect_lists(self) -> Iterable[tuple[Effect, tuple[int, ...]]]:
        return (
            (Effect.GOOSE, self.goose),
            (Effect.BRIDGE, self.bridge),
            (Effect.MAZE, self.maze),
            (Effect.SKULL, self.skull),
        )

    @property
    def terminal(self) -> int:
        return self.length - 1


DEFAULT_LAYOUT = BoardLayout()


def special_effect_at(position: int, layout: BoardLayout = DEFAULT_LAYOUT) -> Effect:
    """Effect category of the 0-based *position*."""
    for effect, spaces in layout.effect_lists():
        if position + 1 in spaces:
            return effect
    return Effect.NONE


# ── Track state ─────────────────────────────────────────────────────

@dataclass
class Space:
    effect: Effect = Effect.NONE
    occupied: bool = False


@dataclass
class Track:
    """Mutable board for one game round: effects plus occupancy flags."""

    layout: BoardLayout = DEFAULT_LAYOUT
    spaces: list[Space] = field(default_factory=list)

    @property
    def length(self) -> int:
        return len(self.spaces)

    @property
    def terminal(self) -> int:
        return self.length - 1

    def effect_at(self, position: int) -> Effect:
        return self.spaces[position].effect

    def mark_occupied(self, position: int) -> None:
        self.spaces[position].occupied = True

    def clear_if_vacant(self, position: int, players: Iterable[Player]) -> None:
        """Clear *position* unless some player still stands on it."""
        if any(p.position == position for p in players):
            return
        self.spaces[position].occupied = False

    def is_occupied(self, position: int) -> bool:
        return self.spaces[position].occupied


def reset_board(layout: BoardLayout = DEFAULT_LAYOUT) -> Track:
    """Fresh track with every effect recomputed and nothing occupied."""
    spaces = [
        Space(effect=special_effect_at(position, layout))
        for position in range(layout.length)
    ]
    return Track(layout=layout, spaces=spaces)


def reset_game(players: list[Player], layout: BoardLayout = DEFAULT_LAYOUT) -> Track:
    """Start a new round: rebuild the board and put every token on start."""
    track = reset_board(layout)
    for player in players:
        player.position = 0
    track.mark_occupied(0)
    logger.debug("Board reset: %d spaces, %d players", track.length, len(players))
    return track
