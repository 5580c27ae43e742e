"""Dice sources and seeding."""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from goose_race.log import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)

DIE_FACES = 6


@dataclass(frozen=True)
class DiceRoll:
    """Two dice thrown together."""

    first: int
    second: int

    @property
    def total(self) -> int:
        return self.first + self.second

    def describe(self) -> str:
        return (
            f"\tPlayer rolled {self.first} and {self.second} "
            f"for a total of {self.total}."
        )


@runtime_checkable
class DiceSource(Protocol):
    """Anything that can throw a pair of dice."""

    def roll(self) -> DiceRoll: ...


@dataclass
class RandomDice:
    """Two independent uniform d6 from a private, seedable RNG."""

    seed: int | None = None
    _rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def roll(self) -> DiceRoll:
        result = DiceRoll(
            self._rng.randint(1, DIE_FACES),
            self._rng.randint(1, DIE_FACES),
        )
        logger.debug("Dice: %d + %d = %d", result.first, result.second, result.total)
        return result


def resolve_seed(text: str | None) -> int:
    """Parse a user-supplied seed; anything but a plain integer means wall-clock time."""
    if text is not None:
        try:
            return int(text.strip())
        except ValueError:
            pass
    seed = int(time.time())
    logger.debug("No usable seed in %r, using time %d", text, seed)
    return seed
