"""Line-based prompting for interactive play."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from goose_race.dice import resolve_seed
from goose_race.players import Player
from goose_race.render import PAGE_BREAK
from goose_race.sink import StatusSink

InputFn = Callable[[str], str]

MENU = (
    "*** Welcome to The Game of the Goose! ***\n"
    "  1) To play, enter 'P' or 'p'\n"
    "  2) To quit, enter 'Q' or 'q'\n"
    "Please select an option: "
)
SEED_PROMPT = (
    "Enter a seed for the random number generator\n"
    "(invalid input interpreted as the current time): "
)


def _read(input_fn: InputFn | None, prompt: str) -> str | None:
    """One line of input, or None once the input stream is exhausted."""
    try:
        return (input_fn or input)(prompt)
    except EOFError:
        return None


@dataclass
class EnterPrompter:
    """Blocks until the user presses Enter. Computer turns can be skipped."""

    input_fn: InputFn | None = None
    auto: bool = False

    def __call__(self, player: Player, message: str) -> None:
        if self.auto and player.is_computer:
            return
        _read(self.input_fn, message)


def parse_menu_choice(text: str | None) -> bool | None:
    """True for play, False for quit, None for anything unrecognised."""
    if not text:
        return None
    choice = text.strip()[:1]
    if choice in ("P", "p"):
        return True
    if choice in ("Q", "q"):
        return False
    return None


def prompt_for_play(sink: StatusSink, input_fn: InputFn | None = None) -> bool:
    """Show the menu until the user picks play or quit. End of input means quit."""
    while True:
        text = _read(input_fn, MENU)
        if text is None:
            sink.emit(PAGE_BREAK)
            return False
        choice = parse_menu_choice(text)
        if choice is not None:
            sink.emit(PAGE_BREAK)
            return choice
        sink.emit("")
        sink.emit("Selection was invalid. Try again.")
        sink.emit("")


def prompt_for_seed(sink: StatusSink, input_fn: InputFn | None = None) -> int:
    seed = resolve_seed(_read(input_fn, SEED_PROMPT))
    sink.emit(PAGE_BREAK)
    return seed
