"""CLI entry point: python -m goose_race {play,simulate}."""

from __future__ import annotations

import argparse
import sys

from goose_race.chart import make_turns_chart
from goose_race.console import EnterPrompter, prompt_for_play, prompt_for_seed
from goose_race.dice import RandomDice
from goose_race.game import GameRunner
from goose_race.log import LOG_LEVEL_ENV, configure_logging
from goose_race.players import default_players
from goose_race.simulate import simulate
from goose_race.sink import ConsoleSink


# ── play ─────────────────────────────────────────────────────────────

def cmd_play(args: argparse.Namespace) -> None:
    """Interactive play: seed once, then play rounds until the user quits."""
    sink = ConsoleSink()
    seed = args.seed if args.seed is not None else prompt_for_seed(sink)
    dice = RandomDice(seed)
    players = default_players()

    while prompt_for_play(sink):
        runner = GameRunner(
            players=players,
            dice=dice,
            sink=sink,
            prompter=EnterPrompter(auto=args.auto),
        )
        runner.play()


# ── simulate ─────────────────────────────────────────────────────────

def cmd_simulate(args: argparse.Namespace) -> None:
    """Play computer-only games and print a summary."""
    if args.games < 1:
        print("--games must be at least 1.", file=sys.stderr)
        sys.exit(1)

    summary = simulate(args.games, seed=args.seed, max_turns=args.max_turns)

    print(f"\nSimulated {summary.games} games")
    print("=" * 40)
    for seat in sorted(summary.wins):
        print(f"  Seat {seat + 1} wins {summary.wins[seat]:>10d}")
    print(f"  Unfinished         {summary.unfinished:>6d}")
    print(f"  Mean turns         {summary.mean_turns:>9.1f}")
    print(f"  First player wins  {summary.first_player_win_rate:>9.1%}")

    if args.chart:
        if not summary.turn_counts:
            print("No finished games to chart.", file=sys.stderr)
            sys.exit(1)
        out = make_turns_chart(summary.turn_counts, output_path=args.chart)
        print(f"Chart saved to {out}")


# ── main ─────────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="goose_race",
        description="The Game of the Goose",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default from ${LOG_LEVEL_ENV}, else WARNING)",
    )
    sub = parser.add_subparsers(dest="command")

    p_play = sub.add_parser("play", help="Play against the computer")
    p_play.add_argument("--seed", type=int, help="Dice seed (prompted for if omitted)")
    p_play.add_argument("--auto", action="store_true", help="Don't wait for <Enter> on computer turns")

    p_sim = sub.add_parser("simulate", help="Simulate computer-only games")
    p_sim.add_argument("--games", type=int, default=1000, help="Number of games (default 1000)")
    p_sim.add_argument("--seed", type=int, help="Dice seed for a reproducible batch")
    p_sim.add_argument("--max-turns", type=int, default=1000, help="Safety cap per game")
    p_sim.add_argument("--chart", "-o", help="Write a game-length histogram to this PNG path")

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.command == "play":
        cmd_play(args)
    elif args.command == "simulate":
        cmd_simulate(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
