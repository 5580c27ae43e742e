"""Generate a histogram of game lengths from a simulation batch."""

from __future__ import annotations

import matplotlib
matplotlib.use("Agg")  # non-interactive backend

import matplotlib.pyplot as plt


def make_turns_chart(
    turn_counts: list[int],
    output_path: str = "game_lengths.png",
    title: str = "Game of the Goose — Game Length",
) -> str:
    """Create a bar chart of how many games finished after each turn count.

    Returns the path to the saved PNG.
    """
    if not turn_counts:
        raise ValueError("No finished games to chart.")

    counts: dict[int, int] = {}
    for turns in turn_counts:
        counts[turns] = counts.get(turns, 0) + 1
    lengths = sorted(counts)
    frequencies = [counts[n] for n in lengths]

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.bar(lengths, frequencies, color="#4A90D9", edgecolor="white")

    mean = sum(turn_counts) / len(turn_counts)
    ax.axvline(mean, color="#D94A4A", linestyle="--", label=f"mean {mean:.1f}")

    ax.set_xlabel("Turns until a player reached the last space")
    ax.set_ylabel("Games")
    ax.set_title(title, fontsize=14, fontweight="bold")
    ax.legend()

    plt.tight_layout()
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    return output_path
