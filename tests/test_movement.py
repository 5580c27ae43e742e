"""Tests for goose_race.movement (bounce-back and space effects)."""

from goose_race.board import BoardLayout, Effect, reset_game
from goose_race.dice import RandomDice
from goose_race.movement import reflect, resolve_move
from goose_race.players import default_players
from goose_race.sink import ListSink


def _setup(*positions: int):
    players = default_players()
    track = reset_game(players)
    for player, position in zip(players, positions):
        player.position = position
        track.mark_occupied(position)
    track.clear_if_vacant(0, players)
    return track, players


# ── reflect ──────────────────────────────────────────────────────────

def test_reflect_inside_track_is_identity():
    assert reflect(10, 23) == 10
    assert reflect(23, 23) == 23


def test_reflect_bounces_by_excess():
    assert reflect(27, 23) == 19
    assert reflect(24, 23) == 22


# ── plain moves ──────────────────────────────────────────────────────

def test_plain_move_adds_roll():
    track, players = _setup(0, 0)
    sink = ListSink()

    result = resolve_move(track, players, players[0], 3, sink)

    assert result.end == 3
    assert players[0].position == 3
    assert result.effects == []
    assert not result.bounced
    assert sink.lines == ["New space is: 4"]


def test_every_plain_landing_is_exact():
    for start in range(0, 20):
        for roll in range(2, 13):
            target = start + roll
            track, players = _setup(start, 0)
            if target > 23 or track.effect_at(target) is not Effect.NONE:
                continue
            result = resolve_move(track, players, players[0], roll)
            assert result.end == target, (start, roll)


def test_exact_landing_on_terminal():
    track, players = _setup(15, 0)
    result = resolve_move(track, players, players[0], 8)
    assert result.end == 23
    assert track.is_occupied(23)


# ── overshoot ────────────────────────────────────────────────────────

def test_overshoot_reflects_back():
    """20 + 7 = 27 is 4 past index 23, so the token bounces to 19."""
    track, players = _setup(20, 0)
    result = resolve_move(track, players, players[0], 7)
    assert result.end == 19
    assert result.bounced


def test_bounce_onto_skull_resets():
    """21 + 3 = 24 bounces to 22, which is the skull."""
    track, players = _setup(21, 0)
    result = resolve_move(track, players, players[0], 3)
    assert result.effects == [Effect.SKULL]
    assert result.end == 0


# ── goose ────────────────────────────────────────────────────────────

def test_goose_repeats_same_roll():
    track, players = _setup(3, 0)
    sink = ListSink()

    result = resolve_move(track, players, players[0], 3, sink)  # 6 is a goose

    assert result.effects == [Effect.GOOSE]
    assert result.end == 9
    assert "Player landed on a goose! Moving the roll amount again!" in sink.lines


def test_consecutive_geese_all_move_again():
    """2 + 4 = 6 (goose) -> 10 (goose) -> 14 (goose) -> 18."""
    track, players = _setup(2, 0)
    result = resolve_move(track, players, players[0], 4)
    assert result.effects == [Effect.GOOSE, Effect.GOOSE, Effect.GOOSE]
    assert result.end == 18


def test_goose_into_maze_reverts_whole_move():
    """0 + 6 = 6 (goose) -> 12 (maze) -> back to 0."""
    track, players = _setup(0, 0)
    result = resolve_move(track, players, players[0], 6)
    assert result.effects == [Effect.GOOSE, Effect.MAZE]
    assert result.end == 0


def test_goose_cycle_stops():
    """A goose one short of the end bounces back onto itself with a roll of 2."""
    layout = BoardLayout(length=13, goose=(12,), bridge=(), maze=(), skull=(), bridge_target=5)
    players = default_players()
    track = reset_game(players, layout)
    players[0].position = 9
    result = resolve_move(track, players, players[0], 2)

    assert result.cycle_detected
    assert result.end == 11
    assert result.effects == [Effect.GOOSE, Effect.GOOSE]


# ── bridge / maze / skull ────────────────────────────────────────────

def test_bridge_jumps_to_space_12():
    for start, roll in ((0, 5), (2, 3), (3, 2)):
        track, players = _setup(start, 0)
        sink = ListSink()
        result = resolve_move(track, players, players[0], roll, sink)
        assert result.end == 11
        assert result.effects == [Effect.BRIDGE]
        assert "Player landed on a bridge! Moving to space 12!" in sink.lines


def test_maze_cancels_move():
    for start, roll in ((8, 4), (3, 9), (1, 11)):
        track, players = _setup(start, 0)
        sink = ListSink()
        result = resolve_move(track, players, players[0], roll, sink)
        assert result.end == start
        assert result.effects == [Effect.MAZE]
        assert "Player landed on a maze! No movement this round!" in sink.lines


def test_skull_sends_back_to_start():
    track, players = _setup(17, 9)
    sink = ListSink()
    result = resolve_move(track, players, players[0], 5, sink)
    assert result.end == 0
    assert players[0].position == 0
    assert "Player landed on a skull! Moving back to start!" in sink.lines
    assert sink.lines[-1] == "New space is: 1"


# ── occupancy bookkeeping ────────────────────────────────────────────

def test_start_stays_occupied_while_other_player_there():
    track, players = _setup(0, 0)
    resolve_move(track, players, players[0], 3)
    assert track.is_occupied(0)
    assert track.is_occupied(3)

    resolve_move(track, players, players[1], 3)
    assert not track.is_occupied(0)
    assert track.is_occupied(3)


def test_leaving_shared_space_keeps_it_occupied():
    track, players = _setup(3, 3)
    resolve_move(track, players, players[0], 4)  # 7 is plain
    assert track.is_occupied(3)
    assert track.is_occupied(7)


def test_maze_keeps_original_space_occupied():
    track, players = _setup(8, 0)
    resolve_move(track, players, players[0], 4)
    assert track.is_occupied(8)
    assert not track.is_occupied(12)


def test_occupancy_invariant_over_random_moves():
    players = default_players()
    track = reset_game(players)
    dice = RandomDice(seed=2021)

    for turn in range(500):
        mover = players[turn % 2]
        resolve_move(track, players, mover, dice.roll().total)
        positions = {p.position for p in players}
        for position in range(track.length):
            assert track.is_occupied(position) == (position in positions)
        assert all(0 <= p.position <= track.terminal for p in players)
