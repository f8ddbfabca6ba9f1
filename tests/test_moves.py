# tests/test_moves.py
import random

from crystalmaze.engine import messages
from crystalmaze.engine.moves import EAST, NORTH, SOUTH, WEST, MoveResult, attempt_move
from crystalmaze.engine.state import create_session
from crystalmaze.mapgen.generator import Thresholds
from crystalmaze.tiles import BACKTRACK, EXIT, NORTH_ENTRY, SAFE, SEQUENCE, THIRD_EXIT, WALL


def pinned(archetype=THIRD_EXIT, seed=21, **thresholds):
    """Session whose every tile has one archetype. Default never hardens."""
    s = create_session(seed)
    for t in s.grid.tiles():
        t.archetype = archetype
    base = dict(third_exit=99, frequency_window=6, frequency_count=3, backtrack_window=4)
    base.update(thresholds)
    s.thresholds = Thresholds(**base)
    return s


def snapshot(s):
    tiles = [(t.state, t.leave_count, t.visits, t.last_entry) for t in s.grid.tiles()]
    return (
        tiles,
        s.player,
        s.move_count,
        s.crystallized,
        list(s.recent_directions),
        list(s.recent_archetypes),
        list(s.recent_positions),
    )


def test_no_session_is_a_noop():
    assert attempt_move(None, *EAST) == MoveResult(moved=False, message="")


def test_non_unit_direction_is_a_noop():
    s = pinned()
    before = snapshot(s)
    for dx, dy in ((1, 1), (0, 0), (2, 0), (0, -3)):
        res = attempt_move(s, dx, dy)
        assert res == MoveResult(moved=False, message=messages.IN_PROGRESS)
    assert snapshot(s) == before
    assert s.message == messages.IN_PROGRESS


def test_accepted_move_updates_everything():
    s = pinned()
    res = attempt_move(s, *EAST)
    assert res.moved and not res.crystallized
    assert res.message == messages.IN_PROGRESS
    assert s.player == (2, 1)
    assert s.move_count == 1
    start, dest = s.grid.get(1, 1), s.grid.get(2, 1)
    assert start.leave_count == 1
    assert dest.visits == 1
    assert dest.last_entry == "east"
    assert dest.state == SAFE
    assert list(s.recent_directions) == ["east"]
    assert list(s.recent_archetypes) == [THIRD_EXIT]
    assert list(s.recent_positions) == [(2, 1)]


def test_out_of_bounds_is_silent():
    s = pinned()
    attempt_move(s, *WEST)  # onto the rim at (0,1)
    assert s.player == (0, 1)
    before = snapshot(s)
    res = attempt_move(s, *WEST)
    assert not res.moved
    assert res.message == messages.IN_PROGRESS
    assert res.flashes == []
    assert snapshot(s) == before


def test_wall_blocks_without_side_effects():
    s = pinned()
    s.grid.get(2, 1).state = WALL
    before = snapshot(s)
    res = attempt_move(s, *EAST)
    assert not res.moved
    assert res.message == messages.BLOCKED
    assert s.message == messages.BLOCKED
    assert snapshot(s) == before


def test_third_exit_hardens_on_the_nth_leave():
    s = pinned(third_exit=3)
    for step in (EAST, WEST, EAST, WEST):
        assert not attempt_move(s, *step).crystallized
    res = attempt_move(s, *EAST)  # third time leaving (1,1)
    assert res.crystallized
    assert s.grid.get(1, 1).state == WALL
    assert s.crystallized == 1
    assert not attempt_move(s, *WEST).moved


def test_sequence_hardens_on_second_repeat():
    s = pinned()
    s.grid.get(2, 2).archetype = SEQUENCE
    s.grid.get(3, 2).archetype = SEQUENCE
    attempt_move(s, *SOUTH)  # (1,2)
    attempt_move(s, *EAST)   # (2,2)  history S,E
    attempt_move(s, *EAST)   # leave (2,2) with S,E -> stays
    assert s.grid.get(2, 2).state == SAFE
    res = attempt_move(s, *EAST)  # leave (3,2) with E,E -> hardens
    assert res.crystallized
    assert s.grid.get(3, 2).state == WALL
    assert s.player == (4, 2)


def test_first_move_off_a_sequence_tile_hardens_it():
    s = pinned(SEQUENCE)
    res = attempt_move(s, *EAST)
    assert res.crystallized
    assert s.grid.get(1, 1).state == WALL


def test_backtrack_hardens_on_quick_return():
    s = pinned()
    s.grid.get(1, 1).archetype = BACKTRACK
    attempt_move(s, *EAST)  # (1,1) never entered yet: stays
    assert s.grid.get(1, 1).state == SAFE
    attempt_move(s, *WEST)  # back onto (1,1)
    res = attempt_move(s, *EAST)
    assert res.crystallized
    assert s.grid.get(1, 1).state == WALL


def test_north_entry_trails_one_step_behind():
    s = pinned(NORTH_ENTRY)
    s.player = (3, 3)
    res = attempt_move(s, *NORTH)  # step north into (3,2)
    assert not res.crystallized
    assert s.grid.get(3, 2).state == SAFE
    res = attempt_move(s, *EAST)   # now (3,2) is left behind
    assert res.crystallized
    assert s.grid.get(3, 2).state == WALL
    assert s.grid.get(4, 2).state == SAFE


def test_destination_is_never_evaluated():
    s = pinned(NORTH_ENTRY)
    s.player = (3, 3)
    attempt_move(s, *NORTH)
    # (3,2) has last_entry == "north" but is only judged when left.
    assert s.grid.get(3, 2).last_entry == "north"
    assert s.grid.get(3, 2).state == SAFE


def test_histories_are_capped_fifo():
    s = pinned()
    for i in range(30):
        attempt_move(s, *(EAST if i % 2 == 0 else WEST))
    assert len(s.recent_directions) == 12
    assert len(s.recent_archetypes) == 20
    assert len(s.recent_positions) == 14
    assert s.recent_positions[-1] == s.player == (1, 1)
    assert s.recent_directions[0] == "east"
    assert s.move_count == 30


def test_reaching_exit_wins_and_skips_liveness():
    s = pinned()
    ex, ey = s.exit
    s.player = (ex, ey + 1)
    s.grid.get(ex, ey + 1).archetype = SEQUENCE  # hardens behind us
    for x, y in ((ex - 1, ey), (ex + 1, ey), (ex, ey - 1)):
        s.grid.get(x, y).state = WALL
    res = attempt_move(s, *NORTH)
    assert res.moved
    assert res.message == messages.WON
    assert res.flashes == [messages.CRYSTALLIZED, messages.WON]
    assert s.won
    assert s.grid.at(s.exit).state == EXIT


def test_exit_tile_never_hardens():
    s = pinned(NORTH_ENTRY)
    ex, ey = s.exit
    s.player = (ex, ey + 1)
    attempt_move(s, *NORTH)
    assert s.grid.at(s.exit).last_entry == "north"
    res = attempt_move(s, *NORTH)  # leave the exit
    assert res.moved and not res.crystallized
    assert s.grid.at(s.exit).state == EXIT
    assert s.crystallized == 0
    assert not s.won


def test_random_walk_invariants():
    for seed in range(12):
        s = create_session(seed)
        walk = random.Random(seed)
        walls = set()
        for _ in range(250):
            dx, dy = walk.choice([NORTH, EAST, SOUTH, WEST])
            nx, ny = s.player[0] + dx, s.player[1] + dy
            into_wall = s.grid.in_bounds(nx, ny) and s.grid.get(nx, ny).state == WALL
            before = snapshot(s)
            count = s.move_count

            res = attempt_move(s, dx, dy)

            if into_wall:
                assert not res.moved
                assert snapshot(s) == before
            assert s.move_count == count + (1 if res.moved else 0)
            now = {t.pos for t in s.grid.tiles() if t.state == WALL}
            assert walls <= now
            walls = now
            assert s.grid.at(s.exit).state == EXIT
            assert s.grid.at(s.player).state != WALL
            assert s.crystallized == len(walls)


def test_silent_noops_keep_the_last_flashes():
    s = pinned()
    attempt_move(s, *WEST)  # (0,1)
    s.grid.get(1, 1).state = WALL
    attempt_move(s, *EAST)
    assert s.flashes == [messages.BLOCKED]
    assert not attempt_move(s, *WEST).moved  # off-grid
    assert not attempt_move(s, 1, 1).moved   # not a unit step
    assert s.flashes == [messages.BLOCKED]
    assert s.message == messages.BLOCKED
