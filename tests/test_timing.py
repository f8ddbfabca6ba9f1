from crystalmaze.engine.moves import EAST, attempt_move
from crystalmaze.engine.state import create_session
from crystalmaze.engine.timing import tick, tick_period_ms, trigger_reveal


def gameplay_view(s):
    return (
        s.grid.state_matrix(),
        s.player,
        s.move_count,
        s.crystallized,
        s.message,
        list(s.recent_directions),
    )


def test_reveal_countdown():
    s = create_session(4)
    trigger_reveal(s)
    assert s.reveal_timer == 60
    for _ in range(59):
        tick(s)
    assert s.reveal_timer == 1
    tick(s)
    tick(s)
    assert s.reveal_timer == 0


def test_tile_glow_decays_to_zero():
    s = create_session(4)
    t = s.grid.get(5, 5)
    t.reveal = 1.0
    tick(s)
    assert abs(t.reveal - 0.98) < 1e-9
    for _ in range(60):
        tick(s)
    assert t.reveal == 0.0


def test_tick_leaves_gameplay_alone():
    s = create_session(4)
    attempt_move(s, *EAST)
    trigger_reveal(s)
    before = gameplay_view(s)
    for _ in range(100):
        tick(s)
    assert gameplay_view(s) == before


def test_moves_do_not_touch_the_reveal_timer():
    s = create_session(4)
    trigger_reveal(s)
    attempt_move(s, *EAST)
    assert s.reveal_timer == 60


def test_no_session_is_fine():
    tick(None)
    trigger_reveal(None)


def test_tick_period():
    assert tick_period_ms(create_session(4)) == 33
