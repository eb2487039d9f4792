import pong_engine as engine
from pong_engine import Config
from session import Session


def test_new_session_starts_empty():
    session = Session(Config(seed=0))
    assert (session.ticks, session.player, session.opponent) == ([0], [0], [0])


def test_no_history_without_a_point():
    session = Session(Config(seed=0))
    session.step(10)
    assert session.state.ticks == 10
    assert session.ticks == [0]


def test_history_records_each_point_on_its_tick():
    cfg = Config(seed=0)
    session = Session(cfg)
    session.step(3000, target=0)

    # same game, one tick per call
    replay = Session(cfg)
    expected = [0]
    for _ in range(3000):
        before = replay.state.score.player + replay.state.score.opponent
        replay.step(1, target=0)
        if replay.state.score.player + replay.state.score.opponent != before:
            expected.append(replay.state.ticks)

    assert len(expected) > 1
    assert session.ticks == expected
    assert session.player[-1] == session.state.score.player
    assert session.opponent[-1] == session.state.score.opponent
    totals = [p + o for p, o in zip(session.player, session.opponent)]
    assert totals == list(range(len(totals)))


def test_slider_target_pins_paddle():
    session = Session(Config(seed=0))
    session.step(1, target=1e6)
    assert session.state.player.y == 420


def test_autoplay_follows_ball():
    session = Session(Config(seed=0))
    session.state.ball.y = 50
    start = session.state.player.y
    session.step(1)
    assert session.state.player.y == start - 5


def test_serve_recenters_ball():
    session = Session(Config(seed=0))
    session.step(20)
    session.serve()
    assert (session.state.ball.x, session.state.ball.y) == (392, 242)
    assert abs(session.state.ball.vx) == engine.SERVE_SPEED
