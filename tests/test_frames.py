import numpy as np

import pong_engine as engine
from frames import render_rgb
from pong_engine import Arena

WHITE = [255, 255, 255]
BLACK = [0, 0, 0]


def snap_at(**changes):
    state = engine.initialize(Arena(800, 500), 12, 80, 16, seed=0)
    for name, value in changes.items():
        obj, attr = name.split("_", 1)
        setattr(getattr(state, obj), attr, value)
    return engine.snapshot(state)


def test_court_layout():
    img = render_rgb(snap_at())
    assert img.shape == (500, 800, 3)
    assert img.dtype == np.uint8
    assert img[250, 5].tolist() == WHITE      # player paddle
    assert img[250, 794].tolist() == WHITE    # opponent paddle
    assert img[245, 395].tolist() == WHITE    # ball
    assert img[100, 200].tolist() == BLACK
    assert img[205, 5].tolist() == BLACK      # just above the player paddle


def test_net_dashes():
    img = render_rgb(snap_at(ball_x=100, ball_y=300))
    assert img[10, 399].tolist() == WHITE
    assert img[24, 400].tolist() == WHITE
    assert img[30, 399].tolist() == BLACK
    assert img[40, 399].tolist() == WHITE
    assert img[10, 402].tolist() == BLACK


def test_ball_partly_outside_is_clipped():
    img = render_rgb(snap_at(ball_x=-10, ball_y=490))
    assert img[495, 2].tolist() == WHITE
    assert img.shape == (500, 800, 3)


def test_scale():
    img = render_rgb(snap_at(), scale=2)
    assert img.shape == (1000, 1600, 3)
    assert img[500, 10].tolist() == WHITE
