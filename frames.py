import numpy as np

from pong_engine import Snapshot

BG = (0, 0, 0)
WHITE = (255, 255, 255)

NET_START, NET_GAP, NET_DASH, NET_W = 10, 30, 15, 2


def _fill(img, x, y, w, h, color):
    # Clip a float rectangle to the image and paint it
    H, W = img.shape[:2]
    x0, y0 = max(0, int(round(x))), max(0, int(round(y)))
    x1, y1 = min(W, int(round(x + w))), min(H, int(round(y + h)))
    if x1 > x0 and y1 > y0:
        img[y0:y1, x0:x1] = color


def render_rgb(snap: Snapshot, scale=1):
    """Return an RGB image (H, W, 3) of the court for one snapshot."""
    W, H = int(snap.width), int(snap.height)
    img = np.zeros((H, W, 3), dtype=np.uint8)
    img[:] = BG
    # center net
    for y in range(NET_START, H, NET_GAP):
        _fill(img, W/2 - NET_W/2, y, NET_W, NET_DASH, WHITE)
    # paddles
    _fill(img, 0, snap.player_y, snap.paddle_w, snap.paddle_h, WHITE)
    _fill(img, W - snap.paddle_w, snap.opponent_y, snap.paddle_w, snap.paddle_h, WHITE)
    # ball
    _fill(img, snap.ball_x, snap.ball_y, snap.ball_size, snap.ball_size, WHITE)
    if scale != 1:
        img = np.repeat(np.repeat(img, scale, axis=0), scale, axis=1)
    return img
