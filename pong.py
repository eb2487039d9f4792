"""
Pygame front end for the Pong engine.

Usage:
- python pong.py                       # play, mouse or touch moves the left paddle
- python pong.py --headless --ticks 5000   # run the engine without a window

Keys: S toggles the score, R forces a serve, ESC quits.
"""
import argparse
import sys

import pygame

import pong_engine as engine
from pong_engine import Config

FONT_NAME = "arial"
BG = (0, 0, 0)
WHITE = (255, 255, 255)
LETTERBOX = (12, 12, 16)


def view_rect(window_size, arena_w, arena_h):
    """Largest centered rect inside the window that keeps the arena aspect ratio."""
    sw, sh = window_size
    scale = min(sw / arena_w, sh / arena_h)
    vw, vh = max(1, int(arena_w * scale)), max(1, int(arena_h * scale))
    return pygame.Rect((sw - vw) // 2, (sh - vh) // 2, vw, vh)


def window_to_arena_y(y, view, arena_h):
    # Scale display pixels back to arena units; the engine clamps the result
    return (y - view.y) * (arena_h / view.h)


def finger_to_arena_y(norm_y, window_size, view, arena_h):
    # Touch events carry y normalized to the window height
    return window_to_arena_y(norm_y * window_size[1], view, arena_h)


def draw_net(surface, snap):
    x = snap.width / 2 - 1
    y = 10
    while y < snap.height:
        pygame.draw.rect(surface, WHITE, (x, y, 2, 15))
        y += 30


def draw(surface, snap, font=None):
    surface.fill(BG)
    draw_net(surface, snap)
    pygame.draw.rect(surface, WHITE, (0, snap.player_y, snap.paddle_w, snap.paddle_h))
    pygame.draw.rect(surface, WHITE, (snap.width - snap.paddle_w, snap.opponent_y, snap.paddle_w, snap.paddle_h))
    pygame.draw.rect(surface, WHITE, (snap.ball_x, snap.ball_y, snap.ball_size, snap.ball_size))
    if font is not None:
        left = font.render(str(snap.player_score), True, WHITE)
        right = font.render(str(snap.opponent_score), True, WHITE)
        surface.blit(left, (snap.width / 2 - 50, 20))
        surface.blit(right, (snap.width / 2 + 30, 20))


def game(cfg: Config):
    pygame.init()
    try:
        pygame.display.set_caption("Pong")
        display = pygame.display.set_mode((int(cfg.width), int(cfg.height)), pygame.RESIZABLE)
        canvas = pygame.Surface((int(cfg.width), int(cfg.height)))
        clock = pygame.time.Clock()
        font = pygame.font.SysFont(FONT_NAME, 32)

        state = engine.new_game(cfg)
        show_score = cfg.show_score
        view = view_rect(display.get_size(), cfg.width, cfg.height)

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    display = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
                    view = view_rect(display.get_size(), cfg.width, cfg.height)
                elif event.type == pygame.MOUSEMOTION:
                    engine.set_player_target(state, window_to_arena_y(event.pos[1], view, cfg.height))
                elif event.type == pygame.FINGERMOTION:
                    y = finger_to_arena_y(event.y, display.get_size(), view, cfg.height)
                    engine.set_player_target(state, y)
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_s:
                        show_score = not show_score
                    elif event.key == pygame.K_r:
                        engine.reset_ball(state, state.rng.choice([-1, 1]))

            engine.tick(state)
            snap = engine.snapshot(state)

            draw(canvas, snap, font if show_score else None)
            display.fill(LETTERBOX)
            display.blit(pygame.transform.smoothscale(canvas, view.size), view.topleft)
            pygame.display.flip()
            clock.tick(cfg.fps)
    finally:
        pygame.quit()

    print(f"Final score {state.score.player} : {state.score.opponent}")


def headless(cfg: Config, ticks, report_every=1000):
    """Run the engine without a window; the left paddle tracks the ball."""
    state = engine.new_game(cfg)
    for _ in range(ticks):
        engine.set_player_target(state, engine.follow_ball(state))
        engine.tick(state)
        if report_every and state.ticks % report_every == 0:
            print(f"Tick {state.ticks}: score {state.score.player} : {state.score.opponent}")
    return state


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Pong: mouse/touch versus a tracking paddle")
    parser.add_argument("--width", type=float, default=Config.width)
    parser.add_argument("--height", type=float, default=Config.height)
    parser.add_argument("--paddle-w", type=float, default=Config.paddle_w)
    parser.add_argument("--paddle-h", type=float, default=Config.paddle_h)
    parser.add_argument("--ball-size", type=float, default=Config.ball_size)
    parser.add_argument("--fps", type=int, default=Config.fps)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--no-score", action="store_true", help="start with the score hidden")
    parser.add_argument("--headless", action="store_true")
    parser.add_argument("--ticks", type=int, default=10_000)
    parser.add_argument("--report-every", type=int, default=1000)
    args = parser.parse_args(argv)

    if min(args.width, args.height, args.paddle_w, args.paddle_h, args.ball_size) <= 0:
        parser.error("sizes must be positive")
    if args.paddle_h > args.height or args.ball_size > args.height:
        parser.error("paddle and ball must fit inside the arena height")
    if 2 * args.paddle_w + args.ball_size > args.width:
        parser.error("arena too narrow for two paddles and the ball")
    if args.fps <= 0:
        parser.error("--fps must be positive")
    return args


def config_from_args(args) -> Config:
    return Config(width=args.width, height=args.height, paddle_w=args.paddle_w,
                  paddle_h=args.paddle_h, ball_size=args.ball_size, fps=args.fps,
                  seed=args.seed, show_score=not args.no_score)


def main(argv=None):
    args = parse_args(argv)
    cfg = config_from_args(args)
    if args.headless:
        state = headless(cfg, args.ticks, args.report_every)
        print(f"Final score {state.score.player} : {state.score.opponent} after {state.ticks} ticks")
    else:
        game(cfg)


if __name__ == "__main__":
    main(sys.argv[1:])
