from typing import List

import pong_engine as engine
from pong_engine import Config


class Session:
    """Engine state plus the score history the dashboard charts are drawn from."""

    def __init__(self, cfg: Config):
        self.cfg = cfg
        self.state = engine.new_game(cfg)
        self.ticks: List[int] = [0]
        self.player: List[int] = [0]
        self.opponent: List[int] = [0]

    def step(self, n, target=None):
        """Advance n ticks. With no target the left paddle follows the ball."""
        for _ in range(n):
            if target is None:
                engine.set_player_target(self.state, engine.follow_ball(self.state))
            else:
                engine.set_player_target(self.state, target)
            engine.tick(self.state)
            self._record()
        return self.state

    def serve(self):
        engine.reset_ball(self.state, self.state.rng.choice([-1, 1]))

    def _record(self):
        # one entry per point, stamped with the tick it was scored on
        score = self.state.score
        if score.player != self.player[-1] or score.opponent != self.opponent[-1]:
            self.ticks.append(self.state.ticks)
            self.player.append(score.player)
            self.opponent.append(score.opponent)
