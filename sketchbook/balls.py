"""Bouncing balls: a field of many circles, clickable balls and keyed stars."""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass

from sketchbook.canvas import Color, Polyline, Sketch

logger = logging.getLogger(__name__)


@dataclass
class Particle:
    """One ball of a BouncingField, in whole-pixel units."""

    x: int
    y: int
    vx: int
    vy: int
    diameter: int
    gray: int


class BouncingField(Sketch):
    """Many gray circles bouncing off the window edges."""

    title = "300balls"

    def __init__(self, width=1024, height=768, rng=None, count=300):
        super().__init__(width, height, rng)
        if count < 0:
            raise ValueError("count must not be negative")
        r = self.rng
        self.particles = [
            Particle(
                x=int(r.uniform(0, width)),
                y=int(r.uniform(0, height)),
                vx=int(r.uniform(-2, 2)),
                vy=int(r.uniform(-2, 2)),
                diameter=int(r.uniform(10, 30)),
                gray=int(r.uniform(100, 200)),
            )
            for _ in range(count)
        ]
        self.background = Color(255, 255, 255, 1)
        self.background_auto = True
        self.frame_rate = 60

    def update(self) -> None:
        for p in self.particles:
            p.x += p.vx
            p.y += p.vy
            if p.y > self.height or p.y < 0:
                p.vy = -p.vy
            if p.x > self.width or p.x < 0:
                p.vx = -p.vx

    def draw(self, canvas) -> None:
        for p in self.particles:
            canvas.set_color(p.gray)
            canvas.draw_circle(p.x, p.y, p.diameter)


class Ball:
    """A gray ball with a random velocity that bounces inside the window."""

    def __init__(self, x=None, y=None, *, width=1024, height=768, rng=None, size=10):
        rng = rng if rng is not None else random.Random()
        if (x is None) != (y is None):
            raise TypeError("give both x and y, or neither")
        if x is None:
            x = rng.uniform(0, width // 2)
            y = rng.uniform(0, height // 2)
        self.x = float(x)
        self.y = float(y)
        self.vx = rng.uniform(-3, 3)
        self.vy = rng.uniform(-3, 3)
        self.gray = min(int(rng.uniform(0, 256)), 255)
        self.size = size

    def update(self, width, height) -> None:
        new_x = int(self.x + self.vx)
        if 0 < new_x < width:
            self.x = float(new_x)
            logger.debug("updatex: %s", self.x)
        else:
            self.vx = -self.vx
            self.x += self.vx

        new_y = int(self.y + self.vy)
        if 0 < new_y < height:
            self.y = float(new_y)
        else:
            self.vy = -self.vy
            self.y += self.vy

    def display(self, canvas) -> None:
        canvas.set_color(self.gray)
        canvas.draw_circle(self.x, self.y, self.size)
        logger.debug("speed: %s %s", self.vx, self.vy)


class BallSketch(Sketch):
    """Each mouse release drops a new bouncing ball where it happened."""

    title = "ballObjects"

    def __init__(self, width=1024, height=768, rng=None):
        super().__init__(width, height, rng)
        self.my_ball: Ball | None = None
        self.balls: list[Ball] = []

    def _ball(self, x=None, y=None) -> Ball:
        return Ball(x, y, width=self.width, height=self.height, rng=self.rng)

    def setup(self) -> None:
        self.my_ball = self._ball()

    def update(self) -> None:
        if self.my_ball is not None:
            self.my_ball.update(self.width, self.height)
        for ball in self.balls:
            ball.update(self.width, self.height)

    def draw(self, canvas) -> None:
        for ball in self.balls:
            ball.display(canvas)

    def mouse_released(self, x, y) -> None:
        self.balls.append(self._ball(x, y))


class StarSketch(Sketch):
    """Each key release adds a bouncing body at a random spot."""

    title = "spinningStars"

    def __init__(self, width=1024, height=768, rng=None):
        super().__init__(width, height, rng)
        self.my_star = Ball(width=width, height=height, rng=self.rng)
        self.stars: list[Ball] = []

    def update(self) -> None:
        self.my_star.update(self.width, self.height)
        for star in self.stars:
            star.update(self.width, self.height)

    def draw(self, canvas) -> None:
        for star in self.stars:
            star.display(canvas)

    def key_released(self, key) -> None:
        x = int(self.rng.uniform(0, self.width))
        y = int(self.rng.uniform(0, self.height))
        self.stars.append(
            Ball(x, y, width=self.width, height=self.height, rng=self.rng)
        )


def star_outline(radius) -> Polyline:
    """A closed five-pointed star centred on the origin."""
    star = Polyline()
    for i in range(5):
        outer = math.radians(i * 72 - 36)
        star.line_to(radius * math.cos(outer), radius * math.sin(outer))
        inner = math.radians(i * 72)
        star.line_to(radius * 0.4 * math.cos(inner), radius * 0.4 * math.sin(inner))
    star.close()
    return star