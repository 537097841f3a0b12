"""Particle sketches: mouse-chasing tracers and intersecting drifting circles."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

from sketchbook.canvas import WHITE, Color, Sketch

_DRIFT_OUTLINE = Color(200, 200, 0)
_SHADE = Color(0, 0, 0, 150)


class Tracer:
    """A body pulled towards a target that leaves a line behind each frame."""

    size_threshold = 5.0
    deceleration = 1.05
    drag = 0.01

    def __init__(self, width=1024, height=768, rng=None):
        rng = rng if rng is not None else random.Random()
        self.x = rng.uniform(0, width)
        self.y = rng.uniform(0, height)
        self.w = rng.uniform(1 / self.size_threshold, self.size_threshold)
        self.xv = 0.0
        self.yv = 0.0
        self.px = self.x
        self.py = self.y

    def render(self, canvas, mx, my, mouse_pressed=False) -> None:
        """Move towards (mx, my) and draw the segment travelled."""
        if not mouse_pressed:
            self.xv /= self.deceleration
            self.yv /= self.deceleration
        self.xv += self.drag * (mx - self.x) * self.w
        self.yv += self.drag * (my - self.y) * self.w
        self.x += self.xv
        self.y += self.yv
        canvas.set_color(WHITE)
        canvas.draw_line(self.x, self.y, self.px, self.py)
        self.px = self.x
        self.py = self.y


class TracerSketch(Sketch):
    """Hundreds of tracers chasing an eased mouse position over a fading trail."""

    title = "magicLines"
    easing = 0.3

    def __init__(self, width=1024, height=768, rng=None, count=500):
        super().__init__(width, height, rng)
        if count < 0:
            raise ValueError("count must not be negative")
        self.total_amount = count
        self.mx = 0.0
        self.my = 0.0
        self.bodies: list[Tracer] = []

    def setup(self) -> None:
        self.frame_rate = 24
        self.background = Color(0, 0, 0)
        self.background_auto = False
        self.bodies = [
            Tracer(self.width, self.height, self.rng) for _ in range(self.total_amount)
        ]

    def draw(self, canvas) -> None:
        self.mx += self.easing * (self.mouse_x - self.mx)
        self.my += self.easing * (self.mouse_y - self.my)
        for body in self.bodies:
            body.render(canvas, self.mx, self.my, self.mouse_pressed)
        canvas.set_color(_SHADE)
        canvas.draw_rectangle(0, 0, self.width, self.height)


class Element:
    """A drifting circle that wraps around the window edges."""

    def __init__(self, width=1024, height=768, rng=None):
        rng = rng if rng is not None else random.Random()
        self.x = rng.uniform(0, width)
        self.y = rng.uniform(0, height)
        self.vx = rng.uniform(-2, 2)
        self.vy = rng.uniform(-2, 2)
        self.gray = int(rng.uniform(0, 255))
        self.rad = rng.uniform(3, 10)

    def update(self, width, height) -> None:
        self.x += self.vx
        self.y += self.vy
        if self.x > width + self.rad:
            self.x = -self.rad
        if self.y > height + self.rad:
            self.y = -self.rad
        if self.x < -self.rad:
            self.x = self.rad + width
        if self.y < -self.rad:
            # Leaving through the top re-enters on the x axis, as the sketch always did.
            self.x = self.rad + height

    def draw(self, canvas) -> None:
        canvas.draw_circle(self.x, self.y, self.rad)


@dataclass
class Intersection:
    """A point where two circles cross, with a size from the chord length."""

    pos: tuple[float, float]
    size: float


def circle_intersections(x1, y1, r1, x2, y2, r2) -> list[tuple[float, float]]:
    """The two crossing points of two circles, or an empty list if they do not cross.

    Concentric circles have no well-defined crossing points and give an empty list.
    """
    d = math.hypot(x2 - x1, y2 - y1)
    if d > r1 + r2 or d < abs(r1 - r2) or d == 0:
        return []
    a = (r1 * r1 - r2 * r2 + d * d) / (2 * d)
    h = math.sqrt(max(r1 * r1 - a * a, 0.0))
    x0 = x1 + a * (x2 - x1) / d
    y0 = y1 + a * (y2 - y1) / d
    rx = -(y2 - y1) * (h / d)
    ry = (x2 - x1) * (h / d)
    return [(x0 + rx, y0 + ry), (x0 - rx, y0 - ry)]


class IntersectionSketch(Sketch):
    """Thousands of drifting circles with dots marking where they cross."""

    title = "process8"
    chord_factor = 0.3

    def __init__(self, width=1024, height=768, rng=None, count=4000):
        super().__init__(width, height, rng)
        if count < 0:
            raise ValueError("count must not be negative")
        self.count = count
        self.elements: list[Element] = []
        self.intersections: list[Intersection] = []

    def setup(self) -> None:
        self.elements = [
            Element(self.width, self.height, self.rng) for _ in range(self.count)
        ]
        self.background = Color(255, 255, 255)
        self.frame_rate = 24

    def update(self) -> None:
        self.intersections = []
        snapshot = [(e.x, e.y, e.rad) for e in self.elements]
        for index, (ex, ey, er) in enumerate(snapshot):
            for fx, fy, fr in snapshot[index:]:
                points = circle_intersections(ex, ey, er, fx, fy, fr)
                if not points:
                    continue
                first, second = points
                size = math.dist(first, second) * self.chord_factor
                self.intersections.append(Intersection(second, size))
                self.intersections.append(Intersection(first, size))
        for element in self.elements:
            element.update(self.width, self.height)

    def draw(self, canvas) -> None:
        canvas.fill = False
        canvas.set_color(_DRIFT_OUTLINE)
        for element in self.elements:
            element.draw(canvas)
        canvas.fill = True
        for point in self.intersections:
            canvas.set_color(point.size * 50)
            canvas.draw_circle(point.pos[0], point.pos[1], point.size)