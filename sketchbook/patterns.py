"""Static and mouse-driven line and shape patterns."""

from __future__ import annotations

import math

from sketchbook.canvas import Canvas, Color, Line, Polyline, Sketch, map_range

_WHITE_BACKGROUND = Color(255, 255, 255)


class DropsSketch(Sketch):
    """Columns of stacked circles that fade and shrink like falling drops."""

    title = "drops"
    max_radius = 45

    def setup(self) -> None:
        self.background = _WHITE_BACKGROUND

    def draw(self, canvas) -> None:
        d = self.max_radius
        for i in range(200, 700, 100):
            for j in range(200, 400):
                canvas.set_color(map_range(j, 200, 400, 55, 255))
                canvas.draw_circle(i, j, map_range(j, 200, 400, d, 0))
        for i in range(250, 600, 100):
            for j in range(400, 200, -1):
                canvas.set_color(map_range(j, 400, 200, 55, 255))
                canvas.draw_circle(i, j, map_range(j, 400, 200, d, 0))


class TunnelSketch(Sketch):
    """Fifteen nested ellipses receding into a dark tunnel."""

    title = "tunnel"
    rings = 15

    def draw(self, canvas) -> None:
        last = self.rings - 1
        for i in range(self.rings):
            canvas.set_color(map_range(i, 0, last, 200, 0))
            x = map_range(i, 0, last, 300, 220)
            y = map_range(i, 0, last, 300, 340)
            width = map_range(i, 0, last, 300, 30)
            height = map_range(i, 0, last, 200, 20)
            canvas.draw_ellipse(x, y, width, height)


class GlowBrushSketch(Sketch):
    """A soft brush of layered translucent circles following the mouse."""

    title = "mouseCircleGlow"
    max_radius = 40
    radius_step = 3
    alpha = 3

    def setup(self) -> None:
        self.frame_rate = 60
        self.background_auto = False
        self.background = _WHITE_BACKGROUND

    def draw(self, canvas) -> None:
        for radius in range(self.max_radius, 0, -self.radius_step):
            canvas.set_color((0, self.alpha))
            canvas.draw_circle(self.mouse_x, self.mouse_y, radius)


class ArticulatedArmSketch(Sketch):
    """Four chained segments, each bent by an angle taken from the mouse."""

    title = "articulateArm"
    segment_length = 200
    widths = (8, 4, 2, 1)

    def draw(self, canvas) -> None:
        angle = -1.0 + self.mouse_x / 600.0
        canvas.translate(0, 250)
        for index, width in enumerate(self.widths):
            if index:
                canvas.translate(self.segment_length, 0)
            canvas.rotate(angle)
            canvas.line_width = width
            canvas.draw_line(0, 0, self.segment_length, 0)


class LissajousSketch(Sketch):
    """A Lissajous curve traced one vertex per frame."""

    title = "polyLineLissajous"
    a = 5
    b = 2
    amplitude = 300

    def __init__(self, width=1024, height=768, rng=None):
        super().__init__(width, height, rng)
        self.poly = Polyline()

    def update(self) -> None:
        angle_a = math.radians(self.a * self.frame_num)
        angle_b = math.radians(self.b * self.frame_num)
        self.poly.line_to(
            self.amplitude * math.cos(angle_a), self.amplitude * math.sin(angle_b)
        )

    def draw(self, canvas) -> None:
        canvas.translate(self.width // 2, self.height // 2)
        canvas.draw_polyline(self.poly)


class ScatteredLinesSketch(Sketch):
    """A grid of randomly turned and stretched strokes rendered once."""

    title = "linesAllOver"
    step = 50
    grid = 10

    def __init__(self, width=500, height=500, rng=None):
        super().__init__(width, height, rng)
        self.lines: list[Line] = []

    def setup(self) -> None:
        layer = Canvas(self.width, self.height)
        layer.set_color(255)
        layer.line_width = 2
        for _ in range(self.grid):
            layer.push()
            for _ in range(self.grid):
                layer.translate(self.step, 0)
                layer.push()
                layer.rotate(math.radians(self.rng.uniform(0, 180)))
                layer.scale(self.rng.uniform(0.5, 1.5))
                layer.draw_line(0, -50, 0, 50)
                layer.pop()
            layer.pop()
            layer.translate(0, self.step)
        self.lines = [c for c in layer.commands if isinstance(c, Line)]

    def draw(self, canvas) -> None:
        saved_width = canvas.line_width
        for line in self.lines:
            canvas.set_color(line.color)
            canvas.line_width = line.width
            canvas.draw_line(*line.start, *line.end)
        canvas.line_width = saved_width