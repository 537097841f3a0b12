"""Choosing a sketch by name and running it in a window."""

from __future__ import annotations

import argparse
import math
import time
from array import array

import pygame

from sketchbook.audio import BandSmoother
from sketchbook.balls import BallSketch, BouncingField, StarSketch
from sketchbook.canvas import (
    Canvas,
    Circle,
    Clear,
    Color,
    Ellipse,
    Line,
    Path,
    Polygon,
    Sketch,
)
from sketchbook.depth import DepthCloudSketch
from sketchbook.noise import NoiseLinesSketch
from sketchbook.particles import IntersectionSketch, TracerSketch
from sketchbook.patterns import (
    ArticulatedArmSketch,
    DropsSketch,
    GlowBrushSketch,
    LissajousSketch,
    ScatteredLinesSketch,
    TunnelSketch,
)

_DEFAULT_SIZE = (1024, 768)

_SAMPLE_FORMATS = {
    8: ("B", 128.0, 128.0),
    -8: ("b", 0.0, 128.0),
    16: ("H", 32768.0, 32768.0),
    -16: ("h", 0.0, 32768.0),
    -32: ("i", 0.0, 2147483648.0),
    32: ("f", 0.0, 1.0),
}


def _decode(raw: bytes, size: int, channels: int) -> list[float]:
    """First-channel samples of raw mixer audio, scaled to -1..1."""
    try:
        code, offset, scale = _SAMPLE_FORMATS[size]
    except KeyError:
        raise ValueError(f"unsupported sample size {size}") from None
    data = array(code)
    data.frombytes(raw[: len(raw) - len(raw) % data.itemsize])
    return [(value - offset) / scale for value in data[:: max(channels, 1)]]


class _SoundSketch(Sketch):
    """A sphere that jumps with the loudness of a sound played on click."""

    title = "simpleSoundAnimated"
    bands = 4
    window = 256
    lift = 200.0
    radius = 20

    def __init__(self, width=1024, height=768, rng=None, sound_path="1085.mp3"):
        super().__init__(width, height, rng)
        self.sound_path = sound_path
        self.smoother = BandSmoother()
        self._sound = None
        self._samples: list[float] = []
        self._rate = 44100
        self._started: float | None = None
        half = self.window // 2
        self._cos = [
            [math.cos(2 * math.pi * k * n / self.window) for n in range(self.window)]
            for k in range(1, half + 1)
        ]
        self._sin = [
            [math.sin(2 * math.pi * k * n / self.window) for n in range(self.window)]
            for k in range(1, half + 1)
        ]

    def setup(self) -> None:
        if not pygame.mixer.get_init():
            pygame.mixer.init()
        rate, size, channels = pygame.mixer.get_init()
        self._sound = pygame.mixer.Sound(self.sound_path)
        self._samples = _decode(self._sound.get_raw(), size, channels)
        self._rate = rate

    def mouse_released(self, x, y) -> None:
        if self._sound is None:
            return
        self._sound.stop()
        self._sound.play()
        self._started = time.monotonic()

    def _spectrum(self) -> list[float]:
        silent = [0.0] * self.bands
        if self._started is None:
            return silent
        start = int((time.monotonic() - self._started) * self._rate)
        frame = self._samples[start : start + self.window]
        if len(frame) < self.window:
            return silent
        norm = 2.0 / self.window
        magnitudes = [
            math.hypot(
                sum(s * c for s, c in zip(frame, cos_row)),
                sum(s * c for s, c in zip(frame, sin_row)),
            )
            * norm
            for cos_row, sin_row in zip(self._cos, self._sin)
        ]
        per_band = len(magnitudes) // self.bands
        return [
            sum(magnitudes[b * per_band : (b + 1) * per_band]) / per_band
            for b in range(self.bands)
        ]

    def update(self) -> None:
        self.smoother.feed(self._spectrum())

    def draw(self, canvas) -> None:
        canvas.set_color(Color(0, 200, 0))
        canvas.draw_circle(
            self.width / 2,
            self.height / 2 - self.smoother.smoothed * self.lift,
            self.radius,
        )


_SKETCHES = {
    cls.title: cls
    for cls in (
        BouncingField,
        BallSketch,
        StarSketch,
        DropsSketch,
        TunnelSketch,
        GlowBrushSketch,
        ArticulatedArmSketch,
        LissajousSketch,
        ScatteredLinesSketch,
        TracerSketch,
        IntersectionSketch,
        NoiseLinesSketch,
        DepthCloudSketch,
        _SoundSketch,
    )
}

_SIZES = {
    "linesAllOver": (500, 500),
    "noise": (1200, 1000),
}


def create_sketch(name, width=None, height=None) -> Sketch:
    """Build the sketch called name, at its usual window size unless given one."""
    try:
        cls = _SKETCHES[name]
    except KeyError:
        known = ", ".join(sorted(_SKETCHES))
        raise ValueError(f"unknown sketch {name!r}; choose from {known}") from None
    default_width, default_height = _SIZES.get(name, _DEFAULT_SIZE)
    width = default_width if width is None else width
    height = default_height if height is None else height
    if width <= 0 or height <= 0:
        raise ValueError("window size must be positive")
    return cls(width, height)


def _stroke(width: float) -> int:
    return max(1, round(width))


def _bounds(command) -> tuple[float, float, float, float]:
    if isinstance(command, Circle):
        cx, cy = command.center
        r = abs(command.radius) + 1
        return cx - r, cy - r, cx + r, cy + r
    if isinstance(command, Ellipse):
        cx, cy = command.center
        hw, hh = abs(command.width) / 2 + 1, abs(command.height) / 2 + 1
        return cx - hw, cy - hh, cx + hw, cy + hh
    if isinstance(command, Line):
        points, pad = (command.start, command.end), command.width + 1
    elif isinstance(command, Path):
        points, pad = command.points, command.width + 1
    else:
        points, pad = command.points, 1
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    return min(xs) - pad, min(ys) - pad, max(xs) + pad, max(ys) + pad


def _draw_shape(surface, command, ox: float, oy: float) -> None:
    rgba = command.color.rgba

    def shift(point):
        return (point[0] + ox, point[1] + oy)

    if isinstance(command, Circle):
        if command.radius > 0:
            pygame.draw.circle(
                surface, rgba, shift(command.center), command.radius,
                0 if command.filled else 1,
            )
    elif isinstance(command, Ellipse):
        cx, cy = shift(command.center)
        w, h = abs(command.width), abs(command.height)
        rect = pygame.Rect(round(cx - w / 2), round(cy - h / 2), round(w), round(h))
        if rect.width >= 1 and rect.height >= 1:
            pygame.draw.ellipse(surface, rgba, rect, 0 if command.filled else 1)
    elif isinstance(command, Line):
        pygame.draw.line(
            surface, rgba, shift(command.start), shift(command.end),
            _stroke(command.width),
        )
    elif isinstance(command, Polygon):
        if len(command.points) >= 3:
            pygame.draw.polygon(
                surface, rgba, [shift(p) for p in command.points],
                0 if command.filled else 1,
            )
    elif isinstance(command, Path):
        if len(command.points) >= 2:
            pygame.draw.lines(
                surface, rgba, command.closed, [shift(p) for p in command.points],
                _stroke(command.width),
            )


def _paint(surface, command) -> None:
    alpha = command.color.a
    if alpha == 0:
        return
    if alpha == 255:
        _draw_shape(surface, command, 0, 0)
        return
    x0, y0, x1, y1 = _bounds(command)
    left, top = max(math.floor(x0), 0), max(math.floor(y0), 0)
    right = min(math.ceil(x1), surface.get_width())
    bottom = min(math.ceil(y1), surface.get_height())
    if right <= left or bottom <= top:
        return
    layer = pygame.Surface((right - left, bottom - top), pygame.SRCALPHA)
    _draw_shape(layer, command, -left, -top)
    surface.blit(layer, (left, top))


def _render(surface, commands) -> None:
    for command in commands:
        if isinstance(command, Clear):
            surface.fill(command.color.rgba[:3])
        else:
            _paint(surface, command)


def run(sketch, width=None, height=None) -> int:
    """Open a window and animate sketch until it is closed; return frames drawn."""
    if width is not None:
        sketch.width = width
    if height is not None:
        sketch.height = height
    pygame.init()
    try:
        screen = pygame.display.set_mode((sketch.width, sketch.height))
        pygame.display.set_caption(sketch.title)
        clock = pygame.time.Clock()
        canvas = Canvas(sketch.width, sketch.height)
        sketch.setup()
        screen.fill(sketch.background.rgba[:3])
        frames = 0
        while True:
            running = True
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEMOTION:
                    sketch.mouse_x, sketch.mouse_y = event.pos
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    sketch.mouse_x, sketch.mouse_y = event.pos
                    sketch.mouse_pressed = True
                elif event.type == pygame.MOUSEBUTTONUP:
                    sketch.mouse_pressed = False
                    sketch.mouse_released(*event.pos)
                elif event.type == pygame.KEYUP:
                    sketch.key_released(event.key)
            if not running:
                return frames
            sketch.frame_num = frames
            sketch.update()
            if sketch.background_auto:
                screen.fill(sketch.background.rgba[:3])
            canvas.begin_frame()
            canvas.commands = []
            sketch.draw(canvas)
            _render(screen, canvas.commands)
            pygame.display.flip()
            frames += 1
            clock.tick(sketch.frame_rate)
    finally:
        pygame.quit()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="sketchbook", description="Run one of the sketches in a window."
    )
    parser.add_argument("sketch", nargs="?", help="name of the sketch to run")
    parser.add_argument("--list", action="store_true", help="list sketch names")
    parser.add_argument("--width", type=int, help="window width in pixels")
    parser.add_argument("--height", type=int, help="window height in pixels")
    args = parser.parse_args(argv)
    if args.list:
        print("\n".join(sorted(_SKETCHES)))
        return 0
    if args.sketch is None:
        parser.error("a sketch name is required")
    try:
        sketch = create_sketch(args.sketch, args.width, args.height)
    except ValueError as error:
        parser.error(str(error))
    run(sketch)
    return 0