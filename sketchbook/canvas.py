"""Drawing surface, colours, polylines and the base class every sketch extends."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Iterator, Sequence, Union

_FLOAT_EPSILON = 1.1920929e-07


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"colour channel {name}={value} outside 0..255")

    @property
    def rgba(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)


WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)
DEFAULT_BACKGROUND = Color(200, 200, 200)

ColorLike = Union[Color, int, float, Sequence[float]]


def _channel(value: float) -> int:
    return int(min(max(value, 0), 255))


def _as_color(value: ColorLike) -> Color:
    """Accept a Color, a gray level, or a tuple of 1 to 4 channel values."""
    if isinstance(value, Color):
        return value
    if isinstance(value, (int, float)):
        gray = _channel(value)
        return Color(gray, gray, gray)
    channels = [_channel(v) for v in value]
    if len(channels) == 1:
        return Color(channels[0], channels[0], channels[0])
    if len(channels) == 2:
        gray, alpha = channels
        return Color(gray, gray, gray, alpha)
    if len(channels) in (3, 4):
        return Color(*channels)
    raise ValueError(f"cannot build a colour from {len(channels)} values")


def map_range(value, in_min, in_max, out_min, out_max, clamp=False):
    """Re-map value from one range to another, optionally clamping the result."""
    if abs(in_min - in_max) < _FLOAT_EPSILON:
        return out_min
    out = (value - in_min) / (in_max - in_min) * (out_max - out_min) + out_min
    if clamp:
        low, high = sorted((out_min, out_max))
        out = min(max(out, low), high)
    return out


@dataclass
class Polyline:
    """An ordered list of vertices that may be closed into a loop."""

    points: list[tuple[float, float]] = field(default_factory=list)
    closed: bool = False

    def line_to(self, x, y) -> None:
        self.points.append((float(x), float(y)))

    def close(self) -> None:
        self.closed = True

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[tuple[float, float]]:
        return iter(self.points)


@dataclass(frozen=True)
class Clear:
    color: Color


@dataclass(frozen=True)
class Circle:
    center: tuple[float, float]
    radius: float
    color: Color
    filled: bool


@dataclass(frozen=True)
class Ellipse:
    center: tuple[float, float]
    width: float
    height: float
    color: Color
    filled: bool


@dataclass(frozen=True)
class Line:
    start: tuple[float, float]
    end: tuple[float, float]
    color: Color
    width: float


@dataclass(frozen=True)
class Polygon:
    points: tuple[tuple[float, float], ...]
    color: Color
    filled: bool


@dataclass(frozen=True)
class Path:
    points: tuple[tuple[float, float], ...]
    closed: bool
    color: Color
    width: float


@dataclass(frozen=True)
class _Affine:
    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    def then(self, o: "_Affine") -> "_Affine":
        """Compose so that o is applied in this transform's local space."""
        return _Affine(
            self.a * o.a + self.c * o.b,
            self.b * o.a + self.d * o.b,
            self.a * o.c + self.c * o.d,
            self.b * o.c + self.d * o.d,
            self.a * o.e + self.c * o.f + self.e,
            self.b * o.e + self.d * o.f + self.f,
        )

    def apply(self, x: float, y: float) -> tuple[float, float]:
        return (self.a * x + self.c * y + self.e, self.b * x + self.d * y + self.f)

    @property
    def uniform_scale(self) -> float:
        return math.sqrt(abs(self.a * self.d - self.b * self.c))

    @property
    def axis_scales(self) -> tuple[float, float]:
        return (math.hypot(self.a, self.b), math.hypot(self.c, self.d))


class Canvas:
    """Records drawing commands in screen coordinates under a transform stack."""

    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.color: Color = WHITE
        self.fill = True
        self.line_width = 1.0
        self.commands: list = []
        self._matrix = _Affine()
        self._stack: list[_Affine] = []

    def begin_frame(self) -> None:
        """Reset the transform stack, as happens at the start of every frame."""
        self._matrix = _Affine()
        self._stack.clear()

    def set_color(self, color) -> None:
        self.color = _as_color(color)

    def clear(self, color) -> None:
        """Paint the whole surface; earlier pending commands are covered."""
        self.commands = [Clear(_as_color(color))]

    def draw_circle(self, x, y, radius) -> None:
        center = self._matrix.apply(x, y)
        self.commands.append(
            Circle(center, radius * self._matrix.uniform_scale, self.color, self.fill)
        )

    def draw_line(self, x1, y1, x2, y2) -> None:
        self.commands.append(
            Line(
                self._matrix.apply(x1, y1),
                self._matrix.apply(x2, y2),
                self.color,
                self.line_width,
            )
        )

    def draw_ellipse(self, x, y, width, height) -> None:
        sx, sy = self._matrix.axis_scales
        self.commands.append(
            Ellipse(self._matrix.apply(x, y), width * sx, height * sy, self.color, self.fill)
        )

    def draw_rectangle(self, x, y, width, height) -> None:
        corners = ((x, y), (x + width, y), (x + width, y + height), (x, y + height))
        points = tuple(self._matrix.apply(cx, cy) for cx, cy in corners)
        self.commands.append(Polygon(points, self.color, self.fill))

    def draw_polyline(self, polyline) -> None:
        if not polyline.points:
            return
        points = tuple(self._matrix.apply(px, py) for px, py in polyline.points)
        self.commands.append(Path(points, polyline.closed, self.color, self.line_width))

    def translate(self, dx, dy) -> None:
        self._matrix = self._matrix.then(_Affine(e=dx, f=dy))

    def rotate(self, radians) -> None:
        cos, sin = math.cos(radians), math.sin(radians)
        self._matrix = self._matrix.then(_Affine(a=cos, b=sin, c=-sin, d=cos))

    def scale(self, sx, sy=None) -> None:
        if sy is None:
            sy = sx
        self._matrix = self._matrix.then(_Affine(a=sx, d=sy))

    def push(self) -> None:
        self._stack.append(self._matrix)

    def pop(self) -> None:
        if not self._stack:
            raise IndexError("pop without a matching push")
        self._matrix = self._stack.pop()


class Sketch:
    """Base class for an animated sketch; subclasses override the hooks they need."""

    title = "sketch"

    def __init__(self, width=1024, height=768, rng=None):
        self.width = width
        self.height = height
        self.rng: random.Random = rng if rng is not None else random.Random()
        self.mouse_x = 0
        self.mouse_y = 0
        self.mouse_pressed = False
        self.frame_num = 0
        self.frame_rate = 60
        self.background: Color = DEFAULT_BACKGROUND
        self.background_auto = True

    def setup(self) -> None:
        """Called once before the first frame."""

    def update(self) -> None:
        """Advance the state by one frame."""

    def draw(self, canvas) -> None:
        """Draw the current state onto canvas."""

    def mouse_released(self, x, y) -> None:
        """React to a mouse button being released at (x, y)."""

    def key_released(self, key) -> None:
        """React to a key being released."""