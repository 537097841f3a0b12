"""Simplex noise and a sketch comparing noisy and random lines."""

from __future__ import annotations

import math

from sketchbook.canvas import Color, Polyline, Sketch

_PERM_BASE = (
    151, 160, 137, 91, 90, 15, 131, 13, 201, 95, 96, 53, 194, 233, 7, 225,
    140, 36, 103, 30, 69, 142, 8, 99, 37, 240, 21, 10, 23, 190, 6, 148,
    247, 120, 234, 75, 0, 26, 197, 62, 94, 252, 219, 203, 117, 35, 11, 32,
    57, 177, 33, 88, 237, 149, 56, 87, 174, 20, 125, 136, 171, 168, 68, 175,
    74, 165, 71, 134, 139, 48, 27, 166, 77, 146, 158, 231, 83, 111, 229, 122,
    60, 211, 133, 230, 220, 105, 92, 41, 55, 46, 245, 40, 244, 102, 143, 54,
    65, 25, 63, 161, 1, 216, 80, 73, 209, 76, 132, 187, 208, 89, 18, 169,
    200, 196, 135, 130, 116, 188, 159, 86, 164, 100, 109, 198, 173, 186, 3, 64,
    52, 217, 226, 250, 124, 123, 5, 202, 38, 147, 118, 126, 255, 82, 85, 212,
    207, 206, 59, 227, 47, 16, 58, 17, 182, 189, 28, 42, 223, 183, 170, 213,
    119, 248, 152, 2, 44, 154, 163, 70, 221, 153, 101, 155, 167, 43, 172, 9,
    129, 22, 39, 253, 19, 98, 108, 110, 79, 113, 224, 232, 178, 185, 112, 104,
    218, 246, 97, 228, 251, 34, 242, 193, 238, 210, 144, 12, 191, 179, 162, 241,
    81, 51, 145, 235, 249, 14, 239, 107, 49, 192, 214, 31, 181, 199, 106, 157,
    184, 84, 204, 176, 115, 121, 50, 45, 127, 4, 150, 254, 138, 236, 205, 93,
    222, 114, 67, 29, 24, 72, 243, 141, 128, 195, 78, 66, 215, 61, 156, 180,
)
_PERM = _PERM_BASE + _PERM_BASE

_F2 = 0.366025403
_G2 = 0.211324865
_F3 = 1.0 / 3.0
_G3 = 1.0 / 6.0


def _grad1(h: int, x: float) -> float:
    h &= 15
    grad = 1.0 + (h & 7)
    if h & 8:
        grad = -grad
    return grad * x


def _grad2(h: int, x: float, y: float) -> float:
    h &= 7
    u, v = (x, y) if h < 4 else (y, x)
    return (-u if h & 1 else u) + (-2.0 * v if h & 2 else 2.0 * v)


def _grad3(h: int, x: float, y: float, z: float) -> float:
    h &= 15
    u = x if h < 8 else y
    if h < 4:
        v = y
    elif h in (12, 14):
        v = x
    else:
        v = z
    return (-u if h & 1 else u) + (-v if h & 2 else v)


def _simplex1(x: float) -> float:
    i0 = math.floor(x)
    x0 = x - i0
    total = 0.0
    for offset, dx in ((0, x0), (1, x0 - 1.0)):
        t = 1.0 - dx * dx
        t *= t
        total += t * t * _grad1(_PERM[(i0 + offset) & 0xFF], dx)
    return 0.25 * total


def _simplex2(x: float, y: float) -> float:
    s = (x + y) * _F2
    i = math.floor(x + s)
    j = math.floor(y + s)
    t = (i + j) * _G2
    x0 = x - (i - t)
    y0 = y - (j - t)
    i1, j1 = (1, 0) if x0 > y0 else (0, 1)
    corners = (
        (0, 0, x0, y0),
        (i1, j1, x0 - i1 + _G2, y0 - j1 + _G2),
        (1, 1, x0 - 1.0 + 2.0 * _G2, y0 - 1.0 + 2.0 * _G2),
    )
    ii, jj = i & 0xFF, j & 0xFF
    total = 0.0
    for di, dj, cx, cy in corners:
        t = 0.5 - cx * cx - cy * cy
        if t > 0:
            t *= t
            total += t * t * _grad2(_PERM[ii + di + _PERM[jj + dj]], cx, cy)
    return 40.0 * total


def _simplex3(x: float, y: float, z: float) -> float:
    s = (x + y + z) * _F3
    i = math.floor(x + s)
    j = math.floor(y + s)
    k = math.floor(z + s)
    t = (i + j + k) * _G3
    x0 = x - (i - t)
    y0 = y - (j - t)
    z0 = z - (k - t)
    if x0 >= y0:
        if y0 >= z0:
            o1, o2 = (1, 0, 0), (1, 1, 0)
        elif x0 >= z0:
            o1, o2 = (1, 0, 0), (1, 0, 1)
        else:
            o1, o2 = (0, 0, 1), (1, 0, 1)
    else:
        if y0 < z0:
            o1, o2 = (0, 0, 1), (0, 1, 1)
        elif x0 < z0:
            o1, o2 = (0, 1, 0), (0, 1, 1)
        else:
            o1, o2 = (0, 1, 0), (1, 1, 0)
    offsets = ((0, 0, 0, 0.0), (*o1, _G3), (*o2, 2.0 * _G3), (1, 1, 1, 3.0 * _G3))
    ii, jj, kk = i & 0xFF, j & 0xFF, k & 0xFF
    total = 0.0
    for di, dj, dk, g in offsets:
        cx = x0 - di + g
        cy = y0 - dj + g
        cz = z0 - dk + g
        t = 0.6 - cx * cx - cy * cy - cz * cz
        if t > 0:
            t *= t
            h = _PERM[ii + di + _PERM[jj + dj + _PERM[kk + dk]]]
            total += t * t * _grad3(h, cx, cy, cz)
    return 32.0 * total


def signed_noise(*args) -> float:
    """Simplex noise of one to three coordinates, roughly in -1..1."""
    coords = [float(a) for a in args]
    if len(coords) == 1:
        return _simplex1(*coords)
    if len(coords) == 2:
        return _simplex2(*coords)
    if len(coords) == 3:
        return _simplex3(*coords)
    raise TypeError(f"noise takes 1 to 3 coordinates, got {len(coords)}")


def noise(*args) -> float:
    """Simplex noise of one to three coordinates, roughly in 0..1."""
    return signed_noise(*args) * 0.5 + 0.5


class NoiseLinesSketch(Sketch):
    """A smooth noise line drawn against a jagged random line."""

    title = "noise"
    frequency = 0.01
    noise_color = Color(255, 0, 255)
    random_color = Color(255, 165, 0)

    def __init__(self, width=1200, height=1000, rng=None):
        super().__init__(width, height, rng)
        self.noiseline = Polyline()
        self.randomline = Polyline()

    def setup(self) -> None:
        self.noiseline = Polyline()
        self.randomline = Polyline()
        for x in range(self.width):
            self.noiseline.line_to(x, signed_noise(x * self.frequency) * self.height)
        for x in range(self.width):
            offset = self.height // 2 - self.rng.uniform(0, self.height)
            self.randomline.line_to(x, offset / 2)

    def draw(self, canvas) -> None:
        canvas.push()
        canvas.translate(0, self.height // 2)
        canvas.set_color(self.random_color)
        canvas.draw_polyline(self.randomline)
        canvas.set_color(self.noise_color)
        canvas.draw_polyline(self.noiseline)
        canvas.pop()