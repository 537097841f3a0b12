"""Point clouds built from a depth map coloured by a matching photograph."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from PIL import Image

from sketchbook.canvas import Color, Sketch, map_range

DEPTH_NEAR = -300.0
DEPTH_FAR = 300.0


@dataclass(frozen=True)
class CloudPoint:
    """One vertex of a point cloud with the colour it is drawn in."""

    x: float
    y: float
    z: float
    color: Color


def build_point_cloud(depth_image, color_image, skip=4) -> list[CloudPoint]:
    """Sample every skip-th pixel of the depth map, row by row.

    The red channel of the depth map gives z in DEPTH_NEAR..DEPTH_FAR and the
    colour image gives each point its colour.
    """
    if skip < 1:
        raise ValueError("skip must be at least 1")
    depth = depth_image.convert("RGB")
    colors = color_image.convert("RGBA")
    width, height = depth.size
    if colors.width < width or colors.height < height:
        raise ValueError(
            f"colour image {colors.size} is smaller than depth map {depth.size}"
        )
    depth_pixels = depth.load()
    color_pixels = colors.load()
    return [
        CloudPoint(
            x,
            y,
            map_range(depth_pixels[x, y][0], 0, 255, DEPTH_NEAR, DEPTH_FAR),
            Color(*color_pixels[x, y]),
        )
        for y in range(0, height, skip)
        for x in range(0, width, skip)
    ]


class DepthCloudSketch(Sketch):
    """A photograph lifted into space by its depth map, seen straight on."""

    title = "depthCloud"
    zoom = 2.0
    point_size = 3.0

    def __init__(
        self,
        width=1024,
        height=768,
        rng=None,
        image_path="guggenheim.jpg",
        depth_path="depth.png",
        skip=4,
    ):
        super().__init__(width, height, rng)
        if skip < 1:
            raise ValueError("skip must be at least 1")
        self.image_path = Path(image_path)
        self.depth_path = Path(depth_path)
        self.skip = skip
        self.points: list[CloudPoint] = []
        self.image_size: tuple[int, int] = (0, 0)

    def setup(self) -> None:
        with Image.open(self.image_path) as image, Image.open(self.depth_path) as depth:
            self.image_size = image.size
            self.points = build_point_cloud(depth, image, self.skip)

    def draw(self, canvas) -> None:
        image_width, image_height = self.image_size
        canvas.push()
        canvas.translate(self.width / 2, self.height / 2)
        canvas.scale(self.zoom)
        canvas.translate(-image_width / 2, -image_height / 2)
        # Points keep their on-screen size whatever the zoom.
        radius = self.point_size / 2 / self.zoom
        for point in self.points:
            canvas.set_color(point.color)
            canvas.draw_circle(point.x, point.y, radius)
        canvas.pop()