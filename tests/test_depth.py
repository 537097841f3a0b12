import pytest
from PIL import Image

from sketchbook.canvas import Canvas, Circle, Color
from sketchbook.depth import (
    DEPTH_FAR,
    DEPTH_NEAR,
    CloudPoint,
    DepthCloudSketch,
    build_point_cloud,
)


def _gray(width, height, level):
    return Image.new("L", (width, height), level)


def _rgb(width, height, color):
    return Image.new("RGB", (width, height), color)


def test_samples_every_skip_pixels_row_by_row():
    points = build_point_cloud(_gray(8, 8, 0), _rgb(8, 8, (1, 2, 3)), 4)
    assert [(p.x, p.y) for p in points] == [(0, 0), (4, 0), (0, 4), (4, 4)]


def test_black_depth_is_nearest():
    points = build_point_cloud(_gray(4, 4, 0), _rgb(4, 4, (0, 0, 0)), 1)
    assert all(p.z == pytest.approx(-300) for p in points)
    assert DEPTH_NEAR == -300


def test_white_depth_is_farthest():
    points = build_point_cloud(_gray(4, 4, 255), _rgb(4, 4, (0, 0, 0)), 1)
    assert all(p.z == pytest.approx(300) for p in points)
    assert DEPTH_FAR == 300


def test_colour_comes_from_colour_image():
    points = build_point_cloud(_gray(6, 6, 40), _rgb(6, 6, (10, 20, 30)), 2)
    assert {p.color for p in points} == {Color(10, 20, 30, 255)}


def test_skip_one_takes_every_pixel():
    points = build_point_cloud(_gray(5, 3, 9), _rgb(5, 3, (0, 0, 0)), 1)
    assert len(points) == 15


def test_depth_grows_with_gray_level():
    depth = Image.new("L", (16, 1))
    depth.putdata([i * 16 for i in range(16)])
    points = build_point_cloud(depth, _rgb(16, 1, (0, 0, 0)), 1)
    zs = [p.z for p in points]
    assert zs == sorted(zs)
    assert zs[0] < zs[-1]


def test_zero_skip_is_rejected():
    with pytest.raises(ValueError):
        build_point_cloud(_gray(4, 4, 0), _rgb(4, 4, (0, 0, 0)), 0)


def test_smaller_colour_image_is_rejected():
    with pytest.raises(ValueError):
        build_point_cloud(_gray(8, 8, 0), _rgb(4, 4, (0, 0, 0)), 1)


def test_sketch_rejects_zero_skip():
    with pytest.raises(ValueError):
        DepthCloudSketch(skip=0)


@pytest.fixture
def files(tmp_path):
    image_path = tmp_path / "photo.png"
    depth_path = tmp_path / "depth.png"
    _rgb(8, 8, (200, 100, 50)).save(image_path)
    _gray(8, 8, 128).save(depth_path)
    return image_path, depth_path


def test_sketch_setup_loads_cloud(files):
    image_path, depth_path = files
    sketch = DepthCloudSketch(100, 100, image_path=image_path, depth_path=depth_path)
    sketch.setup()
    assert sketch.image_size == (8, 8)
    assert len(sketch.points) == 4
    assert all(isinstance(p, CloudPoint) for p in sketch.points)


def test_sketch_draws_one_dot_per_point_centred(files):
    image_path, depth_path = files
    sketch = DepthCloudSketch(100, 100, image_path=image_path, depth_path=depth_path)
    sketch.setup()
    canvas = Canvas(100, 100)
    sketch.draw(canvas)
    circles = [c for c in canvas.commands if isinstance(c, Circle)]
    assert len(circles) == len(sketch.points)
    assert all(c.color == Color(200, 100, 50, 255) for c in circles)
    middle = next(c for c, p in zip(circles, sketch.points) if (p.x, p.y) == (4, 4))
    assert middle.center == pytest.approx((50, 50))
    assert all(c.radius == pytest.approx(sketch.point_size / 2) for c in circles)


def test_sketch_draw_restores_transform(files):
    image_path, depth_path = files
    sketch = DepthCloudSketch(100, 100, image_path=image_path, depth_path=depth_path)
    sketch.setup()
    canvas = Canvas(100, 100)
    sketch.draw(canvas)
    canvas.draw_circle(7, 9, 1)
    assert canvas.commands[-1].center == pytest.approx((7, 9))


def test_missing_file_raises(tmp_path):
    sketch = DepthCloudSketch(
        image_path=tmp_path / "none.jpg", depth_path=tmp_path / "none.png"
    )
    with pytest.raises(FileNotFoundError):
        sketch.setup()