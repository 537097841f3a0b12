import math
import random

import pytest

from sketchbook.canvas import Canvas, Circle, Line, Polygon
from sketchbook.particles import (
    Element,
    Intersection,
    IntersectionSketch,
    Tracer,
    TracerSketch,
    circle_intersections,
)


def _element(x, y, rad, vx=0.0, vy=0.0):
    e = Element(rng=random.Random(1))
    e.x, e.y, e.rad, e.vx, e.vy = x, y, rad, vx, vy
    return e


def test_separate_circles_do_not_intersect():
    assert circle_intersections(0, 0, 1, 10, 0, 1) == []


def test_contained_circle_does_not_intersect():
    assert circle_intersections(0, 0, 10, 1, 0, 2) == []


def test_concentric_circles_give_empty_list():
    assert circle_intersections(3, 3, 5, 3, 3, 5) == []


def test_worked_example():
    points = circle_intersections(0, 0, 5, 8, 0, 5)
    assert points[0] == pytest.approx((4, 3))
    assert points[1] == pytest.approx((4, -3))


@pytest.mark.parametrize(
    "c1,c2",
    [((0, 0, 5), (6, 2, 4)), ((10, -3, 7), (4, 1, 3)), ((1, 1, 2), (2, 2, 2))],
)
def test_points_lie_on_both_circles(c1, c2):
    points = circle_intersections(*c1, *c2)
    assert len(points) == 2
    for px, py in points:
        assert math.hypot(px - c1[0], py - c1[1]) == pytest.approx(c1[2])
        assert math.hypot(px - c2[0], py - c2[1]) == pytest.approx(c2[2])


def test_tangent_circles_touch_once():
    first, second = circle_intersections(0, 0, 5, 10, 0, 5)
    assert first == pytest.approx(second)
    assert first == pytest.approx((5, 0))


def test_tracer_starts_inside_window_with_weight_in_range():
    for seed in range(20):
        t = Tracer(300, 200, random.Random(seed))
        assert 0 <= t.x <= 300 and 0 <= t.y <= 200
        assert 1 / 5 <= t.w <= 5
        assert (t.px, t.py) == (t.x, t.y)


def test_tracer_at_target_stays_and_draws_point():
    t = Tracer(rng=random.Random(2))
    canvas = Canvas(100, 100)
    x, y = t.x, t.y
    t.render(canvas, x, y)
    assert (t.x, t.y) == (x, y)
    (line,) = canvas.commands
    assert isinstance(line, Line)
    assert line.start == line.end


def test_tracer_decelerates_only_when_released():
    released = Tracer(rng=random.Random(3))
    pressed = Tracer(rng=random.Random(3))
    for t in (released, pressed):
        t.xv = 1.05
    released.render(Canvas(10, 10), released.x, released.y, False)
    pressed.render(Canvas(10, 10), pressed.x, pressed.y, True)
    assert released.xv == pytest.approx(1.0)
    assert pressed.xv == pytest.approx(1.05)
    assert pressed.x - pressed.px == 0


def test_tracer_line_runs_from_new_to_previous_position():
    t = Tracer(rng=random.Random(4))
    old = (t.x, t.y)
    canvas = Canvas(100, 100)
    t.render(canvas, t.x + 100, t.y + 50)
    line = canvas.commands[0]
    assert line.end == pytest.approx(old)
    assert line.start == pytest.approx((t.x, t.y))
    assert t.x > old[0] and t.y > old[1]


def test_tracer_sketch_setup_and_draw():
    sketch = TracerSketch(200, 100, random.Random(5), count=12)
    sketch.setup()
    assert len(sketch.bodies) == 12
    assert sketch.background_auto is False
    sketch.mouse_x, sketch.mouse_y = 100, 50
    canvas = Canvas(200, 100)
    sketch.draw(canvas)
    lines = [c for c in canvas.commands if isinstance(c, Line)]
    assert len(lines) == 12
    shade = canvas.commands[-1]
    assert isinstance(shade, Polygon)
    assert shade.color.a == 150
    assert 0 < sketch.mx < 100


def test_tracer_sketch_eases_towards_mouse():
    sketch = TracerSketch(200, 100, random.Random(6), count=1)
    sketch.setup()
    sketch.mouse_x, sketch.mouse_y = 100, 50
    gaps = []
    for _ in range(5):
        sketch.draw(Canvas(200, 100))
        gaps.append(100 - sketch.mx)
    assert gaps == sorted(gaps, reverse=True)
    assert gaps[-1] < gaps[0]


def test_negative_counts_rejected():
    with pytest.raises(ValueError):
        TracerSketch(count=-1)
    with pytest.raises(ValueError):
        IntersectionSketch(count=-1)


def test_element_wraps_right_and_bottom():
    e = _element(105, 50, 3, vx=5)
    e.update(100, 100)
    assert e.x == -3
    e = _element(50, 105, 3, vy=5)
    e.update(100, 100)
    assert e.y == -3


def test_element_wraps_left():
    e = _element(-2, 50, 3, vx=-5)
    e.update(100, 80)
    assert e.x == 103


def test_element_leaving_top_moves_x():
    e = _element(50, -2, 3, vy=-5)
    e.update(100, 80)
    assert e.x == 83
    assert e.y == -7


def test_intersection_sketch_setup_creates_elements():
    sketch = IntersectionSketch(300, 200, random.Random(7), count=25)
    sketch.setup()
    assert len(sketch.elements) == 25
    assert sketch.frame_rate == 24
    for e in sketch.elements:
        assert 3 <= e.rad <= 10


def test_intersection_sketch_finds_pair_once():
    sketch = IntersectionSketch(100, 100, random.Random(8), count=0)
    sketch.elements = [_element(0, 0, 5), _element(8, 0, 5), _element(90, 90, 1)]
    sketch.update()
    assert len(sketch.intersections) == 2
    first, second = circle_intersections(0, 0, 5, 8, 0, 5)
    size = math.dist(first, second) * 0.3
    assert sketch.intersections[0] == Intersection(second, pytest.approx(size))
    assert sketch.intersections[1].pos == first


def test_intersection_sketch_draw():
    sketch = IntersectionSketch(100, 100, random.Random(9), count=0)
    sketch.elements = [_element(20, 20, 5), _element(26, 20, 5)]
    sketch.update()
    canvas = Canvas(100, 100)
    sketch.draw(canvas)
    circles = [c for c in canvas.commands if isinstance(c, Circle)]
    outlines = [c for c in circles if not c.filled]
    dots = [c for c in circles if c.filled]
    assert len(outlines) == 2
    assert len(dots) == 2
    assert outlines[0].color.rgba == (200, 200, 0, 255)