import pygame
import pytest

from sketchbook.app import create_sketch, main, run
from sketchbook.canvas import Polyline, Sketch
from sketchbook.patterns import DropsSketch


def _names(capsys):
    assert main(["--list"]) == 0
    return capsys.readouterr().out.split()


def test_list_names_sketches(capsys):
    names = _names(capsys)
    assert "drops" in names
    assert "300balls" in names
    assert names == sorted(names)


def test_every_listed_name_builds_matching_sketch(capsys):
    for name in _names(capsys):
        assert create_sketch(name).title == name


def test_create_with_size():
    sketch = create_sketch("drops", 800, 600)
    assert isinstance(sketch, DropsSketch)
    assert (sketch.width, sketch.height) == (800, 600)


def test_default_sizes_follow_each_sketch():
    assert (create_sketch("tunnel").width, create_sketch("tunnel").height) == (1024, 768)
    lines = create_sketch("linesAllOver")
    assert (lines.width, lines.height) == (500, 500)
    noise = create_sketch("noise")
    assert (noise.width, noise.height) == (1200, 1000)


def test_unknown_sketch_rejected():
    with pytest.raises(ValueError):
        create_sketch("nothing-here")


def test_non_positive_size_rejected():
    with pytest.raises(ValueError):
        create_sketch("drops", 0, 100)


def test_main_unknown_name_exits():
    with pytest.raises(SystemExit) as info:
        main(["nothing-here"])
    assert info.value.code == 2


def test_main_without_name_exits():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2


def test_sound_sketch_stays_still_without_sound():
    sketch = create_sketch("simpleSoundAnimated")
    sketch.update()
    assert sketch.smoother.smoothed == 0.0


class _Recorder(Sketch):
    title = "recorder"

    def __init__(self):
        super().__init__(64, 48)
        self.events = []

    def setup(self):
        self.events.append("setup")

    def update(self):
        self.events.append("update")

    def draw(self, canvas):
        canvas.set_color((10, 20, 30, 100))
        canvas.draw_circle(10, 10, 5)
        canvas.draw_ellipse(30, 20, 12, 8)
        canvas.draw_rectangle(0, 0, 64, 48)
        canvas.draw_line(0, 0, 20, 20)
        canvas.set_color(200)
        poly = Polyline()
        poly.line_to(1, 1)
        poly.line_to(40, 30)
        canvas.draw_polyline(poly)
        self.events.append(("draw", len(canvas.commands)))
        pygame.event.post(
            pygame.event.Event(pygame.MOUSEBUTTONUP, pos=(5, 6), button=1)
        )
        pygame.event.post(pygame.event.Event(pygame.QUIT))

    def mouse_released(self, x, y):
        self.events.append(("released", x, y))


@pytest.fixture
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")


def test_run_calls_hooks_in_order(headless):
    sketch = _Recorder()
    frames = run(sketch)
    assert frames == 1
    assert sketch.events == ["setup", "update", ("draw", 5), ("released", 5, 6)]


def test_run_applies_window_size(headless):
    sketch = _Recorder()
    run(sketch, 80, 60)
    assert (sketch.width, sketch.height) == (80, 60)