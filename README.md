# sketchbook

A collection of small animated and interactive 2D drawing sketches that run
in a pygame window.

Each sketch is a subclass of `sketchbook.canvas.Sketch` with `setup`,
`update` and `draw` steps and the input hooks `mouse_released` and
`key_released`. Drawing goes through a `sketchbook.canvas.Canvas`, which
records circles, lines, ellipses, rectangles and polylines under a transform
stack (`translate`, `rotate`, `scale`, `push`, `pop`); the runner then paints
those commands with pygame, honouring colour alpha.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running a sketch

```
sketchbook --list
sketchbook tunnel
sketchbook noise --width 800 --height 600
```

`--list` prints the sketch names; `--width` and `--height` override the
window size. Closing the window ends the run. The sketches are:

| name | what it shows |
| --- | --- |
| `300balls` | 300 gray circles bouncing off the window edges |
| `ballObjects` | each mouse release adds a bouncing ball where it happened |
| `spinningStars` | each key release adds a bouncing ball at a random spot |
| `drops` | columns of stacked circles that fade and shrink |
| `tunnel` | fifteen nested ellipses receding into the dark |
| `mouseCircleGlow` | a soft translucent brush following the mouse (not cleared between frames) |
| `articulateArm` | four chained segments bent by the mouse's x position |
| `polyLineLissajous` | a Lissajous curve traced one vertex per frame |
| `linesAllOver` | a 10 × 10 grid of randomly turned and stretched strokes (500 × 500 window) |
| `magicLines` | 500 tracers chasing an eased mouse position over a fading trail |
| `process8` | 4000 drifting circles with dots where they cross (slow: pairs are compared every frame) |
| `noise` | a smooth noise line against a jagged random line (1200 × 1000 window) |
| `depthCloud` | a photograph sampled into coloured points by a depth map |
| `simpleSoundAnimated` | a green circle that jumps with the loudness of a sound |

All other sketches open at 1024 × 768.

Two sketches read files from the current directory: `depthCloud` loads
`guggenheim.jpg` and `depth.png`, and `simpleSoundAnimated` loads
`1085.mp3` and plays it on each mouse release.

## Using it from Python

```python
from sketchbook.app import create_sketch, run

sketch = create_sketch("drops")          # usual window size
frames = run(sketch)                     # returns the number of frames drawn
```

`create_sketch(name, width=None, height=None)` raises `ValueError` for an
unknown name or a non-positive size.

The building blocks can be used on their own:

- `sketchbook.canvas.map_range(value, in_min, in_max, out_min, out_max, clamp=False)`
  maps a value from one range onto another, optionally clamped.
- `sketchbook.canvas.Color`, `Polyline` and `Canvas`: an RGBA colour with
  0–255 channels, a list of vertices that can be closed, and the recording
  drawing surface.
- `sketchbook.balls.star_outline(radius)` builds a closed five-pointed star
  `Polyline` centred on the origin.
- `sketchbook.particles.circle_intersections(x1, y1, r1, x2, y2, r2)` returns
  the two points where two circles cross, or an empty list when they are
  apart, one lies inside the other, or they share a centre.
- `sketchbook.noise.noise(*coords)` and `signed_noise(*coords)` give simplex
  noise of one to three coordinates, roughly in 0..1 and -1..1.
- `sketchbook.depth.build_point_cloud(depth_image, color_image, skip=4)`
  turns two Pillow images into `CloudPoint`s, with z taken from the depth
  map's red channel in -300..300.
- `sketchbook.audio.BandSmoother.feed(spectrum)` averages spectrum bands and
  returns a level that jumps up at once and sinks by a decay factor
  (0.96 by default) each frame.

## Writing your own sketch

```python
from sketchbook.app import run
from sketchbook.canvas import Color, Sketch


class Dot(Sketch):
    def draw(self, canvas):
        canvas.set_color(Color(200, 0, 0))
        canvas.draw_circle(100, 100, 20)


run(Dot(), 400, 300)
```

A sketch controls its frame rate, background colour and whether the
background is cleared each frame through `frame_rate`, `background` and
`background_auto`, and reads input from `mouse_x`, `mouse_y`,
`mouse_pressed` and `frame_num`.

## What it does not do

Everything is drawn flat in 2D. There is no 3D camera, lighting, textured
primitives or loading of 3D model files; the `depthCloud` points keep their z
value but are drawn straight on, and `simpleSoundAnimated` shows its sphere
as a circle. The `spinningStars` sketch draws its bodies as circles;
`star_outline` is available but no sketch draws it.