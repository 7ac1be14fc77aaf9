# lancer

Lancer holds the logic of a small freehand drawing program. Pointer
samples are collected into strokes, and finished strokes are turned into
ribbons of vertices whose width follows a simulated pen pressure: the
faster the pointer moves, the lighter and thinner the line. Finished
strokes can be undone one at a time or cleared all at once, and the pen
colour is chosen with a model of an HSV colour wheel with a
saturation/value triangle inside it.

It uses only the Python standard library.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## The command

```
lancer
lancer --version
```

`lancer` builds the main window model and prints its title,
`Lancer: v<version>`. With `--version` it prints the version alone.

The version comes from `lancer.app.load_version`, which tries a list of
candidate files in order and returns the first non-empty, stripped
contents. The command looks for `version.txt` next to the running
script and then for `assets/version.txt` under the current directory,
and falls back to `Unknown Version` when neither holds a version.

## Using it as a library

- `lancer.geometry`: `calculate_pressure(pos_f, pos_i, delta_ms,
  speed_sense)` turns the distance and time between two samples into a
  pressure clamped to 0.1–1.0 (0.5 when the time delta is not positive);
  `distance` measures between two points; `to_opengl_coords` maps a
  canvas point to drawing coordinates, which coincide with canvas ones.
- `lancer.stroke`: `StrokePoint`, one captured sample (position,
  pressure, thickness, time in milliseconds and colour), with
  `with_thickness(min_thickness, max_thickness)` deriving thickness from
  pressure; `Vertex`, one corner of the rendered ribbon.
- `lancer.processor`: `generate_vertices(stroke)` builds triangle-strip
  vertices for a stroke, subdividing segments longer than 5 pixels into
  three; `interpolate_points(p1, p2, segments)` returns evenly spaced
  points and raises `ValueError` when `segments` is below 1.
- `lancer.files.load_file_as_text(path)` reads a UTF-8 text file and
  raises `RuntimeError` when it cannot be opened.
- `lancer.color.Color`: an RGB colour with components between 0 and 1,
  `Color.from_hsv(h, s, v)` (hue in degrees), `to_hsv()` and `name()`
  giving `#rrggbb`. Out-of-range components raise `ValueError`.
- `lancer.manager.StrokeManager` keeps finished strokes and the number
  of vertices each produced; `add_stroke`, `undo` (returns `False` when
  there is nothing to undo), `clear`, `clear_vertex_counts` and
  `append_stroke`. The vertex list passed in is updated in place.
- `lancer.renderer`: `VertexBuffer` (`upload`, `clear`, `vertices`,
  `nbytes`), `stroke_preview_vertices(stroke, color)` for the stroke
  still being drawn, and `strip_ranges` / `split_strips` for cutting the
  shared vertex list back into one strip per stroke.
- `lancer.controller`: `MouseButton` flags and `CanvasController`,
  which follows the pointer through `press`, `move` and `release`;
  samples closer than 1.5 pixels to the previous one are dropped.
  Times may be passed as `now` in milliseconds; otherwise a monotonic
  clock is used.
- `lancer.canvas.Canvas` ties the controller, stroke manager and vertex
  buffer together: `press`, `move`, `release`, `undo`, `clear`,
  `set_color`, and `paint()`, which returns a `Frame` holding the
  background colour, one vertex strip per finished stroke and the
  preview vertices of the stroke in progress.
- `lancer.color_picker.HSVColorPicker` holds the geometry and state of
  the colour wheel and triangle: `resize`, `press`, `move`, `release`,
  hit tests, conversions between triangle points and
  saturation/value, `wheel_lines()`, `hue_indicator()` and
  `triangle_pixels()`. Callables added to `listeners` receive each
  colour picked through pointer input.
- `lancer.app.MainWindow` connects the colour picker to the canvas and
  keeps the window title and the `#rrggbb` name of the current colour.

## What it does not do

There is no window, on-screen display or GPU drawing: `Canvas.paint`
and the colour picker only produce the vertex, line and pixel data a
display would draw, and the `lancer` command prints the window title
rather than opening a window. Drawings are not saved to or loaded from
files.