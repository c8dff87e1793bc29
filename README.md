# gba3d

A small fixed-point software rasterizer. It draws flat-coloured triangles
and lines into 16-bit framebuffers laid out like a handheld console's
bitmap video modes, using integer maths, 256-step lookup tables and the
console's clipping rules.

## Modules

- `gba3d.lookups`: the tables `LUT_COS`, `LUT_SIN` and `LUT_COSHALF`,
  indexed by an 8-bit angle.
- `gba3d.gba`: the `Key` and `DisplayControl` flags, `SCREEN_WIDTH` /
  `SCREEN_HEIGHT`, `rgb()` for packing 5-bit channels and `key_down()` for
  reading an active-low key register value.
- `gba3d.mathtypes`: frozen integer vectors `Vec2` and `Vec3`.
- `gba3d.fixmath`: `cos_lut`, `sin_lut`, `vector_2d_rotate`,
  `vector_2d_rotate_half`, the backface test `clockwise`, and the view
  tests `inside_view`, `inside_view_horizontal` and `inside_view_vertical`.
- `gba3d.camera`: `Camera(pos, direction, zoom)` with `move()` and `rotate()`.
- `gba3d.polygon`: screen-space `Poly` and world-space `Poly3D`
  (with `Poly3D.from_coords()`).
- `gba3d.rendering`: `Renderer`, which holds two frame-buffer pages
  (`pages`), the page being drawn into (`buffer`) and the page selected for
  display (`displayed`). It offers `swap_buffers()`, `clear_buffer()`,
  `pixel()`, `draw_pixel()`, `draw_triangle()`, `draw_triangle_clipped()`,
  `draw_line_low()`, `draw_line_high()` and `draw_line()`. The module also
  has `project_vertex()` and the helpers `quad8`, `quad16` and `fill16`.
  Pixels are stored column by column (`x * 160 + y`), and writes outside a
  page raise `IndexError`.
- `gba3d.model`: `Model(polycount, tris, pos, direction)`, which projects
  its first `polycount` triangles through a camera and rasterises them,
  clipping those that leave the screen. A `polycount` larger than the
  triangle list raises `ValueError`.
- `gba3d.scene`: `apply_input()` turns and moves a camera from a key
  register value; `render_frame()` clears the drawing page and draws a model.
- `gba3d.triangle`: `render_triangle()` draws a colour-gradient triangle into
  a 240x160 mode-3 frame, returned row by row; `rgb15()` and `c_mix()` are
  its colour helpers.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from gba3d.camera import Camera
from gba3d.gba import Key
from gba3d.mathtypes import Vec2, Vec3
from gba3d.model import Model
from gba3d.polygon import Poly3D
from gba3d.rendering import Renderer
from gba3d.scene import apply_input, render_frame

tris = [
    Poly3D.from_coords(-5, -5, 0, 5, -5, 0, 5, 5, 0, 0x7C00),
    Poly3D.from_coords(-5, -5, 0, 5, 5, 0, -5, 5, 0, 0x03E0),
]
model = Model(len(tris), tris, Vec3(0, 0, 0), 0)
camera = Camera(Vec2(0, 0), 31, 4)
renderer = Renderer()

# Key bits are active-low: a cleared bit means the key is held.
apply_input(camera, 0x3FF ^ Key.UP)
render_frame(renderer, model, camera)
renderer.swap_buffers()
frame = renderer.displayed
```

## Command line

```
gba3d-triangle triangle.ppm
```

Renders the gradient triangle and writes it as a binary PPM image to the
given file, or to standard output when the file is omitted or is `-`.

## What it does not do

The package only fills memory buffers. It opens no window, reads no
keyboard or gamepad, and runs no frame loop or vertical-sync timing: the
caller supplies key register values and decides when to swap pages. It
ships no ready-made 3D models; triangles have to be built by the caller.