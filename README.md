# pixelpaint

A small pixel art editor built on pygame. You paint on a 16 × 16 grid of
cells and save the result as a PNG image.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
pixelpaint
```

This opens a 512 × 512 window with a 256 × 256 canvas (16-pixel cells) in the
middle, a toolbar down the left-hand side and a frame-rate counter in the
lower right corner.

Options:

- `--icons DIR`: directory holding the toolbar icons (default: the current
  directory).
- `--export PATH`: where exports are written (default: `Masterpiece.png`).

The toolbar needs these PNG files in the icons directory:
`pencilIcon2.png`, `eraserIcon.png`, `paintBucketIcon.png`,
`colourPickerIcon.png`, `colourPickerIconCurrentColour.png`, `clearIcon.png`
and `downloadIcon.png`. They are scaled to 32 × 32 pixels. The package does
not ship these images; the editor will not start without them.

## Tools

The toolbar buttons, from top to bottom:

- **Pencil**: paints the cell under the mouse in the selected colour while the
  left button is held. This is the default tool.
- **Eraser**: makes cells transparent again.
- **Paint bucket**: flood-fills the connected area of one colour with the
  selected colour. Neighbours are the four cells above, below, left and right.
- **Colour picker**: opens an HSV panel at the bottom of the window. Hue runs
  left to right and saturation top to bottom. The slider next to the panel sets
  the value (brightness). Hold the left button over the panel to choose a
  colour. The picker button's inner icon is tinted with the selected colour.
  Click the button again to close the panel and go back to the pencil.
- **Clear**: makes every cell transparent.
- **Export**: writes the canvas to the export path as a PNG. Each cell becomes
  one block of pixels, so the 256 × 256 canvas gives a 256 × 256 image.
  Transparent cells stay transparent.

The clear and export buttons light up for 0.15 seconds when you click them.

The window can be resized, but the layout stays fixed at its 512 × 512
positions. There is no undo, no loading of existing images and no way to
change the canvas size from the command line.

## Using the pieces from Python

The editor's parts can also be used without the window:

```python
from pixelpaint.canvas import Canvas
from pixelpaint.colour import Colour, colour_from_hsv, colour_name
from pixelpaint.tools import clear_canvas, export_png, paint_bucket, render_image

canvas = Canvas(256, 256, Colour(200, 200, 200, 255), 16)
canvas.create_grid()
canvas.set_cell_colour((0, 0), Colour(230, 41, 55, 255))
paint_bucket(canvas, (5, 5), Colour(0, 121, 241, 255))
export_png(canvas, "out.png")
```

- `pixelpaint.colour`: `Colour` is an RGBA named tuple (alpha defaults to
  255). `colour_from_hsv(hue, saturation, value)` converts hue in degrees and
  saturation and value in 0..1 to an opaque colour. `colour_name(colour)`
  returns the palette name (`"RED"`, `"ORANGE"`, `"YELLOW"`, `"GREEN"`,
  `"BLUE"`, `"PURPLE"`, `"WHITE"`, `"BLACK"`) or `"UNKNOWN"`.
- `pixelpaint.canvas`: `Canvas.create_grid()` sizes the grid to the canvas
  with transparent cells. `Canvas.cell_at(position, x_offset, y_offset)` maps a
  screen position to a `(row, column)` cell, or returns `None` when the
  position is outside the grid. `Canvas.contains(cell)` tells whether a cell
  lies on the grid. `Canvas.cell_colour(cell)` returns a cell's colour, or the
  canvas colour for cells off the grid. `Canvas.set_cell_colour(cell, colour)`
  raises `IndexError` for cells off the grid. `Canvas.centre_position()`
  returns the centre relative to the top-left corner. `draw`, `draw_cells`
  and `draw_grid` paint onto a pygame surface.
- `pixelpaint.tools`: `paint_bucket`, `clear_canvas`, `render_image` (returns
  a pygame surface of the canvas size) and `export_png` (returns the path
  written).
- `pixelpaint.ui`: `Toolbar` draws the button column and maps positions to
  button slots with `button_at`, which returns `None` off the buttons.
- `pixelpaint.app`: `PaintState` holds the active `Tool`, selected colour and
  slider value; `PaintState.handle_button` and `PaintState.apply_brush` apply
  toolbar clicks and brush strokes. `picker_colour` and `slider_value` are the
  colour picker's position-to-colour and position-to-value mappings. `main`
  starts the editor.