# pixeldynasty

Building blocks for *Pixel Dynasty*, a small falling-sand simulation drawn
with pygame. The package has three independent parts:

- **`pixeldynasty.quadtree`**: a region quadtree (`Quadtree`, `Rect`). It
  finds the items near a given area without scanning all of them.
- **`pixeldynasty.application`** and **`pixeldynasty.context`**: the window,
  the drawing canvas and the input state (`Application`, `Color`).
  `initialize()` and `shutdown()` start and stop pygame, and
  `load_sounds()` registers the default sound effects.
- **`pixeldynasty.textedit`**: an engine for a single-line or multi-line text
  field. It covers cursor movement, selection, typing, cut and paste, and
  bounded undo/redo (`TextEditState`, `Key`, `PlainTextBuffer`, `UndoState`).

The package needs Python 3.10 or newer and pygame. Install the `test` extra
to run the tests with pytest.

## Quadtree

A `Quadtree` covers a rectangular region given as a `Rect(x, y, w, h)`.
When a node holds more than four items, it splits into four quadrants. The
tree goes at most three levels below the root. Every item needs a `position`
attribute that is a `Rect`. An item that straddles a quadrant midline stays
in the parent node.

```python
from dataclasses import dataclass

from pixeldynasty.quadtree import Quadtree, Rect


@dataclass
class Grain:
    position: Rect


tree = Quadtree(0, Rect(0, 0, 40, 40))
for x in range(0, 40, 5):
    tree.insert(Grain(Rect(x, x, 1, 1)))

nearby = tree.retrieve(Rect(0, 0, 10, 10))  # candidates near the area
tree.clear()                                # empty it before the next frame
```

`retrieve` returns the items of every child node whose bounds intersect the
area, followed by the items held in the node itself. The result can contain
items that do not overlap the area, so check the candidates yourself when you
need exact hits. `get_index(rect)` tells you which quadrant (0 top-right,
1 top-left, 2 bottom-left, 3 bottom-right) wholly holds a rectangle. It
returns -1 when the rectangle fits in no single quadrant. `draw(surface)`
outlines every node on a pygame surface, which helps when debugging.

## Application shell

`Application.get_instance()` returns the single application object. The first
call creates it and opens a 640×640 window. Drawing happens on a 40×40 canvas
(`app.canvas`), and each canvas pixel is shown 16 times larger in the window.

`initialize()` sets up the audio mixer (44100 Hz, stereo, 2048-sample buffer)
and starts pygame. It then creates the application, loads the sounds
`"pixel"` and `"delete"` from `Resources/Sound/` under the current directory,
and returns the application. If the mixer cannot start, it writes a message
to standard error. `shutdown()` closes the window and stops pygame.

```python
from pixeldynasty.context import initialize, shutdown

app = initialize()
while not app.done:
    app.input()        # poll events
    app.display()      # clear the canvas to app.background_color
    app.draw_rectangle(10, 10, 4, 4, (200, 180, 90))
    app.draw_everything()
shutdown()
```

`input()` reacts to these events:

- Closing the window or releasing Escape sets `done`.
- Mouse buttons set `mb_left` and `mb_right`. Releasing any button clears both.
- Mouse motion updates `mouse_position` in canvas coordinates.

`draw_rectangle` accepts a `Color`, a `pygame.Color` or a tuple. A colour with
an alpha below 255 is blended onto the canvas. `render_image(image, x, y)`
draws a surface as it is. With `w` and `h` as well, it stretches the surface
to that size first.

Textures and sounds are stored under string identifiers with `add_texture`
and `add_sound`, and looked up with `get_texture` and `get_sound`. A file that
cannot be loaded produces a printed message and is skipped. A lookup for an
unknown identifier returns `None`. `close()` drops the assets and closes the
window.

## Text editing

`TextEditState` holds the cursor, the selection and the undo history of one
text field. The text itself lives in a buffer object. `PlainTextBuffer` is a
buffer with fixed-width glyphs that wraps only at newlines:

```python
from pixeldynasty.textedit.editor import Key, TextEditState
from pixeldynasty.textedit.layout import PlainTextBuffer

buffer = PlainTextBuffer("hello", 8.0, 16.0, 256)  # char width, line height, max length
state = TextEditState(False)                       # multi-line field

state.click(buffer, 40.0, 0.0)   # place the cursor after "hello"
state.type_text(buffer, " world")
state.undo(buffer)               # removes " world" again
state.redo(buffer)               # puts it back
state.key(buffer, Key.LINESTART | Key.SHIFT)  # select to the start of the line
```

`state.key(buffer, key)` takes one of these:

- A `Key` value: arrows, word left/right, line and text start/end, page
  up/down, Delete, Backspace, undo, redo, or Insert to toggle overwrite
  mode. Combine a key with `Key.SHIFT` to extend the selection. Page
  movement uses `row_count_per_page`, which must be set to a positive value
  for it to move.
- A character code or a string, which is typed.

Other operations:

- `click` and `drag` map mouse positions to characters.
- `cut` deletes the selection.
- `paste` replaces the selection with new text. It returns `False` when the
  buffer refuses the text because it would exceed `max_length`.

Lower-level pieces are also available:

- `pixeldynasty.textedit.navigation` provides `locate_coord`,
  `find_charpos`, `is_word_boundary`, `move_word_left` and
  `move_word_right`.
- `pixeldynasty.textedit.undo.UndoState` is the history on its own. By
  default it keeps 99 records and 999 characters, and it discards the oldest
  entries first when it runs out of room.

## What the package does not do

There is no command to run and no game loop of its own. The sand itself is
not part of the package: it has no pixel materials, physics or simulation
rules. The text-editing engine only edits text and tracks state. It does not
draw a text field on screen.