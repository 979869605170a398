# cubraycaster

A small first-person raycasting engine in the style of Wolfenstein 3D.
It reads a `.cub` scene file, checks it, and renders textured walls over a
flat ceiling and floor in a 1440×900 window (drawn with pygame).

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install .[test]
pytest
```

## Running

```
cubraycaster path/to/scene.cub
```

The command takes exactly one argument, whose last dotted name part must
start with `cub`. If the arguments are wrong or the scene (or one of its
textures) cannot be read, it prints `Error` followed by the reason and
exits with status 1.

### Controls

| Key          | Action            |
|--------------|-------------------|
| `W` / `S`    | move forward/back |
| `A` / `D`    | strafe right/left |
| `←` / `→`    | turn the camera   |
| `Esc`        | quit              |

Closing the window quits as well. Movement stops at walls.

## The `.cub` format

A scene has its header lines first and the map last:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0

111111
100001
10N001
111111
```

- `NO`, `SO`, `WE` and `EA` each give the path of a texture ending in `.xpm`.
  Each may appear once only, and a tab inside a texture line is rejected.
- `F` (floor) and `C` (ceiling) each hold exactly three comma-separated
  decimal values in the range 0–255, and each may appear once only.
- Blank lines may separate header lines. As soon as all six header entries
  are known, the rest of the file is the map. Blank lines may come before the
  map; a blank line inside or after the map is an error.
- The map may hold only `0`, `1`, whitespace and exactly one player start:
  `N`, `S`, `E` or `W`. The start letter sets the direction the player faces.
- The map must be closed by walls: the first and last rows hold only walls
  and whitespace, every row starts and ends with `1`, every whitespace cell is
  bordered only by walls or whitespace, and any part of a row that is longer
  than its neighbour is all `1`.

Textures are sampled as 64×64 images. XPM colours may be given as `#rrggbb`
or as X11 colour names; `None` pixels are stored as transparent black.

## Using it as a library

- `cubraycaster.config.load_scene(path)` reads and checks a scene and returns
  a `SceneConfig` (`textures`, `floor`, `ceiling`, `grid`). Any problem with
  the file or its map raises `ConfigError`. `parse_scene(lines)` does the same
  for an iterable of lines.
- `cubraycaster.mapcheck.validate_map(grid)` checks a map grid on its own,
  returns the player's direction letter and raises `MapError` when invalid.
- `cubraycaster.xpm.load_xpm(path)` and `parse_xpm(text)` read XPM images into
  an `Image`; they raise `XpmError` on bad data.
- `cubraycaster.image.Image` is a 32-bit pixel buffer with `put_pixel`,
  `get_pixel`, `fill_halves` and `to_bytes`.
- `cubraycaster.raycast.cast_ray(grid, x, y, angle)` returns a `RayHit`, and
  `Renderer` draws the walls seen by a `cubraycaster.player.Player` into an
  `Image`.
- `cubraycaster.colors.lookup_color(name)` resolves X11 colour names such as
  `"dark slate"` or `"gray50"`, ignoring case.
- `cubraycaster.game.Game` ties these together; `Game.frame()` renders one
  frame and `Game.handle_key(key)` applies a key press.

```python
from cubraycaster.config import load_scene
from cubraycaster.game import Game

scene = load_scene("maps/example.cub")
game = Game(scene)
image = game.frame()          # render one frame into an Image
raw = image.to_bytes()        # raw 32-bit pixels, B, G, R, X order
```

## Limitations

There is no minimap, no sprites and no sound. Rays treat a `D` cell as a
solid wall, but the map check does not accept `D`, so scenes cannot contain
doors.