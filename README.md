# cubcaster

cubcaster is a small first-person raycasting engine. It reads a `.cub`
scene file that names four wall textures, the floor and ceiling colours
and a grid map. It checks that the scene is well formed and then opens an
850 x 500 window titled "Cub3D" in which you can walk around the map. A
round minimap of the nearby walls, with the player as a red dot, is drawn
in the top-left corner.

## Installing

```
pip install .
```

This installs `pygame`, which draws the window and reads the keyboard.

## Running

```
cubcaster maps/example.cub
```

The command takes exactly one argument, the path to a scene file. If it
gets any other number of arguments it prints a usage line and exits with
status 1. If the scene is invalid, or a texture cannot be read, it prints
a short message saying what is wrong and exits with status 1. Quitting the
game exits with status 0.

Besides the four wall textures named in the scene, the game reads a
minimap frame image from `./textures/minimap.xpm`, relative to the
directory the command is run from; the file must exist. Its pixels whose
colour is `None` are left transparent. Texture paths in the scene are also
taken relative to the current directory.

### Controls

| Key          | Action             |
|--------------|--------------------|
| W            | move forward       |
| S            | move backward      |
| A            | strafe left        |
| D            | strafe right       |
| Left arrow   | turn left          |
| Right arrow  | turn right         |
| Esc          | quit               |

Closing the window also quits. Only one action is carried out per frame:
turning takes priority over moving forward or backward, which takes
priority over strafing. The player moves one world unit per step (a map
cell is 10 units wide) and turns one degree per step, and cannot walk into
walls or squeeze diagonally between two walls.

## Scene files

The part of the file name after its first dot must be exactly `cub`, so
`example.cub` is accepted but `example.map.cub` is not.

Lines that start with these identifiers set up the scene. They may appear
in any order, but all of them must come before the map:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm

F 220,100,0
C 225,30,0
```

- `NO`, `SO`, `WE` and `EA` name XPM images used as wall textures. The
  identifier must be followed by whitespace, the path must end in `.xpm`,
  `.xpm` may appear only once on the line, and the file must be readable.
- `F` and `C` give the floor and ceiling colours. The identifier must be
  followed by a space, then exactly three comma-separated decimal values,
  each from 0 to 255.
- Each identifier may appear only once.

The map comes after the identifiers and uses these characters:

- `1` is a wall.
- `0` is empty floor.
- a space is outside the map.
- `N`, `S`, `E` or `W` is the player's start position and the direction
  the player faces.

Shorter rows are padded with spaces. The map must be closed by walls, no
floor or player cell may touch a space, and there must be exactly one
player start. Blank lines after the map are ignored.

```
        1111111111111
        1000000000001
111111111011000001111
100000000011000001
11110111111111011101
11110111111111011101
11000000110101011100001
10000000000000001100001
10000000000000001101001
11000001110101011111011
11110111 1110101 101111
11111111 1111111 111111
```

## Using the library

The modules can also be used on their own:

- `cubcaster.scene`: `parse_scene(path)` reads a scene file and returns a
  `Scene` holding the raw identifier lines and the map lines;
  `parse_scene_lines(lines)` does the same for lines already read. Both
  raise `SceneError`. `has_valid_extension(file_name)` checks a name.
- `cubcaster.elements`: `parse_rgb(line)` returns a `(red, green, blue)`
  tuple and `parse_texture_path(line, check_exists)` returns a texture
  path; `validate_colors(scene)` returns the `(ceiling, floor)` colours and
  `validate_textures(scene, check_exists)` a dict of paths keyed by
  `"north"`, `"south"`, `"east"` and `"west"`. They raise `ElementError`.
- `cubcaster.mapcheck`: `validate_map(lines)` checks the map lines and
  returns a `Level` with the padded `grid`, the `player` character, its
  start `x`, `y` in world units and its `direction` in radians. It raises
  `MapError`.
- `cubcaster.xpm`: `load_xpm(path)`, `parse_xpm(text)` and
  `parse_xpm_lines(lines)` decode XPM images into an `XpmImage` with
  `width`, `height`, `pixels` and `pixel(x, y)`. They raise `XpmError`.
  Colours may be `#RRGGBB` values or names; `cubcaster.colornames.lookup_color(name)`
  resolves a name.
- `cubcaster.raycast`: `cast_ray(...)` returns a `RayHit` for one ray,
  `render_view(...)` draws the first-person view into a `FrameBuffer`
  (with `put(x, y, color)` and `get(x, y)`), and `render_minimap(...)`
  draws the round minimap. `WallTextures` holds the four wall images.
- `cubcaster.player`: `Player` moves and turns on a grid, `KeyState`
  records held keys (`Key` codes) and applies them, and `hits_wall(...)`
  tells whether a step is blocked.
- `cubcaster.app`: `load_config(path, check_exists)` runs every check and
  returns a `GameConfig`; `Game(config, textures, minimap)` holds a running
  game, with `step()` applying the held keys and `render()` drawing a frame
  without opening a window.

## What it does not do

There is no mouse look, no sound, no sprites, doors or enemies, and no
way to change the window size or key bindings from the command line. The
game shows a single scene and keeps no saved state.

## Running the tests

```
pip install ".[test]"
pytest
```