# knightquest

A small tile-based arcade game. You play a knight in a walled dungeon. Pick up
every collectible, deal with the enemies patrolling the corridors, and walk
through the exit to win. If a living enemy reaches your tile, you die.

## Installing

```
pip install .
```

The game window uses `pygame`. To run the test suite, install the `test` extra:

```
pip install ".[test]"
pytest
```

## Playing

```
knightquest path/to/level.ber
```

The command takes exactly one argument, the map file. With any other number of
arguments it prints `You need 1 argument !` on standard error and exits with
status 1. If the file cannot be opened, it exits with status 0 and prints
nothing.

### Sprites

The window draws its images from a directory named `d` in the current working
directory. `knightquest.render.sprite_paths()` lists every file that is
expected there:

- `Wall2.xpm`, `Wall3.xpm`, `Wall4.xpm`
- `Floor1.xpm` through `Floor9.xpm`
- `Exit1.xpm`, `Exit2.xpm`, `Obj1.xpm`
- `aw_1/W1.xpm` through `aw_1/W6.xpm`
- `rp/rp1-6.xpm`, `lp/lp1-6.xpm`
- `pa/ra1-6.xpm`, `pa/la1-6.xpm`, `pa/ua1-6.xpm`, `pa/da1-6.xpm`
- `pe/en1-6.xpm`, `pe/len1-6.xpm`
- `dp/dp1-6.xpm`

The images are not shipped with the package. You have to provide them
yourself.

### Controls

| Key         | Action                                                  |
|-------------|---------------------------------------------------------|
| `W A S D`   | Move up / left / down / right                           |
| Left, Right | Turn the knight and aim the attack that way             |
| Up, Down    | Aim the attack up or down                               |
| `Space`     | Attack the tile next to the knight in the aimed direction |
| `Esc`       | Quit                                                    |

Moving with `A` or `D` also turns the knight to face left or right. Walls stop
the knight.

Each step is counted. The terminal prints `Number of movements : N`, and the
window shows the count as well. Stepping onto a collectible picks it up.
Stepping onto the exit ends the game and prints `VICTORY !!`. Once the death
animation finishes, the game ends and prints `YoU aRe DeAd !`.

Enemies walk left and right and turn around when they meet a wall. A struck
enemy dies and stays on the map as a corpse.

## Map format

A map is a text file of rows, all of the same width, made of these characters:

| Char | Meaning                    |
|------|----------------------------|
| `1`  | Wall                       |
| `0`  | Floor                      |
| `P`  | Player start (exactly one) |
| `E`  | Exit (exactly one)         |
| `C`  | Collectible (at least one) |
| `M`  | Enemy                      |

Example:

```
1111111
1P0C0E1
10M0001
1111111
```

A map is rejected with one of these messages on standard error, and the
command exits with status 1:

| Message | Reason |
|---------|--------|
| `Invalid character in map.` | The map contains any other character. |
| `Invalid size of map.` | A row is shorter than three characters, or the rows differ in width. |
| `Empty Map.` | The file has no rows. |
| `The border of the map need to be only walls.` | The border is not made entirely of walls. |
| `Error map, check 'E', 'P' or 'C'.` | There is no collectible, or not exactly one `P` and one `E`. |
| `The map is impossible.` | The map cannot be completed from the start. |

## Using it as a library

Maps can be loaded and checked without opening a window:

```python
from knightquest.mapfile import load_map, check_map, MapError

try:
    level = load_map("level.ber")
    check_map(level)
except MapError as err:
    print(err)
```

`knightquest.mapfile` also provides `parse_map` (build a `GameMap` from lines
of text), `has_wall_border`, `count_elements` and `reach_exit`. A `GameMap` is
indexed as `game_map[x, y]` and has `find`, `count` and `copy`.

### Game rules

`knightquest.game.Game` holds the rules and needs no display. You can drive it
key by key with `Game.handle_key`, which takes the codes in `Key`. You can
drive it frame by frame with `Game.tick`. The game ends by raising `GameOver`,
whose `outcome` is an `Outcome`: `VICTORY`, `DEATH` or `QUIT`.

### Drawing

`knightquest.render` contains the rules for choosing tiles: `mark_border`,
`wall_tile` and `floor_tile`. It also has `Renderer`, which draws a `Game` in a
pygame window.

### Helper modules

The package includes some small helper modules:

- `knightquest.chars`: character classes, `atoi`, `itoa`
- `knightquest.strings`: `split`, `strchr`, `strnstr`, `substr`, `strlcpy`, …
- `knightquest.memory`: byte-buffer helpers on `bytearray`
- `knightquest.linkedlist`: `LinkedList` and `Node`
- `knightquest.printf`: `sprintf` and `printf` with the conversions `c s p d i u x X %`
- `knightquest.linereader`: `LineReader` and `get_next_line`, which read a stream line by line through a fixed-size buffer