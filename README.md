# doomdungeon

Building blocks for a classic terminal dungeon crawler: a level map with
rooms and mazes, monster selection and saving throws, the hero's pack, ring
effects, decoding of terminal key sequences into movement commands, the
tombstone and the top-scores list, and access to the player's account and
shell.

The package needs nothing outside the standard library. Routines that involve
chance take a `random.Random` instance, so results can be replayed by seeding
it.

## Modules

- `doomdungeon.level` – the map of one level. `Level` holds a grid of `Place`
  objects (`ch`, `flags`, `monster`), nine `Room`s and the passage records.
  `Level.do_rooms()` lays out the rooms (some left out, some dark, some mazes),
  drops gold and places monsters; `Level.draw_room`, `Level.do_maze`,
  `Level.rnd_room`, `Level.rnd_pos`, `Level.find_floor`, `Level.roomin`,
  `Level.at` and `Level.clear` work on it. `step_ok(ch)` tells whether a
  creature may step on a character. `Coord`, `PlaceFlag` and `RoomFlag`
  describe positions and flags.
- `doomdungeon.monsters` – `randmonster(rng, depth, wander)` picks a monster
  letter for a depth, `exp_add(level, max_hp)` gives the experience it is
  worth, and `save_throw(rng, which, level)` rolls a saving throw.
- `doomdungeon.misc` – `sign`, `spread`, `vowelstr`, `add_str` (strength kept
  between 3 and 31), `rnd_thing`, `choose_str` and `trip_ch`, plus the map and
  item symbols.
- `doomdungeon.pack` – `Pack` and `Item`. `Pack.add` stacks potions, scrolls
  and food and groups of the same kind, keeps items ordered by type and gives
  each a letter; it raises `PackFullError` when the pack is full.
  `Pack.leave`, `Pack.pack_char`, `Pack.inventory` and `Pack.find` complete it.
- `doomdungeon.rings` – `RingKind`, `ring_eat(rng, which)` for the food a ring
  uses each turn, and `ring_num(which, bonus, known)` for its bonus label.
- `doomdungeon.keys` – `KeyDecoder` turns curses key codes and ESC-prefixed
  sequences into walk commands (`hjklyubn`) and run commands (their control
  characters); `decode`, `translate_key` and `ctrl` are shortcuts.
- `doomdungeon.rip` – `tombstone(...)` returns the lines of the tombstone,
  `killname` and `death_monst` name causes of death, `center` centres text on
  the stone, and `ScoreBoard` with `ScoreEntry` keeps and prints the top
  scores.
- `doomdungeon.system` – `get_username`, `get_homedir`, `get_shell`,
  `shell_escape` (runs the player's shell and waits for it), `get_realname`,
  `get_uid`, `get_pid`, `load_average`, `directory_exists`, `unlink` and
  `chmod`.

## Example

```python
import random

from doomdungeon.keys import ctrl, decode
from doomdungeon.level import Level
from doomdungeon.pack import Item, Pack
from doomdungeon.rip import ScoreBoard, ScoreEntry

rng = random.Random(1980)

level = Level(rng, depth=3)
level.do_rooms()                         # rooms, gold and monsters
spot = level.find_floor(None, 0, False)  # a free floor spot in some room

pack = Pack()
pack.add(Item(type="!", which=0, name="a blue potion"))
print(pack.inventory())                  # ['a) a blue potion']

assert decode([27, ord("["), ord("A")]) == [ctrl("K")]   # run up

board = ScoreBoard()
place = board.insert(ScoreEntry(score=500, name="Fred", level=4, monster="K"))
for line in board.format(highlight=place, monster_names={"K": "kobold"}):
    print(line)
```

`killname` and `ScoreBoard.format` need a mapping from monster letters to
names for deaths caused by monsters; an unknown letter raises `KeyError`.

## What the package does not do

There is no game to run: no command, no screen drawing and no main loop.
`Level` digs rooms and mazes but does not draw the corridors between rooms,
place traps or stairs, or put objects on the floor. There is no option
parsing, no potion, scroll or movement handling, and the score list lives in
memory only; reading and writing a score file is left to the caller.

## Running the tests

The tests use pytest, available through the `test` extra:

```
pip install -e .[test]
pytest
```