import random

import pytest

from doomdungeon.level import (
    Coord,
    Level,
    PlaceFlag,
    Room,
    RoomFlag,
    step_ok,
)


def _box_room():
    return Room(pos=Coord(2, 3), size=Coord(5, 6))


@pytest.mark.parametrize("ch", [" ", "|", "-", "A", "Z", "k"])
def test_step_not_ok(ch):
    assert step_ok(ch) is False


@pytest.mark.parametrize("ch", [".", "#", "+", "*", "%"])
def test_step_ok(ch):
    assert step_ok(ch) is True


def test_at_out_of_bounds():
    level = Level(random.Random(1))
    with pytest.raises(IndexError):
        level.at(-1, 0)
    with pytest.raises(IndexError):
        level.at(level.lines, 0)
    with pytest.raises(IndexError):
        level.at(0, level.cols)


def test_clear_resets_places():
    level = Level(random.Random(1))
    place = level.at(5, 5)
    place.ch = "#"
    place.flags = int(PlaceFlag.PASS)
    place.monster = "K"
    level.clear()
    assert place.ch == " "
    assert place.flags == PlaceFlag.REAL
    assert place.monster is None


def test_draw_room_walls_and_floor():
    level = Level(random.Random(1))
    room = _box_room()
    level.draw_room(room)
    assert level.at(2, 3).ch == "-"
    assert level.at(6, 8).ch == "-"
    assert level.at(4, 3).ch == "|"
    assert level.at(4, 8).ch == "|"
    interior = {level.at(y, x).ch for y in range(3, 6) for x in range(4, 8)}
    assert interior == {"."}
    assert level.at(4, 9).ch == " "


def test_rnd_pos_inside_walls():
    level = Level(random.Random(7))
    room = _box_room()
    for _ in range(100):
        spot = level.rnd_pos(room)
        assert 3 <= spot.y <= 5
        assert 4 <= spot.x <= 7


def test_rnd_room_skips_gone():
    level = Level(random.Random(3))
    for room in level.rooms[:-1]:
        room.flags = RoomFlag.GONE
    assert {level.rnd_room() for _ in range(30)} == {len(level.rooms) - 1}


def test_find_floor_in_room():
    level = Level(random.Random(5))
    room = _box_room()
    level.draw_room(room)
    spot = level.find_floor(room, 0, False)
    assert level.at(spot.y, spot.x).ch == "."
    monster_spot = level.find_floor(room, 0, True)
    assert level.at(monster_spot.y, monster_spot.x).monster is None


def test_find_floor_gives_up():
    level = Level(random.Random(5))
    room = _box_room()
    assert level.find_floor(room, 5, False) is None
    assert level.find_floor(room, 5, True) is None


def test_roomin():
    level = Level(random.Random(2))
    room = _box_room()
    level.rooms[0] = room
    level.draw_room(room)
    assert level.roomin(Coord(4, 5)) is room
    assert level.roomin(Coord(20, 70)) is None
    level.at(20, 70).flags = int(PlaceFlag.PASS) | 2
    assert level.roomin(Coord(20, 70)) is level.passages[2]


def _passage_cells(level):
    return {
        (y, x)
        for y in range(level.lines)
        for x in range(level.cols)
        if level.at(y, x).flags & PlaceFlag.PASS
    }


@pytest.mark.parametrize("seed", range(8))
def test_maze_is_connected(seed):
    level = Level(random.Random(seed), depth=1)
    room = Room(pos=Coord(1, 0), size=Coord(7, 25), flags=RoomFlag.MAZE)
    level.draw_room(room)
    cells = _passage_cells(level)
    assert cells
    for y, x in cells:
        assert 1 <= y <= 8 and 0 <= x <= 25
        assert level.at(y, x).ch == "#"
    start = next(iter(cells))
    seen = {start}
    todo = [start]
    while todo:
        y, x = todo.pop()
        for ny, nx in ((y + 1, x), (y - 1, x), (y, x + 1), (y, x - 1)):
            if (ny, nx) in cells and (ny, nx) not in seen:
                seen.add((ny, nx))
                todo.append((ny, nx))
    assert seen == cells


def test_do_rooms_find_floor_anywhere():
    level = Level(random.Random(11), depth=1)
    level.do_rooms()
    for _ in range(20):
        spot = level.find_floor(None, 0, False)
        assert level.at(spot.y, spot.x).ch in (".", "#")


def test_amulet_blocks_gold_above_deepest():
    for seed in range(10):
        level = Level(random.Random(seed), depth=3, amulet=True, max_level=8)
        level.do_rooms()
        assert all(room.goldval == 0 for room in level.rooms)