"""The dungeon map of one level and the rooms laid out on it."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass, field
from typing import Optional

from .monsters import randmonster

NUMLINES = 24
NUMCOLS = 80
MAXROOMS = 9
MAXPASS = 13

FLOOR = "."
PASSAGE = "#"
DOOR = "+"
GOLD = "*"


@dataclass(frozen=True)
class Coord:
    y: int
    x: int


class PlaceFlag(enum.IntFlag):
    PASS = 0x80
    SEEN = 0x40
    DROPPED = 0x20
    LOCKED = 0x20
    REAL = 0x10
    PNUM = 0x0F
    TMASK = 0x07


class RoomFlag(enum.IntFlag):
    DARK = 0o1
    GONE = 0o2
    MAZE = 0o4


@dataclass
class Place:
    ch: str = " "
    flags: int = int(PlaceFlag.REAL)
    monster: Optional[str] = None


@dataclass
class Room:
    pos: Coord = Coord(0, 0)
    size: Coord = Coord(0, 0)
    flags: RoomFlag = RoomFlag(0)
    goldval: int = 0
    gold: Optional[Coord] = None
    exits: list[Coord] = field(default_factory=list)


def step_ok(ch: str) -> bool:
    """Whether a creature may step onto a space showing ``ch``."""
    if ch in (" ", "|", "-"):
        return False
    return not ch.isalpha()


_DIG_STEPS = (Coord(2, 0), Coord(-2, 0), Coord(0, 2), Coord(0, -2))


class Level:
    """The places, rooms and passages of one dungeon level."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        depth: int = 1,
        *,
        lines: int = NUMLINES,
        cols: int = NUMCOLS,
        amulet: bool = False,
        max_level: Optional[int] = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.depth = depth
        self.lines = lines
        self.cols = cols
        self.amulet = amulet
        self.max_level = depth if max_level is None else max_level
        self.places = [[Place() for _ in range(cols)] for _ in range(lines)]
        self.rooms = [Room() for _ in range(MAXROOMS)]
        self.passages = [Room() for _ in range(MAXPASS)]
        self.monsters: list[tuple[Coord, str]] = []

    def _rnd(self, n: int) -> int:
        return 0 if n == 0 else self.rng.randrange(abs(n))

    def at(self, y: int, x: int) -> Place:
        """The place at row ``y``, column ``x``."""
        if not (0 <= y < self.lines and 0 <= x < self.cols):
            raise IndexError(f"position {y},{x} is off the map")
        return self.places[y][x]

    def clear(self) -> None:
        """Wipe every place and forget the monsters."""
        for row in self.places:
            for place in row:
                place.ch = " "
                place.flags = int(PlaceFlag.REAL)
                place.monster = None
        self.monsters.clear()

    def do_rooms(self) -> None:
        """Lay out, dig and populate the rooms of the level."""
        bsze = Coord(self.lines // 3, self.cols // 3)
        for room in self.rooms:
            room.goldval = 0
            room.gold = None
            room.exits = []
            room.flags = RoomFlag(0)
        for _ in range(self._rnd(4)):
            self.rooms[self.rnd_room()].flags |= RoomFlag.GONE

        for i, room in enumerate(self.rooms):
            top = Coord((i // 3) * bsze.y, (i % 3) * bsze.x + 1)
            if room.flags & RoomFlag.GONE:
                while True:
                    room.pos = Coord(
                        top.y + self._rnd(bsze.y - 2) + 1,
                        top.x + self._rnd(bsze.x - 2) + 1,
                    )
                    room.size = Coord(-self.lines, -self.cols)
                    if 0 < room.pos.y < self.lines - 1:
                        break
                continue

            if self._rnd(10) < self.depth - 1:
                room.flags |= RoomFlag.DARK
                if self._rnd(15) == 0:
                    room.flags = RoomFlag.MAZE

            if room.flags & RoomFlag.MAZE:
                size_y, size_x = bsze.y - 1, bsze.x - 1
                pos_x = 0 if top.x == 1 else top.x
                pos_y = top.y
                if pos_y == 0:
                    pos_y += 1
                    size_y -= 1
                room.pos = Coord(pos_y, pos_x)
                room.size = Coord(size_y, size_x)
            else:
                while True:
                    room.size = Coord(
                        self._rnd(bsze.y - 4) + 4, self._rnd(bsze.x - 4) + 4
                    )
                    room.pos = Coord(
                        top.y + self._rnd(bsze.y - room.size.y),
                        top.x + self._rnd(bsze.x - room.size.x),
                    )
                    if room.pos.y != 0:
                        break
            self.draw_room(room)

            if self._rnd(2) == 0 and (not self.amulet or self.depth >= self.max_level):
                room.goldval = self._rnd(50 + 10 * self.depth) + 2
                room.gold = self.find_floor(room, 0, False)
                self.at(room.gold.y, room.gold.x).ch = GOLD

            if self._rnd(100) < (80 if room.goldval > 0 else 25):
                spot = self.find_floor(room, 0, True)
                letter = randmonster(self.rng, self.depth, False)
                self.at(spot.y, spot.x).monster = letter
                self.monsters.append((spot, letter))

    def draw_room(self, room: Room) -> None:
        """Draw walls and floor of a room, or dig a maze for a maze room."""
        if room.flags & RoomFlag.MAZE:
            self.do_maze(room)
            return
        top, left = room.pos.y, room.pos.x
        bottom = top + room.size.y - 1
        right = left + room.size.x - 1
        for x in (left, right):
            for y in range(top + 1, bottom + 1):
                self.at(y, x).ch = "|"
        for y in (top, bottom):
            for x in range(left, right + 1):
                self.at(y, x).ch = "-"
        for y in range(top + 1, bottom):
            for x in range(left + 1, right):
                self.at(y, x).ch = FLOOR

    def _putpass(self, pos: Coord) -> None:
        place = self.at(pos.y, pos.x)
        place.flags |= int(PlaceFlag.PASS)
        if self._rnd(10) + 1 < self.depth and self._rnd(40) == 0:
            place.flags &= ~int(PlaceFlag.REAL)
        else:
            place.ch = PASSAGE

    def do_maze(self, room: Room) -> None:
        """Dig a maze of passages filling the room's area."""
        max_y, max_x = room.size.y, room.size.x
        start = room.pos
        y = (self._rnd(max_y) // 2) * 2
        x = (self._rnd(max_x) // 2) * 2
        self._putpass(Coord(y + start.y, x + start.x))

        stack = [(y, x)]
        while stack:
            y, x = stack[-1]
            cnt = 0
            next_y = next_x = 0
            for step in _DIG_STEPS:
                ny, nx = y + step.y, x + step.x
                if ny < 0 or ny > max_y or nx < 0 or nx > max_x:
                    continue
                if self.at(ny + start.y, nx + start.x).flags & PlaceFlag.PASS:
                    continue
                cnt += 1
                if self._rnd(cnt) == 0:
                    next_y, next_x = ny, nx
            if cnt == 0:
                stack.pop()
                continue
            if next_y == y:
                mid_x = next_x + start.x + (1 if next_x < x else -1)
                mid = Coord(y + start.y, mid_x)
            else:
                mid_y = next_y + start.y + (1 if next_y < y else -1)
                mid = Coord(mid_y, x + start.x)
            self._putpass(mid)
            self._putpass(Coord(next_y + start.y, next_x + start.x))
            stack.append((next_y, next_x))

    def rnd_room(self) -> int:
        """Index of a random room that is really there."""
        while True:
            index = self._rnd(MAXROOMS)
            if not self.rooms[index].flags & RoomFlag.GONE:
                return index

    def rnd_pos(self, room: Room) -> Coord:
        """A random spot inside the walls of ``room``."""
        return Coord(
            room.pos.y + self._rnd(room.size.y - 2) + 1,
            room.pos.x + self._rnd(room.size.x - 2) + 1,
        )

    def find_floor(
        self, room: Optional[Room], limit: int, monst: bool
    ) -> Optional[Coord]:
        """A free spot in ``room`` (any room if None); None after ``limit`` tries."""
        pick_room = room is None
        tries = limit
        while True:
            if limit:
                if tries == 0:
                    return None
                tries -= 1
            if pick_room:
                room = self.rooms[self.rnd_room()]
            assert room is not None
            wanted = PASSAGE if room.flags & RoomFlag.MAZE else FLOOR
            spot = self.rnd_pos(room)
            place = self.at(spot.y, spot.x)
            if monst:
                if place.monster is None and step_ok(place.ch):
                    return spot
            elif place.ch == wanted:
                return spot

    def roomin(self, pos: Coord) -> Optional[Room]:
        """The room or passage containing ``pos``, or None."""
        place = self.at(pos.y, pos.x)
        if place.flags & PlaceFlag.PASS:
            return self.passages[place.flags & PlaceFlag.PNUM]
        for room in self.rooms:
            if (room.pos.x <= pos.x < room.pos.x + room.size.x
                    and room.pos.y <= pos.y < room.pos.y + room.size.y):
                return room
        return None