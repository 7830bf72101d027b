"""The hero's pack: stacking, ordering and lettering of carried items."""

from __future__ import annotations

import dataclasses
import string
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional

from .misc import AMULET, FOOD, POTION, RING, SCROLL, STICK

MAXPACK = 23
S_SCARE = 10

# Special inventory filters
CALLABLE = "callable"
R_OR_S = "ring_or_stick"

_MULTIPLE_TYPES = frozenset({POTION, SCROLL, FOOD})


class PackFullError(Exception):
    """Raised when an item does not fit in the pack."""


@dataclass
class Item:
    """A thing that can lie on the floor or be carried."""

    type: str
    which: int = 0
    count: int = 1
    group: int = 0
    name: str = ""
    packch: Optional[str] = None
    found: bool = False
    arm: int = 0
    hplus: int = 0
    dplus: int = 0
    protected: bool = False


class Pack:
    """The ordered contents of the hero's pack."""

    def __init__(self) -> None:
        self._items: list[Item] = []
        self._used: set[str] = set()
        self.slots = 0
        self.last_pick: Optional[Item] = None
        self.has_amulet = False

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def _make_room(self) -> None:
        self.slots += 1
        if self.slots > MAXPACK:
            self.slots = MAXPACK
            raise PackFullError("there's no room in your pack")

    def _take(self, item: Item) -> Item:
        item.found = True
        if item.type == AMULET:
            self.has_amulet = True
        return item

    def add(self, item: Item) -> Optional[Item]:
        """Put ``item`` in the pack, merging it into a stack where it fits.

        Returns the item as now held (possibly an existing stack), or None
        if an already-found scare monster scroll turned to dust.  Raises
        PackFullError if there is no room.
        """
        if item.type == SCROLL and item.which == S_SCARE and item.found:
            return None

        items = self._items
        if not items:
            items.append(item)
            item.packch = self.pack_char()
            self.slots += 1
            return self._take(item)

        def same(op: Item, group: bool = False) -> bool:
            if op.type != item.type or op.which != item.which:
                return False
            return not group or op.group == item.group

        last: Optional[int] = None
        idx = 0
        while idx < len(items):
            if items[idx].type != item.type:
                last = idx
                idx += 1
                continue
            while items[idx].type == item.type and items[idx].which != item.which:
                last = idx
                if idx + 1 == len(items):
                    break
                idx += 1
            op = items[idx]
            if same(op):
                if op.type in _MULTIPLE_TYPES:
                    self._make_room()
                    op.count += 1
                    return self._take(op)
                if item.group:
                    last = idx
                    while same(items[idx]) and items[idx].group != item.group:
                        last = idx
                        if idx + 1 == len(items):
                            break
                        idx += 1
                    op = items[idx]
                    if same(op, group=True):
                        op.count += item.count
                        self.slots -= 1
                        self._make_room()
                        return self._take(op)
                else:
                    last = idx
            break

        assert last is not None
        self._make_room()
        item.packch = self.pack_char()
        items.insert(last + 1, item)
        return self._take(item)

    def leave(self, item: Item, newobj: bool, all_: bool) -> Item:
        """Take ``item`` (or one of its stack) out of the pack and return it."""
        self.slots -= 1
        if item.count > 1 and not all_:
            self.last_pick = item
            item.count -= 1
            if item.group:
                self.slots += 1
            if newobj:
                return dataclasses.replace(item, count=1)
            return item
        self.last_pick = None
        if item.packch is not None:
            self._used.discard(item.packch)
        self._items.remove(item)
        return item

    def pack_char(self) -> str:
        """Claim and return the next unused pack letter."""
        for letter in string.ascii_lowercase:
            if letter not in self._used:
                self._used.add(letter)
                return letter
        raise PackFullError("no pack letters left")

    def inventory(self, kind: Optional[str] = None) -> list[str]:
        """Lines ``"x) name"`` for the items matching ``kind`` (None for all)."""
        lines = []
        for item in self._items:
            if kind is not None and kind != item.type:
                if kind == CALLABLE and item.type not in (FOOD, AMULET):
                    pass
                elif kind == R_OR_S and item.type in (RING, STICK):
                    pass
                else:
                    continue
            lines.append(f"{item.packch}) {item.name}")
        return lines

    def find(self, letter: str) -> Optional[Item]:
        """The item carried under ``letter``, or None."""
        for item in self._items:
            if item.packch == letter:
                return item
        return None