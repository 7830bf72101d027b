"""The end of a game: tombstone, killer names and the top-scores list."""

from __future__ import annotations

import random
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional

from .misc import vowelstr

NUMSCORES = 10

# Why a game ended, indexed by the score entry's flags
REASONS = (
    "killed",
    "quit",
    "A total winner",
    "killed with Amulet",
)

KILLED = 0
QUIT = 1
WINNER = 2
KILLED_WITH_AMULET = 3

STANDOUT = "\x1b[7m"
STANDEND = "\x1b[27m"

_RIP = (
    "                       __________",
    "                      /          \\",
    "                     /    REST    \\",
    "                    /      IN      \\",
    "                   /     PEACE      \\",
    "                  /                  \\",
    "                  |                  |",
    "                  |                  |",
    "                  |   killed by a    |",
    "                  |                  |",
    "                  |       1980       |",
    "                 *|     *  *  *      | *",
    "         ________)/\\\\_//(\\/(/\\)/\\//\\/|_)_______",
)
_RIP_TOP = 8

# Non-monster causes of death: (name, takes an article)
_CAUSES = {
    "a": ("arrow", True),
    "b": ("bolt", True),
    "d": ("dart", True),
    "h": ("hypothermia", False),
    "s": ("starvation", False),
}
_UNKNOWN_KILLER = "Wally the Wonder Badger"

_DEATH_CAUSES = "ABCDEFGHIJKLMNOPQRSTUVWXYZabhds "


def center(text: str) -> int:
    """The column at which ``text`` is centred on the tombstone."""
    return 28 - (len(text) + 1) // 2


def killname(
    monst: str,
    doart: bool,
    monster_names: Optional[Mapping[str, str]] = None,
) -> str:
    """The name of what killed the player, with "a"/"an" if ``doart``.

    Capital letters are monsters and are looked up in ``monster_names``.
    """
    if monst.isascii() and monst.isupper():
        names = monster_names if monster_names is not None else {}
        if monst not in names:
            raise KeyError(f"no name known for monster {monst!r}")
        name, article = names[monst], True
    else:
        name, article = _CAUSES.get(monst, (_UNKNOWN_KILLER, False))
    if doart and article:
        return f"a{vowelstr(name)} {name}"
    return name


def death_monst(rng: random.Random) -> str:
    """A cause of death chosen at random, monsters included."""
    return _DEATH_CAUSES[rng.randrange(len(_DEATH_CAUSES))]


def tombstone(name: str, killer: str, purse: int, year: int, monst: str) -> list[str]:
    """The lines of the tombstone drawn for a dead player.

    ``killer`` is the bare killer name; ``monst`` its code, used to decide
    whether "killed by a" keeps its article.
    """
    lines = list(_RIP)

    def put(row: int, col: int, text: str) -> None:
        index = row - _RIP_TOP
        col = max(col, 0)
        line = lines[index].ljust(col)
        lines[index] = line[:col] + text + line[col + len(text):]

    put(17, center(killer), killer)
    if monst in ("s", "h"):
        put(16, 32, " ")
    else:
        put(16, 33, vowelstr(killer))
    put(14, center(name), name)
    gold = f"{purse} Au"
    put(15, center(gold), gold)
    put(18, 26, f"{year:4d}")
    return lines


@dataclass
class ScoreEntry:
    """One line of the top-scores list."""

    score: int
    name: str
    flags: int = KILLED
    level: int = 1
    monster: str = " "
    uid: int = 0


class ScoreBoard:
    """The top scores, best first."""

    def __init__(
        self,
        entries: Optional[list[ScoreEntry]] = None,
        numscores: int = NUMSCORES,
        *,
        allscore: bool = False,
        numname: str = "Ten",
    ) -> None:
        if numscores < 1:
            raise ValueError("a score board needs at least one place")
        self.numscores = numscores
        self.allscore = allscore
        self.numname = numname
        self.entries = sorted(entries or [], key=lambda e: -e.score)[:numscores]

    def insert(self, entry: ScoreEntry, allscore: Optional[bool] = None) -> Optional[int]:
        """Enter ``entry`` if it earns a place; return its index or None.

        Unless ``allscore`` is set, a player keeps only one non-winning
        score: a lower one is not entered, a higher one replaces it.
        """
        if allscore is None:
            allscore = self.allscore
        slots: list[Optional[ScoreEntry]] = list(self.entries)
        slots += [None] * (self.numscores - len(slots))

        def own(e: Optional[ScoreEntry]) -> bool:
            return e is not None and e.uid == entry.uid and e.flags != WINNER

        pos = None
        for i, existing in enumerate(slots):
            if entry.score > (existing.score if existing else 0):
                pos = i
                break
            if not allscore and entry.flags != WINNER and own(existing):
                return None
        if pos is None:
            return None

        drop = len(slots) - 1
        if entry.flags != WINNER and not allscore:
            drop = next(
                (i for i in range(pos, len(slots)) if own(slots[i])), drop
            )
        del slots[drop]
        slots.insert(pos, entry)
        self.entries = [e for e in slots if e is not None]
        return pos

    def format(
        self,
        highlight: Optional[int] = None,
        monster_names: Optional[Mapping[str, str]] = None,
    ) -> list[str]:
        """The printed list; the entry at index ``highlight`` is in standout."""
        kind = "Scores" if self.allscore else "Rogueists"
        lines = [f"Top {self.numname} {kind}:", "   Score Name"]
        for rank, entry in enumerate(self.entries, start=1):
            if not entry.score:
                break
            text = (
                f"{rank:2d} {entry.score:5d} {entry.name}: "
                f"{REASONS[entry.flags]} on level {entry.level}"
            )
            if entry.flags in (KILLED, KILLED_WITH_AMULET):
                text += f" by {killname(entry.monster, True, monster_names)}"
            text += "."
            if highlight == rank - 1:
                text = STANDOUT + text + STANDEND
            lines.append(text)
        return lines