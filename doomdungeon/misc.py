"""Small helpers shared by the game: signs, spreads, strength and hallucination."""

from __future__ import annotations

import random

AMULETLEVEL = 26

FLOOR = "."
PASSAGE = "#"
DOOR = "+"
TRAP = "^"

POTION = "!"
SCROLL = "?"
RING = "="
STICK = "/"
FOOD = ":"
WEAPON = ")"
ARMOR = "]"
STAIRS = "%"
GOLD = "*"
AMULET = ","

MIN_STRENGTH = 3
MAX_STRENGTH = 31

# Things that may turn up on a level; the amulet only from AMULETLEVEL on
THING_LIST = (POTION, SCROLL, RING, STICK, FOOD, WEAPON, ARMOR, STAIRS, GOLD, AMULET)

# Map features that keep their look even when the player is tripping
_STEADY_CHARS = frozenset({FLOOR, " ", PASSAGE, "-", "|", DOOR, TRAP})


def _rnd(rng: random.Random, n: int) -> int:
    return 0 if n == 0 else rng.randrange(abs(n))


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def sign(n: int) -> int:
    """-1, 0 or 1 according to the sign of ``n``."""
    if n < 0:
        return -1
    return 1 if n > 0 else 0


def spread(rng: random.Random, n: int) -> int:
    """A value within about twenty percent of ``n``."""
    return n - _cdiv(n, 20) + _rnd(rng, _cdiv(n, 10))


def vowelstr(text: str) -> str:
    """'n' if ``text`` starts with a vowel (for "an"), else ''."""
    return "n" if text[:1] in ("a", "A", "e", "E", "i", "I", "o", "O", "u", "U") else ""


def add_str(value: int, amount: int) -> int:
    """Add ``amount`` to a strength, keeping it between 3 and 31."""
    value += amount
    if value < MIN_STRENGTH:
        return MIN_STRENGTH
    if value > MAX_STRENGTH:
        return MAX_STRENGTH
    return value


def rnd_thing(rng: random.Random, depth: int) -> str:
    """Pick the symbol of a random thing appropriate for dungeon ``depth``."""
    if depth >= AMULETLEVEL:
        return THING_LIST[_rnd(rng, len(THING_LIST))]
    return THING_LIST[_rnd(rng, len(THING_LIST) - 1)]


def choose_str(hallucinating: bool, trip: str, straight: str) -> str:
    """The tripping text when hallucinating, the plain one otherwise."""
    return trip if hallucinating else straight


def trip_ch(ch: str, hallucinating: bool, rng: random.Random, depth: int) -> str:
    """The character to show for a space, scrambled while tripping.

    ``hallucinating`` should be false for a space holding stairs the
    player has already seen, and before the first move of a turn.
    """
    if hallucinating and ch not in _STEADY_CHARS:
        return rnd_thing(rng, depth)
    return ch