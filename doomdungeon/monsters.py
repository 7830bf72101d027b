"""Monster selection, experience value and saving throws."""

from __future__ import annotations

import random

# Monsters in rough order of vorpalness
LEVEL_MONSTERS = (
    "K", "E", "B", "S", "H", "I", "R", "O", "Z", "L", "C", "Q", "A",
    "N", "Y", "F", "T", "W", "P", "X", "U", "M", "V", "G", "J", "D",
)

# Same order; None marks monsters that never wander
WANDERING_MONSTERS = (
    "K", "E", "B", "S", "H", None, "R", "O", "Z", None, "C", "Q", "A",
    None, "Y", None, "T", "W", "P", None, "U", "M", "V", "G", "J", None,
)


def _rnd(rng: random.Random, n: int) -> int:
    return 0 if n == 0 else rng.randrange(abs(n))


def randmonster(rng: random.Random, depth: int, wander: bool) -> str:
    """Pick a monster letter suited to dungeon ``depth``."""
    mons = WANDERING_MONSTERS if wander else LEVEL_MONSTERS
    while True:
        d = depth + (_rnd(rng, 10) - 6)
        if d < 0:
            d = _rnd(rng, 5)
        if d > 25:
            d = _rnd(rng, 5) + 21
        if mons[d] is not None:
            return mons[d]


def exp_add(level: int, max_hp: int) -> int:
    """Experience to add for a monster's level and hit points."""
    mod = int(max_hp / 8) if level == 1 else int(max_hp / 6)
    if level > 9:
        mod *= 20
    elif level > 6:
        mod *= 4
    return mod


def save_throw(rng: random.Random, which: int, level: int) -> bool:
    """Whether a creature of ``level`` saves against hazard ``which``."""
    need = 14 + which - int(level / 2)
    return _rnd(rng, 20) + 1 >= need