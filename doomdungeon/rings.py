"""Ring kinds, their food consumption and their bonus display."""

from __future__ import annotations

import enum
import random
from typing import Optional


class RingKind(enum.IntEnum):
    PROTECT = 0
    ADDSTR = 1
    SUSTSTR = 2
    SEARCH = 3
    SEEINVIS = 4
    NOP = 5
    AGGR = 6
    ADDHIT = 7
    ADDDAM = 8
    REGEN = 9
    DIGEST = 10
    TELEPORT = 11
    STEALTH = 12
    SUSTARM = 13


# Food used per turn; negative n means one unit with chance 1 in -n.
_USES = {
    RingKind.PROTECT: 1,
    RingKind.ADDSTR: 1,
    RingKind.SUSTSTR: 1,
    RingKind.SEARCH: -3,
    RingKind.SEEINVIS: -5,
    RingKind.NOP: 0,
    RingKind.AGGR: 0,
    RingKind.ADDHIT: -3,
    RingKind.ADDDAM: -3,
    RingKind.REGEN: 2,
    RingKind.DIGEST: -2,
    RingKind.TELEPORT: 0,
    RingKind.STEALTH: 1,
    RingKind.SUSTARM: 1,
}

_BONUS_RINGS = frozenset(
    {RingKind.PROTECT, RingKind.ADDSTR, RingKind.ADDDAM, RingKind.ADDHIT}
)


def ring_eat(rng: random.Random, which: Optional[RingKind]) -> int:
    """Food consumed this turn by a ring on one hand (None for a bare hand)."""
    if which is None:
        return 0
    which = RingKind(which)
    eat = _USES[which]
    if eat < 0:
        eat = 1 if rng.randrange(-eat) == 0 else 0
    if which is RingKind.DIGEST:
        eat = -eat
    return eat


def ring_num(which: RingKind, bonus: int, known: bool) -> str:
    """The bracketed bonus shown after a known ring's name, or ''."""
    if not known or RingKind(which) not in _BONUS_RINGS:
        return ""
    sign = "" if bonus < 0 else "+"
    return f" [{sign}{bonus}]"