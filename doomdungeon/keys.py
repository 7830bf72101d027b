"""Decoding of raw terminal key codes into movement commands.

Cursor and keypad keys arrive either as curses key codes or as
ESC-prefixed byte sequences, depending on the terminal.  Unmodified
keys become walk commands (``hjklyubn``); shifted, control or alt
variants become run commands (the control characters of ``HJKLYUBN``).
"""

from __future__ import annotations

import enum
from collections.abc import Iterable
from typing import Optional, Union

ESCAPE = 27

# curses key codes as assigned by ncurses
KEY_DOWN = 258
KEY_UP = 259
KEY_LEFT = 260
KEY_RIGHT = 261
KEY_HOME = 262
KEY_BACKSPACE = 263
KEY_EOL = 335
KEY_NPAGE = 338
KEY_PPAGE = 339
KEY_LL = 347
KEY_A1 = 348
KEY_A3 = 349
KEY_B2 = 350
KEY_C1 = 351
KEY_C3 = 352
KEY_END = 360
KEY_SEND = 386
KEY_SHOME = 391
KEY_SLEFT = 393
KEY_SNEXT = 396
KEY_SPREVIOUS = 400
KEY_SRIGHT = 402

Key = Union[int, str]


def _code(ch: Key) -> int:
    return ord(ch) if isinstance(ch, str) else ch


def ctrl(ch: Key) -> int:
    """Return the control character for ``ch`` (e.g. ``ctrl('H')`` is backspace)."""
    return _code(ch) & 0x1F


def _upper(c: int) -> int:
    return ord(chr(c).upper()) if 0 <= c < 128 else c


def _lower(c: int) -> int:
    return ord(chr(c).lower()) if 0 <= c < 128 else c


_ESC_KEYS = {
    KEY_LEFT: ctrl("H"),
    KEY_RIGHT: ctrl("L"),
    KEY_UP: ctrl("K"),
    KEY_DOWN: ctrl("J"),
    KEY_HOME: ctrl("Y"),
    KEY_PPAGE: ctrl("U"),
    KEY_NPAGE: ctrl("N"),
    KEY_END: ctrl("B"),
}

_KEYPAD_KEYS = {
    # ESC F - Interix console
    ord("^"): ctrl("H"),
    ord("$"): ctrl("L"),
    # ESC [ - Interix console
    ord("H"): ord("y"),
    1: ctrl("K"),
    2: ctrl("J"),
    3: ctrl("L"),
    4: ctrl("H"),
    263: ctrl("Y"),
    19: ctrl("U"),
    20: ctrl("N"),
    21: ctrl("B"),
    # ESC [ - Cygwin console
    ord("G"): ord("."),
    # ESC O - PuTTY
    ord("D"): ctrl("H"),
    ord("C"): ctrl("L"),
    ord("A"): ctrl("K"),
    ord("B"): ctrl("J"),
    ord("t"): ord("h"),
    ord("v"): ord("l"),
    ord("x"): ord("k"),
    ord("r"): ord("j"),
    ord("w"): ord("y"),
    ord("y"): ord("u"),
    ord("s"): ord("n"),
    ord("q"): ord("b"),
    ord("u"): ord("."),
}

# Keypad characters that expect a trailing '~' or '^'
_TRAIL_STARTS = {
    ord("7"): ord("Y"),
    ord("5"): ord("U"),
    ord("6"): ord("N"),
    ord("1"): ord("y"),
    ord("4"): ord("b"),
}

_PLAIN_KEYS = {
    KEY_LEFT: ord("h"),
    KEY_DOWN: ord("j"),
    KEY_UP: ord("k"),
    KEY_RIGHT: ord("l"),
    KEY_HOME: ord("y"),
    KEY_PPAGE: ord("u"),
    KEY_END: ord("b"),
    KEY_LL: ord("b"),
    KEY_NPAGE: ord("n"),
    KEY_A1: ord("y"),
    KEY_A3: ord("u"),
    KEY_C1: ord("b"),
    KEY_C3: ord("n"),
    # should be '.', but PuTTY on Linux sends it for page up
    KEY_B2: ord("u"),
    KEY_SRIGHT: ctrl("L"),
    KEY_SLEFT: ctrl("H"),
    KEY_SHOME: ctrl("Y"),
    KEY_SPREVIOUS: ctrl("U"),
    KEY_SEND: ctrl("B"),
    KEY_SNEXT: ctrl("N"),
    0x146: ctrl("K"),
    0x145: ctrl("J"),
    KEY_EOL: ctrl("B"),
    # MSYS rxvt console
    511: ctrl("J"),
    512: ctrl("J"),
    514: ctrl("H"),
    516: ctrl("L"),
    518: ctrl("K"),
    519: ctrl("K"),
    KEY_BACKSPACE: ctrl("H"),
}


def translate_key(code: Key) -> int:
    """Map a single curses key code to a movement command; others pass through."""
    c = _code(code)
    return _PLAIN_KEYS.get(c, c)


class _Mode(enum.Enum):
    NORMAL = enum.auto()
    ESC = enum.auto()
    KEYPAD = enum.auto()
    TRAIL = enum.auto()


class KeyDecoder:
    """Incremental decoder for key codes and escape sequences."""

    def __init__(self) -> None:
        self._reset()

    def _reset(self) -> None:
        self._mode = _Mode.NORMAL
        self._mode2 = _Mode.NORMAL
        self._lastch = 0

    def _finish(self, ch: int) -> int:
        self._reset()
        return ch & 0x7F

    @property
    def pending(self) -> bool:
        """True while part of an escape sequence has been read."""
        return self._mode is not _Mode.NORMAL

    def timeout(self) -> int:
        """Abandon any partial sequence; the result is a plain escape."""
        return self._finish(ESCAPE)

    def feed(self, ch: Key) -> Optional[int]:
        """Feed one key code; return a command, or None if more input is needed."""
        c = _code(ch)

        if self._mode is _Mode.TRAIL:
            if c == ord("^"):
                c = ctrl(_upper(self._lastch))
            if c == ord("~"):
                c = _lower(self._lastch)
            if self._mode2 is _Mode.ESC:
                c = ctrl(_upper(c))
            return self._finish(c)

        if self._mode is _Mode.ESC:
            if c == ESCAPE:
                self._mode2 = _Mode.ESC
                return None
            if c in (ord("F"), ord("O"), ord("[")):
                self._mode = _Mode.KEYPAD
                return None
            return self._finish(_ESC_KEYS.get(c, c))

        if self._mode is _Mode.KEYPAD:
            if c in _TRAIL_STARTS:
                self._lastch = _TRAIL_STARTS[c]
                self._mode = _Mode.TRAIL
                return None
            c = _KEYPAD_KEYS.get(c, c)

        if c == ESCAPE:
            self._mode = _Mode.ESC
            return None

        return self._finish(translate_key(c))


def decode(codes: Iterable[Key]) -> list[int]:
    """Decode a whole run of key codes; a trailing partial sequence times out."""
    decoder = KeyDecoder()
    result = []
    for code in codes:
        out = decoder.feed(code)
        if out is not None:
            result.append(out)
    if decoder.pending:
        result.append(decoder.timeout())
    return result