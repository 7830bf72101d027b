import pytest

from doomdungeon.keys import (
    ESCAPE,
    KEY_DOWN,
    KEY_END,
    KEY_HOME,
    KEY_LEFT,
    KEY_NPAGE,
    KEY_PPAGE,
    KEY_RIGHT,
    KEY_SLEFT,
    KEY_UP,
    KeyDecoder,
    ctrl,
    decode,
    translate_key,
)


@pytest.mark.parametrize(
    "code, expected",
    [
        (KEY_LEFT, "h"),
        (KEY_DOWN, "j"),
        (KEY_UP, "k"),
        (KEY_RIGHT, "l"),
        (KEY_HOME, "y"),
        (KEY_PPAGE, "u"),
        (KEY_END, "b"),
        (KEY_NPAGE, "n"),
    ],
)
def test_translate_cursor_keys(code, expected):
    assert translate_key(code) == ord(expected)


def test_translate_passes_unknown_through():
    assert translate_key("q") == ord("q")


def test_ctrl_case_insensitive_and_escape():
    assert ctrl("H") == ctrl("h")
    assert ctrl("[") == ESCAPE


def test_shift_left_is_run_left():
    assert decode([KEY_SLEFT]) == [ctrl("H")]


def test_escape_bracket_letter():
    assert decode([27, ord("["), ord("D")]) == [ctrl("H")]


def test_putty_keypad():
    assert decode("\x1bOt") == [ord("h")]
    assert decode("\x1bOu") == [ord(".")]


def test_tilde_trail_gives_walk():
    assert decode("\x1b[5~") == [ord("u")]
    assert decode("\x1b[1~") == [ord("y")]


def test_double_escape_trail_gives_run():
    assert decode("\x1b\x1b[5~") == [ctrl("U")]


def test_caret_trail_gives_run():
    assert decode("\x1b[7^") == [ctrl("Y")]


def test_escape_then_curses_key():
    assert decode([27, KEY_LEFT]) == [ctrl("H")]


def test_escape_then_plain_char():
    assert decode("\x1bx") == [ord("x")]


def test_trailing_escape_times_out():
    assert decode("a\x1b") == [ord("a"), ESCAPE]


def test_feed_returns_none_mid_sequence():
    decoder = KeyDecoder()
    assert decoder.feed(27) is None
    assert decoder.feed("[") is None
    assert decoder.feed("C") == ctrl("L")
    assert decoder.feed("k") == ord("k")


def test_timeout_resets_decoder():
    decoder = KeyDecoder()
    decoder.feed(27)
    assert decoder.timeout() == ESCAPE
    assert decoder.feed("j") == ord("j")