import random

import pytest

from doomdungeon.rip import (
    KILLED,
    WINNER,
    ScoreBoard,
    ScoreEntry,
    center,
    death_monst,
    killname,
    tombstone,
)


def test_center_moves_left_as_text_grows():
    assert center("ab") - center("abcd") == 1
    assert center("") == 28


def test_killname_causes():
    assert killname("s", True) == "starvation"
    assert killname("h", True) == "hypothermia"
    assert killname("a", True) == "an arrow"
    assert killname("b", True) == "a bolt"
    assert killname("a", False) == "arrow"


def test_killname_unknown_is_badger():
    assert killname(" ", True) == "Wally the Wonder Badger"


def test_killname_monster():
    names = {"K": "kestrel", "E": "emu"}
    assert killname("K", True, names) == "a kestrel"
    assert killname("E", True, names) == "an emu"
    assert killname("E", False, names) == "emu"


def test_killname_missing_monster():
    with pytest.raises(KeyError):
        killname("Q", True, {})


def test_death_monst_choices():
    rng = random.Random(3)
    seen = {death_monst(rng) for _ in range(2000)}
    assert seen <= set("ABCDEFGHIJKLMNOPQRSTUVWXYZabhds ")
    assert " " in seen and "A" in seen


def test_tombstone_places_texts():
    lines = tombstone("Rodney", "emu", 120, 1985, "E")
    assert len(lines) == 13
    col = center("Rodney")
    assert lines[6][col:col + 6] == "Rodney"
    kcol = center("emu")
    assert lines[9][kcol:kcol + 3] == "emu"
    gcol = center("120 Au")
    assert lines[7][gcol:gcol + 6] == "120 Au"
    assert lines[10][26:30] == "1985"
    assert "killed by an" in lines[8]


def test_tombstone_no_article_for_starvation():
    lines = tombstone("Rodney", "starvation", 0, 1985, "s")
    assert "killed by a " not in lines[8]
    assert "killed by" in lines[8]


def test_insert_orders_best_first():
    board = ScoreBoard()
    assert board.insert(ScoreEntry(100, "a", uid=1)) == 0
    assert board.insert(ScoreEntry(300, "b", uid=2)) == 0
    assert board.insert(ScoreEntry(200, "c", uid=3)) == 1
    assert [e.score for e in board.entries] == [300, 200, 100]


def test_zero_score_not_entered():
    board = ScoreBoard()
    assert board.insert(ScoreEntry(0, "a", uid=1)) is None
    assert board.entries == []


def test_one_score_per_player():
    board = ScoreBoard()
    board.insert(ScoreEntry(100, "a", uid=1))
    assert board.insert(ScoreEntry(50, "a", uid=1)) is None
    assert board.insert(ScoreEntry(200, "a", uid=1)) == 0
    assert [e.score for e in board.entries] == [200]


def test_allscore_keeps_every_score():
    board = ScoreBoard(allscore=True)
    board.insert(ScoreEntry(100, "a", uid=1))
    assert board.insert(ScoreEntry(50, "a", uid=1)) == 1
    assert len(board.entries) == 2


def test_winners_are_not_replaced():
    board = ScoreBoard()
    board.insert(ScoreEntry(100, "a", flags=WINNER, uid=1))
    assert board.insert(ScoreEntry(50, "a", flags=KILLED, uid=1)) == 1
    assert len(board.entries) == 2


def test_board_capacity():
    board = ScoreBoard(numscores=3, allscore=True)
    for score in (10, 20, 30, 40):
        board.insert(ScoreEntry(score, "x", uid=score))
    assert [e.score for e in board.entries] == [40, 30, 20]
    assert board.insert(ScoreEntry(5, "y", uid=9)) is None


def test_board_needs_a_place():
    with pytest.raises(ValueError):
        ScoreBoard(numscores=0)


def test_format_lines():
    board = ScoreBoard()
    board.insert(ScoreEntry(100, "Rodney", flags=KILLED, level=3, monster="K", uid=1))
    board.insert(ScoreEntry(50, "Other", flags=1, level=2, uid=2))
    lines = board.format(None, {"K": "kestrel"})
    assert lines[0] == "Top Ten Rogueists:"
    assert lines[1] == "   Score Name"
    assert lines[2].endswith("Rodney: killed on level 3 by a kestrel.")
    assert lines[3].endswith("Other: quit on level 2.")


def test_format_highlight():
    board = ScoreBoard(allscore=True)
    board.insert(ScoreEntry(100, "Rodney", flags=1, uid=1))
    lines = board.format(0, {})
    assert "Scores" in lines[0]
    assert lines[2].startswith("\x1b[7m")