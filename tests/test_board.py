import random
from collections import Counter

import pytest
from boggle.board import Board, BoardConfigError


def test_from_letters_row_major():
    board = Board.from_letters("abcdefghijklmnop")
    assert board.side == 4
    assert board[0, 0].letter == "A"
    assert board[0, 3].letter == "D"
    assert board[1, 0].letter == "E"
    assert board[3, 3].letter == "P"
    assert str(board) == "ABCD\nEFGH\nIJKL\nMNOP"


def test_from_letters_ignores_excess():
    board = Board.from_letters("ABCDEFGHIJKLMNOPXYZ")
    assert len(board) == 16
    assert "".join(c.letter for c in board) == "ABCDEFGHIJKLMNOP"


def test_from_letters_too_short():
    with pytest.raises(BoardConfigError, match="16 characters"):
        Board.from_letters("ABCDEFGHIJKLMNO")
    with pytest.raises(ValueError):
        Board.from_letters("ABC", side=5)


def test_layout_has_one_cube_per_cell():
    board = Board.from_letters("ABCDEFGHIJKLMNOPQRSTUVWXY", side=5)
    layout = board.layout()
    assert len(layout) == 25
    assert len({(r, c) for r, c, _ in layout}) == 25
    assert layout[7] == (1, 2, "H")


class RecordingRandom(random.Random):
    """Remembers which cube each face was rolled from."""

    def __init__(self, seed):
        super().__init__(seed)
        self.rolled = []

    def choice(self, seq):
        self.rolled.append(seq)
        return super().choice(seq)


@pytest.mark.parametrize("side,cubes", [(4, Board.STANDARD_CUBES), (5, Board.BIG_BOGGLE_CUBES)])
def test_shuffled_uses_every_cube_once(side, cubes):
    assert len(cubes) == side * side
    for seed in range(20):
        rng = RecordingRandom(seed)
        board = Board.shuffled(side, rng)
        assert len(board) == side * side
        assert Counter(rng.rolled) == Counter(cubes)
        for cube, faces in zip(board, rng.rolled):
            assert cube.letter in faces


def test_shuffled_is_reproducible_with_seed():
    a = Board.shuffled(5, random.Random(42))
    b = Board.shuffled(5, random.Random(42))
    assert a.layout() == b.layout()


def test_shuffled_rejects_unknown_side():
    with pytest.raises(BoardConfigError):
        Board.shuffled(3)


def test_neighbors_clip_at_edges():
    board = Board.from_letters("ABCDEFGHIJKLMNOP")
    assert list(board.neighbors((0, 0))) == [(0, 1), (1, 1), (1, 0)]
    assert len(list(board.neighbors((0, 2)))) == 5
    assert len(list(board.neighbors((3, 3)))) == 3


def test_neighbors_canonical_order():
    board = Board.from_letters("ABCDEFGHIJKLMNOP")
    assert list(board.neighbors((1, 1))) == [
        (0, 0), (0, 1), (0, 2), (1, 2), (2, 2), (2, 1), (2, 0), (1, 0),
    ]


def test_adjacent_returns_self_off_grid():
    board = Board.from_letters("ABCD", side=2)
    northwest = Board.DIRECTIONS[0]
    assert board.adjacent((0, 0), northwest) == (0, 0)
    assert board.adjacent((1, 1), northwest) == (0, 0)


def test_constructor_checks_length():
    with pytest.raises(BoardConfigError, match="4 characters"):
        Board("ABC", side=2)


@pytest.mark.parametrize("letters", ["ßBCD", "ABﬁD"])
def test_letters_that_uppercase_to_several_are_rejected(letters):
    with pytest.raises(BoardConfigError, match="single cube"):
        Board.from_letters(letters, side=2)


def test_every_cube_holds_one_uppercase_letter():
    board = Board.from_letters("abcdéfghijklmnop")
    assert all(len(c.letter) == 1 and c.letter == c.letter.upper() for c in board)
    assert board[1, 0].letter == "É"
