from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable

from boggle.board import Board, Position
from boggle.lexicon import Lexicon
from boggle.metrics import SearchStats

logger = logging.getLogger("boggle")

MIN_WORD_LENGTH = 4
# Words are rejected before tracing when no dictionary word shares this prefix
VERIFY_PREFIX_LENGTH = 2

Path = tuple[Position, ...]


@dataclass(frozen=True)
class FoundWord:
    word: str
    path: Path


class WordSearch:
    """Backtracking word search over one board.

    ``in_use`` marks the cubes on the path currently being explored. Every
    public search leaves it exactly as it found it, including when a callback
    raises.
    """

    def __init__(self, board: Board, lexicon: Lexicon, stats: SearchStats | None = None):
        assert len(board) == board.side * board.side, "board shape is inconsistent"
        self.board = board
        self.lexicon = lexicon
        self.stats = stats or SearchStats()
        self.in_use: list[list[bool]] = [[False] * board.side for _ in range(board.side)]

    def verify(self, word: str) -> bool:
        return self.trace(word) is not None

    def trace(self, word: str, on_path: Callable[[Path], None] | None = None) -> Path | None:
        """Return the first simple path of adjacent cubes spelling ``word``.

        ``on_path`` is called with the path while its cubes are still marked in use.
        """
        word = word.upper()
        if not word or not self.lexicon.has_prefix(word[:VERIFY_PREFIX_LENGTH]):
            return None

        with self.stats.stage("verify"):
            for cube in self.board:
                found = self._trace_from(cube.position, word, [], on_path)
                if found is not None:
                    return found
        return None

    def _trace_from(self, pos: Position, word: str, path: list[Position], on_path) -> Path | None:
        row, col = pos
        if self.board[pos].letter != word[0]:
            return None

        self.stats.nodes += 1
        self.in_use[row][col] = True
        path.append(pos)
        try:
            suffix = word[1:]
            if not suffix:
                found = tuple(path)
                if on_path is not None:
                    on_path(found)
                return found

            for direction in Board.DIRECTIONS:
                npos = self.board.adjacent(pos, direction)
                if npos == pos or self.in_use[npos[0]][npos[1]]:
                    continue
                found = self._trace_from(npos, suffix, path, on_path)
                if found is not None:
                    return found
            return None
        finally:
            path.pop()
            self.in_use[row][col] = False

    def is_legal(self, word: str, claimed: set[str]) -> bool:
        return len(word) >= MIN_WORD_LENGTH and self.lexicon.contains(word) and word not in claimed

    def enumerate(
        self,
        start: Position,
        claimed: set[str],
        on_word: Callable[[FoundWord], None] | None = None,
    ) -> set[str]:
        """Find every legal word whose path starts at ``start``.

        Each word is added to ``claimed`` and passed to ``on_word`` as soon as
        it is recognised, before the search goes on.
        """
        row, col = start
        if self.in_use[row][col]:
            return set()

        found: set[str] = set()
        self.stats.nodes += 1
        self.in_use[row][col] = True
        try:
            self._extend(start, self.board[start].letter, [start], claimed, found, on_word)
        finally:
            self.in_use[row][col] = False
        return found

    def _extend(self, pos: Position, word: str, path: list[Position], claimed, found, on_word):
        if self.is_legal(word, claimed):
            claimed.add(word)
            found.add(word)
            self.stats.words += 1
            if on_word is not None:
                on_word(FoundWord(word, tuple(path)))

        for direction in Board.DIRECTIONS:
            npos = self.board.adjacent(pos, direction)
            if npos == pos or self.in_use[npos[0]][npos[1]]:
                continue
            candidate = word + self.board[npos].letter
            if not self.lexicon.has_prefix(candidate):
                self.stats.pruned += 1
                continue

            self.stats.nodes += 1
            self.in_use[npos[0]][npos[1]] = True
            path.append(npos)
            try:
                self._extend(npos, candidate, path, claimed, found, on_word)
            finally:
                path.pop()
                self.in_use[npos[0]][npos[1]] = False

    def enumerate_all(
        self,
        claimed: set[str],
        on_word: Callable[[FoundWord], None] | None = None,
        time_budget: float | None = None,
    ) -> set[str]:
        """Run ``enumerate`` from every cube in row-major order.

        ``time_budget`` (seconds) is only checked between starting cubes.
        """
        found: set[str] = set()
        deadline = time.perf_counter() + time_budget if time_budget else None
        with self.stats.stage("enumerate"):
            for cube in self.board:
                if deadline is not None and time.perf_counter() >= deadline:
                    logger.warning(
                        "Time budget of %.2fs spent, stopping before cube (%d, %d)",
                        time_budget, cube.row, cube.col,
                    )
                    break
                found |= self.enumerate(cube.position, claimed, on_word)
        return found


def solve(board: Board, lexicon: Lexicon, claimed: set[str] | None = None) -> list[str]:
    """All legal words on ``board`` not in ``claimed``, longest first then alphabetical."""
    search = WordSearch(board, lexicon)
    found = search.enumerate_all(set(claimed or ()))
    return sorted(found, key=lambda w: (-len(w), w))
