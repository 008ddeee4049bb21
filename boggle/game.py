"""One round of Boggle: the human guesses first, then the computer sweeps the board."""

from __future__ import annotations

import logging
import random
import uuid

from boggle.board import BIG_BOGGLE_SIDE, STANDARD_SIDE, Board
from boggle.lexicon import Lexicon
from boggle.schemas import (
    REJECT_MESSAGES,
    CubeFace,
    GuessResult,
    Phase,
    Player,
    RejectReason,
    RoundState,
    WordFound,
)
from boggle.solver import MIN_WORD_LENGTH, FoundWord, Path, WordSearch

logger = logging.getLogger("boggle")


class TurnOrderError(RuntimeError):
    """A player acted outside their turn."""


def score_word(word: str) -> int:
    """Points for a legal word: 1 for four letters, one more per extra letter."""
    return max(len(word) - (MIN_WORD_LENGTH - 1), 0)


class SessionListener:
    """Receives board and word events from a session. Override what you need."""

    def board_ready(self, cells: list[CubeFace]):
        pass

    def path_traced(self, path: Path):
        pass

    def word_recorded(self, found: WordFound):
        pass


class GameSession:
    def __init__(self, board: Board, lexicon: Lexicon, listener: SessionListener | None = None,
                 round_id: str | None = None):
        self.id = round_id or uuid.uuid4().hex
        self.board = board
        self.lexicon = lexicon
        self.listener = listener or SessionListener()
        self.search = WordSearch(board, lexicon)
        self.phase = Phase.HUMAN
        self.claimed: set[str] = set()
        self.scores = {Player.HUMAN: 0, Player.COMPUTER: 0}
        self.words: dict[Player, list[str]] = {Player.HUMAN: [], Player.COMPUTER: []}

        logger.info("Round %s board %dx%d: %s", self.id, board.side, board.side,
                    " / ".join(str(board).splitlines()))
        self.listener.board_ready(self.cells())

    @classmethod
    def random(cls, lexicon: Lexicon, big: bool = False, seed: int | None = None,
               listener: SessionListener | None = None) -> "GameSession":
        side = BIG_BOGGLE_SIDE if big else STANDARD_SIDE
        return cls(Board.shuffled(side, random.Random(seed)), lexicon, listener)

    @classmethod
    def custom(cls, lexicon: Lexicon, letters: str, big: bool = False,
               listener: SessionListener | None = None) -> "GameSession":
        side = BIG_BOGGLE_SIDE if big else STANDARD_SIDE
        return cls(Board.from_letters(letters, side), lexicon, listener)

    def cells(self) -> list[CubeFace]:
        return [CubeFace(row=r, col=c, letter=letter) for r, c, letter in self.board.layout()]

    def _require_phase(self, phase: Phase):
        if self.phase != phase:
            raise TurnOrderError(f"It is the {self.phase.value} phase, not {phase.value}")

    def check_guess(self, word: str) -> tuple[RejectReason | None, Path | None]:
        """Run the guess checks in order and stop at the first failure."""
        if len(word) < MIN_WORD_LENGTH:
            return RejectReason.TOO_SHORT, None
        if not self.lexicon.contains(word):
            return RejectReason.NOT_A_WORD, None
        if word in self.claimed:
            return RejectReason.ALREADY_CLAIMED, None
        path = self.search.trace(word, on_path=self.listener.path_traced)
        if path is None:
            return RejectReason.NOT_FORMABLE, None
        return None, path

    def submit_guess(self, word: str) -> GuessResult:
        self._require_phase(Phase.HUMAN)
        word = word.strip().upper()

        reason, path = self.check_guess(word)
        if reason is not None:
            logger.info("Round %s rejected %r: %s", self.id, word, reason.value)
            return GuessResult(word=word, accepted=False, reason=reason, message=REJECT_MESSAGES[reason])

        found = self._record(Player.HUMAN, FoundWord(word, path))
        return GuessResult(word=word, accepted=True, points=found.points, path=found.path)

    def end_human_turn(self):
        self._require_phase(Phase.HUMAN)
        self.phase = Phase.COMPUTER

    def play_computer_turn(self, time_budget: float | None = None) -> list[WordFound]:
        self._require_phase(Phase.COMPUTER)
        recorded: list[WordFound] = []

        def on_word(found: FoundWord):
            recorded.append(self._record(Player.COMPUTER, found, claim=False))

        self.search.enumerate_all(self.claimed, on_word, time_budget)
        self.phase = Phase.FINISHED
        logger.info("Round %s computer found %d words for %d points",
                    self.id, len(recorded), self.scores[Player.COMPUTER])
        return recorded

    def _record(self, player: Player, found: FoundWord, claim: bool = True) -> WordFound:
        # Enumeration claims words itself before reporting them
        if claim:
            self.claimed.add(found.word)
        points = score_word(found.word)
        self.scores[player] += points
        self.words[player].append(found.word)
        word = WordFound(word=found.word, player=player, points=points, path=list(found.path))
        logger.debug("Round %s %s scored %s for %d", self.id, player.value, found.word, points)
        self.listener.word_recorded(word)
        return word

    def state(self) -> RoundState:
        return RoundState(
            id=self.id,
            size=self.board.side,
            board=self.cells(),
            phase=self.phase,
            scores=dict(self.scores),
            words={player: list(words) for player, words in self.words.items()},
        )
