from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class Player(str, Enum):
    HUMAN = "human"
    COMPUTER = "computer"


class Phase(str, Enum):
    HUMAN = "human"
    COMPUTER = "computer"
    FINISHED = "finished"


class RejectReason(str, Enum):
    TOO_SHORT = "too_short"
    NOT_A_WORD = "not_a_word"
    ALREADY_CLAIMED = "already_claimed"
    NOT_FORMABLE = "not_formable"


REJECT_MESSAGES = {
    RejectReason.TOO_SHORT: "That word doesn't meet the minimum word length of 4 characters.",
    RejectReason.NOT_A_WORD: "That's not a word!",
    RejectReason.ALREADY_CLAIMED: "You've already guessed that!",
    RejectReason.NOT_FORMABLE: "You can't make that word!",
}


class CubeFace(BaseModel):
    row: int
    col: int
    letter: str


class WordFound(BaseModel):
    word: str
    player: Player
    points: int
    path: list[tuple[int, int]] = []


class GuessResult(BaseModel):
    word: str
    accepted: bool
    reason: RejectReason | None = None
    message: str | None = None
    points: int = 0
    path: list[tuple[int, int]] = []


class RoundState(BaseModel):
    id: str
    size: int
    board: list[CubeFace]
    phase: Phase
    scores: dict[Player, int]
    words: dict[Player, list[str]]


class ComputerTurn(BaseModel):
    words: list[WordFound]
    score: int
    stats: dict = Field(default_factory=dict)


class NewRoundRequest(BaseModel):
    big: bool | None = None
    letters: str | None = None
    seed: int | None = None


class GuessRequest(BaseModel):
    word: str
