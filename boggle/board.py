from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterator

Position = tuple[int, int]

STANDARD_SIDE = 4
BIG_BOGGLE_SIDE = 5


class BoardConfigError(ValueError):
    """Letters or board size the board cannot be built from."""


@dataclass(frozen=True)
class Cube:
    letter: str
    row: int
    col: int

    @property
    def position(self) -> Position:
        return self.row, self.col


class Board:
    """Square grid of lettered cubes with clipped 8-neighbour adjacency.

    Cubes are stored row-major and never change after construction. Search
    state (which cubes are on the current path) lives in the solver, not here.
    """

    STANDARD_CUBES = (
        "AAEEGN", "ABBJOO", "ACHOPS", "AFFKPS",
        "AOOTTW", "CIMOTU", "DEILRX", "DELRVY",
        "DISTTY", "EEGHNW", "EEINSU", "EHRTVW",
        "EIOSST", "ELRTTY", "HIMNQU", "HLNNRZ",
    )

    BIG_BOGGLE_CUBES = (
        "AAAFRS", "AAEEEE", "AAFIRS", "ADENNN", "AEEEEM",
        "AEEGMU", "AEGMNN", "AFIRSY", "BJKQXZ", "CCNSTW",
        "CEIILT", "CEILPT", "CEIPST", "DDLNOR", "DDHNOT",
        "DHHLOR", "DHLNOR", "EIIITT", "EMOTTT", "ENSSSU",
        "FIPRSY", "GORRVW", "HIPRRY", "NOOTUW", "OOOTTU",
    )

    CUBE_SETS = {
        STANDARD_SIDE: STANDARD_CUBES,
        BIG_BOGGLE_SIDE: BIG_BOGGLE_CUBES,
    }

    # Northwest, North, Northeast, East, Southeast, South, Southwest, West
    DIRECTIONS = (
        (-1, -1), (-1, 0), (-1, 1), (0, 1),
        (1, 1), (1, 0), (1, -1), (0, -1),
    )

    def __init__(self, letters: str, side: int):
        if side < 1:
            raise BoardConfigError(f"Board side must be positive, got {side}")
        needed = side * side
        if len(letters) < needed:
            raise BoardConfigError(f"String must include {needed} characters, got {len(letters)}")

        cubes = []
        for idx in range(needed):
            letter = letters[idx].upper()
            # Some characters upper-case to several, e.g. "ß" -> "SS"
            if len(letter) != 1:
                raise BoardConfigError(f"{letters[idx]!r} does not fit on a single cube")
            cubes.append(Cube(letter, *divmod(idx, side)))
        self.side = side
        self.cubes: tuple[Cube, ...] = tuple(cubes)

    @classmethod
    def from_letters(cls, letters: str, side: int = STANDARD_SIDE) -> "Board":
        """Place ``side * side`` letters row-major; extra characters are ignored."""
        return cls(letters[:side * side], side)

    @classmethod
    def shuffled(cls, side: int = STANDARD_SIDE, rng: random.Random | None = None) -> "Board":
        """Shuffle the canonical cubes for ``side`` and roll a face for each."""
        if side not in cls.CUBE_SETS:
            raise BoardConfigError(f"No cube set for a {side}x{side} board")
        rng = rng or random.Random()
        dice = list(cls.CUBE_SETS[side])
        rng.shuffle(dice)
        return cls("".join(rng.choice(faces) for faces in dice), side)

    def __getitem__(self, pos: Position) -> Cube:
        row, col = pos
        return self.cubes[row * self.side + col]

    def __iter__(self) -> Iterator[Cube]:
        return iter(self.cubes)

    def __len__(self) -> int:
        return len(self.cubes)

    def __str__(self) -> str:
        return "\n".join(
            "".join(cube.letter for cube in self.cubes[r * self.side:(r + 1) * self.side])
            for r in range(self.side)
        )

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.side and 0 <= col < self.side

    def adjacent(self, pos: Position, direction: tuple[int, int]) -> Position:
        """Neighbour of ``pos`` in ``direction``, or ``pos`` itself off the edge."""
        row, col = pos
        nr, nc = row + direction[0], col + direction[1]
        if self.in_bounds(nr, nc):
            return nr, nc
        return pos

    def neighbors(self, pos: Position) -> Iterator[Position]:
        for direction in self.DIRECTIONS:
            npos = self.adjacent(pos, direction)
            if npos != pos:
                yield npos

    def layout(self) -> list[tuple[int, int, str]]:
        return [(cube.row, cube.col, cube.letter) for cube in self.cubes]
