"""Monkey map: walking a wrapping board following a path of moves and turns."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import Enum

_TILES_TO_MOVE_RE = re.compile(r"(\d+)[RL]?")
_TURNS_RE = re.compile(r"\d+([RL])")


class Square(Enum):
    EMPTY = " "
    TILE = "."
    WALL = "#"


class Turn(Enum):
    NONE = ""
    CLOCKWISE = "R"
    COUNTER_CLOCKWISE = "L"


class Facing(Enum):
    UP = "^"
    DOWN = "v"
    RIGHT = ">"
    LEFT = "<"

    def turn_clockwise(self) -> Facing:
        return _CLOCKWISE[self]

    def turn_counter_clockwise(self) -> Facing:
        return self.turn_clockwise().turn_clockwise().turn_clockwise()

    def code(self) -> int:
        return _CODES[self]


_CLOCKWISE = {
    Facing.UP: Facing.RIGHT,
    Facing.RIGHT: Facing.DOWN,
    Facing.DOWN: Facing.LEFT,
    Facing.LEFT: Facing.UP,
}
_CODES = {Facing.RIGHT: 0, Facing.DOWN: 1, Facing.LEFT: 2, Facing.UP: 3}
_DELTAS = {
    Facing.UP: (-1, 0),
    Facing.DOWN: (1, 0),
    Facing.LEFT: (0, -1),
    Facing.RIGHT: (0, 1),
}

Board = list[list[Square]]


@dataclass(frozen=True)
class Position:
    i: int
    j: int
    facing: Facing

    def final_password(self) -> int:
        return 1000 * (self.i + 1) + 4 * (self.j + 1) + self.facing.code()


def _next_position(position: Position, board: Board) -> Position:
    """Step once in the facing direction, wrapping and skipping empty squares."""
    rows, columns = len(board), len(board[0])
    di, dj = _DELTAS[position.facing]
    i, j = position.i, position.j
    while True:
        i, j = (i + di) % rows, (j + dj) % columns
        if board[i][j] is not Square.EMPTY:
            return replace(position, i=i, j=j)


@dataclass(frozen=True)
class Step:
    tiles_to_move: int = 0
    turn: Turn = Turn.NONE

    def execute(self, position: Position, board: Board) -> Position:
        """Return the position after taking this step."""
        if self.turn is Turn.NONE:
            for _ in range(self.tiles_to_move):
                following = _next_position(position, board)
                if board[following.i][following.j] is Square.WALL:
                    break
                position = following
            return position
        if self.turn is Turn.CLOCKWISE:
            return replace(position, facing=position.facing.turn_clockwise())
        return replace(position, facing=position.facing.turn_counter_clockwise())


def parse_board(lines: list[str]) -> Board:
    """Parse the board rows, padding short rows with empty squares."""
    if not lines:
        raise ValueError("the board is empty")
    width = max(len(line) for line in lines)
    return [[Square(char) for char in line.ljust(width)] for line in lines]


def parse_path(line: str) -> list[Step]:
    """Parse a path such as '10R5L5' into alternating moves and turns."""
    tiles = _TILES_TO_MOVE_RE.findall(line)
    turns = _TURNS_RE.findall(line)
    if not tiles:
        return []
    if len(turns) < len(tiles) - 1:
        raise ValueError(f"invalid path format: {line}")
    path = [Step(tiles_to_move=int(tiles[0]))]
    for turn, count in zip(turns, tiles[1:]):
        path.append(Step(turn=Turn(turn)))
        path.append(Step(tiles_to_move=int(count)))
    return path


def starting_position(board: Board) -> Position:
    """Return the leftmost open tile of the top row, facing right."""
    for j, square in enumerate(board[0]):
        if square is Square.TILE:
            return Position(0, j, Facing.RIGHT)
    raise ValueError("the top row has no open tile")


@dataclass
class Day:
    board: Board
    path: list[Step]

    @classmethod
    def from_input(cls, text: str) -> Day:
        lines = text.split("\n")
        return cls(parse_board(lines[:-2]), parse_path(lines[-1]))

    def solve_part_one(self) -> str:
        position = starting_position(self.board)
        for step in self.path:
            position = step.execute(position, self.board)
        return str(position.final_password())

    def solve_part_two(self) -> str:
        return ""