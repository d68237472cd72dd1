from enum import Enum
from functools import lru_cache
from typing import NamedTuple, Optional, Sequence, Tuple

from .errors import InvariantViolation


class Mark(Enum):
    """
    content of one cell
    """
    EMPTY = ""
    X = "X"     # player A, moves first
    O = "O"     # player B

    @property
    def other(self):
        if self is Mark.X:
            return Mark.O
        if self is Mark.O:
            return Mark.X
        return Mark.EMPTY


class WinningLine(NamedTuple):
    mark: Mark
    cells: Tuple[int, ...]


@lru_cache(maxsize=None)
def candidate_runs(board_size: int, run_length: int) -> Tuple[Tuple[int, ...], ...]:
    """
    every run of run_length cells that fits on the board, in scan order:
    rows, then columns, then down-right and down-left diagonals
    """
    n, k = board_size, run_length
    if not 1 <= k <= n:
        raise InvariantViolation(f"run length {k} does not fit a {n}x{n} board")
    runs = []
    # horizontal
    for row in range(n):
        for col in range(n - k + 1):
            start = row * n + col
            runs.append(tuple(start + i for i in range(k)))
    # vertical
    for col in range(n):
        for row in range(n - k + 1):
            start = row * n + col
            runs.append(tuple(start + i * n for i in range(k)))
    # diagonal, top-left to bottom-right
    for row in range(n - k + 1):
        for col in range(n - k + 1):
            start = row * n + col
            runs.append(tuple(start + i * (n + 1) for i in range(k)))
    # diagonal, top-right to bottom-left
    for row in range(n - k + 1):
        for col in range(k - 1, n):
            start = row * n + col
            runs.append(tuple(start + i * (n - 1) for i in range(k)))
    return tuple(runs)


def find_winning_line(board: Sequence[Mark], board_size: int,
                      run_length: int) -> Optional[WinningLine]:
    """
    scan the board for run_length identical non-empty marks in a line.
    returns the first run found (see candidate_runs for the order) or None
    """
    if len(board) != board_size * board_size:
        raise InvariantViolation(
            f"board has {len(board)} cells, expected {board_size * board_size}"
        )
    for run in candidate_runs(board_size, run_length):
        first = board[run[0]]
        if first is Mark.EMPTY:
            continue
        if all(board[i] is first for i in run):
            return WinningLine(first, run)
    return None
