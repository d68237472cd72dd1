import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import InvariantViolation
from .variants import CLASSIC, VARIANTS, variant_for
from .win_check import Mark, find_winning_line

logger = logging.getLogger(__name__)


class MoveResult(Enum):
    CONTINUE = "continue"
    WIN = "win"
    DRAW = "draw"
    REJECTED = "rejected"


class Outcome(Enum):
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class GameStatus:
    """
    derived view of the game for the status line
    """
    outcome: Outcome
    winner: Optional[Mark]
    next_mark: Mark

    @property
    def text(self):
        if self.outcome is Outcome.WIN:
            return f"Winner: {self.winner.value}"
        if self.outcome is Outcome.DRAW:
            return "It's a draw!"
        return f"Next player: {self.next_mark.value}"


class GameLogic:
    """
    grid game rules and state for one variant
    """
    def __init__(self, variant=CLASSIC):
        """
        init board and turn for the chosen variant
        """
        if VARIANTS.get(variant.name) != variant:
            raise InvariantViolation(
                f"unsupported variant {variant.name!r}: "
                f"size={variant.board_size}, run_length={variant.run_length}"
            )
        self.variant = variant
        self._clear()

    @classmethod
    def for_size(cls, board_size, run_length):
        # only the two fixed variants are accepted
        return cls(variant_for(board_size, run_length))

    @property
    def board_size(self):
        return self.variant.board_size

    @property
    def run_length(self):
        return self.variant.run_length

    @property
    def board(self):
        return self._board

    @property
    def next_mark(self):
        return self._next_mark

    @property
    def winning_line(self):
        return self._winning_line

    @property
    def winner(self):
        """
        winning mark, or None
        """
        if not self._winning_line:
            return None
        return self._board[self._winning_line[0]]

    @property
    def move_count(self):
        return sum(1 for m in self._board if m is not Mark.EMPTY)

    @property
    def game_over(self):
        """
        true on win or full board
        """
        return bool(self._winning_line) or Mark.EMPTY not in self._board

    def _check_index(self, index):
        if isinstance(index, bool) or not isinstance(index, int) \
           or not 0 <= index < self.variant.cell_count:
            raise InvariantViolation(
                f"cell index {index!r} outside 0..{self.variant.cell_count - 1}"
            )

    def index_of(self, row, col):
        """
        row-major index for (row, col)
        """
        n = self.board_size
        if not (0 <= row < n and 0 <= col < n):
            raise InvariantViolation(f"cell ({row}, {col}) outside {n}x{n} board")
        return row * n + col

    def is_cell_empty(self, index):
        self._check_index(index)
        return self._board[index] is Mark.EMPTY

    def make_move(self, index):
        """
        place the next mark at index, check result
        returns a MoveResult; REJECTED leaves state untouched
        """
        self._check_index(index)
        if self.game_over or self._board[index] is not Mark.EMPTY:
            logger.debug("rejected move at %d (game over=%s)", index, self.game_over)
            return MoveResult.REJECTED

        mark = self._next_mark
        board = list(self._board)
        board[index] = mark
        self._board = tuple(board)       # new board per move
        self._next_mark = mark.other
        logger.debug("%s played %d", mark.value, index)

        line = find_winning_line(self._board, self.board_size, self.run_length)
        if line is not None:
            self._winning_line = line.cells
            logger.info("%s wins on %s", line.mark.value, list(line.cells))
            return MoveResult.WIN
        if Mark.EMPTY not in self._board:
            logger.info("draw after %d moves", len(self._board))
            return MoveResult.DRAW
        return MoveResult.CONTINUE

    def would_win(self, index):
        """
        true if the next mark at index would complete a run; no state change
        """
        self._check_index(index)
        if self.game_over or self._board[index] is not Mark.EMPTY:
            return False
        board = list(self._board)
        board[index] = self._next_mark
        return find_winning_line(board, self.board_size, self.run_length) is not None

    def status(self):
        if self._winning_line:
            return GameStatus(Outcome.WIN, self.winner, self._next_mark)
        if Mark.EMPTY not in self._board:
            return GameStatus(Outcome.DRAW, None, self._next_mark)
        return GameStatus(Outcome.IN_PROGRESS, None, self._next_mark)

    def reset_game(self):
        """
        clear board, X to move, no winning line
        """
        logger.info("reset %s board", self.variant.name)
        self._clear()

    def _clear(self):
        self._board = (Mark.EMPTY,) * self.variant.cell_count
        self._next_mark = Mark.X
        self._winning_line = ()
