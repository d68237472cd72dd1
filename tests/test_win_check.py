import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from gridgame.errors import InvariantViolation
from gridgame.win_check import Mark, WinningLine, candidate_runs, find_winning_line

X, O, E = Mark.X, Mark.O, Mark.EMPTY


def board_with(size, marks):
    """
    board with marks ({index: mark}) set and the rest empty
    """
    board = [E] * (size * size)
    for index, mark in marks.items():
        board[index] = mark
    return board


def test_empty_board_has_no_winner():
    assert find_winning_line([E] * 9, 3, 3) is None
    assert find_winning_line([E] * 25, 5, 5) is None


@pytest.mark.parametrize(
    "cells",
    [
        (0, 1, 2), (3, 4, 5), (6, 7, 8),
        (0, 3, 6), (1, 4, 7), (2, 5, 8),
        (0, 4, 8), (2, 4, 6),
    ],
)
def test_every_classic_line_is_detected(cells):
    board = board_with(3, {i: O for i in cells})
    assert find_winning_line(board, 3, 3) == WinningLine(O, cells)


@pytest.mark.parametrize(
    "cells",
    [
        (10, 11, 12, 13, 14),
        (3, 8, 13, 18, 23),
        (0, 6, 12, 18, 24),
        (4, 8, 12, 16, 20),
    ],
)
def test_connect_five_orientations(cells):
    board = board_with(5, {i: X for i in cells})
    line = find_winning_line(board, 5, 5)
    assert line.mark is X
    assert line.cells == cells


def test_cells_are_ordered_along_the_run():
    board = board_with(3, {6: X, 4: X, 2: X})
    assert find_winning_line(board, 3, 3).cells == (2, 4, 6)


def test_four_in_a_row_is_not_enough_on_five_board():
    board = board_with(5, {0: X, 1: X, 2: X, 3: X, 4: O})
    assert find_winning_line(board, 5, 5) is None


def test_mixed_marks_do_not_win():
    board = [X, O, X,
             X, O, O,
             O, X, X]
    assert find_winning_line(board, 3, 3) is None


def test_rows_are_reported_before_columns():
    # X holds row 0 and column 0 at the same time
    board = board_with(3, {0: X, 1: X, 2: X, 3: X, 6: X})
    assert find_winning_line(board, 3, 3).cells == (0, 1, 2)


def test_down_right_diagonal_before_down_left():
    board = board_with(3, {0: O, 4: O, 8: O, 2: O, 6: O})
    assert find_winning_line(board, 3, 3).cells == (0, 4, 8)


def test_candidate_runs_scan_order():
    runs = candidate_runs(3, 3)
    assert runs == (
        (0, 1, 2), (3, 4, 5), (6, 7, 8),
        (0, 3, 6), (1, 4, 7), (2, 5, 8),
        (0, 4, 8),
        (2, 4, 6),
    )
    assert len(candidate_runs(5, 5)) == 12


def test_shorter_runs_on_larger_board_stay_in_bounds():
    runs = candidate_runs(5, 3)
    # 15 horizontal, 15 vertical, 9 per diagonal direction
    assert len(runs) == 48
    for run in runs:
        rows = [i // 5 for i in run]
        cols = [i % 5 for i in run]
        steps = {(rows[j + 1] - rows[j], cols[j + 1] - cols[j]) for j in range(2)}
        assert len(steps) == 1
        assert steps.pop() in {(0, 1), (1, 0), (1, 1), (1, -1)}


def test_wrong_board_length_is_a_fault():
    with pytest.raises(InvariantViolation):
        find_winning_line([E] * 8, 3, 3)
    with pytest.raises(InvariantViolation):
        find_winning_line([E] * 9, 5, 5)


def test_run_length_longer_than_board_is_a_fault():
    with pytest.raises(InvariantViolation):
        find_winning_line([E] * 9, 3, 4)


def test_evaluation_does_not_touch_the_board():
    board = board_with(3, {0: X, 1: X, 2: X})
    snapshot = list(board)
    find_winning_line(board, 3, 3)
    assert board == snapshot


def test_mark_other():
    assert X.other is O
    assert O.other is X
    assert E.other is E


DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))


def all_runs(board, size, length):
    """
    every straight run of length equal non-empty marks, found cell by cell
    """
    found = []
    for row in range(size):
        for col in range(size):
            for dr, dc in DIRECTIONS:
                end_row, end_col = row + dr * (length - 1), col + dc * (length - 1)
                if not (0 <= end_row < size and 0 <= end_col < size):
                    continue
                cells = tuple((row + dr * i) * size + col + dc * i for i in range(length))
                if board[cells[0]] is not E and all(board[i] is board[cells[0]] for i in cells):
                    found.append(cells)
    return found


@st.composite
def boards(draw):
    size = draw(st.sampled_from([3, 5]))
    marks = draw(st.lists(st.sampled_from([X, O, E]), min_size=size * size, max_size=size * size))
    return size, marks


@st.composite
def sparse_boards(draw):
    # mostly empty cells so boards without a run show up often
    size = draw(st.sampled_from([3, 5]))
    marks = draw(
        st.lists(
            st.sampled_from([X, O, E, E, E]), min_size=size * size, max_size=size * size
        )
    )
    return size, marks


@settings(max_examples=300, deadline=None)
@given(boards())
def test_reported_line_is_a_real_run(sized_board):
    size, board = sized_board
    line = find_winning_line(board, size, size)
    if line is None:
        return
    assert len(line.cells) == size
    assert line.mark is not E
    assert all(board[i] is line.mark for i in line.cells)
    rows = [i // size for i in line.cells]
    cols = [i % size for i in line.cells]
    steps = {(rows[j + 1] - rows[j], cols[j + 1] - cols[j]) for j in range(size - 1)}
    assert len(steps) == 1
    assert steps.pop() in DIRECTIONS


@settings(max_examples=300, deadline=None)
@given(st.one_of(boards(), sparse_boards()))
def test_winner_found_exactly_when_a_run_exists(sized_board):
    size, board = sized_board
    runs = all_runs(board, size, size)
    line = find_winning_line(board, size, size)
    if runs:
        assert line is not None
        assert line.cells in runs
    else:
        assert line is None
