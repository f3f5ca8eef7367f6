# SPDX-FileCopyrightText: 2025 ratgrid contributors
# SPDX-License-Identifier: Apache-2.0

import logging
import pytest
from ratgrid import Cell, Direction, SquareBoard, GameBoard, create_square_board, create_game_board

def test_cell():
    c = Cell(2, 3)
    assert c.i == 2
    assert c.j == 3
    assert c == Cell(2, 3)
    assert c != Cell(3, 2)
    assert repr(c) == 'Cell(2, 3)'
    with pytest.raises(AttributeError):
        c.i = 5

def test_direction():
    assert Direction.UP.reversed() == Direction.DOWN
    assert Direction.DOWN.reversed() == Direction.UP
    assert Direction.LEFT.reversed() == Direction.RIGHT
    assert Direction.RIGHT.reversed() == Direction.LEFT
    for d in Direction:
        assert d.reversed().reversed() == d
    assert repr(Direction.LEFT) == 'Direction.LEFT'

def test_all_cells():
    board = create_square_board(2)
    assert board.width == 2
    assert board.get_all_cells() == [Cell(1, 1), Cell(1, 2), Cell(2, 1), Cell(2, 2)]
    assert create_square_board(0).get_all_cells() == []
    assert len(SquareBoard(5).get_all_cells()) == 25

def test_invalid_width():
    with pytest.raises(ValueError):
        SquareBoard(-1)

def test_get_cell():
    board = SquareBoard(3)
    assert board.get_cell(1, 1) == Cell(1, 1)
    assert board.get_cell(3, 2) == Cell(3, 2)
    # Lookups return the instances created by the board:
    assert board.get_cell(2, 2) is board.get_cell(2, 2)
    assert board.get_cell_or_none(2, 2) is board.get_cell(2, 2)
    assert board.get_cell(1, 3) in board.get_all_cells()

    for i, j in ((0, 1), (1, 0), (4, 1), (1, 4), (-1, -1)):
        assert board.get_cell_or_none(i, j) is None
        with pytest.raises(IndexError):
            board.get_cell(i, j)

def test_contains():
    board = SquareBoard(2)
    assert Cell(2, 2) in board
    assert Cell(3, 1) not in board
    with pytest.raises(TypeError):
        (1, 1) in board

def test_row_and_column():
    board = SquareBoard(4)
    assert board.get_row(2, range(1, 3)) == [Cell(2, 1), Cell(2, 2)]
    assert board.get_row(2, range(4, 0, -1)) == [Cell(2, 4), Cell(2, 3), Cell(2, 2), Cell(2, 1)]
    assert board.get_row(1, range(3, 10)) == [Cell(1, 3), Cell(1, 4)]
    assert board.get_row(5, range(1, 5)) == []

    assert board.get_column(range(1, 3), 3) == [Cell(1, 3), Cell(2, 3)]
    assert board.get_column(range(2, 0, -1), 1) == [Cell(2, 1), Cell(1, 1)]
    assert board.get_column([4, 9, 1], 1) == [Cell(4, 1), Cell(1, 1)]

def test_neighbours():
    board = SquareBoard(2)
    c11 = board.get_cell(1, 1)
    assert board.get_neighbour(c11, Direction.UP) is None
    assert board.get_neighbour(c11, Direction.LEFT) is None
    assert board.get_neighbour(c11, Direction.DOWN) == Cell(2, 1)
    assert board.get_neighbour(c11, Direction.RIGHT) == Cell(1, 2)

    c22 = board.get_cell(2, 2)
    assert board.get_neighbour(c22, Direction.UP) is board.get_cell(1, 2)
    assert board.get_neighbour(c22, Direction.LEFT) is board.get_cell(2, 1)
    assert board.get_neighbour(c22, Direction.DOWN) is None
    assert board.get_neighbour(c22, Direction.RIGHT) is None

def test_game_board_get_set():
    board = create_game_board(2)
    c11 = board.get_cell(1, 1)
    c12 = board.get_cell(1, 2)
    assert board.get(c11) is None

    board.set(c11, 'a')
    board[c12] = 'b'
    assert board.get(c11) == 'a'
    assert board[c12] == 'b'
    assert board[Cell(1, 2)] == 'b'

    board[c11] = None
    assert board[c11] is None
    assert dict(board.values()) == {c12: 'b'}

def test_game_board_off_board():
    board = GameBoard(2)
    with pytest.raises(IndexError):
        board.get(Cell(3, 1))
    with pytest.raises(IndexError):
        board[Cell(0, 0)] = 'x'

def test_game_board_snapshot():
    board = GameBoard(2)
    board[board.get_cell(1, 1)] = 1
    snapshot = board.values()
    board[board.get_cell(2, 2)] = 2
    assert dict(snapshot) == {Cell(1, 1): 1}
    assert dict(board.values()) == {Cell(1, 1): 1, Cell(2, 2): 2}

def test_game_board_queries():
    board = GameBoard(2)
    board[board.get_cell(1, 1)] = 'a'
    board[board.get_cell(1, 2)] = 'b'
    board[board.get_cell(2, 2)] = 'a'

    assert board.filter(lambda v: v == 'a') == [Cell(1, 1), Cell(2, 2)]
    assert board.filter(lambda v: v is None) == [Cell(2, 1)]
    assert board.find(lambda v: v == 'b') is board.get_cell(1, 2)
    assert board.find(lambda v: v == 'z') is None
    assert board.any(lambda v: v is None)
    assert not board.any(lambda v: v == 'z')
    assert not board.all(lambda v: v is not None)

    board[board.get_cell(2, 1)] = 'c'
    assert board.all(lambda v: v is not None)

def test_game_board_empty():
    board = GameBoard(0)
    assert board.all(lambda v: False)
    assert not board.any(lambda v: True)
    assert board.find(lambda v: True) is None

def test_game_board_logs_writes(caplog):
    board = GameBoard(1)
    with caplog.at_level(logging.DEBUG, logger='ratgrid.board'):
        board[board.get_cell(1, 1)] = 'x'
    assert "Cell(1, 1): None -> 'x'" in caplog.text

def test_cell_rejects_non_integers():
    with pytest.raises(TypeError):
        Cell(1.7, 2)
    with pytest.raises(TypeError):
        Cell(1, "2")
    with pytest.raises(TypeError):
        Cell(True, 1)
    with pytest.raises(TypeError):
        SquareBoard(2.5)
