# SPDX-FileCopyrightText: 2025 ratgrid contributors
# SPDX-License-Identifier: Apache-2.0

"""
Square boards of cells with 1-based (row, column) addressing, and game
boards storing one value per cell.
"""

import logging
from enum import Enum
from collections import namedtuple
from typing import Callable, Iterable, Optional
from pyrsistent import pmap, PMap
from public import public

from .rational import check_integer

log = logging.getLogger(__name__)

@public
class Cell(tuple):
    """Board position: 1-based row index i and column index j."""

    __slots__ = ()

    def __new__(cls, i, j):
        i = check_integer(i, "i")
        j = check_integer(j, "j")
        return tuple.__new__(cls, (i, j))

    def __getnewargs__(self):
        return self.i, self.j

    @property
    def i(self) -> int:
        """Row index, starting at 1."""
        return self[0]

    @property
    def j(self) -> int:
        """Column index, starting at 1."""
        return self[1]

    def __repr__(self):
        return f"{type(self).__name__}({self.i!r}, {self.j!r})"

Offset = namedtuple('Offset', ['di', 'dj'])

@public
class Direction(Enum):
    """Step from a cell to its neighbour. Row indices grow downwards."""

    UP    = Offset(di=-1, dj=0)
    DOWN  = Offset(di=1,  dj=0)
    LEFT  = Offset(di=0,  dj=-1)
    RIGHT = Offset(di=0,  dj=1)

    def __repr__(self):
        return f'{self.__class__.__name__}.{self.name}'

    def reversed(self) -> "Direction":
        """Returns the opposite direction."""
        return {
            Direction.UP: Direction.DOWN,
            Direction.DOWN: Direction.UP,
            Direction.LEFT: Direction.RIGHT,
            Direction.RIGHT: Direction.LEFT,
        }[self]

@public
class SquareBoard:
    """
    Square board of width x width cells. All :class:`Cell` objects are created
    once in the constructor; every lookup returns these same instances.
    """

    def __init__(self, width: int):
        width = check_integer(width, "width")
        if width < 0:
            raise ValueError("width must not be negative.")
        self._width = width
        self._cells = tuple(
            tuple(Cell(i, j) for j in range(1, width + 1))
            for i in range(1, width + 1)
        )

    @property
    def width(self) -> int:
        """Number of cells per row and per column."""
        return self._width

    def _in_bounds(self, i, j) -> bool:
        return 1 <= i <= self._width and 1 <= j <= self._width

    def __contains__(self, cell) -> bool:
        """Returns whether cell is a position on this board."""
        if not isinstance(cell, Cell):
            raise TypeError("Left-hand side of 'in' supports only Cell.")
        return self._in_bounds(cell.i, cell.j)

    def get_cell_or_none(self, i: int, j: int) -> Optional[Cell]:
        """Returns the cell at (i, j), or None if (i, j) is off the board."""
        if not self._in_bounds(i, j):
            return None
        return self._cells[i - 1][j - 1]

    def get_cell(self, i: int, j: int) -> Cell:
        """Returns the cell at (i, j). Raises IndexError if it is off the board."""
        cell = self.get_cell_or_none(i, j)
        if cell is None:
            raise IndexError(f"Invalid cell position: ({i}, {j})")
        return cell

    def get_all_cells(self) -> list[Cell]:
        """Returns all cells, row by row."""
        return [cell for row in self._cells for cell in row]

    def get_row(self, i: int, j_range: Iterable[int]) -> list[Cell]:
        """
        Returns the cells of row i at the columns of j_range, in the order of
        j_range, e.g. ``board.get_row(2, range(4, 0, -1))`` for a reversed row.
        Columns outside the board are skipped.
        """
        return [cell for cell in (self.get_cell_or_none(i, j) for j in j_range) if cell is not None]

    def get_column(self, i_range: Iterable[int], j: int) -> list[Cell]:
        """Column counterpart of :meth:`get_row`."""
        return [cell for cell in (self.get_cell_or_none(i, j) for i in i_range) if cell is not None]

    def get_neighbour(self, cell: Cell, direction: Direction) -> Optional[Cell]:
        """Returns the adjacent cell in direction, or None at the edge of the board."""
        offset = direction.value
        return self.get_cell_or_none(cell.i + offset.di, cell.j + offset.dj)

    def __repr__(self):
        return f"{type(self).__name__}(width={self._width!r})"

@public
class GameBoard(SquareBoard):
    """
    Square board storing one value per cell. Unset cells read as None and
    setting a cell to None clears it.
    """

    def __init__(self, width: int):
        super().__init__(width)
        self._values = pmap()

    def _check(self, cell):
        if cell not in self:
            raise IndexError(f"{cell!r} is not on a board of width {self.width}.")

    def get(self, cell: Cell):
        self._check(cell)
        return self._values.get(cell)

    def set(self, cell: Cell, value):
        self._check(cell)
        log.debug("%r: %r -> %r", cell, self._values.get(cell), value)
        if value is None:
            self._values = self._values.discard(cell)
        else:
            self._values = self._values.set(cell, value)

    def __getitem__(self, cell: Cell):
        return self.get(cell)

    def __setitem__(self, cell: Cell, value):
        self.set(cell, value)

    def values(self) -> PMap:
        """Immutable snapshot of all cells that currently hold a value."""
        return self._values

    def filter(self, predicate: Callable) -> list[Cell]:
        """Returns all cells whose value satisfies predicate, row by row."""
        return [cell for cell in self.get_all_cells() if predicate(self._values.get(cell))]

    def find(self, predicate: Callable) -> Optional[Cell]:
        """Returns the first cell whose value satisfies predicate, or None."""
        for cell in self.get_all_cells():
            if predicate(self._values.get(cell)):
                return cell
        return None

    def any(self, predicate: Callable) -> bool:
        return any(predicate(self._values.get(cell)) for cell in self.get_all_cells())

    def all(self, predicate: Callable) -> bool:
        return all(predicate(self._values.get(cell)) for cell in self.get_all_cells())

@public
def create_square_board(width: int) -> SquareBoard:
    return SquareBoard(width)

@public
def create_game_board(width: int) -> GameBoard:
    return GameBoard(width)
