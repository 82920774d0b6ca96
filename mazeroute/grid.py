"""Routing grid made of cells, with neighbour lookup and text rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

# Order in which neighbours are examined: down, up, right, left.
_DIRECTIONS = ((1, 0), (-1, 0), (0, 1), (0, -1))

_HEADERS = {
    0: "Print the original maze:\n",
    1: "Print the solution to the maze routing problem:\n",
}


@dataclass(eq=False)
class Cell:
    """A single grid square; compared and hashed by identity."""

    x: int
    y: int
    visited: bool = False
    is_obstacle: bool = False
    parent: Cell | None = field(default=None, repr=False)
    is_start: bool = False
    is_end: bool = False
    path_id: int = -1


class Grid:
    """A rows x cols grid of cells plus the endpoints of every net."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 0 or cols < 0:
            raise ValueError(f"grid dimensions must be non-negative, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self.cells: list[list[Cell]] = [
            [Cell(i, j) for j in range(cols)] for i in range(rows)
        ]
        # net id -> (start cell, end cell)
        self.net_points: dict[int, tuple[Cell, Cell]] = {}

    def __iter__(self) -> Iterator[Cell]:
        for row in self.cells:
            yield from row

    def neighbors(self, cell: Cell) -> list[Cell]:
        """Return the non-obstacle cells orthogonally adjacent to ``cell``."""
        result = []
        for dx, dy in _DIRECTIONS:
            ni, nj = cell.x + dx, cell.y + dy
            if 0 <= ni < self.rows and 0 <= nj < self.cols:
                candidate = self.cells[ni][nj]
                if not candidate.is_obstacle:
                    result.append(candidate)
        return result

    def render(self, mode: int = 0) -> str:
        """Return the grid as text: '#' obstacle, net id for routed cells, '.' free."""
        lines = [_HEADERS.get(mode, "")]
        for row in self.cells:
            lines.append("".join(_symbol(cell) for cell in row) + "\n")
        lines.append("\n")
        return "".join(lines)


def _symbol(cell: Cell) -> str:
    if cell.is_obstacle:
        return "#"
    if cell.path_id != -1:
        return str(cell.path_id)
    return "."