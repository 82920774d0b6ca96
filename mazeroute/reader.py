"""Reading maze description files into a routing grid."""

from __future__ import annotations

import re
from pathlib import Path

from mazeroute.grid import Cell, Grid

_NET_ID = re.compile(r"[+-]?\d+")


class MazeFormatError(ValueError):
    """Raised when a maze description cannot be read or is malformed."""


def parse_maze(text: str) -> Grid:
    """Build a grid from maze text: 'M N' followed by M*N tokens.

    Tokens are '#' (obstacle), '.' (free), 'S<id>' (net start) or 'E<id>'
    (net end). Every net must have both a start and an end.
    """
    tokens = iter(text.split())
    try:
        rows = int(next(tokens))
        cols = int(next(tokens))
    except (StopIteration, ValueError) as exc:
        raise MazeFormatError("Missing or invalid maze dimensions") from exc
    if rows < 0 or cols < 0:
        raise MazeFormatError(f"Invalid maze dimensions: {rows} {cols}")

    grid = Grid(rows, cols)
    starts: dict[int, Cell] = {}
    ends: dict[int, Cell] = {}

    for cell in grid:
        token = next(tokens, None)
        if token is None:
            raise MazeFormatError("Unexpected end of maze input")
        if token == "#":
            cell.is_obstacle = True
        elif token == ".":
            pass
        elif len(token) >= 2 and token[0] in "SE":
            match = _NET_ID.match(token, 1)
            if match is None:
                raise MazeFormatError(f"Invalid token in input: {token}")
            net_id = int(match.group())
            cell.path_id = net_id
            if token[0] == "S":
                cell.is_start = True
                starts[net_id] = cell
            else:
                cell.is_end = True
                ends[net_id] = cell
        else:
            raise MazeFormatError(f"Invalid token in input: {token}")

    for net_id in sorted(starts.keys() | ends.keys()):
        if net_id not in starts or net_id not in ends:
            raise MazeFormatError(f"Missing S{net_id} or E{net_id}!")
        grid.net_points[net_id] = (starts[net_id], ends[net_id])

    return grid


def read_maze(path: str | Path) -> Grid:
    """Read and parse a maze file."""
    try:
        text = Path(path).read_text()
    except OSError as exc:
        raise MazeFormatError("Cannot read the input file!") from exc
    return parse_maze(text)