"""Random maze generation with guaranteed-routable nets."""

from __future__ import annotations

import random
import sys
from collections import deque
from pathlib import Path

Point = tuple[int, int]

MAX_TRIES = 5000
_DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))

_USAGE = "Usage: maze_generator M N net_count obstacle_density"


def bfs_path(start: Point, end: Point, maze: list[list[str]]) -> list[Point] | None:
    """Shortest path from start to end avoiding '#' cells, or None if there is none."""
    rows, cols = len(maze), len(maze[0])
    parents: dict[Point, Point | None] = {start: None}
    queue = deque([start])
    while queue:
        cur = queue.popleft()
        if cur == end:
            path = []
            node: Point | None = cur
            while node is not None:
                path.append(node)
                node = parents[node]
            return path[::-1]
        x, y = cur
        for dx, dy in _DIRECTIONS:
            nxt = (x + dx, y + dy)
            nx, ny = nxt
            if (0 <= nx < rows and 0 <= ny < cols
                    and nxt not in parents and maze[nx][ny] != "#"):
                parents[nxt] = cur
                queue.append(nxt)
    return None


def generate_maze(
    rows: int,
    cols: int,
    net_count: int,
    density: float,
    rng: random.Random | None = None,
) -> list[list[str]]:
    """Generate a maze of tokens with up to ``net_count`` routable nets.

    Obstacles are placed with probability ``density``; each accepted net gets
    a cleared path between its endpoints, labelled S<i>/E<i> from 1.
    """
    if rows < 1 or cols < 1:
        raise ValueError(f"maze dimensions must be positive, got {rows}x{cols}")
    rng = rng or random.Random()

    maze = [["#" if rng.random() < density else "." for _ in range(cols)]
            for _ in range(rows)]

    used: set[Point] = set()
    nets: list[tuple[Point, Point]] = []
    tries = 0
    while len(nets) < net_count and tries < MAX_TRIES:
        tries += 1
        start = (rng.randrange(rows), rng.randrange(cols))
        end = (rng.randrange(rows), rng.randrange(cols))
        if start == end or start in used or end in used:
            continue
        maze[start[0]][start[1]] = "."
        maze[end[0]][end[1]] = "."
        path = bfs_path(start, end, maze)
        if path is not None:
            for x, y in path:
                maze[x][y] = "."
            used.update((start, end))
            nets.append((start, end))

    for number, (start, end) in enumerate(nets, 1):
        maze[start[0]][start[1]] = f"S{number}"
        maze[end[0]][end[1]] = f"E{number}"
    return maze


def format_maze(maze: list[list[str]]) -> str:
    """Serialize a maze in the 'M N' header plus space-prefixed token format."""
    rows = len(maze)
    cols = len(maze[0]) if maze else 0
    lines = [f"{rows} {cols}\n"]
    lines.extend("".join(f" {token}" for token in row) + "\n" for row in maze)
    return "".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Generate a maze and write it to maze_<M>x<N>.txt in the current directory."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 4:
        print(_USAGE)
        return 1
    try:
        rows, cols, net_count = int(args[0]), int(args[1]), int(args[2])
        density = float(args[3])
        maze = generate_maze(rows, cols, net_count, density)
    except ValueError as exc:
        print(exc)
        print(_USAGE)
        return 1

    filename = f"maze_{rows}x{cols}.txt"
    Path(filename).write_text(format_maze(maze))
    print(f"Maze generated and saved to: {filename}")
    return 0