"""Lee-style maze routing of nets over a grid, by BFS or A*."""

from __future__ import annotations

import heapq
import itertools
from collections import deque

from mazeroute.grid import Cell, Grid

FAILED = -1


class Router:
    """Routes every net of a grid in turn, marking the cells each route uses."""

    def route(self, grid: Grid, use_astar: bool = False) -> dict[int, int]:
        """Route all nets; return a mapping of net id to steps (-1 on failure)."""
        id_to_steps: dict[int, int] = {}
        for net_id, (start, end) in grid.net_points.items():
            self.reset_grid_state(grid)
            search = self.astar if use_astar else self.bfs
            id_to_steps[net_id] = search(grid, start, end)
        return id_to_steps

    def bfs(self, grid: Grid, start: Cell, end: Cell) -> int:
        """Breadth-first search from ``start`` to ``end``, then trace the route back."""
        queue = deque([start])
        start.visited = True
        while queue:
            cur = queue.popleft()
            if cur is end:
                break
            for n in grid.neighbors(cur):
                if not n.visited and (n.path_id == -1 or n.is_end):
                    n.visited = True
                    n.parent = cur
                    queue.append(n)
        return self.backtrace(grid, start.path_id)

    def astar(self, grid: Grid, start: Cell, end: Cell) -> int:
        """A* search with a Manhattan heuristic, then trace the route back."""

        def heuristic(cell: Cell) -> int:
            return abs(cell.x - end.x) + abs(cell.y - end.y)

        counter = itertools.count()
        heap = [(heuristic(start), start.x, start.y, next(counter), start)]
        start.visited = True
        g_score = {start: 0}

        while heap:
            cur = heapq.heappop(heap)[-1]
            if cur is end:
                break
            for n in grid.neighbors(cur):
                if n.is_obstacle or (n.path_id != -1 and not n.is_end):
                    continue
                tentative = g_score[cur] + 1
                if n not in g_score or tentative < g_score[n]:
                    g_score[n] = tentative
                    heapq.heappush(
                        heap, (tentative + heuristic(n), n.x, n.y, next(counter), n)
                    )
                    n.parent = cur
                    n.visited = True

        return self.backtrace(grid, start.path_id)

    def backtrace(self, grid: Grid, net_id: int) -> int:
        """Mark the route of ``net_id`` from its end back to its start.

        Returns the number of cells on the route, or -1 if the parent chain
        does not lead back to the start.
        """
        start, end = grid.net_points[net_id]
        steps = 1
        cur = end
        while cur is not None and cur is not start:
            cur.path_id = net_id
            cur = cur.parent
            steps += 1
        return steps if cur is start else FAILED

    def reset_grid_state(self, grid: Grid) -> None:
        """Clear the search state (visited flag and parent) of every cell."""
        for cell in grid:
            cell.visited = False
            cell.parent = None