# mazeroute

Routes several nets across a grid maze. Each net joins a start cell `S<id>`
to an end cell `E<id>`. Nets are routed one at a time, in ascending id order,
with breadth-first search or A*. Moves go up, down, left and right. A cell
that one route uses is blocked for every net routed after it.

## Installation

```
pip install .
```

The viewer uses pygame, which is installed as a dependency.

## Maze file format

The first two tokens give the number of rows and the number of columns. The
cells follow as whitespace-separated tokens, written row by row:

```
4 5
 S1 . . # E1
 . # . . .
 S2 . # . .
 . . . . E2
```

- `.` is a free cell.
- `#` is an obstacle.
- `S<id>` and `E<id>` are the start and end of net `<id>`.

Every net needs both an `S` and an `E`. A file that is missing, too short,
holds an unknown token or lacks an endpoint raises
`mazeroute.reader.MazeFormatError`.

## Routing a maze

```
mazeroute maze.txt [--print] [--no-gui] [--astar]
```

- `--print` prints the maze before routing and again after it. In the second
  print, each routed cell shows its net id.
- `--no-gui` skips the interactive window.
- `--astar` uses A* with a Manhattan-distance heuristic instead of
  breadth-first search.

For each net the command prints either `route id: <id> => steps: <n>` or
`Routing failed for net_id <id>`. The step count is the number of cells on the
route, both endpoints included. If the arguments or the maze file are bad, the
command prints the error and exits with status 1.

### The viewer

Unless you pass `--no-gui`, a window opens after routing. It shows these
colours:

- black: obstacles
- blue: start points
- red: end points
- green: routed cells
- white: free cells

Endpoints are labelled with their net id. Hovering over a routed cell shows
that whole route in purple, with a box that gives its id and step count. The
panel at the bottom of the window has two buttons:

- **Download Image** saves the maze area of the window to
  `maze_screenshot.png`.
- **Download Result** writes the routing report to `routing_results.txt`.

Both files are written to the current directory.

## Generating mazes

```
maze-generator M N net_count obstacle_density
```

The generator writes a random `M`×`N` maze to `maze_MxN.txt` in the current
directory. Each cell becomes an obstacle with probability `obstacle_density`,
a value from 0 to 1. The generator then picks random endpoint pairs, making up
to 5000 tries, until it has placed `net_count` nets. It keeps a pair only if a
path joins its ends, and clears the cells along that path. The nets it places
are numbered from 1. The command itself uses an unseeded random generator.

## Library use

```python
from mazeroute.reader import parse_maze
from mazeroute.router import Router
from mazeroute.report import format_results, save_results

grid = parse_maze("2 3\n S1 . E1\n . . .\n")
steps = Router().route(grid, False)   # {1: 3}
print(format_results(steps))
print(grid.render(1))
save_results(steps, "results.txt")
```

- `mazeroute.reader.read_maze(path)` reads a maze file.
- `mazeroute.grid.Grid` holds the cells and `net_points`, which maps each net
  id to its start and end cells.
- `Router.bfs` and `Router.astar` route a single net.
- `mazeroute.gui.run_gui(grid, id_to_steps)` opens the viewer for a grid you
  have already routed.

To create mazes from code, use `generate_maze`, `format_maze` and `bfs_path`
from `mazeroute.generator`. Pass `generate_maze` your own `random.Random` to
get the same maze on every run:

```python
import random
from mazeroute.generator import generate_maze, format_maze

maze = generate_maze(10, 12, 3, 0.2, random.Random(42))
print(format_maze(maze))
```

## Limitations

- Nets are routed in a fixed order and a failed route is never retried. A net
  can fail only because earlier routes block it.
- The viewer is for display only. It cannot edit a maze or route it again.

## Running the tests

```
pip install .[test]
pytest
```