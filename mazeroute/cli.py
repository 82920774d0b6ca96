"""Command line entry point: read a maze, route its nets and show the result."""

from __future__ import annotations

import sys
from dataclasses import dataclass

from mazeroute.reader import MazeFormatError, read_maze
from mazeroute.report import format_results
from mazeroute.router import Router

USAGE = (
    "Input format error!\n"
    "Correct format:\n"
    "./main INPUT_MAZE.txt [--print] [--no-gui] [--astar]"
)


class CliError(Exception):
    """Raised for malformed command line arguments."""


@dataclass(frozen=True)
class Options:
    input_file: str
    print_maze: bool = False
    gui: bool = True
    astar: bool = False


def parse_args(argv: list[str]) -> Options:
    """Parse arguments (without the program name) into options."""
    if not 1 <= len(argv) <= 4:
        raise CliError(USAGE)
    input_file, *flags = argv
    print_maze, gui, astar = False, True, False
    for flag in flags:
        if flag == "--print":
            print_maze = True
        elif flag == "--no-gui":
            gui = False
        elif flag == "--astar":
            astar = True
        else:
            raise CliError(f"Unknown argument: {flag}")
    return Options(input_file, print_maze, gui, astar)


def main(argv: list[str] | None = None) -> int:
    """Run the router; return the process exit status."""
    args = sys.argv[1:] if argv is None else argv
    try:
        options = parse_args(args)
        grid = read_maze(options.input_file)
    except (CliError, MazeFormatError) as exc:
        print(exc)
        return 1

    if options.print_maze:
        print(grid.render(0), end="")

    id_to_steps = Router().route(grid, options.astar)
    print(format_results(id_to_steps))

    if options.print_maze:
        print(grid.render(1), end="")

    if options.gui:
        from mazeroute.gui import run_gui

        run_gui(grid, id_to_steps)
    return 0