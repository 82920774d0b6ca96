import pytest

from mazeroute.reader import MazeFormatError, parse_maze, read_maze

SAMPLE = "2 3\n S1 # .\n . E1 .\n"


def test_parse_dimensions_and_cells():
    grid = parse_maze(SAMPLE)
    assert (grid.rows, grid.cols) == (2, 3)
    assert grid.cells[0][1].is_obstacle
    assert [c.is_obstacle for c in grid if c is not grid.cells[0][1]] == [False] * 5


def test_parse_net_points():
    grid = parse_maze(SAMPLE)
    start, end = grid.net_points[1]
    assert start is grid.cells[0][0]
    assert end is grid.cells[1][1]
    assert start.is_start and end.is_end
    assert start.path_id == end.path_id == 1


def test_net_points_sorted_by_id():
    grid = parse_maze("2 2\n S3 E3\n S1 E1\n")
    assert list(grid.net_points) == [1, 3]


def test_multi_digit_ids():
    grid = parse_maze("1 2\n S12 E12\n")
    assert list(grid.net_points) == [12]


def test_render_after_parse():
    assert parse_maze(SAMPLE).render(1).splitlines()[1:3] == ["1#.", ".1."]


@pytest.mark.parametrize("token", ["x", "S", "E", "Sx", "?"])
def test_invalid_token(token):
    with pytest.raises(MazeFormatError):
        parse_maze(f"1 2\n {token} .\n")


def test_invalid_token_message():
    with pytest.raises(MazeFormatError, match="Invalid token in input: Q"):
        parse_maze("1 1\n Q\n")


def test_missing_end():
    with pytest.raises(MazeFormatError, match="Missing S2 or E2!"):
        parse_maze("1 2\n S2 .\n")


def test_missing_start():
    with pytest.raises(MazeFormatError):
        parse_maze("1 2\n . E4\n")


def test_truncated_input():
    with pytest.raises(MazeFormatError):
        parse_maze("2 2\n . .\n .\n")


def test_bad_dimensions():
    with pytest.raises(MazeFormatError):
        parse_maze("two 2\n")
    with pytest.raises(MazeFormatError):
        parse_maze("")


def test_read_maze_from_file(tmp_path):
    path = tmp_path / "maze.txt"
    path.write_text(SAMPLE)
    assert read_maze(path).render() == parse_maze(SAMPLE).render()


def test_read_missing_file(tmp_path):
    with pytest.raises(MazeFormatError, match="Cannot read the input file!"):
        read_maze(tmp_path / "absent.txt")