import pygame
import pytest

from mazeroute.gui import (
    BLACK,
    BLUE,
    BUTTON_COLOR,
    BUTTON_HOVER_COLOR,
    GREEN,
    PANEL_HEIGHT,
    PURPLE,
    RED,
    WHITE,
    Button,
    MazeView,
    cell_size_for,
)
from mazeroute.reader import parse_maze
from mazeroute.router import Router

CELL = 20

MAZE = """3 10
 S1 . . . . . . . . E1
 # # # # # # # # # #
 . . . . . . . . . .
"""


@pytest.fixture
def routed():
    grid = parse_maze(MAZE)
    steps = Router().route(grid)
    return grid, steps


@pytest.fixture
def view(routed, tmp_path):
    grid, steps = routed
    surface = pygame.Surface((grid.cols * CELL, grid.rows * CELL + PANEL_HEIGHT))
    return MazeView(
        grid,
        steps,
        surface,
        CELL,
        image_path=tmp_path / "shot.png",
        results_path=tmp_path / "results.txt",
    )


def _center(row, col):
    return (col * CELL + CELL // 2, row * CELL + CELL // 2)


def test_cell_size_minimum_is_four():
    assert cell_size_for(100, 100, 1000, 1000) == 4


@pytest.mark.parametrize("screen", [(1920, 1080), (800, 600), (1280, 1024)])
def test_cell_size_fits_screen(screen):
    w, h = screen
    size = cell_size_for(w, h, 30, 40)
    assert size >= 4
    assert size * 40 <= w and size * 30 <= h


def test_hovered_path_on_route(view):
    assert view.hovered_path(_center(0, 4)) == 1


def test_hovered_path_ignores_endpoints_and_free_cells(view):
    assert view.hovered_path(_center(0, 0)) == -1
    assert view.hovered_path(_center(0, 9)) == -1
    assert view.hovered_path(_center(2, 3)) == -1
    assert view.hovered_path(_center(1, 3)) == -1


def test_hovered_path_outside_grid(view):
    assert view.hovered_path((-50, -50)) == -1
    assert view.hovered_path((5, 3 * CELL + 10)) == -1


def test_cell_colors(view):
    cells = view.grid.cells
    assert view.cell_color(cells[1][0], -1) == BLACK
    assert view.cell_color(cells[0][0], -1) == BLUE
    assert view.cell_color(cells[0][9], -1) == RED
    assert view.cell_color(cells[0][4], -1) == GREEN
    assert view.cell_color(cells[0][4], 1) == PURPLE
    assert view.cell_color(cells[2][4], 1) == WHITE


def test_render_colors_cells(view):
    hovered = view.render((-1, -1))
    assert hovered == -1
    assert tuple(view.surface.get_at((4 * CELL + 1, 1)))[:3] == GREEN
    assert tuple(view.surface.get_at((1, 2 * CELL + 1)))[:3] == WHITE
    assert tuple(view.surface.get_at((1, CELL + 1)))[:3] == BLACK


def test_render_highlights_hovered_route(view):
    hovered = view.render(_center(0, 2))
    assert hovered == 1
    assert tuple(view.surface.get_at((6 * CELL + 1, 1)))[:3] == PURPLE


def test_button_hover_and_contains():
    pygame.font.init()
    button = Button((10, 10), (180, 40), "Download Image", pygame.font.Font(None, 20))
    assert button.contains((10, 10))
    assert not button.contains((190, 10))
    assert button.fill_color == BUTTON_COLOR
    button.update((50, 30))
    assert button.hovered
    assert button.fill_color == BUTTON_HOVER_COLOR
    button.update((0, 0))
    assert not button.hovered


def test_button_draw_fills_rect():
    pygame.font.init()
    surface = pygame.Surface((200, 60))
    button = Button((10, 10), (180, 40), "X", pygame.font.Font(None, 20))
    button.draw(surface)
    assert tuple(surface.get_at((12, 12)))[:3] == BUTTON_COLOR


def test_click_result_button_saves_report(view):
    w, h = view.surface.get_size()
    assert view.handle_click((w / 2, h - 25))
    text = view.results_path.read_text()
    assert text.startswith("route id: 1 => steps: ")


def test_click_image_button_saves_cropped_image(view):
    view.render((-1, -1))
    w, h = view.surface.get_size()
    assert view.handle_click((w / 2, h - 75))
    image = pygame.image.load(str(view.image_path))
    assert image.get_size() == (w, view.grid.rows * CELL)


def test_click_elsewhere_does_nothing(view):
    assert not view.handle_click((1, 1))
    assert not view.results_path.exists()
    assert not view.image_path.exists()