"""Interactive window showing the routed maze, with hover info and download buttons."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from mazeroute.grid import Cell, Grid  # noqa: E402
from mazeroute.report import DEFAULT_RESULTS_PATH, save_results  # noqa: E402

Color = tuple[int, int, int]

BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)
BLUE: Color = (0, 0, 255)
RED: Color = (255, 0, 0)
GREEN: Color = (0, 255, 0)
PURPLE: Color = (128, 0, 128)
BUTTON_COLOR: Color = (200, 200, 200)
BUTTON_HOVER_COLOR: Color = (180, 180, 180)

PANEL_HEIGHT = 100
BUTTON_SIZE = (180, 40)
DEFAULT_IMAGE_PATH = "maze_screenshot.png"
_TEXT_SIZE = 20
_HOVER_OFFSET = (10.0, -40.0)


class Button:
    """A clickable labelled rectangle."""

    def __init__(self, position, size, label: str, font: pygame.font.Font) -> None:
        self.rect = pygame.Rect(int(position[0]), int(position[1]), int(size[0]), int(size[1]))
        self.label = label
        self.hovered = False
        self._text = font.render(label, True, BLACK)

    @property
    def fill_color(self) -> Color:
        return BUTTON_HOVER_COLOR if self.hovered else BUTTON_COLOR

    def contains(self, point) -> bool:
        """Whether ``point`` lies inside the button."""
        x, y = point
        return self.rect.left <= x < self.rect.right and self.rect.top <= y < self.rect.bottom

    def update(self, mouse_pos) -> None:
        """Refresh the hover state from the mouse position."""
        self.hovered = self.contains(mouse_pos)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the button with its outline and centred label."""
        pygame.draw.rect(surface, self.fill_color, self.rect)
        pygame.draw.rect(surface, BLACK, self.rect.inflate(4, 4), 2)
        surface.blit(self._text, self._text.get_rect(center=self.rect.center))


def cell_size_for(screen_w: int, screen_h: int, rows: int, cols: int) -> int:
    """Cell size in pixels so the maze fills about two thirds of the screen, at least 4."""
    return max(min((screen_w * 2 // 3) // cols, (screen_h * 2 // 3) // rows), 4)


class MazeView:
    """Draws a routed grid onto a surface and reacts to the mouse."""

    def __init__(
        self,
        grid: Grid,
        id_to_steps: Mapping[int, int],
        surface: pygame.Surface,
        cell_size: int,
        image_path: str | Path = DEFAULT_IMAGE_PATH,
        results_path: str | Path = DEFAULT_RESULTS_PATH,
    ) -> None:
        pygame.font.init()
        self.grid = grid
        self.id_to_steps = id_to_steps
        self.surface = surface
        self.cell_size = cell_size
        self.image_path = Path(image_path)
        self.results_path = Path(results_path)
        self._font = pygame.font.Font(None, _TEXT_SIZE)
        self._number_font = pygame.font.Font(None, max(cell_size // 2, 1))

        width, height = surface.get_size()
        base_x, base_y = width / 2 - 90, height - 95
        self.image_button = Button((base_x, base_y), BUTTON_SIZE, "Download Image", self._font)
        self.result_button = Button(
            (base_x, base_y + 50), BUTTON_SIZE, "Download Result", self._font
        )

    def hovered_path(self, pos) -> int:
        """Net id of the routed (non-endpoint) cell under ``pos``, or -1."""
        col = int(pos[0] / self.cell_size)
        row = int(pos[1] / self.cell_size)
        if 0 <= row < self.grid.rows and 0 <= col < self.grid.cols:
            cell = self.grid.cells[row][col]
            if cell.path_id != -1 and not cell.is_start and not cell.is_end:
                return cell.path_id
        return -1

    def cell_color(self, cell: Cell, hovered: int) -> Color:
        """Fill colour of ``cell`` given the currently hovered net id."""
        if cell.is_obstacle:
            return BLACK
        if cell.path_id == -1:
            return WHITE
        if cell.is_start:
            return BLUE
        if cell.is_end:
            return RED
        if cell.path_id == hovered:
            return PURPLE
        return GREEN

    def render(self, mouse_pos=None) -> int:
        """Draw the whole view for the given mouse position; return the hovered net id."""
        if mouse_pos is None:
            mouse_pos = (-1, -1)
        hovered = self.hovered_path(mouse_pos)
        self.image_button.update(mouse_pos)
        self.result_button.update(mouse_pos)

        self.surface.fill(BLACK)
        size = self.cell_size
        for cell in self.grid:
            rect = pygame.Rect(cell.y * size, cell.x * size, size, size)
            pygame.draw.rect(self.surface, self.cell_color(cell, hovered), rect)
            if cell.is_start or cell.is_end:
                self._draw_number(cell, rect)

        if hovered != -1:
            self._draw_hover_info(hovered, mouse_pos)

        self.image_button.draw(self.surface)
        self.result_button.draw(self.surface)
        return hovered

    def _draw_number(self, cell: Cell, rect: pygame.Rect) -> None:
        label = self._number_font.render(str(cell.path_id), True, WHITE)
        self.surface.blit(label, label.get_rect(center=rect.center))

    def _draw_hover_info(self, net_id: int, mouse_pos) -> None:
        steps = self.id_to_steps.get(net_id, 0)
        lines = [
            self._font.render(text, True, BLACK)
            for text in (f"Route {net_id}", f"Steps: {steps}")
        ]
        text_w = max(line.get_width() for line in lines) + 20
        text_h = sum(line.get_height() for line in lines) + 20

        mx, my = mouse_pos
        x = mx + _HOVER_OFFSET[0]
        y = my + _HOVER_OFFSET[1]
        if x + text_w > self.surface.get_width():
            x = mx - text_w - _HOVER_OFFSET[0]
        if y < 0:
            y = my + 10

        background = pygame.Surface((text_w, text_h), pygame.SRCALPHA)
        background.fill((255, 255, 255, 200))
        self.surface.blit(background, (x - 10, y - 10))
        offset = 0
        for line in lines:
            self.surface.blit(line, (x, y + offset))
            offset += line.get_height()

    def handle_click(self, pos) -> bool:
        """Run the action of the button under ``pos``; return whether one was hit."""
        if self.image_button.contains(pos):
            height = min(self.grid.rows * self.cell_size, self.surface.get_height())
            area = pygame.Rect(0, 0, self.surface.get_width(), height)
            pygame.image.save(self.surface.subsurface(area).copy(), str(self.image_path))
            print(f"Screenshot saved to {self.image_path}")
            return True
        if self.result_button.contains(pos):
            save_results(self.id_to_steps, self.results_path)
            print(f"Routing results saved to {self.results_path}")
            return True
        return False


def run_gui(grid: Grid, id_to_steps: Mapping[int, int]) -> None:
    """Open the maze window and run its event loop until it is closed."""
    pygame.init()
    try:
        info = pygame.display.Info()
        cell_size = cell_size_for(info.current_w, info.current_h, grid.rows, grid.cols)
        width = grid.cols * cell_size
        height = grid.rows * cell_size + PANEL_HEIGHT
        window = pygame.display.set_mode((width, height))
        pygame.display.set_caption("Maze Routing")
        view = MazeView(grid, id_to_steps, window, cell_size)
        clock = pygame.time.Clock()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    view.handle_click(event.pos)
            if running:
                view.render(pygame.mouse.get_pos())
                pygame.display.flip()
                clock.tick(60)
    finally:
        pygame.quit()