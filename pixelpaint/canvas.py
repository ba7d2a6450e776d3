"""The paintable canvas: a grid of coloured cells."""

from __future__ import annotations

import pygame

from pixelpaint.colour import GREEN, RED, TRANSPARENT, Colour

Cell = tuple[int, int]

_SHADOW = Colour(0, 0, 0, 20)
_SHADOW_OFFSET = 5


def _fill_rect(surface: pygame.Surface, rect: pygame.Rect, colour) -> None:
    """Fill a rectangle, blending when the colour is translucent."""
    colour = Colour(*colour)
    if colour.a == 0 or rect.width <= 0 or rect.height <= 0:
        return
    if colour.a == 255:
        surface.fill(colour, rect)
        return
    overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
    overlay.fill(colour)
    surface.blit(overlay, rect.topleft)


class Canvas:
    """A rectangular drawing area divided into square cells."""

    def __init__(self, width: int, height: int, colour, grid_size: int) -> None:
        self.width = width
        self.height = height
        self.grid_size = grid_size
        self.colour = Colour(*colour)
        self.grid: list[list[Colour]] = []

    def draw(self, surface: pygame.Surface, x_offset: float, y_offset: float) -> None:
        """Draw the canvas background with a soft drop shadow."""
        x, y = int(x_offset), int(y_offset)
        shadow = pygame.Rect(
            int(x_offset + _SHADOW_OFFSET), int(y_offset + _SHADOW_OFFSET), self.width, self.height
        )
        _fill_rect(surface, shadow, _SHADOW)
        _fill_rect(surface, pygame.Rect(x, y, self.width, self.height), self.colour)

    def draw_cells(self, surface: pygame.Surface, x_offset: int, y_offset: int) -> None:
        """Draw every cell's colour at the given offset."""
        size = self.grid_size
        for row, cells in enumerate(self.grid):
            for column, colour in enumerate(cells):
                rect = pygame.Rect(x_offset + column * size, y_offset + row * size, size, size)
                _fill_rect(surface, rect, colour)

    def create_grid(self) -> None:
        """Size the grid to the canvas, filling new cells with transparency."""
        columns = self.width // self.grid_size
        rows = self.height // self.grid_size
        del self.grid[rows:]
        while len(self.grid) < rows:
            self.grid.append([TRANSPARENT] * columns)

    def cell_at(self, position, x_offset: int, y_offset: int) -> Cell | None:
        """Return the (row, column) under a screen position, or None."""
        column = int((position[0] - x_offset) / self.grid_size)
        row = int((position[1] - y_offset) / self.grid_size)
        cell = (row, column)
        return cell if self.contains(cell) else None

    def draw_grid(self, surface: pygame.Surface, x_offset: int, y_offset: int) -> None:
        """Draw the cell grid lines."""
        for x in range(0, self.width + 1, self.grid_size):
            pygame.draw.line(
                surface, RED, (x + x_offset, y_offset), (x + x_offset, y_offset + self.height)
            )
        for y in range(0, self.height + 1, self.grid_size):
            pygame.draw.line(
                surface, GREEN, (x_offset, y + y_offset), (x_offset + self.width, y + y_offset)
            )

    def centre_position(self) -> tuple[float, float]:
        """Return the centre of the canvas relative to its top-left corner."""
        return float(self.width // 2), float(self.height // 2)

    def cell_colour(self, cell: Cell) -> Colour:
        """Return a cell's colour, or the canvas colour for cells outside the grid."""
        if self.contains(cell):
            row, column = cell
            return self.grid[row][column]
        return self.colour

    def set_cell_colour(self, cell: Cell, colour) -> None:
        """Set the colour of a cell inside the grid."""
        if not self.contains(cell):
            raise IndexError(f"cell {cell!r} is outside the canvas")
        row, column = cell
        self.grid[row][column] = Colour(*colour)

    def contains(self, cell: Cell | None) -> bool:
        """Tell whether a cell lies inside the grid."""
        if cell is None or not self.grid:
            return False
        row, column = cell
        return 0 <= row < len(self.grid) and 0 <= column < len(self.grid[0])