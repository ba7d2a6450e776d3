"""The vertical toolbar of tool buttons."""

from __future__ import annotations

from pathlib import Path

import pygame

from pixelpaint.colour import Colour

_FIRST_BUTTON = 4
_LAST_BUTTON = 12
_FIRST_HOVER = 3
_LAST_HOVER = 11


class Toolbar:
    """A column of square buttons along the left edge of the window."""

    def __init__(self, number_of_buttons: int, button_size: int, colour, grid_colour, hover_colour) -> None:
        self.number_of_buttons = number_of_buttons
        self.button_size = button_size
        self.colour = Colour(*colour)
        self.grid_colour = Colour(*grid_colour)
        self.hover_colour = Colour(*hover_colour)

    def draw(self, surface: pygame.Surface, x: int, y: int) -> None:
        """Draw the toolbar background."""
        rect = pygame.Rect(x, y, self.button_size, self.button_size * self.number_of_buttons)
        pygame.draw.rect(surface, self.colour, rect)

    def draw_button(self, surface: pygame.Surface, icon: pygame.Surface, index: int, tint) -> None:
        """Draw an icon in the button slot at index, multiplied by tint."""
        tinted = icon.copy()
        tinted.fill(Colour(*tint), special_flags=pygame.BLEND_RGBA_MULT)
        surface.blit(tinted, (0, index * self.button_size))

    def draw_grid(self, surface: pygame.Surface, x: int, y: int) -> None:
        """Draw the outline of every button."""
        size = self.button_size
        for i in range(self.number_of_buttons):
            pygame.draw.rect(surface, self.grid_colour, pygame.Rect(x, y + i * size, size, size), 1)

    def draw_hover(self, surface: pygame.Surface, index: int | None) -> None:
        """Outline the hovered button slot, if it is one of the toolbar's slots."""
        if index is None or index < _FIRST_HOVER or index > _LAST_HOVER:
            return
        size = self.button_size
        pygame.draw.rect(surface, self.hover_colour, pygame.Rect(0, index * size, size, size), 1)

    def button_at(self, position, x: int, y: int) -> int | None:
        """Return the slot index under a position, or None when off the buttons."""
        local_x = position[0] - x
        local_y = position[1] - y
        size = self.button_size
        if local_x < 0 or local_x > size or local_y < size * _FIRST_BUTTON or local_y > size * _LAST_BUTTON:
            return None
        return int(local_y / size)

    def load_icon(self, path: str | Path) -> pygame.Surface:
        """Load an image and scale it to the button size."""
        image = pygame.image.load(str(path))
        return pygame.transform.scale(image, (self.button_size, self.button_size))