"""Painting operations on a canvas and export to PNG."""

from __future__ import annotations

from pathlib import Path

import pygame

from pixelpaint.canvas import Canvas
from pixelpaint.colour import TRANSPARENT, Colour


def paint_bucket(canvas: Canvas, cell, colour) -> None:
    """Flood-fill the region of same-coloured cells around cell."""
    if not canvas.contains(cell):
        return
    colour = Colour(*colour)
    initial = canvas.cell_colour(cell)
    if initial == colour:
        return

    to_fill = [cell]
    while to_fill:
        current = to_fill.pop()
        if not canvas.contains(current) or canvas.cell_colour(current) != initial:
            continue
        canvas.set_cell_colour(current, colour)
        row, column = current
        to_fill.extend(
            [(row + 1, column), (row - 1, column), (row, column + 1), (row, column - 1)]
        )


def clear_canvas(canvas: Canvas) -> None:
    """Make every cell of the canvas transparent."""
    rows = canvas.height // canvas.grid_size
    columns = canvas.width // canvas.grid_size
    for row in range(rows):
        for column in range(columns):
            canvas.set_cell_colour((row, column), TRANSPARENT)


def render_image(canvas: Canvas) -> pygame.Surface:
    """Render the canvas cells onto a transparent surface of the canvas size."""
    image = pygame.Surface((canvas.width, canvas.height), pygame.SRCALPHA)
    image.fill(TRANSPARENT)
    size = canvas.grid_size
    for row in range(canvas.height // size):
        for column in range(canvas.width // size):
            colour = canvas.cell_colour((row, column))
            image.fill(colour, pygame.Rect(column * size, row * size, size, size))
    return image


def export_png(canvas: Canvas, path: str | Path) -> Path:
    """Write the canvas to a PNG file and return its path."""
    path = Path(path)
    pygame.image.save(render_image(canvas), str(path))
    return path