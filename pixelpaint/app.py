"""The paint application: tool state, colour picker helpers and the main loop."""

from __future__ import annotations

import argparse
import enum
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

import pygame

from pixelpaint.canvas import Canvas
from pixelpaint.colour import (
    DARKGRAY,
    GRAY,
    LIGHTGRAY,
    TRANSPARENT,
    WHITE,
    BLACK,
    Colour,
    colour_from_hsv,
)
from pixelpaint.tools import clear_canvas, export_png, paint_bucket
from pixelpaint.ui import Toolbar

SCREEN_WIDTH = 512
SCREEN_HEIGHT = 512
CELL_SIZE = 16
CANVAS_WIDTH = 256
CANVAS_HEIGHT = 256

BUTTON_COUNT = 8
BUTTON_SIZE = 32
TOOLBAR_Y = BUTTON_SIZE * 4

BUTTON_DISPLAY_TIME = 0.15

BACKGROUND_COLOUR = Colour(32, 32, 32, 255)
UI_COLOUR = Colour(24, 24, 24, 255)
UI_GRID_COLOUR = Colour(43, 43, 43, 255)
UI_HOVER_COLOUR = WHITE
FPS_COLOUR = Colour(0, 158, 47, 255)

PENCIL_BUTTON = 4
ERASER_BUTTON = 5
BUCKET_BUTTON = 6
PICKER_BUTTON = 7
CLEAR_BUTTON = 10
EXPORT_BUTTON = 11

DEFAULT_EXPORT_PATH = "Masterpiece.png"

_ICON_FILES = {
    "pencil": "pencilIcon2.png",
    "bucket": "paintBucketIcon.png",
    "download": "downloadIcon.png",
    "clear": "clearIcon.png",
    "picker": "colourPickerIcon.png",
    "picker_colour": "colourPickerIconCurrentColour.png",
    "eraser": "eraserIcon.png",
}

_PICKER_PANEL = (0, SCREEN_HEIGHT - 104, 304, 104)
_PICKER_GRAPH = (1, SCREEN_HEIGHT - 102, 300, 100)
_SLIDER_BORDER = 2
_KNOB_SIZE = 16


class Tool(enum.Enum):
    """The active painting tool."""

    PENCIL = "pencil"
    ERASER = "eraser"
    BUCKET = "bucket"
    PICKER = "picker"


_TOOL_BUTTONS = {
    PENCIL_BUTTON: Tool.PENCIL,
    ERASER_BUTTON: Tool.ERASER,
    BUCKET_BUTTON: Tool.BUCKET,
}


@dataclass
class PaintState:
    """What the user has selected and which toolbar buttons are flashing."""

    tool: Tool = Tool.PENCIL
    selected_colour: Colour = WHITE
    value: float = 1.0
    clear_flash: bool = False
    download_flash: bool = False
    flash_start: float = 0.0

    def handle_button(self, button_index, canvas: Canvas, now: float, export_path) -> None:
        """React to a click on the toolbar slot button_index."""
        if button_index in _TOOL_BUTTONS:
            self.tool = _TOOL_BUTTONS[button_index]
        elif button_index == PICKER_BUTTON:
            self.tool = Tool.PENCIL if self.tool is Tool.PICKER else Tool.PICKER
        elif button_index == CLEAR_BUTTON:
            clear_canvas(canvas)
            self.clear_flash = True
            self.flash_start = now
        elif button_index == EXPORT_BUTTON:
            export_png(canvas, export_path)
            self.download_flash = True
            self.flash_start = now

    def apply_brush(self, canvas: Canvas, cell) -> None:
        """Apply the active tool to a cell of the canvas."""
        if not canvas.contains(cell):
            return
        if self.tool is Tool.BUCKET:
            paint_bucket(canvas, cell, self.selected_colour)
        elif self.tool is Tool.ERASER:
            canvas.set_cell_colour(cell, TRANSPARENT)
        else:
            canvas.set_cell_colour(cell, self.selected_colour)

    def _lit_flashes(self, now: float) -> tuple[bool, bool]:
        """Return whether the clear and export buttons are lit, expiring old flashes."""
        fresh = now - self.flash_start < BUTTON_DISPLAY_TIME
        clear_lit = self.clear_flash and fresh
        download_lit = self.download_flash and fresh
        if not clear_lit:
            self.clear_flash = False
        if not download_lit:
            self.download_flash = False
        return clear_lit, download_lit


def picker_colour(rect, position, value: float, fallback) -> Colour:
    """Return the colour of the HSV picker at position, or fallback outside it."""
    x, y, width, height = rect
    px, py = position
    if x <= px < x + width and y <= py < y + height:
        hue = (px - x) / width * 360.0
        saturation = 1.0 - (py - y) / height
        return colour_from_hsv(hue, saturation, value)
    return Colour(*fallback)


def slider_value(groove_y: float, groove_height: float, mouse_y: float) -> float:
    """Map a vertical position on the slider groove to a value in 0..1 (top is 1)."""
    knob_y = min(max(mouse_y, groove_y), groove_y + groove_height)
    return 1.0 - (knob_y - groove_y) / groove_height


@lru_cache(maxsize=4)
def _hsv_surface(width: int, height: int, value: float) -> pygame.Surface:
    surface = pygame.Surface((width, height))
    for x in range(width):
        hue = x / width * 360.0
        for y in range(height):
            saturation = 1.0 - y / height
            surface.set_at((x, y), colour_from_hsv(hue, saturation, value))
    return surface


def _update_slider(screen: pygame.Surface, state: PaintState, mouse, mouse_down: bool) -> None:
    _, _, width, height = _PICKER_GRAPH
    background = pygame.Rect(
        width + _SLIDER_BORDER,
        SCREEN_HEIGHT - height - _SLIDER_BORDER * 2,
        BUTTON_SIZE,
        height + _SLIDER_BORDER * 2,
    )
    groove_x = (width + 2) + BUTTON_SIZE // 2 - BUTTON_SIZE // 8
    groove_y = (SCREEN_HEIGHT - height) + BUTTON_SIZE // 4
    groove_width = BUTTON_SIZE // 4
    groove_height = height - BUTTON_SIZE // 2

    pygame.draw.rect(screen, UI_COLOUR, background)
    pygame.draw.rect(screen, BLACK, pygame.Rect(groove_x, groove_y, groove_width, groove_height))

    hit = pygame.Rect(groove_x - _KNOB_SIZE // 4, groove_y, _KNOB_SIZE, groove_height)
    if mouse_down and hit.collidepoint(mouse):
        state.value = slider_value(groove_y, groove_height, mouse[1])

    knob_y = groove_y + (1.0 - state.value) * groove_height - _KNOB_SIZE // 2
    knob_x = groove_x + groove_width // 2 - _KNOB_SIZE // 2
    pygame.draw.rect(screen, GRAY, pygame.Rect(int(knob_x), int(knob_y), _KNOB_SIZE, _KNOB_SIZE))


def _draw_picker(screen: pygame.Surface, state: PaintState, mouse, mouse_down: bool) -> None:
    pygame.draw.rect(screen, UI_COLOUR, pygame.Rect(_PICKER_PANEL))
    _update_slider(screen, state, mouse, mouse_down)
    x, y, width, height = _PICKER_GRAPH
    screen.blit(_hsv_surface(width, height, state.value), (x, y))

    hovered = picker_colour(_PICKER_GRAPH, mouse, state.value, state.selected_colour)
    if mouse_down and hovered != state.selected_colour and hovered != TRANSPARENT:
        state.selected_colour = hovered


def _draw_buttons(
    screen: pygame.Surface,
    toolbar: Toolbar,
    icons: dict[str, pygame.Surface],
    state: PaintState,
    now: float,
    mouse,
    mouse_down: bool,
) -> None:
    def lit(active: bool, idle=GRAY) -> Colour:
        return WHITE if active else idle

    toolbar.draw_button(screen, icons["pencil"], PENCIL_BUTTON, lit(state.tool is Tool.PENCIL))
    toolbar.draw_button(screen, icons["eraser"], ERASER_BUTTON, lit(state.tool is Tool.ERASER))
    toolbar.draw_button(screen, icons["bucket"], BUCKET_BUTTON, lit(state.tool is Tool.BUCKET))

    picker_open = state.tool is Tool.PICKER
    toolbar.draw_button(screen, icons["picker"], PICKER_BUTTON, lit(picker_open, DARKGRAY))
    toolbar.draw_button(screen, icons["picker_colour"], PICKER_BUTTON, state.selected_colour)
    if picker_open:
        _draw_picker(screen, state, mouse, mouse_down)

    clear_lit, download_lit = state._lit_flashes(now)
    toolbar.draw_button(screen, icons["clear"], CLEAR_BUTTON, lit(clear_lit, DARKGRAY))
    toolbar.draw_button(screen, icons["download"], EXPORT_BUTTON, lit(download_lit, DARKGRAY))


def _parse_args(argv) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="pixelpaint", description="A small pixel-art editor.")
    parser.add_argument(
        "--icons", type=Path, default=Path("."), help="directory holding the toolbar icons"
    )
    parser.add_argument(
        "--export", type=Path, default=Path(DEFAULT_EXPORT_PATH), help="where exports are written"
    )
    return parser.parse_args(argv)


def _run(args: argparse.Namespace) -> None:
    screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption("PixelPaint :)")
    clock = pygame.time.Clock()
    font = pygame.font.Font(None, 20)

    canvas = Canvas(CANVAS_WIDTH, CANVAS_HEIGHT, LIGHTGRAY, CELL_SIZE)
    canvas.create_grid()
    toolbar = Toolbar(BUTTON_COUNT, BUTTON_SIZE, UI_COLOUR, UI_GRID_COLOUR, UI_HOVER_COLOUR)
    icons = {name: toolbar.load_icon(args.icons / filename) for name, filename in _ICON_FILES.items()}
    state = PaintState()

    x_offset = SCREEN_WIDTH // 4
    y_offset = SCREEN_HEIGHT // 4

    running = True
    while running:
        pressed = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                pressed = True
        if not running:
            break

        mouse = pygame.mouse.get_pos()
        mouse_down = pygame.mouse.get_pressed()[0]
        now = pygame.time.get_ticks() / 1000.0

        screen.fill(BACKGROUND_COLOUR)
        toolbar.draw(screen, 0, TOOLBAR_Y)
        toolbar.draw_grid(screen, 0, TOOLBAR_Y)

        cell = canvas.cell_at(mouse, x_offset, y_offset)
        button = toolbar.button_at(mouse, 0, 0)
        toolbar.draw_hover(screen, button)
        if mouse_down:
            state.apply_brush(canvas, cell)
        if pressed:
            state.handle_button(button, canvas, now, args.export)

        canvas.draw(screen, x_offset, y_offset)
        canvas.draw_cells(screen, x_offset, y_offset)

        _draw_buttons(screen, toolbar, icons, state, now, mouse, mouse_down)

        fps = font.render(f"{int(clock.get_fps())} FPS", True, FPS_COLOUR)
        screen.blit(fps, (SCREEN_WIDTH - 150, SCREEN_HEIGHT - 50))

        pygame.display.flip()
        clock.tick(60)


def main(argv=None) -> int:
    """Open the editor window and run until it is closed."""
    args = _parse_args(argv)
    pygame.init()
    try:
        _run(args)
    finally:
        pygame.quit()
    return 0