import pygame
import pytest

from pixelpaint.app import (
    BUTTON_DISPLAY_TIME,
    PaintState,
    Tool,
    main,
    picker_colour,
    slider_value,
)
from pixelpaint.canvas import Canvas
from pixelpaint.colour import BLACK, LIGHTGRAY, TRANSPARENT, WHITE, Colour, colour_from_hsv


@pytest.fixture
def canvas():
    c = Canvas(64, 64, LIGHTGRAY, 16)
    c.create_grid()
    return c


def all_cells(canvas):
    return [colour for row in canvas.grid for colour in row]


def test_default_state():
    state = PaintState()
    assert state.tool is Tool.PENCIL
    assert state.selected_colour == WHITE
    assert state.value == 1.0
    assert not state.clear_flash and not state.download_flash


@pytest.mark.parametrize(
    "button, tool", [(4, Tool.PENCIL), (5, Tool.ERASER), (6, Tool.BUCKET)]
)
def test_tool_buttons_select_tool(canvas, tmp_path, button, tool):
    state = PaintState(tool=Tool.PICKER)
    state.handle_button(button, canvas, 0.0, tmp_path / "out.png")
    assert state.tool is tool


def test_picker_button_toggles(canvas, tmp_path):
    state = PaintState(tool=Tool.ERASER)
    state.handle_button(7, canvas, 0.0, tmp_path / "out.png")
    assert state.tool is Tool.PICKER
    state.handle_button(7, canvas, 0.0, tmp_path / "out.png")
    assert state.tool is Tool.PENCIL


@pytest.mark.parametrize("button", [None, 3, 8, 9, 12])
def test_other_slots_do_nothing(canvas, tmp_path, button):
    state = PaintState(tool=Tool.BUCKET)
    state.handle_button(button, canvas, 1.0, tmp_path / "out.png")
    assert state.tool is Tool.BUCKET
    assert not state.clear_flash and not state.download_flash
    assert not (tmp_path / "out.png").exists()


def test_pencil_paints_selected_colour(canvas):
    state = PaintState(selected_colour=Colour(10, 20, 30))
    state.apply_brush(canvas, (1, 2))
    assert canvas.cell_colour((1, 2)) == Colour(10, 20, 30)
    assert all_cells(canvas).count(TRANSPARENT) == 15


def test_picker_tool_paints_like_pencil(canvas):
    state = PaintState(tool=Tool.PICKER, selected_colour=BLACK)
    state.apply_brush(canvas, (0, 0))
    assert canvas.cell_colour((0, 0)) == BLACK


def test_eraser_makes_cell_transparent(canvas):
    canvas.set_cell_colour((2, 2), BLACK)
    state = PaintState(tool=Tool.ERASER)
    state.apply_brush(canvas, (2, 2))
    assert canvas.cell_colour((2, 2)) == TRANSPARENT


def test_bucket_fills_region(canvas):
    for row in range(4):
        canvas.set_cell_colour((row, 1), BLACK)
    state = PaintState(tool=Tool.BUCKET, selected_colour=WHITE)
    state.apply_brush(canvas, (0, 0))
    assert [canvas.cell_colour((row, 0)) for row in range(4)] == [WHITE] * 4
    assert canvas.cell_colour((0, 2)) == TRANSPARENT
    assert canvas.cell_colour((3, 3)) == TRANSPARENT


def test_brush_outside_canvas_changes_nothing(canvas):
    state = PaintState(selected_colour=BLACK)
    state.apply_brush(canvas, None)
    state.apply_brush(canvas, (4, 0))
    assert all_cells(canvas) == [TRANSPARENT] * 16


def test_clear_button_clears_and_flashes(canvas, tmp_path):
    canvas.set_cell_colour((0, 0), BLACK)
    canvas.set_cell_colour((3, 3), WHITE)
    state = PaintState()
    state.handle_button(10, canvas, 2.5, tmp_path / "out.png")
    assert all_cells(canvas) == [TRANSPARENT] * 16
    assert state.clear_flash
    assert state.flash_start == 2.5


def test_export_button_writes_png(canvas, tmp_path):
    target = tmp_path / "out.png"
    canvas.set_cell_colour((0, 0), Colour(10, 20, 30))
    state = PaintState()
    state.handle_button(11, canvas, 5.0, target)
    assert state.download_flash
    assert state.flash_start == 5.0
    image = pygame.image.load(str(target))
    assert image.get_size() == (64, 64)
    assert tuple(image.get_at((0, 0))) == (10, 20, 30, 255)


def test_flash_expires(canvas, tmp_path):
    state = PaintState()
    state.handle_button(10, canvas, 1.0, tmp_path / "out.png")
    assert state._lit_flashes(1.0) == (True, False)
    assert state._lit_flashes(1.0 + BUTTON_DISPLAY_TIME * 2) == (False, False)
    assert not state.clear_flash


def test_picker_colour_outside_returns_fallback():
    rect = (1, 410, 300, 100)
    assert picker_colour(rect, (0, 0), 1.0, BLACK) == BLACK
    assert picker_colour(rect, (301, 420), 1.0, WHITE) == WHITE


def test_picker_colour_top_left_is_pure_red():
    rect = (1, 410, 300, 100)
    assert picker_colour(rect, (1, 410), 1.0, BLACK) == Colour(255, 0, 0, 255)


def test_picker_colour_zero_value_is_black():
    rect = (1, 410, 300, 100)
    assert picker_colour(rect, (150, 450), 0.0, WHITE) == Colour(0, 0, 0, 255)


def test_picker_colour_matches_hsv_at_position():
    rect = (0, 0, 300, 100)
    assert picker_colour(rect, (150, 50), 0.5, BLACK) == colour_from_hsv(180.0, 0.5, 0.5)


@pytest.mark.parametrize(
    "mouse_y, expected", [(100, 1.0), (0, 1.0), (184, 0.0), (500, 0.0), (142, 0.5)]
)
def test_slider_value(mouse_y, expected):
    assert slider_value(100, 84, mouse_y) == pytest.approx(expected)


def test_slider_value_is_monotonic():
    values = [slider_value(0, 50, y) for y in range(0, 51)]
    assert values == sorted(values, reverse=True)


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0