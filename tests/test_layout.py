import pytest

from glyphterm.layout import Layout, compute_layout
from glyphterm.screen import Screen


@pytest.mark.parametrize("size", [(1280, 720), (300, 2000), (1920, 1080), (800, 600)])
def test_cells_keep_aspect_ratio(size):
    layout = compute_layout(*size)
    assert layout.char_height / layout.char_width == pytest.approx(1.9)


@pytest.mark.parametrize("size", [(1280, 720), (640, 480), (1920, 1080)])
def test_grid_fits_in_window(size):
    width, height = size
    layout = compute_layout(width, height)
    assert layout.cols * layout.char_width <= width + 1e-6
    assert layout.rows * layout.char_height <= height - 2 * layout.padding_y + 1e-6
    assert layout.cols >= 1 and layout.rows >= 1


def test_padding_is_fixed():
    layout = compute_layout(1280, 720)
    assert (layout.padding_x, layout.padding_y) == (0.0, 30.0)


def test_wide_window_is_clamped_to_max_cols():
    assert compute_layout(5000, 1000).cols == Screen.MAX_COLS


def test_tall_window_is_clamped_to_max_rows():
    assert compute_layout(500, 5000).rows == Screen.MAX_ROWS


@pytest.mark.parametrize("size", [(0, 720), (1280, 60), (1280, 10)])
def test_too_small_window_raises(size):
    with pytest.raises(ValueError):
        compute_layout(*size)


def test_to_grid_clamps_low():
    layout = Layout()
    assert layout.to_grid(-500, -500) == (0, 0)


def test_to_grid_clamps_high():
    layout = Layout()
    assert layout.to_grid(1e6, 1e6) == (layout.cols - 1, layout.rows - 1)


@pytest.mark.parametrize("cell", [(0, 0), (5, 3), (100, 20), (127, 35)])
def test_cell_origin_round_trips_through_to_grid(cell):
    layout = compute_layout(1280, 720) if cell[0] < 100 else Layout()
    ox, oy = layout.cell_origin(*cell)
    centre = (ox + layout.char_width / 2, oy + layout.char_height / 2)
    assert layout.to_grid(*centre) == cell


def test_cursor_rect_sits_above_cell_origin():
    layout = compute_layout(1280, 720)
    x, y, w, h = layout.cursor_rect(4, 2)
    origin_x, origin_y = layout.cell_origin(4, 2)
    assert x == pytest.approx(origin_x - layout.padding_x)
    assert y == pytest.approx(origin_y - 13.0)
    assert (w, h) == (layout.char_width, layout.char_height)