import pytest

from glyphterm.colors import PALETTE, ansi_color


def test_default_foreground_is_light_grey():
    assert ansi_color(7, False) == (0.8, 0.8, 0.8)


def test_black_background():
    assert ansi_color(0, False) == (0.0, 0.0, 0.0)


@pytest.mark.parametrize("index", range(8))
def test_bold_selects_bright_variant(index):
    assert ansi_color(index, True) == ansi_color(index + 8, False)


@pytest.mark.parametrize("index", range(8, 16))
def test_bold_leaves_bright_colours_alone(index):
    assert ansi_color(index, True) == ansi_color(index, False)


@pytest.mark.parametrize("index", range(16))
def test_index_wraps_modulo_sixteen(index):
    assert ansi_color(index + 16, False) == ansi_color(index, False)


def test_every_index_reads_palette():
    assert [ansi_color(i, False) for i in range(16)] == list(PALETTE)


def test_bright_white_is_full_intensity():
    assert ansi_color(15, False) == (1.0, 1.0, 1.0)