import pytest

from glyphterm.screen import Screen
from glyphterm.selection import Selection, selection_text


@pytest.fixture
def screen():
    s = Screen(20, 5)
    s.feed(b"hello\r\nworld\r\nthird line")
    return s


def test_begin_sets_both_ends():
    sel = Selection()
    sel.begin(3, 2)
    assert sel.active
    assert sel.bounds() == ((3, 2), (3, 2))


def test_extend_ignored_when_inactive():
    sel = Selection()
    sel.extend(5, 5)
    assert sel.bounds() == ((0, 0), (0, 0))


def test_bounds_are_in_reading_order():
    forward = Selection()
    forward.begin(2, 1)
    forward.extend(4, 3)
    backward = Selection()
    backward.begin(4, 3)
    backward.extend(2, 1)
    assert forward.bounds() == backward.bounds() == ((2, 1), (4, 3))


def test_same_row_orders_by_column():
    sel = Selection()
    sel.begin(7, 0)
    sel.extend(2, 0)
    assert sel.bounds() == ((2, 0), (7, 0))


def test_cells_on_one_row():
    sel = Selection()
    sel.begin(1, 0)
    sel.extend(3, 0)
    assert list(sel.cells(10, 5)) == [(1, 0), (2, 0), (3, 0)]


def test_cells_across_rows_wrap_full_width():
    sel = Selection()
    sel.begin(8, 0)
    sel.extend(1, 2)
    cells = list(sel.cells(10, 5))
    assert cells[0] == (8, 0)
    assert cells[-1] == (1, 2)
    assert len(cells) == 2 + 10 + 2


def test_cells_limited_to_grid():
    sel = Selection()
    sel.begin(0, 3)
    sel.extend(50, 50)
    cells = list(sel.cells(4, 5))
    assert all(x < 4 and y < 5 for x, y in cells)
    assert cells[-1] == (3, 4)


def test_text_of_one_word(screen):
    sel = Selection()
    sel.begin(1, 0)
    sel.extend(3, 0)
    assert selection_text(screen, sel) == "ell"


def test_text_across_rows(screen):
    sel = Selection()
    sel.begin(4, 1)
    sel.extend(0, 0)
    assert selection_text(screen, sel) == "hello\nworld"


def test_text_skips_empty_cells(screen):
    sel = Selection()
    sel.begin(0, 2)
    sel.extend(19, 2)
    assert selection_text(screen, sel) == "thirdline"


def test_text_keeps_empty_rows(screen):
    sel = Selection()
    sel.begin(0, 2)
    sel.extend(0, 4)
    assert selection_text(screen, sel) == "thirdline\n\n"