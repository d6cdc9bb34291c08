from itertools import product

import pytest

from mdview.core import DYNAMIC_EXTENT, Extents, LayoutLeft, LayoutRight, Mdspan
from mdview.dot_product import dot_product, fill_in_order, main


def _span(layout, rows, cols, static=False):
    exts = Extents((rows, cols)) if static else Extents((DYNAMIC_EXTENT, DYNAMIC_EXTENT), (rows, cols))
    return Mdspan([0] * (rows * cols), layout(exts))


def test_fill_in_order_row_major_is_sequential():
    a = _span(LayoutRight, 3, 4)
    fill_in_order(a)
    assert a.data == list(range(12))


def test_fill_in_order_column_major():
    a = _span(LayoutLeft, 2, 3)
    fill_in_order(a)
    assert a.data == [0, 3, 1, 4, 2, 5]


def test_fill_in_order_same_logical_values_across_layouts():
    a = _span(LayoutRight, 3, 5)
    b = _span(LayoutLeft, 3, 5)
    fill_in_order(a)
    fill_in_order(b)
    for i, j in product(range(3), range(5)):
        assert a[i, j] == b[i, j]


def test_dot_with_unit_selects_element():
    a = _span(LayoutRight, 3, 3)
    fill_in_order(a)
    e = _span(LayoutLeft, 3, 3)
    e[2, 1] = 1
    assert dot_product(a, e) == a[2, 1]


def test_dot_with_zeros_is_zero():
    a = _span(LayoutRight, 3, 3)
    fill_in_order(a)
    assert dot_product(a, _span(LayoutRight, 3, 3)) == 0


def test_dot_is_symmetric_and_layout_independent():
    a = _span(LayoutRight, 3, 3)
    b = _span(LayoutLeft, 3, 3)
    c = _span(LayoutRight, 3, 3, static=True)
    for s in (a, b, c):
        fill_in_order(s)
    assert dot_product(a, b) == dot_product(b, a)
    assert dot_product(a, b) == dot_product(a, c)


def test_shape_mismatch_rejected():
    with pytest.raises(ValueError):
        dot_product(_span(LayoutRight, 3, 3), _span(LayoutRight, 3, 4))


def test_rank_three_rejected():
    span = Mdspan([0] * 8, LayoutRight(Extents((2, 2, 2))))
    with pytest.raises(ValueError):
        fill_in_order(span)
    with pytest.raises(ValueError):
        dot_product(span, span)


def test_main_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "204\n204\n"