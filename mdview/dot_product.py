"""Element-wise dot product and in-order filling of two-dimensional spans."""

from __future__ import annotations

from itertools import product

from mdview.core import DYNAMIC_EXTENT, Extents, LayoutLeft, LayoutRight, Mdspan


def _check_rank2(span: Mdspan) -> None:
    if span.rank() != 2:
        raise ValueError(f"expected a rank-2 span, got rank {span.rank()}")


def _indices(span: Mdspan):
    return product(range(span.extent(0)), range(span.extent(1)))


def dot_product(a: Mdspan, b: Mdspan):
    """Sum of ``a[i, j] * b[i, j]`` over all indices of two equally shaped 2-D spans."""
    _check_rank2(a)
    _check_rank2(b)
    if (a.extent(0), a.extent(1)) != (b.extent(0), b.extent(1)):
        raise ValueError("spans must have the same extents")
    return sum((a[i, j] * b[i, j] for i, j in _indices(a)), 0)


def fill_in_order(a: Mdspan) -> None:
    """Assign 0, 1, 2, ... to the elements of a 2-D span in row-by-row index order."""
    _check_rank2(a)
    for count, (i, j) in enumerate(_indices(a)):
        a[i, j] = count


def main(argv=None) -> int:
    """Print dot products of spans filled in order, for dynamic and static extents."""
    rows, cols = 3, 3

    dynamic = Extents((DYNAMIC_EXTENT, DYNAMIC_EXTENT), (rows, cols))
    a = Mdspan([0] * (rows * cols), LayoutRight(dynamic))
    b = Mdspan([0] * (rows * cols), LayoutLeft(dynamic))
    fill_in_order(a)
    fill_in_order(b)
    print(dot_product(a, b))

    static = Extents((rows, cols))
    a = Mdspan([0] * 100, LayoutRight(static))
    b = Mdspan([0] * 100, LayoutRight(static))
    fill_in_order(a)
    fill_in_order(b)
    print(dot_product(a, b))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())