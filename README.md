# mdview

Multidimensional views over flat Python sequences. A view pairs a flat
buffer (a list, an `array.array`, anything indexable and assignable) with a
layout mapping that turns a multi-index into a position in that buffer.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `mdview.core`

- `Extents(static_extents, dynamic_sizes=None)`: the shape of a view. Each
  entry of `static_extents` is either a fixed size or `DYNAMIC_EXTENT`.
  `dynamic_sizes` gives either one size per dynamic dimension or one size
  per dimension (which must then agree with the fixed ones). Left out, the
  dynamic dimensions are 0. Methods: `rank()`, `rank_dynamic()`,
  `static_extent(r)`, `extent(r)` and `converted(static_extents)`, which
  returns the same sizes under another static/dynamic pattern. Two extents
  compare equal when their sizes are equal.
- `LayoutRight(extents)`: row-major mapping, the last index varies fastest.
- `LayoutLeft(extents)`: column-major mapping, the first index varies fastest.
- `LayoutStride(extents, strides)`: an explicit, non-negative stride for each
  dimension.

  Each layout is called with the indices (or one tuple/list of them) and
  returns the offset; it also has `required_span_size()`, `stride(r)` and
  `is_contiguous()`. Indices out of range raise `IndexError`.
- `Mdspan(data, mapping, offset=0)`: the view itself. Passing an `Extents`
  as the mapping uses `LayoutRight`. Elements are read and written with
  `view[i, j, k]`; `view(i, j, k)` and `view((i, j, k))` also read. It has
  `rank()`, `extent(r)` and an `extents` property. A buffer too short for
  the mapping raises `ValueError`.
- `subspan(span, *specs)`: one specifier per dimension. An integer fixes
  that index and drops the dimension, `ALL` keeps the dimension whole, and
  a unit-step `slice` keeps a range of it. The result is an `Mdspan` with a
  `LayoutStride` over the same buffer.

### `mdview.tiled`

- `SimpleTileLayout2D(extents, row_tile, col_tile)`: a 2-D mapping that
  stores the data in fixed-size tiles, column-major across tiles and
  row-major within each tile; partial tiles at the edges are padded. It
  offers `n_row_tiles()`, `n_column_tiles()`, `tile_size()`,
  `tile_offset(row, col)`, `offset_in_tile(row, col)`,
  `required_span_size()` and `is_contiguous()`, and can be given to
  `Mdspan` like any other mapping.

### `mdview.dot_product`

- `dot_product(a, b)`: sum of `a[i, j] * b[i, j]` over two rank-2 views of
  the same shape, whatever their layouts.
- `fill_in_order(a)`: assigns 0, 1, 2, ... to a rank-2 view in row-by-row
  index order.

## Example

```python
from mdview.core import ALL, Extents, LayoutRight, Mdspan, subspan

buffer = [0.0] * (2 * 3 * 4)
view = Mdspan(buffer, LayoutRight(Extents((2, 3, 4))))
view[1, 1, 1] = 42

row = subspan(view, 1, 1, ALL)
assert row[1] == 42
```

Two views can use different layouts:

```python
from mdview.core import DYNAMIC_EXTENT, Extents, LayoutLeft, LayoutRight, Mdspan
from mdview.dot_product import dot_product, fill_in_order

shape = Extents((DYNAMIC_EXTENT, DYNAMIC_EXTENT), (3, 3))
a = Mdspan([0] * 9, LayoutRight(shape))
b = Mdspan([0] * 9, LayoutLeft(shape))
fill_in_order(a)
fill_in_order(b)
print(dot_product(a, b))
```

## Command-line demos

Each demo prints its results to standard output:

```
mdview-subspan       # checks subspans of 3-D views in both layouts
mdview-dot-product   # dot products of views in different layouts
mdview-tiled         # compares a tiled 2-D view with a row-major one
```

`mdview-tiled` exits with status 1 if any element differs.

## Limitations

- `subspan` accepts only unit-step slices and works only on layouts that
  have per-dimension strides, so not on `SimpleTileLayout2D`.
- Views do no arithmetic of their own beyond `dot_product`; there is no
  broadcasting, no element-wise operations and no conversion to other
  array types.