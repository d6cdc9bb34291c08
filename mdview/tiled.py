"""A two-dimensional tiled layout: column-major across tiles, row-major within each tile."""

from __future__ import annotations

import operator
from itertools import product

from mdview.core import DYNAMIC_EXTENT, Extents, LayoutRight, Mdspan


class SimpleTileLayout2D:
    """Mapping of a 2-D index space onto fixed-size tiles.

    Tiles are laid out column-major; elements inside a tile are row-major.
    Partial tiles at the edges are padded to full size.
    """

    def __init__(self, extents: Extents, row_tile: int, col_tile: int):
        if extents.rank() != 2:
            raise ValueError("SimpleTileLayout2D is hard-coded for 2D layout")
        row_tile = operator.index(row_tile)
        col_tile = operator.index(col_tile)
        if row_tile <= 0 or col_tile <= 0:
            raise ValueError("tile sizes must be positive")
        if extents.extent(0) <= 0 or extents.extent(1) <= 0:
            raise ValueError("extents must be positive")
        self.extents = extents
        self._row_tile = row_tile
        self._col_tile = col_tile

    def n_row_tiles(self) -> int:
        return -(-self.extents.extent(0) // self._row_tile)

    def n_column_tiles(self) -> int:
        return -(-self.extents.extent(1) // self._col_tile)

    def tile_size(self) -> int:
        return self._row_tile * self._col_tile

    def tile_offset(self, row: int, col: int) -> int:
        """Offset of the first element of the tile holding ``(row, col)``."""
        col_tile = col // self._col_tile
        row_tile = row // self._row_tile
        return (col_tile * self.n_row_tiles() + row_tile) * self.tile_size()

    def offset_in_tile(self, row: int, col: int) -> int:
        """Offset of ``(row, col)`` relative to the start of its tile."""
        return (row % self._row_tile) * self._col_tile + col % self._col_tile

    def __call__(self, row: int, col: int) -> int:
        row = operator.index(row)
        col = operator.index(col)
        for r, i in enumerate((row, col)):
            if not 0 <= i < self.extents.extent(r):
                raise IndexError(
                    f"index {i} out of range for dimension {r} of extent {self.extents.extent(r)}"
                )
        return self.tile_offset(row, col) + self.offset_in_tile(row, col)

    def required_span_size(self) -> int:
        return self.n_row_tiles() * self.n_column_tiles() * self.tile_size()

    def is_contiguous(self) -> bool:
        return (
            self.extents.extent(0) % self._row_tile == 0
            and self.extents.extent(1) % self._col_tile == 0
        )

    def __repr__(self) -> str:
        return f"SimpleTileLayout2D({self.extents!r}, {self._row_tile}, {self._col_tile})"


def main(argv=None) -> int:
    """Compare a hand-tiled 2x5 array against its row-major form and report the result."""
    n_rows, n_cols = 2, 5
    data_row_major = [
        1, 2, 3, 4, 5,
        6, 7, 8, 9, 10,
    ]
    x = -1
    data_tiled = [
        1, 2, 3, 6, 7, 8, x, x, x,
        4, 5, x, 9, 10, x, x, x, x,
    ]
    extents = Extents((DYNAMIC_EXTENT, DYNAMIC_EXTENT), (n_rows, n_cols))
    tiled = Mdspan(data_tiled, SimpleTileLayout2D(extents, 3, 3))
    row_major = Mdspan(data_row_major, LayoutRight(extents))

    failures = 0
    for irow, icol in product(range(n_rows), range(n_cols)):
        if tiled[irow, icol] != row_major[irow, icol]:
            print(f"Mismatch for entry {irow}, {icol}:")
            print(f"  tiled({irow}, {icol}) = {tiled[irow, icol]}")
            print(f"  row_major({irow}, {icol}) = {row_major[irow, icol]}")
            failures += 1
    if failures == 0:
        print("Success! SimpleTiledLayout2D works as expected.")
    return 0 if failures == 0 else 1


if __name__ == "__main__":
    raise SystemExit(main())