"""Multidimensional views over flat sequences: extents, layouts, spans and subspans."""

from __future__ import annotations

import operator
from collections.abc import MutableSequence, Sequence
from itertools import accumulate
from math import prod

DYNAMIC_EXTENT = -1


class _All:
    """Marker selecting the whole range of a dimension in :func:`subspan`."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ALL"


ALL = _All()


class Extents:
    """The shape of a multidimensional index space, with static and dynamic dimensions."""

    __slots__ = ("_static", "_values")

    def __init__(self, static_extents: Sequence[int], dynamic_sizes: Sequence[int] | None = None):
        static = tuple(operator.index(e) for e in static_extents)
        for e in static:
            if e < 0 and e != DYNAMIC_EXTENT:
                raise ValueError(f"invalid static extent {e}")
        n_dynamic = static.count(DYNAMIC_EXTENT)

        if dynamic_sizes is None:
            values = tuple(0 if e == DYNAMIC_EXTENT else e for e in static)
        else:
            sizes = tuple(operator.index(s) for s in dynamic_sizes)
            if any(s < 0 for s in sizes):
                raise ValueError("extents must not be negative")
            if len(sizes) == n_dynamic:
                it = iter(sizes)
                values = tuple(next(it) if e == DYNAMIC_EXTENT else e for e in static)
            elif len(sizes) == len(static):
                for e, s in zip(static, sizes):
                    if e != DYNAMIC_EXTENT and e != s:
                        raise ValueError(f"size {s} does not match static extent {e}")
                values = sizes
            else:
                raise ValueError(
                    f"expected {n_dynamic} dynamic sizes or {len(static)} sizes, got {len(sizes)}"
                )
        self._static = static
        self._values = values

    def rank(self) -> int:
        return len(self._static)

    def rank_dynamic(self) -> int:
        return self._static.count(DYNAMIC_EXTENT)

    def _check_rank_index(self, r: int) -> int:
        r = operator.index(r)
        if not 0 <= r < len(self._static):
            raise IndexError(f"dimension {r} out of range for rank {len(self._static)}")
        return r

    def static_extent(self, r: int) -> int:
        return self._static[self._check_rank_index(r)]

    def extent(self, r: int) -> int:
        return self._values[self._check_rank_index(r)]

    def converted(self, static_extents: Sequence[int]) -> "Extents":
        """Return extents with the same sizes under another static/dynamic pattern."""
        static = tuple(static_extents)
        if len(static) != len(self._static):
            raise ValueError(f"rank mismatch: {len(static)} != {len(self._static)}")
        return Extents(static, self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Extents):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        return f"Extents({list(self._static)!r}, {list(self._values)!r})"


def _normalize_indices(extents: Extents, args: tuple) -> tuple[int, ...]:
    if len(args) == 1 and isinstance(args[0], (tuple, list)):
        args = tuple(args[0])
    if len(args) != extents.rank():
        raise TypeError(f"expected {extents.rank()} indices, got {len(args)}")
    indices = tuple(operator.index(i) for i in args)
    for r, i in enumerate(indices):
        if not 0 <= i < extents.extent(r):
            raise IndexError(f"index {i} out of range for dimension {r} of extent {extents.extent(r)}")
    return indices


def _strided_offset(extents: Extents, strides: tuple[int, ...], args: tuple) -> int:
    indices = _normalize_indices(extents, args)
    return sum(i * s for i, s in zip(indices, strides))


def _same_mapping(a, b) -> bool:
    return a.extents == b.extents and a._strides == b._strides


class LayoutLeft:
    """Column-major mapping: the first index varies fastest."""

    def __init__(self, extents: Extents):
        self.extents = extents
        self._strides = tuple(accumulate(extents._values[:-1], operator.mul, initial=1))

    def __call__(self, *args) -> int:
        return _strided_offset(self.extents, self._strides, args)

    def required_span_size(self) -> int:
        return prod(self.extents._values)

    def stride(self, r: int) -> int:
        return self._strides[self.extents._check_rank_index(r)]

    def is_contiguous(self) -> bool:
        return True

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return _same_mapping(self, other)

    def __hash__(self) -> int:
        return hash(("LayoutLeft", self.extents, self._strides))

    def __repr__(self) -> str:
        return f"LayoutLeft({self.extents!r})"


class LayoutRight:
    """Row-major mapping: the last index varies fastest."""

    def __init__(self, extents: Extents):
        self.extents = extents
        reversed_strides = accumulate(reversed(extents._values[1:]), operator.mul, initial=1)
        self._strides = tuple(reversed(list(reversed_strides)))

    def __call__(self, *args) -> int:
        return _strided_offset(self.extents, self._strides, args)

    def required_span_size(self) -> int:
        return prod(self.extents._values)

    def stride(self, r: int) -> int:
        return self._strides[self.extents._check_rank_index(r)]

    def is_contiguous(self) -> bool:
        return True

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return _same_mapping(self, other)

    def __hash__(self) -> int:
        return hash(("LayoutRight", self.extents, self._strides))

    def __repr__(self) -> str:
        return f"LayoutRight({self.extents!r})"


class LayoutStride:
    """Mapping with an explicit stride for every dimension."""

    def __init__(self, extents: Extents, strides: Sequence[int]):
        values = tuple(operator.index(s) for s in strides)
        if len(values) != extents.rank():
            raise ValueError(f"expected {extents.rank()} strides, got {len(values)}")
        if any(s < 0 for s in values):
            raise ValueError("strides must not be negative")
        self.extents = extents
        self._strides = values

    def __call__(self, *args) -> int:
        return _strided_offset(self.extents, self._strides, args)

    def required_span_size(self) -> int:
        exts = self.extents._values
        if any(e == 0 for e in exts):
            return 0
        return 1 + sum((e - 1) * s for e, s in zip(exts, self._strides))

    def stride(self, r: int) -> int:
        return self._strides[self.extents._check_rank_index(r)]

    def is_contiguous(self) -> bool:
        return self.required_span_size() == prod(self.extents._values)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return _same_mapping(self, other)

    def __hash__(self) -> int:
        return hash(("LayoutStride", self.extents, self._strides))

    def __repr__(self) -> str:
        return f"LayoutStride({self.extents!r}, {list(self._strides)!r})"


class Mdspan:
    """A multidimensional view of a flat sequence through a layout mapping."""

    def __init__(self, data: MutableSequence, mapping, offset: int = 0):
        if isinstance(mapping, Extents):
            mapping = LayoutRight(mapping)
        offset = operator.index(offset)
        if offset < 0:
            raise ValueError("offset must not be negative")
        needed = mapping.required_span_size()
        if needed and offset + needed > len(data):
            raise ValueError(
                f"data of length {len(data)} is too short for offset {offset} and span size {needed}"
            )
        self.data = data
        self.mapping = mapping
        self.offset = offset

    @property
    def extents(self) -> Extents:
        return self.mapping.extents

    def _position(self, index) -> int:
        if not isinstance(index, tuple):
            index = (index,)
        return self.offset + self.mapping(*index)

    def __getitem__(self, index):
        return self.data[self._position(index)]

    def __setitem__(self, index, value) -> None:
        self.data[self._position(index)] = value

    def rank(self) -> int:
        return self.mapping.extents.rank()

    def extent(self, r: int) -> int:
        return self.mapping.extents.extent(r)

    def __call__(self, *args):
        if len(args) == 1 and isinstance(args[0], (tuple, list)):
            args = tuple(args[0])
        return self[args]

    def __repr__(self) -> str:
        return f"Mdspan(mapping={self.mapping!r}, offset={self.offset})"


def subspan(span: Mdspan, *args) -> Mdspan:
    """Return a view of part of ``span``.

    One specifier per dimension: an integer fixes the index and drops the
    dimension, ``ALL`` keeps it whole, and a ``slice`` with unit step keeps
    a contiguous range of it.
    """
    mapping = span.mapping
    ext = mapping.extents
    if len(args) != ext.rank():
        raise TypeError(f"expected {ext.rank()} slice specifiers, got {len(args)}")
    if not hasattr(mapping, "stride"):
        raise TypeError(f"{type(mapping).__name__} is not a strided layout")

    offset = span.offset
    new_static: list[int] = []
    new_sizes: list[int] = []
    new_strides: list[int] = []
    for r, spec in enumerate(args):
        n = ext.extent(r)
        s = mapping.stride(r)
        if spec is ALL:
            start, length = 0, n
            new_static.append(ext.static_extent(r))
        elif isinstance(spec, slice):
            start, stop, step = spec.indices(n)
            if step != 1:
                raise ValueError("only unit-step slices are supported")
            length = max(0, stop - start)
            if length == 0:
                start = 0
            new_static.append(DYNAMIC_EXTENT)
        else:
            i = operator.index(spec)
            if not 0 <= i < n:
                raise IndexError(f"index {i} out of range for dimension {r} of extent {n}")
            offset += i * s
            continue
        offset += start * s
        new_sizes.append(length)
        new_strides.append(s)

    new_mapping = LayoutStride(Extents(new_static, new_sizes), new_strides)
    return Mdspan(span.data, new_mapping, offset)


def _examples() -> list[bool]:
    results = []

    buffer = [0.0] * (2 * 3 * 4)
    s1 = Mdspan(buffer, LayoutRight(Extents((2, 3, 4))))
    s1[1, 1, 1] = 42
    sub1 = subspan(s1, 1, 1, ALL)
    results.append(sub1[1] == 42)

    buffer = [0.0] * (2 * 3 * 4)
    s1 = Mdspan(buffer, LayoutLeft(Extents((2, 3, 4))))
    s1[1, 1, 1] = 42
    sub2 = subspan(subspan(s1, 1, ALL, ALL), 1, ALL)
    results.append(sub2[1] == 42)

    for layout in (LayoutRight, LayoutLeft):
        buffer = [0.0] * (2 * 3 * 4)
        s1 = Mdspan(buffer, layout(Extents((2, 3, 4))))
        s1[1, 1, 1] = 42
        sub3 = subspan(subspan(subspan(s1, 1, ALL, ALL), 1, ALL), 1)
        results.append(sub3() == 42)

    return results


def main(argv=None) -> int:
    """Run the subspan demonstration and print each check's outcome."""
    for ok in _examples():
        print("true" if ok else "false")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())