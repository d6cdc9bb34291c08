"""Multidimensional views over flat sequences: extents, layouts, spans, subspans, tiling and a dot product."""

__version__ = "0.1.0"
__all__ = ["core", "tiled", "dot_product"]