"""Classic data-structure exercises: lists, searching, sorting, polynomials, graphs and rosters."""

__version__ = "0.1.0"
__all__ = ["seqlist", "search", "sort", "polynomial", "topology", "workers"]