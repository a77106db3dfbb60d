"""
cachematrix - Cache support for matrix inversion
================================================

A matrix object that keeps its inverse around instead of recomputing it.

Quick start:
    import cachematrix

    cached = cachematrix.CacheMatrix(A)
    inv = cachematrix.cache_solve(cached)    # computed (LAPACK / SuperLU)
    inv = cachematrix.cache_solve(cached)    # served from cache

    cached.set(B)                            # different matrix: cache dropped
    inv = cachematrix.cache_solve(cached)    # computed again

    # Inspect matrix structure / invert without caching
    report = cachematrix.detect_matrix(A)
    A_inv = cachematrix.invert(A)

License: MIT
"""

__version__ = "0.1.0"

from cachematrix.detector import detect_matrix, matrices_equal
from cachematrix.solver import invert, InversionError
from cachematrix.cache import CacheMatrix, cache_solve

__all__ = [
    "CacheMatrix", "cache_solve", "invert", "InversionError",
    "detect_matrix", "matrices_equal",
]
