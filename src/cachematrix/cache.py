"""
cachematrix Cache: a matrix object that remembers its inverse.

CacheMatrix wraps a matrix and an optional cached inverse. cache_solve()
computes the inverse on the first request and hands back the stored one
on every later request, until the matrix is replaced with a different one.

    original = np.array([[1, 2, 3], [0, 1, 4], [5, 6, 0]])
    cached = CacheMatrix(original, verbose=True)
    cache_solve(cached)        # Inverse computed.
    cache_solve(cached)        # Inverse retrieved from cache.
    cached.set(alternate)      # Matrix changed. Discarding ...
    cache_solve(cached)        # Inverse computed.

Replacing the matrix with a structurally identical one (same shape, same
values) keeps the cached inverse.

Not thread-safe: callers sharing one instance across threads must hold
their own lock around set() and cache_solve().
"""

import numpy as np
from scipy import sparse

from cachematrix.detector import matrices_equal, matrix_shape
from cachematrix.solver import invert


def _message(verbose, text):
    """Print a diagnostic line when verbose."""
    if verbose:
        print(f"  [cachematrix] {text}")


def _own(matrix):
    """Private copy of a matrix: sparse as CSR, dense made read-only."""
    if sparse.issparse(matrix):
        return matrix.tocsr(copy=True)
    owned = np.array(matrix)
    owned.setflags(write=False)
    return owned


class CacheMatrix:
    """A matrix capable of caching its inverse.

    Use with cache_solve(). The matrix is only ever replaced as a whole
    through set(); dense matrices are held as read-only copies so they
    cannot drift away from the cached inverse.
    """

    def __init__(self, matrix, verbose=False):
        """
        Parameters
        ----------
        matrix : numpy.ndarray, nested sequence or scipy.sparse matrix
            The original matrix.
        verbose : bool
            Print a line on every cache decision.
        """
        self._matrix = _own(matrix)
        self._inverse = None
        self.verbose = bool(verbose)

    def get(self):
        """Return the current matrix."""
        return self._matrix

    def set(self, new_matrix):
        """Replace the matrix, discarding the cached inverse if it differs.

        A structurally identical matrix leaves both the matrix and the
        cached inverse untouched.
        """
        if matrices_equal(self._matrix, new_matrix):
            _message(self.verbose, "New matrix is identical. Nothing will be changed.")
            return

        _message(self.verbose, "Matrix changed. Discarding any previous cached inverse.")
        self._matrix = _own(new_matrix)
        self._inverse = None

    def set_verbose(self, verbose):
        self.verbose = bool(verbose)

    def is_verbose(self):
        return self.verbose

    def has_inverse(self):
        """True when an inverse for the current matrix is cached."""
        return self._inverse is not None

    @property
    def shape(self):
        return matrix_shape(self._matrix)

    # Cache accessors, for cache_solve() only

    def _get_inverse(self):
        return self._inverse

    def _set_inverse(self, inverse):
        if isinstance(inverse, np.ndarray):
            inverse.setflags(write=False)
        self._inverse = inverse

    def __repr__(self):
        state = "cached" if self.has_inverse() else "empty"
        return (f"CacheMatrix(shape={self.shape}, inverse={state}, "
                f"verbose={self.verbose})")


def cache_solve(cached, **kwargs):
    """
    Inverse of a CacheMatrix, computed once and then served from cache.

    Parameters
    ----------
    cached : CacheMatrix
        Cache-capable matrix.
    **kwargs
        Extra options passed to cachematrix.solver.invert(), e.g.
        check_finite. Only used when the inverse has to be computed.

    Returns
    -------
    numpy.ndarray or scipy.sparse matrix
        The inverse. Repeated calls without an intervening set() return
        the very same object.

    Raises
    ------
    InversionError
        Propagated from the solver. Nothing is cached in that case, so the
        next call tries again.
    """
    inverse = cached._get_inverse()
    if inverse is None:
        inverse = invert(cached.get(), **kwargs)
        cached._set_inverse(inverse)
        _message(cached.is_verbose(), "Inverse computed.")
    else:
        _message(cached.is_verbose(), "Inverse retrieved from cache.")
    return inverse
