"""
cachematrix Solver: Auto-routing matrix inverse.

Automatically detects matrix structure and routes to the matching routine:
  - Square dense -> scipy.linalg.inv (LAPACK getrf/getri)
  - Square sparse -> scipy.sparse.linalg.inv (SuperLU), result stays sparse
  - Anything else -> InversionError

Every failure to invert (rectangular, singular, non-finite input) is
reported as InversionError, a subclass of numpy.linalg.LinAlgError.

Usage:
    from cachematrix.solver import invert
    A_inv = invert(A)
"""

import warnings

import numpy as np
import scipy.linalg
from scipy import sparse
from scipy.sparse.linalg import MatrixRankWarning
from scipy.sparse.linalg import inv as sparse_inv

from cachematrix.detector import detect_matrix


class InversionError(np.linalg.LinAlgError):
    """The matrix cannot be inverted (non-square, singular or non-finite)."""


def _has_non_finite(A):
    data = A.data if sparse.issparse(A) else A
    return not np.all(np.isfinite(data))


def _invert_dense(A, check_finite):
    if sparse.issparse(A):
        A = A.toarray()
    try:
        result = scipy.linalg.inv(A, check_finite=check_finite)
    except np.linalg.LinAlgError as exc:
        raise InversionError(f"Matrix is singular: {exc}") from exc
    if not np.all(np.isfinite(result)):
        raise InversionError("Matrix is singular: inverse is not finite")
    return result


def _invert_sparse(A):
    A = sparse.csc_matrix(A)
    if A.dtype.kind not in "fc":
        A = A.astype(np.float64)
    with warnings.catch_warnings():
        warnings.simplefilter("error", MatrixRankWarning)
        try:
            result = sparse_inv(A)
        except MatrixRankWarning as exc:
            raise InversionError(f"Matrix is singular: {exc}") from exc
        except RuntimeError as exc:
            # SuperLU: "Factor is exactly singular"
            raise InversionError(f"Matrix is singular: {exc}") from exc
    if _has_non_finite(result):
        raise InversionError("Matrix is singular: inverse is not finite")
    return result


def invert(A, verbose=False, check_finite=True):
    """
    Compute the inverse of a square matrix with automatic strategy selection.

    Parameters
    ----------
    A : numpy.ndarray, nested sequence or scipy.sparse matrix
        Square matrix to invert.
    verbose : bool
        Print strategy info.
    check_finite : bool
        Reject inputs containing inf or NaN before calling LAPACK.

    Returns
    -------
    numpy.ndarray or scipy.sparse.csc_matrix
        The inverse. Sparse inputs routed to SuperLU give a sparse result.

    Raises
    ------
    InversionError
        If A is not square, is singular, or contains non-finite values.
    """
    if sparse.issparse(A):
        # lil and dok keep no flat .data array
        A = A.tocsr()
    else:
        A = np.asarray(A)
        if A.dtype.kind not in "biufc" or A.ndim != 2:
            raise InversionError(f"Expected a 2-D numeric matrix, got {A.dtype} "
                                 f"with shape {A.shape}")

    report = detect_matrix(A)
    strategy = report["strategy"]

    if verbose:
        print(f"  [cachematrix] {report['shape'][0]:,} x {report['shape'][1]:,}, "
              f"density={report['density']:.4%}, strategy={strategy}")

    if strategy == "not_invertible":
        raise InversionError(f"Cannot invert: {report['reason']}")

    if check_finite and _has_non_finite(A):
        raise InversionError("Matrix contains infs or NaNs")

    if strategy == "sparse":
        return _invert_sparse(A)

    return _invert_dense(A, check_finite)
