"""
cachematrix Detector: structure analysis and structural equality.

Analyzes a matrix and returns a report with:
  - Shape, density, squareness
  - Recommended inversion strategy (dense LAPACK / sparse SuperLU)
  - Memory estimates

Also decides when two matrices are "the same" for caching purposes:
equal shape and pairwise equal elements, regardless of object identity
or storage format.

Usage:
    from cachematrix.detector import detect_matrix, matrices_equal
    report = detect_matrix(A)
    matrices_equal(A, A.copy())   # True
"""

import numpy as np
from scipy import sparse


def matrix_shape(A):
    """Shape of a dense or sparse matrix without densifying it."""
    if sparse.issparse(A):
        return tuple(A.shape)
    return np.shape(A)


def detect_matrix(A):
    """
    Analyze matrix structure and recommend an inversion strategy.

    Parameters
    ----------
    A : numpy.ndarray, nested sequence or scipy.sparse matrix
        The matrix to analyze.

    Returns
    -------
    dict
        Structure report with shape, density, nnz, strategy.

    Raises
    ------
    ValueError
        If A is not two-dimensional.
    """
    is_sparse = sparse.issparse(A)
    if is_sparse:
        A_sp = A.tocsr()
        m, n = A_sp.shape
        nnz = A_sp.nnz
        ram_sparse = A_sp.data.nbytes + A_sp.indices.nbytes + A_sp.indptr.nbytes
        ram_dense = m * n * 8
    else:
        A_arr = np.asarray(A, dtype=float)
        if A_arr.ndim != 2:
            raise ValueError(f"Expected a 2-D matrix, got {A_arr.ndim}-D input")
        m, n = A_arr.shape
        nnz = int(np.count_nonzero(A_arr))
        ram_sparse = None
        ram_dense = A_arr.nbytes

    total = m * n
    density = nnz / total if total > 0 else 0
    is_square = (m == n)

    # Strategy recommendation
    if not is_square:
        strategy = "not_invertible"
        reason = f"Rectangular {m} x {n}, no inverse"
    elif m == 0:
        strategy = "not_invertible"
        reason = "Empty matrix, no inverse"
    elif is_sparse and density < 0.1:
        strategy = "sparse"  # SuperLU, result stays sparse
        reason = f"Sparse ({density:.2%}), SuperLU inverse"
    else:
        strategy = "dense"  # LAPACK getrf/getri
        reason = f"Dense ({density:.1%}), LAPACK inverse"

    report = {
        "shape": (m, n),
        "nnz": nnz,
        "density": round(density, 6),
        "is_square": is_square,
        "is_sparse": is_sparse,
        "strategy": strategy,
        "reason": reason,
        "ram_dense_mb": round(ram_dense / 1e6, 1),
    }

    if ram_sparse is not None:
        report["ram_sparse_mb"] = round(ram_sparse / 1e6, 1)
        report["compression"] = round(ram_dense / max(ram_sparse, 1), 1)

    return report


def matrices_equal(a, b):
    """
    Structural equality: same shape and all elements pairwise equal.

    Works for any mix of dense and sparse inputs. NaN entries never
    compare equal, as with elementwise ``==``.

    Parameters
    ----------
    a, b : numpy.ndarray, nested sequence or scipy.sparse matrix

    Returns
    -------
    bool
    """
    if matrix_shape(a) != matrix_shape(b):
        return False

    if sparse.issparse(a) and sparse.issparse(b):
        # != on two sparse operands yields only the differing entries
        diff = sparse.csr_matrix(a) != sparse.csr_matrix(b)
        return diff.nnz == 0

    if sparse.issparse(a):
        a = a.toarray()
    if sparse.issparse(b):
        b = b.toarray()
    return bool(np.array_equal(np.asarray(a), np.asarray(b)))
