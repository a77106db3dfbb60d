"""
CacheMatrix walkthrough
=======================

Drives a CacheMatrix through its whole life cycle with verbose output:
repeated inverse requests, identical replacement, verbosity toggling and
a switch to a different matrix.

Usage:
  pip install -e .
  python examples/run_cache_demo.py
"""

import sys

import numpy as np

from cachematrix import CacheMatrix, cache_solve, invert


def exercise(cached):
    original_verbose = cached.is_verbose()
    cached.set_verbose(True)

    print("Matrix is:")
    matrix = cached.get()
    print(matrix)

    print("Request inverse multiple times:")
    cache_solve(cached)
    cache_solve(cached)

    print("Computed (and cached) inverse:")
    computed = cache_solve(cached)
    print(computed)

    print("Expected inverse:")
    expected = invert(cached.get())
    print(expected)
    same = np.array_equal(computed, expected)
    print(f"Are computed and expected inverse identical? {same}")
    if not same:
        raise RuntimeError("Expected and obtained inverse matrices are not identical!")

    print("Change to identical matrix (inverse shall not be discarded):")
    cached.set(matrix.copy())
    cache_solve(cached)

    print("Turn verbose off. No message shall be printed till END.")
    cached.set_verbose(False)
    cache_solve(cached)
    print("END.")

    print("Restore verbosity and check messages are back:")
    cached.set_verbose(True)
    cache_solve(cached)

    print("Tests finished")
    cached.set_verbose(original_verbose)


def main():
    original = np.array([[1, 2, 3], [0, 1, 4], [5, 6, 0]], dtype=float)
    print("Creating cache-capable object for matrix:")
    cached = CacheMatrix(original, verbose=True)
    exercise(cached)

    alternate = np.array([[4, 3], [3, 2]], dtype=float)
    print("Switching to other matrix:")
    cached.set(alternate)
    exercise(cached)
    return 0


if __name__ == "__main__":
    sys.exit(main())
