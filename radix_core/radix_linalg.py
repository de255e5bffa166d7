# radix_core/radix_linalg.py

import numpy as np


def matrix_vector_multiply(m: np.ndarray, v: np.ndarray) -> np.ndarray:
    """
    r[i] = sum_j m[i][j] * v[j] for a square n x n matrix and a length-n vector.

    Shape mismatches are internal contract violations and fail the assertion.
    """
    m = np.asarray(m, dtype=np.complex128)
    v = np.asarray(v, dtype=np.complex128)
    assert m.ndim == 2 and m.shape[0] == m.shape[1], f"Expected square matrix, got {m.shape}"
    assert v.shape == (m.shape[0],), f"Expected vector of length {m.shape[0]}, got {v.shape}"
    return m @ v


def add_elementwise(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    a = np.asarray(a, dtype=np.complex128)
    b = np.asarray(b, dtype=np.complex128)
    assert a.shape == b.shape, f"Length mismatch: {a.shape} vs {b.shape}"
    return a + b


def mul_elementwise(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    a = np.asarray(a, dtype=np.complex128)
    b = np.asarray(b, dtype=np.complex128)
    assert a.shape == b.shape, f"Length mismatch: {a.shape} vs {b.shape}"
    return a * b
