# radix_core/radix_dft.py

import numpy as np

from .radix_errors import EmptyInput
from .radix_linalg import matrix_vector_multiply
from .radix_utils import as_complex, get_logger

logger = get_logger(__name__)


def transform_matrix(n: int, w: complex) -> np.ndarray:
    """
    n x n matrix with entry (i, j) = exp(w * i * j).

    Built fresh on every call; the caller owns the result.
    """
    idx = np.arange(n, dtype=np.float64)
    return np.exp(w * np.outer(idx, idx))


def dft(x) -> np.ndarray:
    """DFT of a real sequence (imaginary parts taken as zero)."""
    return dft_complex(np.asarray(x, dtype=np.float64).astype(np.complex128))


def dft_complex(x) -> np.ndarray:
    """
    Direct O(n^2) transform:

        X_k = sum_j x_j * exp(+2*pi*i * j*k / n)

    Any length n >= 1 is accepted.
    """
    x = as_complex(x)
    n = len(x)
    if n == 0:
        raise EmptyInput("dft")

    logger.debug("dft: n=%d", n)
    w = 2j * np.pi / n
    return matrix_vector_multiply(transform_matrix(n, w), x)


def idft(X) -> np.ndarray:
    """
    Inverse of dft_complex for spectra of real signals.

    Uses the conjugate kernel, divides by n and drops the imaginary part.
    """
    X = as_complex(X)
    n = len(X)
    if n == 0:
        raise EmptyInput("idft")

    logger.debug("idft: n=%d", n)
    w = -2j * np.pi / n
    r = matrix_vector_multiply(transform_matrix(n, w), X)
    return (r / n).real
