# radix_core/radix_fft.py

import numpy as np

from .radix_dft import dft_complex
from .radix_errors import EmptyInput, NotAPowerOfTwo
from .radix_linalg import add_elementwise, mul_elementwise
from .radix_utils import as_complex, get_logger, is_power_of_two

logger = get_logger(__name__)


def fft(x) -> np.ndarray:
    """FFT of a real sequence whose length is a power of two."""
    return fft_complex(np.asarray(x, dtype=np.float64).astype(np.complex128))


def fft_complex(x) -> np.ndarray:
    """
    Recursive radix-2 Cooley-Tukey transform.

    Produces the same spectrum as dft_complex. The length is checked on every
    call, so NotAPowerOfTwo surfaces from whichever depth first sees a bad size.
    Lengths 1 and 2 go straight to the direct transform.
    """
    x = as_complex(x)
    n = len(x)
    if n == 0:
        raise EmptyInput("fft")
    if not is_power_of_two(n):
        logger.debug("fft: rejecting length %d", n)
        raise NotAPowerOfTwo(n)
    if n <= 2:
        return dft_complex(x)

    x_even = fft_complex(x[0::2])
    x_odd = fft_complex(x[1::2])

    # twiddles use the same +i sign as the direct kernel
    f = np.exp(2j * np.pi * np.arange(n) / n)

    half = n // 2
    top = add_elementwise(x_even, mul_elementwise(x_odd, f[:half]))
    bottom = add_elementwise(x_even, mul_elementwise(x_odd, f[half:]))
    return np.concatenate([top, bottom])


def ifft(X) -> np.ndarray:
    """
    Inverse FFT via conj(fft(conj(X))) / n, real part only.

    NotAPowerOfTwo from the forward pass propagates unchanged.
    """
    X = as_complex(X)
    n = len(X)
    if n == 0:
        raise EmptyInput("ifft")

    r = np.conj(fft_complex(np.conj(X)))
    return (r / n).real
