from typing import Optional

import numpy as np

from .radix_config import TransformConfig
from .radix_dft import dft_complex, idft
from .radix_errors import EmptyInput
from .radix_fft import fft_complex, ifft
from .radix_utils import as_complex, get_logger

logger = get_logger(__name__)

BACKENDS = ("fft", "dft", "numpy")


class TransformBackend:
    """
    Thin switch over the transform implementations.

    - "fft":   recursive radix-2 FFT (power-of-two lengths only)
    - "dft":   direct O(n^2) transform (any length)
    - "numpy": numpy.fft reference, same sign convention as the engine

    All backends agree on the forward kernel exp(+2*pi*i*j*k/n), which is
    n * numpy.fft.ifft in numpy terms.
    """

    def __init__(self, backend: Optional[str] = None):
        if backend is None:
            backend = TransformConfig.default_backend
        if backend not in BACKENDS:
            raise ValueError(f"Unsupported transform backend: {backend}")
        self.backend = backend

    def forward(self, z) -> np.ndarray:
        """Spectrum of a real or complex 1D sequence."""
        z = as_complex(z)
        logger.debug("%s forward: n=%d", self.backend, len(z))
        if self.backend == "fft":
            return fft_complex(z)
        if self.backend == "dft":
            return dft_complex(z)
        if len(z) == 0:
            raise EmptyInput("numpy forward")
        return len(z) * np.fft.ifft(z)

    def inverse(self, Z) -> np.ndarray:
        """Real time-domain samples from a spectrum."""
        Z = as_complex(Z)
        logger.debug("%s inverse: n=%d", self.backend, len(Z))
        if self.backend == "fft":
            return ifft(Z)
        if self.backend == "dft":
            return idft(Z)
        if len(Z) == 0:
            raise EmptyInput("numpy inverse")
        return (np.fft.fft(Z) / len(Z)).real

    def freqs(self, n: int) -> np.ndarray:
        """
        Return frequency bins (cycles per sample) for sequence length n.

        fftfreq labels numpy's exp(-...) kernel; under exp(+...) bin k holds
        the -k/n component, so the labels are negated.
        """
        return -np.fft.fftfreq(n)
