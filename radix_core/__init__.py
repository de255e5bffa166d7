"""
Radix Core: direct and radix-2 Fourier transform engine.

This package provides generic building blocks:
- Linear-algebra primitives
- DFT engine (explicit transform matrix)
- FFT engine (recursive Cooley-Tukey, power-of-two lengths)
- Transform backend switch

Callers import concrete functions directly from the submodules, e.g.:

    from radix_core.radix_fft import fft, ifft
"""

__all__ = []
