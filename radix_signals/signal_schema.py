"""
Names shared by the generator, the reports and the demo app.

Spectrum tables have one row per frequency bin:

- bin: index k in 0..n-1
- freq: normalized frequency in cycles per sample (numpy.fft.fftfreq order)
- real, imag: parts of the coefficient
- magnitude: |X_k|
- phase: angle of X_k in radians

Comparison tables have one row per backend:

- backend: "fft", "dft" or "numpy"
- n: input length
- max_abs_diff: largest |X_k - reference_k| against the numpy backend
- roundtrip_error: largest |x_j - inverse(forward(x))_j|
- elapsed_ms: wall time of the forward transform
- error: message when the backend rejected the input, else ""
"""

from radix_core.radix_backend import BACKENDS

BACKEND_NAMES = list(BACKENDS)

SIGNAL_KINDS = ["RANDOM", "TONES", "IMPULSE", "RAMP"]

SPECTRUM_COLUMNS = ["bin", "freq", "real", "imag", "magnitude", "phase"]

COMPARISON_COLUMNS = [
    "backend",
    "n",
    "max_abs_diff",
    "roundtrip_error",
    "elapsed_ms",
    "error",
]
