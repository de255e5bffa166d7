"""
Signal generation and spectrum reporting on top of Radix Core.

This package:
- Names the supported backends and demo signal kinds.
- Generates random and synthetic tone signals for self-checks and the demo.
- Builds pandas tables for spectra and backend comparisons.
"""

from .signal_schema import BACKEND_NAMES, SIGNAL_KINDS, SPECTRUM_COLUMNS, COMPARISON_COLUMNS
from .signal_generator import generate_random_values, generate_tone_signal, generate_signal
from .spectrum_report import spectrum_table, compare_backends

__all__ = [
    "BACKEND_NAMES",
    "SIGNAL_KINDS",
    "SPECTRUM_COLUMNS",
    "COMPARISON_COLUMNS",
    "generate_random_values",
    "generate_tone_signal",
    "generate_signal",
    "spectrum_table",
    "compare_backends",
]
