import logging
from typing import Optional

import numpy as np

from .radix_config import TransformConfig


def get_logger(name: str = "radix", level: Optional[int] = None) -> logging.Logger:
    """Returns a logger with a single stream handler and standard formatting."""
    logger = logging.getLogger(name)
    logger.setLevel(TransformConfig.log_level if level is None else level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


def is_power_of_two(n: int) -> bool:
    return n > 0 and (n & (n - 1)) == 0


def as_complex(x) -> np.ndarray:
    """Promote a real or complex sequence to a 1D complex128 array."""
    z = np.asarray(x, dtype=np.complex128)
    if z.ndim != 1:
        raise ValueError(f"expected a 1D sequence, got shape {z.shape}")
    return z


def format_complex(z: complex, precision: int = 2) -> str:
    """
    Render z as 're+imi', e.g. format_complex(-0.3 - 0.97j) == '-0.30-0.97i'.

    Negative zero is printed as positive so rounded bins read '+0.00i'.
    """
    re = round(float(z.real), precision) + 0.0
    im = round(float(z.imag), precision) + 0.0
    sign = "-" if im < 0 else "+"
    return f"{re:.{precision}f}{sign}{abs(im):.{precision}f}i"
