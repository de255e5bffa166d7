import time
from typing import Iterable, Optional

import numpy as np
import pandas as pd

from radix_core.radix_backend import TransformBackend
from radix_core.radix_errors import TransformError
from radix_core.radix_utils import get_logger
from .signal_schema import BACKEND_NAMES, COMPARISON_COLUMNS, SPECTRUM_COLUMNS

logger = get_logger(__name__)


def spectrum_table(samples, backend: Optional[TransformBackend] = None) -> pd.DataFrame:
    """
    One row per frequency bin of `samples` under the given backend.

    TransformError (e.g. NotAPowerOfTwo on the fft backend) propagates.
    """
    backend = backend or TransformBackend()
    S = backend.forward(samples)
    n = len(S)
    return pd.DataFrame(
        {
            "bin": np.arange(n),
            "freq": backend.freqs(n),
            "real": S.real,
            "imag": S.imag,
            "magnitude": np.abs(S),
            "phase": np.angle(S),
        },
        columns=SPECTRUM_COLUMNS,
    )


def compare_backends(samples, backends: Optional[Iterable[str]] = None) -> pd.DataFrame:
    """
    Run every backend on `samples` and measure agreement with numpy.

    A backend that rejects the input gets its message in `error` and NaN
    metrics instead of failing the whole comparison.
    """
    x = np.asarray(samples, dtype=np.float64)
    reference = TransformBackend("numpy").forward(x)

    rows = []
    for name in backends or BACKEND_NAMES:
        backend = TransformBackend(name)
        start = time.perf_counter()
        try:
            S = backend.forward(x)
        except TransformError as exc:
            logger.info("%s backend rejected n=%d: %s", name, len(x), exc)
            rows.append(
                {
                    "backend": name,
                    "n": len(x),
                    "max_abs_diff": np.nan,
                    "roundtrip_error": np.nan,
                    "elapsed_ms": np.nan,
                    "error": str(exc),
                }
            )
            continue
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        roundtrip = backend.inverse(S)

        rows.append(
            {
                "backend": name,
                "n": len(x),
                "max_abs_diff": float(np.max(np.abs(S - reference))),
                "roundtrip_error": float(np.max(np.abs(x - roundtrip))),
                "elapsed_ms": elapsed_ms,
                "error": "",
            }
        )
        logger.info("%s backend: n=%d in %.2f ms", name, len(x), elapsed_ms)

    return pd.DataFrame(rows, columns=COMPARISON_COLUMNS)
