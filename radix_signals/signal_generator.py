from typing import Iterable, Optional

import numpy as np

from radix_core.radix_config import SignalConfig


def generate_random_values(n: int = SignalConfig.random_length, seed: Optional[int] = None) -> np.ndarray:
    """n float64 samples drawn uniformly from [0, 1)."""
    if n <= 0:
        raise ValueError("n must be positive")
    rng = np.random.default_rng(seed)
    return rng.random(n)


def generate_tone_signal(
    n: int,
    tones: Iterable[tuple[float, float]] = SignalConfig.default_tones,
    noise: float = SignalConfig.noise,
    seed: Optional[int] = None,
) -> np.ndarray:
    """
    Sum of sinusoids sampled at n points:

        x_t = sum(amp * sin(2*pi * cycles * t / n)) + N(0, noise^2)

    A tone with an integer number of cycles lands exactly in bins
    `cycles` and `n - cycles`.
    """
    if n <= 0:
        raise ValueError("n must be positive")
    if noise < 0:
        raise ValueError("noise must be non-negative")

    t = np.arange(n)
    x = np.zeros(n, dtype=float)
    for cycles, amp in tones:
        x += amp * np.sin(2.0 * np.pi * cycles * t / n)

    if noise > 0:
        rng = np.random.default_rng(seed)
        x += rng.normal(0.0, noise, size=n)
    return x


def generate_signal(kind: str, n: int, seed: Optional[int] = SignalConfig.seed) -> np.ndarray:
    """Build one of the SIGNAL_KINDS by name."""
    if n <= 0:
        raise ValueError("n must be positive")

    if kind == "RANDOM":
        return generate_random_values(n, seed=seed)
    if kind == "TONES":
        return generate_tone_signal(n)
    if kind == "IMPULSE":
        x = np.zeros(n, dtype=float)
        x[0] = 1.0
        return x
    if kind == "RAMP":
        return np.arange(n, dtype=float) / n

    raise ValueError(f"Unknown signal kind: {kind}")
