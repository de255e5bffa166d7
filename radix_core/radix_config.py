import logging


class TransformConfig:
    default_backend = "fft"  # 'fft', 'dft' or 'numpy'
    tolerance = 1e-5         # per-element round-trip tolerance
    log_level = logging.WARNING


class SignalConfig:
    random_length = 1024
    seed = 42
    # (cycles, amplitude) pairs for the demo tone signal
    default_tones = ((5, 1.0), (10, 0.5))
    noise = 0.0
