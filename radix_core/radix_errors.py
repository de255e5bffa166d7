# radix_core/radix_errors.py


class TransformError(ValueError):
    """Base class for recoverable transform failures."""


class NotAPowerOfTwo(TransformError):
    """
    Raised by the FFT path when the sequence length is not 2**k.

    The offending length is kept on ``n`` so callers can report it.
    """

    def __init__(self, n: int):
        self.n = n
        super().__init__(f"Input length ({n}) is not a power of two.")


class EmptyInput(TransformError):
    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation}: input sequence is empty")
