import numpy as np
import pytest

from radix_core import radix_fft
from radix_core.radix_config import TransformConfig
from radix_core.radix_dft import dft
from radix_core.radix_errors import EmptyInput, NotAPowerOfTwo, TransformError
from radix_core.radix_fft import fft, fft_complex, ifft
from radix_core.radix_utils import format_complex
from radix_signals.signal_generator import generate_random_values

SIMPLE_VALUES = [0.2, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8]


def test_fft_simple_values():
    r = fft(SIMPLE_VALUES)
    assert len(r) == 8

    assert format_complex(r[0]) == "3.70+0.00i"
    assert format_complex(r[1]) == "-0.30-0.97i"
    assert format_complex(r[2]) == "-0.30-0.40i"
    assert format_complex(r[3]) == "-0.30-0.17i"
    assert format_complex(r[4]) == "-0.30+0.00i"

    o = ifft(r)
    assert [f"{v:.1f}" for v in o] == [f"{v:.1f}" for v in SIMPLE_VALUES]


def test_fft_random_values_round_trip():
    values = generate_random_values()
    o = ifft(fft(values))
    assert len(o) == len(values)
    np.testing.assert_allclose(o, values, rtol=0, atol=TransformConfig.tolerance)


@pytest.mark.parametrize("n", [1, 2, 4, 8, 64, 1024])
def test_fft_matches_dft(n):
    x = generate_random_values(n, seed=n)
    np.testing.assert_allclose(fft(x), dft(x), atol=1e-7)


def test_fft_complex_input():
    rng = np.random.default_rng(0)
    z = rng.normal(size=16) + 1j * rng.normal(size=16)
    # forward kernel is exp(+2*pi*i*j*k/n), i.e. n * numpy's inverse
    np.testing.assert_allclose(fft_complex(z), 16 * np.fft.ifft(z), atol=1e-10)


@pytest.mark.parametrize("n", [3, 5, 6, 100])
def test_fft_not_power_of_two(n):
    with pytest.raises(NotAPowerOfTwo) as exc_info:
        fft([1.0] * n)
    assert exc_info.value.n == n
    assert str(exc_info.value) == f"Input length ({n}) is not a power of two."


@pytest.mark.parametrize("n", [3, 5, 6, 100])
def test_ifft_not_power_of_two(n):
    with pytest.raises(NotAPowerOfTwo) as exc_info:
        ifft([1.0 + 0j] * n)
    assert exc_info.value.n == n


def test_not_a_power_of_two_is_a_transform_error():
    with pytest.raises(TransformError):
        fft_complex([1.0, 2.0, 3.0])
    with pytest.raises(ValueError):
        fft_complex([1.0, 2.0, 3.0])


def test_length_checked_at_every_depth(monkeypatch):
    # Pretend 4 is not a power of two: the top-level call on 8 passes the
    # check and the failure must come from the recursive half-size calls.
    monkeypatch.setattr(radix_fft, "is_power_of_two", lambda n: n != 4)
    with pytest.raises(NotAPowerOfTwo) as exc_info:
        fft_complex(np.ones(8))
    assert exc_info.value.n == 4

    with pytest.raises(NotAPowerOfTwo) as exc_info:
        ifft(np.ones(8, dtype=complex))
    assert exc_info.value.n == 4


def test_fft_length_preserved():
    for n in (1, 2, 4, 32):
        x = generate_random_values(n, seed=1)
        assert len(fft(x)) == n
        assert len(ifft(fft(x))) == n


def test_empty_input_rejected():
    with pytest.raises(EmptyInput):
        fft([])
    with pytest.raises(EmptyInput):
        ifft([])
