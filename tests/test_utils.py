import logging

import numpy as np
import pytest

from radix_core.radix_utils import as_complex, format_complex, get_logger, is_power_of_two


@pytest.mark.parametrize("n", [1, 2, 4, 8, 1024, 2 ** 20])
def test_is_power_of_two(n):
    assert is_power_of_two(n)


@pytest.mark.parametrize("n", [0, 3, 5, 6, 100, 1023, -4])
def test_is_not_power_of_two(n):
    assert not is_power_of_two(n)


def test_format_complex():
    assert format_complex(3.7 + 0j) == "3.70+0.00i"
    assert format_complex(-0.3 - 0.9659j) == "-0.30-0.97i"
    assert format_complex(1.25 + 2.5j, 1) == "1.2+2.5i"


def test_format_complex_hides_negative_zero():
    assert format_complex(-0.3 - 1e-17j) == "-0.30+0.00i"
    assert format_complex(-1e-12 + 0j) == "0.00+0.00i"


def test_as_complex():
    z = as_complex([1.0, 2.0])
    assert z.dtype == np.complex128
    assert list(z) == [1 + 0j, 2 + 0j]
    with pytest.raises(ValueError):
        as_complex([[1.0, 2.0], [3.0, 4.0]])


def test_get_logger_attaches_one_handler():
    logger = get_logger("radix.test_utils", level=logging.DEBUG)
    again = get_logger("radix.test_utils", level=logging.DEBUG)
    assert logger is again
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
