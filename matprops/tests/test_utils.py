import logging

import numpy as np
import pytest

from matprops.errors import NumericalError, UnknownModel
from matprops.models import ConductivityModel
from matprops.utils import as_double, directional, numerical_guard


def test_guard_converts_faults():
    with pytest.raises(NumericalError) as excinfo:
        with numerical_guard():
            1/0
    assert isinstance(excinfo.value.fault, ZeroDivisionError)
    assert excinfo.value.__cause__ is excinfo.value.fault

    with pytest.raises(NumericalError) as excinfo:
        with numerical_guard():
            assert False, 'broken invariant'
    assert isinstance(excinfo.value.fault, AssertionError)


def test_guard_keeps_special_values():
    with numerical_guard():
        one, zero = as_double(1., 0.)
        x = one/zero
        y = zero/zero
        z = np.exp(as_double(1000.)[0])
    assert np.isinf(x)
    assert np.isnan(y)
    assert np.isinf(z)


def test_guard_lets_other_errors_through():
    error = UnknownModel(ConductivityModel, 0)
    with pytest.raises(UnknownModel) as excinfo:
        with numerical_guard():
            raise error
    assert excinfo.value is error
    with pytest.raises(KeyError):
        with numerical_guard():
            {}['k']


def test_guard_logs_fault(caplog):
    with caplog.at_level(logging.WARNING, logger='matprops'):
        with pytest.raises(NumericalError):
            with numerical_guard(silent=False):
                1/0
    assert 'ZeroDivisionError' in caplog.text


def test_directional():
    r = directional(1, 2., np.float64(3))
    assert r.shape == (3,)
    assert r.dtype == np.float64
    assert np.allclose(r, [1, 2, 3])


def test_as_double_only_real_scalars():
    c, k = as_double(1, np.float32(0.5))
    assert c == 1. and k == 0.5
    for value in ['1.5', [0.2, 0.3], np.array([0.2]), 1j, None]:
        with pytest.raises(TypeError):
            as_double(0.2, value)
