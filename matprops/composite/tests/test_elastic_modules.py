import numpy as np
import pytest

from matprops.errors import UnknownModel
from matprops.composite.elastic_modules import (
        elastic_modules_for_unidirectional_composite)


def isotropic(e, nu):
    g = e/(2*(1 + nu))
    return [e, e, e, nu, nu, nu, g, g, g]


def test_bounds():
    for model in [1, 2]:
        a = elastic_modules_for_unidirectional_composite(model, 0., 100., 0.3,
                5., 0.2)
        assert np.allclose(a, isotropic(5., 0.2))
        a = elastic_modules_for_unidirectional_composite(model, 1., 100., 0.3,
                5., 0.2)
        assert np.allclose(a, isotropic(100., 0.3))


def test_rule_of_mixtures():
    e1, e2, e3, nu12, nu13, nu23, g12, g13, g23 = \
        elastic_modules_for_unidirectional_composite(1, 0.5, 3., 0.3, 1., 0.1)
    assert np.isclose(e1, 2.)
    assert np.isclose(e2, 1.5)
    assert e2 == e3
    assert np.isclose(nu12*e1/e2, 0.2)
    assert nu12 == nu13
    assert g12 == g13 == g23


def test_vanin():
    a = elastic_modules_for_unidirectional_composite(2, 0.2, 100., 0.3, 5.,
            0.2)
    e1, e2, e3, nu12, nu13, nu23, g12, g13, g23 = a
    assert np.isclose(e1, 24.0117233294, rtol=1e-9)
    # major Poisson ratio
    assert np.isclose(nu12*e1/e2, 0.228135990621, rtol=1e-9)
    assert e2 == e3
    assert nu12 == nu13
    assert g12 == g13
    assert np.isclose(nu23, e2/(2*g23) - 1)
    rom = elastic_modules_for_unidirectional_composite(1, 0.2, 100., 0.3, 5.,
            0.2)
    assert e1 > rom[0]
    assert e2 > rom[1]


def test_unknown_model():
    for number_of_model in [0, 3]:
        with pytest.raises(UnknownModel):
            elastic_modules_for_unidirectional_composite(number_of_model, 0.2,
                    100., 0.3, 5., 0.2)
