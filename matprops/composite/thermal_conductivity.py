from numpy import pi, sin

from ..constants import TETRAGONAL_PACKING_EXPONENT
from ..logger import msg
from ..models import ConductivityModel, resolve
from ..utils import as_double, directional, numerical_guard


def thermal_conductivity_for_unidirectional_composite(number_of_model,
        fibre_content, k_for_fiber, k_for_matrix, silent=True):
    """Thermal conductivity of a unidirectional composite

    Parameters
    ----------
    number_of_model : int
        Number of the model, see :class:`.ConductivityModel`.
    fibre_content : float
        Fibre content, from ``0.`` (matrix only) to ``1.`` (fibre only).
    k_for_fiber : float
        Thermal conductivity of the fibre.
    k_for_matrix : float
        Thermal conductivity of the matrix.
    silent : bool, optional
        A boolean to tell whether the log messages should be printed.

    Returns
    -------
    k : (3,) array_like
        Thermal conductivities ``k1, k2, k3`` in the primary (fibre),
        secondary and tertiary directions.

    Raises
    ------
    UnknownModel
        If ``number_of_model`` is not a :class:`.ConductivityModel`.
    NumericalError
        If an arithmetic fault is raised by the formulas.

    """
    model = resolve(ConductivityModel, number_of_model)
    msg('Thermal conductivity, model %s...' % model.name, level=1,
        silent=silent)

    with numerical_guard(silent=silent):
        c, kf, km = as_double(fibre_content, k_for_fiber, k_for_matrix)
        if model is ConductivityModel.RULE_OF_MIXTURES:
            k1 = c*kf + (1. - c)*km
            k2 = 1./(c/kf + (1. - c)/km)
            k3 = 1./(c/kf + (1. - c)/km)
        elif model is ConductivityModel.VANIN:
            k1 = c*kf + (1. - c)*km
            k_2_zero = km*((1. + c + (1. - c)*kf/km)
                           / (1. - c + (1. - c)*kf/km))
            n = TETRAGONAL_PACKING_EXPONENT
            k2 = k_2_zero*(1.
                    + n*n*(n - 1.)*k_2_zero/km
                    * ((1. - kf/km)/(1. - c + (1. + c)*kf/km))
                    * ((1. - kf/km)/(1. - c + (1. + c)*kf/km))
                    * (sin(pi/2.)*sin(pi/2.))
                    / (pi/2.)**n
                    * (c*c - c**(2.*n)
                        * ((1. - kf/km)/(1. + kf/km))
                        * ((1. - kf/km)/(1. + kf/km))))
            k3 = k_2_zero*(1.
                    + n*n*(n - 1.)*k_2_zero/km
                    * ((1. - kf/km)/(1. - c + (1. + c)*kf/km))
                    * ((1. - kf/km)/(1. - c + (1. + c)*kf/km))
                    * (sin(pi/2.)*sin(pi/2.))
                    / (pi/2.)**n
                    * (c*c - c**(2.*n)
                        * ((1. - kf/km)/(1. + kf/km))
                        * ((1. - kf/km)/(1. + kf/km))))
        else:
            raise ValueError('Invalid model')

    msg('finished!', level=1, silent=silent)
    return directional(k1, k2, k3)
