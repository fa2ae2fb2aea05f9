import numpy as np

from ..constants import DOUBLE
from ..logger import msg
from ..models import ElasticModel, resolve
from ..utils import as_double, numerical_guard


def elastic_modules_for_unidirectional_composite(number_of_model,
        fibre_content, e_for_fiber, nu_for_fiber, e_for_matrix, nu_for_matrix,
        silent=True):
    r"""Elastic modules of a unidirectional composite

    The Poisson ratios follow `\nu_{ij} = -\varepsilon_i/\varepsilon_j` for
    a uniaxial load along `j`, such that `\nu_{12}/E_2 = \nu_{21}/E_1`, with
    direction 1 along the fibres.

    Parameters
    ----------
    number_of_model : int
        Number of the model, see :class:`.ElasticModel`.
    fibre_content : float
        Fibre content, from ``0.`` (matrix only) to ``1.`` (fibre only).
    e_for_fiber, nu_for_fiber : float
        Young's modulus and Poisson's ratio of the fibre.
    e_for_matrix, nu_for_matrix : float
        Young's modulus and Poisson's ratio of the matrix.
    silent : bool, optional
        A boolean to tell whether the log messages should be printed.

    Returns
    -------
    modules : (9,) array_like
        ``E1, E2, E3, nu12, nu13, nu23, G12, G13, G23``.

    """
    model = resolve(ElasticModel, number_of_model)
    msg('Elastic modules, model %s...' % model.name, level=1, silent=silent)

    with numerical_guard(silent=silent):
        c, ef, nuf, em, num = as_double(fibre_content, e_for_fiber,
                nu_for_fiber, e_for_matrix, nu_for_matrix)
        gf = ef/(2.*(1. + nuf))
        gm = em/(2.*(1. + num))
        if model is ElasticModel.RULE_OF_MIXTURES:
            e1 = c*ef + (1. - c)*em
            e2 = 1./(c/ef + (1. - c)/em)
            nu21 = c*nuf + (1. - c)*num
            g12 = 1./(c/gf + (1. - c)/gm)
            g23 = g12
        elif model is ElasticModel.VANIN:
            chif = 3. - 4.*nuf
            chim = 3. - 4.*num
            den = 2. - c + c*chim + (1. - c)*(chif - 1.)*gm/gf
            e1 = (c*ef + (1. - c)*em
                  + 8.*gm*c*(1. - c)*(nuf - num)*(nuf - num)/den)
            nu21 = num - (chim + 1.)*(num - nuf)*c/den
            g12 = gm*(gf*(1. + c) + gm*(1. - c))/(gf*(1. - c) + gm*(1. + c))
            # plane strain bulk modulus
            kf = 2.*gf/(chif - 1.)
            km = 2.*gm/(chim - 1.)
            k23 = km + c/(1./(kf - km) + (1. - c)/(km + gm))
            g23 = gm + c/(1./(gf - gm) + (km + 2.*gm)*(1. - c)/(2.*gm*(km + gm)))
            e2 = 4.*k23*g23/(k23 + g23 + 4.*nu21*nu21*k23*g23/e1)
        else:
            raise ValueError('Invalid model')
        nu12 = nu21*e2/e1
        nu23 = e2/(2.*g23) - 1.

    msg('finished!', level=1, silent=silent)
    return np.array([e1, e2, e2, nu12, nu12, nu23, g12, g12, g23], dtype=DOUBLE)
