from ..constants import ELASTIC_MODEL_FOR_EXPANSION
from ..logger import msg
from ..models import UnidirectionalExpansionModel, resolve
from ..utils import as_double, directional, numerical_guard
from .elastic_modules import elastic_modules_for_unidirectional_composite


def thermal_expansion_for_unidirectional_composite(number_of_model,
        fibre_content, e_for_fiber, nu_for_fiber, alpha_for_fiber,
        e_for_matrix, nu_for_matrix, alpha_for_matrix, silent=True):
    """Thermal expansion of a unidirectional composite

    The effective Poisson ratios entering the transverse coefficients come
    from :func:`.elastic_modules_for_unidirectional_composite` using Vanin's
    elastic model, whatever the value of ``number_of_model``.

    Parameters
    ----------
    number_of_model : int
        Number of the model, see :class:`.UnidirectionalExpansionModel`.
    fibre_content : float
        Volume fraction of the fibre in the composite.
    e_for_fiber, nu_for_fiber, alpha_for_fiber : float
        Young's modulus, Poisson's ratio and coefficient of thermal expansion
        of the fibre.
    e_for_matrix, nu_for_matrix, alpha_for_matrix : float
        Young's modulus, Poisson's ratio and coefficient of thermal expansion
        of the matrix.
    silent : bool, optional
        A boolean to tell whether the log messages should be printed.

    Returns
    -------
    alpha : (3,) array_like
        Coefficients ``alpha1, alpha2, alpha3`` in the primary (fibre),
        secondary and tertiary directions.

    Raises
    ------
    UnknownModel
        If ``number_of_model`` is not a :class:`.UnidirectionalExpansionModel`.
    NumericalError
        If an arithmetic fault is raised by the formulas.

    Notes
    -----
    Errors raised by the elastic modules calculation are propagated as they
    are.

    """
    model = resolve(UnidirectionalExpansionModel, number_of_model)
    msg('Thermal expansion of unidirectional composite, model %s...'
        % model.name, level=1, silent=silent)

    with numerical_guard(silent=silent):
        c, ef, nuf, af, em, num, am = as_double(fibre_content, e_for_fiber,
                nu_for_fiber, alpha_for_fiber, e_for_matrix, nu_for_matrix,
                alpha_for_matrix)
        gf = ef/(2.*(1. + nuf))
        gm = em/(2.*(1. + num))
        chif = 3. - 4.*nuf
        chim = 3. - 4.*num

    a = elastic_modules_for_unidirectional_composite(
            ELASTIC_MODEL_FOR_EXPANSION, fibre_content, e_for_fiber,
            nu_for_fiber, e_for_matrix, nu_for_matrix, silent=silent)

    with numerical_guard(silent=silent):
        nu21 = a[3]*a[0]/a[1]
        nu31 = a[4]*a[0]/a[2]
        if model is UnidirectionalExpansionModel.VANIN:
            alpha1 = am - (am - af)*c/a[0]*(ef
                    + (8.*gm*(nuf - num)*(1. - c)*(1. + nuf))
                    / (2. - c + c*chim + (1. - c)*(chif + 1.)*gm/gf))
            alpha2 = (am + (am - alpha1)*nu21
                      - (am - af)*(1. + nuf)*(num - nu21)/(num - nuf))
            alpha3 = (am + (am - alpha1)*nu31
                      - (am - af)*(1. + nuf)*(num - nu31)/(num - nuf))
        else:
            raise ValueError('Invalid model')

    msg('finished!', level=1, silent=silent)
    return directional(alpha1, alpha2, alpha3)
