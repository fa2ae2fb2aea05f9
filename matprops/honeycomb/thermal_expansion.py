from numpy import cos

from ..logger import msg
from ..models import HoneycombExpansionModel, resolve
from ..utils import as_double, directional, numerical_guard


def thermal_expansion_for_honeycomb(number_of_model, l_cell_side_size,
        h_cell_side_size, wall_thickness, angle, alpha_for_honeycomb,
        silent=True):
    """Thermal expansion of a honeycomb

    Parameters
    ----------
    number_of_model : int
        Number of the model, see :class:`.HoneycombExpansionModel`.
    l_cell_side_size : float
        Length of the inclined wall of the cell.
    h_cell_side_size : float
        Length of the vertical wall of the cell.
    wall_thickness : float
        Thickness of the cell walls. Not used by Vanin's model.
    angle : float
        Angle between the horizontal and the inclined wall, in radians.
    alpha_for_honeycomb : float
        Coefficient of thermal expansion of the wall material.
    silent : bool, optional
        A boolean to tell whether the log messages should be printed.

    Returns
    -------
    alpha : (3,) array_like
        Coefficients ``alpha1, alpha2, alpha3`` in the primary, secondary and
        tertiary directions.

    """
    model = resolve(HoneycombExpansionModel, number_of_model)
    msg('Thermal expansion of honeycomb, model %s...' % model.name, level=1,
        silent=silent)

    with numerical_guard(silent=silent):
        l, h, angle, alpha = as_double(l_cell_side_size, h_cell_side_size,
                                       angle, alpha_for_honeycomb)
        if model is HoneycombExpansionModel.VANIN:
            alpha1 = alpha
            alpha2 = ((h/l*alpha - cos(angle)*alpha)
                      / (h/l - cos(angle)))
            alpha3 = alpha
        else:
            raise ValueError('Invalid model')

    msg('finished!', level=1, silent=silent)
    return directional(alpha1, alpha2, alpha3)
