r"""
Utilities (:mod:`matprops.utils`)
=================================
"""
from contextlib import contextmanager
from numbers import Real

import numpy as np

from .constants import DOUBLE
from .errors import NumericalError
from .logger import warn


def as_double(*values):
    """Convert the inputs to ``float64`` scalars

    The formulas are evaluated on numpy scalars so that divisions by zero
    give ``inf`` or ``nan`` instead of raising. Only real scalars are
    accepted, such that every result keeps ``shape=(3,)``.

    Raises
    ------
    TypeError
        If a value is not a real number, e.g. a string or a sequence.

    """
    for v in values:
        if not isinstance(v, Real):
            raise TypeError('Expected a real number, got %r' % (v,))
    return tuple(np.float64(v) for v in values)


def directional(primary, secondary, tertiary):
    """Result along the three principal directions of the material
    """
    return np.array([primary, secondary, tertiary], dtype=DOUBLE)


@contextmanager
def numerical_guard(silent=True):
    """Evaluate formulas converting arithmetic faults to :class:`NumericalError`

    Inside the block floating point warnings are disabled, so ``nan`` and
    ``inf`` are kept as ordinary values. ``ArithmeticError`` and
    ``AssertionError`` raised in the block are re-raised as
    :class:`.NumericalError`, errors of :mod:`matprops` go through untouched.

    Parameters
    ----------
    silent : bool, optional
        A boolean to tell whether the intercepted faults should be logged.

    """
    with np.errstate(all='ignore'):
        try:
            yield
        except (ArithmeticError, AssertionError) as e:
            warn('numerical fault intercepted: %r' % e, level=2, silent=silent)
            raise NumericalError(e) from e
