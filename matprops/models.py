r"""
Models (:mod:`matprops.models`)
===============================

.. currentmodule:: matprops.models

Each property kind has its own numbering of the available micromechanical
models, starting at 1. The numbers are the discriminants of the enums below
and :func:`resolve` is the only way the calculations translate a number
given by the user into a model.

"""
from enum import IntEnum
from numbers import Integral

from .errors import UnknownModel


class ConductivityModel(IntEnum):
    """Thermal conductivity of unidirectional composites"""
    # rule of mixtures, as in the thesis "Thermal conductivity
    # characterization of composite materials"
    RULE_OF_MIXTURES = 1
    # Vanin, tetragonal packing ("Micromechanics of composite materials",
    # p. 192)
    VANIN = 2


class HoneycombExpansionModel(IntEnum):
    """Thermal expansion of honeycombs"""
    VANIN = 1


class UnidirectionalExpansionModel(IntEnum):
    """Thermal expansion of unidirectional composites"""
    VANIN = 1


class ElasticModel(IntEnum):
    """Elastic modules of unidirectional composites"""
    RULE_OF_MIXTURES = 1
    VANIN = 2


def resolve(kind, identifier):
    """Return the model of ``kind`` numbered ``identifier``

    Parameters
    ----------
    kind : :class:`enum.IntEnum` subclass
        One of the model enums of this module.
    identifier : int
        The number of the model.

    Returns
    -------
    model : member of ``kind``

    Raises
    ------
    UnknownModel
        If ``identifier`` is not an integer or no model of ``kind`` has it.

    """
    if isinstance(identifier, bool) or not isinstance(identifier, Integral):
        raise UnknownModel(kind, identifier)
    try:
        return kind(int(identifier))
    except ValueError:
        raise UnknownModel(kind, identifier) from None


def available_models(kind):
    """List of ``(number, name)`` pairs of the models of ``kind``
    """
    return [(int(m), m.name) for m in sorted(kind)]
