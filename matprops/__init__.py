r"""
Material Properties (:mod:`matprops`)
=====================================

.. currentmodule:: matprops

Homogenized properties of composites and honeycombs computed from the
properties of their constituents using closed-form micromechanical models.

Each calculation takes the number of the model as its first argument and
returns the property along the three principal directions of the material.

.. automodule:: matprops.composite
    :members:

.. automodule:: matprops.honeycomb
    :members:

.. automodule:: matprops.models
    :members:

.. automodule:: matprops.errors
    :members:

"""
from .version import __version__
from .errors import MatPropsError, UnknownModel, NumericalError
from .composite.elastic_modules import elastic_modules_for_unidirectional_composite
from .composite.thermal_conductivity import thermal_conductivity_for_unidirectional_composite
from .composite.thermal_expansion import thermal_expansion_for_unidirectional_composite
from .honeycomb.thermal_expansion import thermal_expansion_for_honeycomb
