r"""
============================================
Composite Module (:mod:`matprops.composite`)
============================================

.. currentmodule:: matprops.composite

The ``matprops.composite`` module includes functions used to calculate the
properties of unidirectional composites based on the properties of the fibre
and the matrix, and on the fibre content.

For example, the thermal conductivity using Vanin's model::

    from matprops.composite.thermal_conductivity import (
        thermal_conductivity_for_unidirectional_composite)

    k1, k2, k3 = thermal_conductivity_for_unidirectional_composite(
            2, fibre_content, k_for_fiber, k_for_matrix)

.. automodule:: matprops.composite.elastic_modules
    :members:

.. automodule:: matprops.composite.thermal_conductivity
    :members:

.. automodule:: matprops.composite.thermal_expansion
    :members:

"""
