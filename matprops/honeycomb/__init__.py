r"""
============================================
Honeycomb Module (:mod:`matprops.honeycomb`)
============================================

.. currentmodule:: matprops.honeycomb

.. automodule:: matprops.honeycomb.thermal_expansion
    :members:

"""
