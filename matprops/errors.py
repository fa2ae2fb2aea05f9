r"""
Errors (:mod:`matprops.errors`)
===============================

.. currentmodule:: matprops.errors

Every calculation either returns its result or raises one of the two
exceptions below. ``nan`` and ``inf`` are ordinary results, not errors.

"""


class MatPropsError(Exception):
    """Base class of the errors raised by :mod:`matprops`
    """
    pass


class UnknownModel(MatPropsError, ValueError):
    """The number of the model does not match any model of its kind

    Parameters
    ----------
    kind : :class:`enum.IntEnum` subclass
        The family of models where the number was looked up.
    identifier : object
        The number passed by the caller.

    """
    def __init__(self, kind, identifier):
        self.kind = kind
        self.identifier = identifier
        valid = ', '.join(str(int(m)) for m in kind)
        super().__init__('Unknown model %r for %s (valid: %s)'
                         % (identifier, kind.__name__, valid))


class NumericalError(MatPropsError):
    """An arithmetic fault was raised while evaluating the formulas

    The original exception is kept in ``fault``.

    """
    def __init__(self, fault):
        self.fault = fault
        super().__init__('%s: %s' % (type(fault).__name__, fault))
