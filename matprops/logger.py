r"""
Logger (:mod:`matprops.logger`)
===============================

Helpers used to report the progress of the calculations. The messages go to
the ``matprops`` logger of the :mod:`logging` module, which only has a
:class:`logging.NullHandler` until :func:`setup_logging` is called.

"""
import os
import sys
import logging

from .constants import LOGGER_NAME, LOGLEVEL_ENV

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


def _indent(s, level):
    return '    '*level + s


def msg(s, level=0, silent=False):
    """Log an informative message

    Parameters
    ----------
    s : str
        The message.
    level : int, optional
        Indentation level of the message.
    silent : bool, optional
        A boolean to tell whether the message should be skipped.

    """
    if silent:
        return
    logger.info(_indent(s, level))


def warn(s, level=0, silent=False):
    if silent:
        return
    logger.warning(_indent('WARNING ' + s, level))


def error(s, level=0, silent=False):
    if silent:
        return
    logger.error(_indent('ERROR ' + s, level))


def setup_logging(level=None, log_file=None):
    """Attach handlers to the ``matprops`` logger

    Parameters
    ----------
    level : int or str, optional
        Logging level. When not given it is read from the
        ``MATPROPS_LOGLEVEL`` environment variable, defaulting to ``INFO``.
    log_file : str, optional
        Path of a file where the messages are also written.

    """
    if level is None:
        level = os.environ.get(LOGLEVEL_ENV, 'INFO').upper()
    logger.setLevel(level)
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)

    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                                  datefmt='%H:%M:%S')
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
