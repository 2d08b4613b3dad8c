# @mindmaze_header@
"""
A set of helpers used throughout the xdg-basedir package
"""

import logging
import sys

import yaml

CONFIG = {'debug': False, 'verbose': False}

LOGGER = logging.getLogger('xdg-basedir')
LOGGER.addHandler(logging.NullHandler())


def _line(args, kwargs) -> str:
    """
    format print-like arguments as a single log line
    """
    return kwargs.get('sep', ' ').join(str(arg) for arg in args)


def set_log_file(filename):
    """
    Init logger to also write to *filename*.
    """
    log_handler = logging.FileHandler(filename, mode='w')

    formatter = logging.Formatter("%(asctime)s: %(levelname)s: %(message)s",
                                  "%Y-%m-%d %H:%M:%S")
    log_handler.setFormatter(formatter)

    LOGGER.addHandler(log_handler)
    LOGGER.setLevel(logging.DEBUG)
    return log_handler


def wprint(*args, **kwargs):
    """
    warning print: print to stderr
    """
    LOGGER.warning(_line(args, kwargs))
    print(*args, file=sys.stderr, **kwargs)


def iprint(*args, **kwargs):
    """
    info print: print only if verbose flag is set
    """
    LOGGER.info(_line(args, kwargs))
    if CONFIG['verbose'] or CONFIG['debug']:
        print(*args, file=sys.stderr, **kwargs)


def dprint(*args, **kwargs):
    """
    debug print: print only if debug flag is set
    """
    LOGGER.debug(_line(args, kwargs))
    if CONFIG['debug']:
        print(*args, file=sys.stderr, **kwargs)


def yaml_load(filename: str):
    """
    helper: load yaml file with BaseLoader
    """
    with open(filename, 'rb') as stream:
        return yaml.load(stream.read(), Loader=yaml.BaseLoader)
