import argparse
import os

from cohensd import constants


def check_delimiter(value):
    if value in constants.TAB_ALIASES:
        return '\t'
    if len(value) != 1:
        raise argparse.ArgumentTypeError(
            'delimiter must be a single character, got {0!r}'.format(value)
        )
    return value


def check_undefined(value):
    if value in constants.UNDEFINED_ALIASES:
        return float('nan')
    try:
        return float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            '{0!r} is not a number'.format(value)
        )


def debug(message):
    if 'DEBUG' in os.environ:
        print('[DEBUG] {0}'.format(message))
