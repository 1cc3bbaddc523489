from enum import Enum

import numpy as np


class Options(str, Enum):
    """
    Option names.
    """
    DEBUG = 'debug'
    NITREF = 'nitref'
    XNORM2 = 'xnorm2'


# Default options.
DEFAULT_OPTIONS = {
    Options.DEBUG.value: False,
    Options.NITREF.value: 1,
    Options.XNORM2.value: 0.0,
}


# Constants.
EPS = np.finfo(float).eps
SQRT_EPS = np.sqrt(EPS)
