import functools
import logging
from datetime import datetime

_log = logging.getLogger(__name__)

try:
    # This variable is injected in the __builtins__ by the build process. It is
    # used to import the version without importing NumPy.
    __KRYLOVAUX_SETUP__  # noqa
except NameError:
    __KRYLOVAUX_SETUP__ = False


@functools.lru_cache()
def _ensure_handler():
    """
    Attach a file handler to the package logger.

    The handler is created and attached to the package logger only the first
    time this function is called (the first call is memoized).
    """
    handler = logging.FileHandler(f"{__name__}_{datetime.now().isoformat()}.log")
    handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)-8s] %(message)s"))
    _log.addHandler(handler)
    return handler


def set_loglevel(level):
    """
    Set the level of the ``krylovaux`` logger and of its file handler.

    The records of the kernels are emitted by the loggers of the submodules
    (``krylovaux.linalg.roots`` and ``krylovaux.linalg.boundary``), which
    propagate to the ``krylovaux`` logger. The first call attaches to this
    logger a file handler writing to ``krylovaux_<timestamp>.log`` in the
    current working directory. The root logger is left untouched.
    The kernels only emit ``DEBUG`` records, which any higher `level` silences.

    Parameters
    ----------
    level : {int, str}
        Level of the ``krylovaux`` logger and of its file handler, such as
        ``logging.DEBUG``, ``"DEBUG"``, or ``10``.
    """
    _log.setLevel(level)
    _ensure_handler().setLevel(level)


# PEP0440 compatible formatted version, see:
# https://www.python.org/dev/peps/pep-0440/
#
# Final release markers:
#   X.Y.0   # For first release after an increment in Y
#   X.Y.Z   # For bugfix releases
#
# Admissible pre-release markers:
#   X.YaN   # Alpha release
#   X.YbN   # Beta release
#   X.YrcN  # Release Candidate
#
# Dev branch marker is: "X.Y.dev" or "X.Y.devN" where N is an integer.
# "X.Y.dev0" is the canonical version of "X.Y.dev"
#
__version__ = "0.1.dev0"

if __KRYLOVAUX_SETUP__:
    __all__ = ["set_loglevel"]
else:
    from .linalg import roots_quadratic, sym_givens, to_boundary
    from .utils import (DegenerateDirectionError, InfeasiblePointError,
                        InvalidRadiusError, show_versions)

    __all__ = [
        "DegenerateDirectionError",
        "InfeasiblePointError",
        "InvalidRadiusError",
        "roots_quadratic",
        "set_loglevel",
        "show_versions",
        "sym_givens",
        "to_boundary",
    ]
