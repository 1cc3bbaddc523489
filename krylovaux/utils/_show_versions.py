import os
import platform
import re
import sys
from importlib.metadata import PackageNotFoundError, version

from .._min_dependencies import dependent_pkgs


def _get_sys_info():
    """
    Get system-related information.
    """
    return {
        'python': sys.version.replace(os.linesep, ' '),
        'executable': sys.executable,
        'machine': platform.platform(),
    }


def _installed_version(package):
    try:
        return version(package)
    except PackageNotFoundError:
        return None


def _get_deps_info(extra):
    """
    Get the installed and minimum required versions of the dependencies
    tagged with `extra` in ``_min_dependencies``.
    """
    deps_info = {}
    for package, (min_version, extras) in dependent_pkgs.items():
        if extra in re.split(r',\s*', extras):
            deps_info[package] = (_installed_version(package), min_version)
    return deps_info


def _print_section(title, info):
    print(title)
    print('-' * len(title))
    width = max(map(len, info.keys()), default=0) + 1
    for k, stat in sorted(info.items()):
        print(f'{k:>{width}}: {stat}')


def show_versions():
    """
    Print debugging information.

    The system settings are followed by the installed version of ``krylovaux``
    and of its runtime and test dependencies. The minimum version required by
    ``krylovaux`` is given in brackets, and ``None`` denotes a dependency that
    is not installed.
    """
    _print_section('System settings', _get_sys_info())
    print()
    _print_section('Package', {'krylovaux': _installed_version('krylovaux')})
    for extra, title in [('install', 'Runtime dependencies'), ('tests', 'Test dependencies')]:
        print()
        deps_info = _get_deps_info(extra)
        _print_section(title, {k: f'{v} (>= {m})' for k, (v, m) in deps_info.items()})
