#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2annotated/utils/decorators.py
"""Utility decorators and context managers for html2annotated converters.

The HTML front end depends on third-party packages (BeautifulSoup for
parsing, bleach for sanitization). ``requires_dependencies`` checks them once
per call and turns an ImportError or a version mismatch into a
``DependencyError`` that names the packages to install.

"""

from __future__ import annotations

import importlib
import logging
import time
from contextlib import contextmanager
from functools import wraps
from importlib import metadata
from typing import Any, Callable, Generator, List, Optional, Tuple

from packaging import version
from packaging.specifiers import InvalidSpecifier, SpecifierSet

from html2annotated.exceptions import DependencyError


def get_package_version(package_name: str) -> Optional[str]:
    """Return the installed version of distribution ``package_name``, or None."""
    try:
        return metadata.version(package_name)
    except metadata.PackageNotFoundError:
        return None


def check_version_requirement(package_name: str, version_spec: str) -> Tuple[bool, Optional[str]]:
    """Check whether an installed package meets a version requirement.

    Parameters
    ----------
    package_name : str
        Distribution name of the package (e.g. "beautifulsoup4")
    version_spec : str
        Version specification (e.g. ">=4.12.0")

    Returns
    -------
    tuple
        (meets_requirement, installed_version)

    """
    installed_version = get_package_version(package_name)
    if not installed_version:
        return False, None

    try:
        meets = version.parse(installed_version) in SpecifierSet(version_spec)
    except (InvalidSpecifier, version.InvalidVersion):
        # Unparseable metadata: trust that the import succeeded
        return True, installed_version
    return meets, installed_version


def find_unmet_requirements(
    packages: List[Tuple[str, str, str]],
) -> Tuple[List[Tuple[str, str]], List[Tuple[str, str, str]], Optional[ImportError]]:
    """Import each package and check its version.

    Parameters
    ----------
    packages : list of tuple
        ``(install_name, import_name, version_spec)`` triples

    Returns
    -------
    tuple
        ``(missing, mismatched, first_import_error)`` where ``missing`` holds
        ``(install_name, version_spec)`` and ``mismatched`` holds
        ``(install_name, version_spec, installed_version)``

    """
    missing: List[Tuple[str, str]] = []
    mismatched: List[Tuple[str, str, str]] = []
    first_error: Optional[ImportError] = None

    for install_name, import_name, version_spec in packages:
        try:
            importlib.import_module(import_name)
        except ImportError as e:
            missing.append((install_name, version_spec))
            first_error = first_error or e
            continue
        if not version_spec:
            continue
        ok, installed = check_version_requirement(install_name, version_spec)
        if not ok:
            mismatched.append((install_name, version_spec, installed or "unknown"))

    return missing, mismatched, first_error


def requires_dependencies(converter_name: str, packages: List[Tuple[str, str, str]]) -> Callable:
    """Fail fast with an install hint when a converter's packages are unavailable.

    Parameters
    ----------
    converter_name : str
        Converter name used in the error message (e.g. "html")
    packages : list of tuple
        ``(install_name, import_name, version_spec)`` triples, for example
        ``("beautifulsoup4", "bs4", ">=4.12.0")``. An empty ``version_spec``
        accepts any installed version.

    Returns
    -------
    Callable
        Decorator that runs the check before every call of the wrapped method

    Raises
    ------
    DependencyError
        From the wrapped method, when a package is missing or too old

    Examples
    --------
        >>> @requires_dependencies("html", [("beautifulsoup4", "bs4", ">=4.12.0")])
        ... def parse_to_tree(self, html_content):
        ...     from bs4 import BeautifulSoup
        ...     return BeautifulSoup(html_content, "html.parser")

    """

    def decorator(method: Callable) -> Callable:
        @wraps(method)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            missing, mismatched, first_error = find_unmet_requirements(packages)
            if missing or mismatched:
                raise DependencyError(
                    converter_name,
                    missing_packages=missing,
                    version_mismatches=mismatched,
                    original_import_error=first_error,
                ) from first_error
            return method(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Time the enclosed block and log the elapsed time at DEBUG level.

    Parameters
    ----------
    logger : logging.Logger
        Logger instance to use for DEBUG messages
    operation : str
        Description of the operation being timed (e.g. "Tree walk")

    Notes
    -----
    No timing is performed when the logger is not enabled for DEBUG.

    """
    if not logger.isEnabledFor(logging.DEBUG):
        yield
        return

    started = time.perf_counter()
    try:
        yield
    finally:
        logger.debug("%s completed in %.4fs", operation, time.perf_counter() - started)


__all__ = [
    "requires_dependencies",
    "find_unmet_requirements",
    "check_version_requirement",
    "get_package_version",
    "debug_timer",
]
