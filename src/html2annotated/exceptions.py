#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Exceptions raised by html2annotated.

The tree walk and the trim are total over well-formed input and raise
nothing. Errors come from the edges of a conversion: options of the wrong
type, builder scopes that are not strictly nested, the sanitize/parse front
end, and missing third-party packages.

Exception Hierarchy
-------------------
- Html2AnnotatedError (root of every library error)

  - ValidationError (bad argument or bad serialized data)
    - InvalidOptionsError (options object of the wrong class)

  - AnnotationScopeError (builder push/pop out of balance)

  - ParsingError (sanitizer or HTML parser failed)

  - DependencyError (package missing or too old)

"""

from typing import Any


class Html2AnnotatedError(Exception):
    """Root exception for html2annotated.

    Parameters
    ----------
    message : str
        Description shown to the caller
    original_error : Exception, optional
        Lower-level exception this error wraps

    Attributes
    ----------
    message : str
        Same as ``str(error)``
    original_error : Exception or None
        Wrapped exception, when there is one

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Store the message and the wrapped exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(Html2AnnotatedError):
    """A caller-supplied value or a serialized payload was rejected.

    Parameters
    ----------
    message : str
        What was wrong with the value
    parameter_name : str, optional
        Argument or field that held the value
    parameter_value : any, optional
        The rejected value
    original_error : Exception, optional
        Lower-level exception this error wraps

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Store the rejected parameter alongside the message."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """A converter was handed an options object of the wrong class.

    Parameters
    ----------
    converter_name : str
        Converter that rejected the options (e.g. "html")
    expected_type : type
        Options class the converter accepts
    received_type : type
        Class of the object actually passed
    message : str, optional
        Overrides the generated message
    original_error : Exception, optional
        Lower-level exception this error wraps

    """

    def __init__(
        self,
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Build a message naming both the expected and received classes."""
        if message is None:
            message = (
                f"The {converter_name} converter takes '{expected_type.__name__}' options, "
                f"got '{received_type.__name__}' instead."
            )
        super().__init__(
            message,
            parameter_name="options",
            parameter_value=received_type,
            original_error=original_error,
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class AnnotationScopeError(Html2AnnotatedError):
    """Style or link scopes on a builder were not strictly nested.

    Raised for ``pop()`` on an empty scope stack, for ``pop_to()`` with a
    depth that is not open, and for building a result while scopes are still
    open.

    Parameters
    ----------
    message : str
        Which scope operation failed
    open_scopes : int, default 0
        Scopes still open when the error was raised

    """

    def __init__(self, message: str, open_scopes: int = 0):
        """Store the open scope count."""
        super().__init__(message)
        self.open_scopes = open_scopes


class ParsingError(Html2AnnotatedError):
    """The markup could not be sanitized or parsed.

    Only the conversion request that raised it is affected.

    Parameters
    ----------
    message : str
        What went wrong
    parsing_stage : str, optional
        "decode", "sanitize" or "parse"
    original_error : Exception, optional
        Exception raised by the sanitizer or parser

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Store the stage at which parsing failed."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


def _requirement(name: str, spec: str) -> str:
    return f"{name}{spec}" if spec else name


def _format_dependency_message(
    converter_name: str,
    missing_packages: list[tuple[str, str]],
    version_mismatches: list[tuple[str, str, str]],
    install_command: str,
) -> str:
    lines = []
    label = converter_name.upper()
    if missing_packages:
        names = ", ".join(f"'{_requirement(name, spec)}'" for name, spec in missing_packages)
        lines.append(f"{label} conversion needs packages that are not installed: {names}")
    if version_mismatches:
        details = ", ".join(
            f"'{name}' ({installed} installed, {required} required)" for name, required, installed in version_mismatches
        )
        lines.append(f"{label} conversion needs newer packages: {details}")

    if not install_command:
        requirements = [_requirement(name, spec) for name, spec in missing_packages]
        requirements += [_requirement(name, required) for name, required, _ in version_mismatches]
        if requirements:
            install_command = "pip install --upgrade " + " ".join(f'"{r}"' for r in requirements)
    if install_command:
        lines.append(f"Install with: {install_command}")
    return "\n".join(lines)


class DependencyError(Html2AnnotatedError):
    """A package needed for conversion is missing or too old.

    Parameters
    ----------
    converter_name : str
        Converter that needs the packages (e.g. "html")
    missing_packages : list[tuple[str, str]]
        ``(install_name, version_spec)`` for each package that failed to import
    version_mismatches : list[tuple[str, str, str]], optional
        ``(install_name, required_spec, installed_version)`` for each package
        that imported but does not satisfy its requirement
    install_command : str, optional
        Command to suggest instead of the generated ``pip install`` line
    message : str, optional
        Overrides the generated message
    original_import_error : ImportError, optional
        First ImportError seen while checking

    """

    def __init__(
        self,
        converter_name: str,
        missing_packages: list[tuple[str, str]],
        version_mismatches: list[tuple[str, str, str]] | None = None,
        install_command: str = "",
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Build an install hint from the missing and mismatched packages."""
        version_mismatches = version_mismatches or []
        if message is None:
            message = _format_dependency_message(converter_name, missing_packages, version_mismatches, install_command)
        super().__init__(message)
        self.converter_name = converter_name
        self.missing_packages = missing_packages
        self.version_mismatches = version_mismatches
        self.install_command = install_command
        self.original_import_error = original_import_error
