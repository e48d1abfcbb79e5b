#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the semdiff library.

This module defines specialized exception classes for the error conditions
that can occur while parsing documents, validating diff options, walking
value trees and rendering results. Every stage fails fast with one of these
exceptions; no stage returns a partial result.

Exception Hierarchy
-------------------
- SemdiffError (base exception)

  - ValidationError (parameter/value validation)
    - InvalidOptionsError (wrong options class for parser)
    - ConfigError (invalid diff options)
      - InvalidPatternError (key-exclusion regex does not compile)
      - UnknownFormatError (unknown output format in options)

  - ParsingError (input text parsing failures)

  - EngineError (diff traversal failures)
    - DepthExceededError (nesting deeper than the configured bound)

  - FormatError (unknown rendering target)

  - DependencyError (missing/incompatible packages)

"""

from typing import Any


class SemdiffError(Exception):
    """Base exception class for all semdiff-specific errors.

    Catching this will catch all library-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(SemdiffError):
    """Exception raised for invalid input parameters or values.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    parameter_name : str or None
        The name of the problematic parameter
    parameter_value : any
        The value that caused the error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when a parser receives the wrong options class.

    Parameters
    ----------
    parser_name : str
        Name of the parser that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received

    """

    def __init__(self, parser_name: str, expected_type: type, received_type: type):
        """Initialize the invalid options error."""
        message = (
            f"{parser_name} parser expected options of type '{expected_type.__name__}' "
            f"but received '{received_type.__name__}'"
        )
        super().__init__(message, parameter_name="options", parameter_value=received_type)
        self.parser_name = parser_name
        self.expected_type = expected_type
        self.received_type = received_type


class ConfigError(ValidationError):
    """Exception raised when diff options fail validation.

    Raised before any input tree is touched, so a bad configuration never
    produces a partial diff.

    """


class InvalidPatternError(ConfigError):
    """Exception raised when the key-exclusion pattern is not a valid regex.

    Parameters
    ----------
    pattern : str
        The pattern that failed to compile
    message : str, optional
        Custom error message. If not provided, generates one from the regex error
    original_error : Exception, optional
        The ``re.error`` raised by the compiler

    Attributes
    ----------
    pattern : str
        The rejected pattern

    """

    def __init__(self, pattern: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the invalid pattern error."""
        if message is None:
            message = f"Invalid ignore_keys_regex {pattern!r}"
            if original_error is not None:
                message += f": {original_error}"
        super().__init__(
            message, parameter_name="ignore_keys_regex", parameter_value=pattern, original_error=original_error
        )
        self.pattern = pattern


class UnknownFormatError(ConfigError):
    """Exception raised when options name an output format that does not exist.

    Parameters
    ----------
    format_name : str
        The unrecognized format name
    supported_formats : list[str], optional
        Known format names, included in the message

    Attributes
    ----------
    format_name : str
        The rejected format name
    supported_formats : list[str]
        Available format names

    """

    def __init__(self, format_name: str, supported_formats: list[str] | None = None):
        """Initialize the unknown format error."""
        supported_formats = supported_formats or []
        message = f"Unknown output format: {format_name!r}"
        if supported_formats:
            message += f". Expected one of: {', '.join(supported_formats)}"
        super().__init__(message, parameter_name="output_format", parameter_value=format_name)
        self.format_name = format_name
        self.supported_formats = supported_formats


class ParsingError(SemdiffError):
    """Exception raised when input text cannot be parsed.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    format_name : str, optional
        Format being parsed (e.g. "json", "xml")
    line : int, optional
        1-based line of the offending construct, when known
    column : int, optional
        1-based column of the offending construct, when known
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    Attributes
    ----------
    format_name : str or None
        Format of the rejected input
    line : int or None
        Line of the error, if the underlying parser reported one
    column : int or None
        Column of the error, if the underlying parser reported one
    parsing_stage : str or None
        Where in the parsing process the error occurred

    """

    def __init__(
        self,
        message: str,
        format_name: str | None = None,
        line: int | None = None,
        column: int | None = None,
        parsing_stage: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.format_name = format_name
        self.line = line
        self.column = column
        self.parsing_stage = parsing_stage


class EngineError(SemdiffError):
    """Base exception for failures inside the diff engine."""


class DepthExceededError(EngineError):
    """Exception raised when value nesting exceeds the configured maximum depth.

    Parameters
    ----------
    max_depth : int
        The configured bound
    path : str
        Path of the node at which the bound was hit

    Attributes
    ----------
    max_depth : int
        The configured bound
    path : str
        Path of the offending node

    """

    def __init__(self, max_depth: int, path: str):
        """Initialize the depth exceeded error."""
        location = path or "(root)"
        super().__init__(f"Maximum diff depth of {max_depth} exceeded at '{location}'")
        self.max_depth = max_depth
        self.path = path


class FormatError(SemdiffError):
    """Exception raised when a rendering target is not supported.

    Parameters
    ----------
    message : str, optional
        Custom error message
    format_type : str, optional
        The unsupported format name
    supported_formats : list[str], optional
        List of supported formats for reference
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    format_type : str or None
        The format that was not supported
    supported_formats : list[str] or None
        Available supported formats

    """

    def __init__(
        self,
        message: str | None = None,
        format_type: str | None = None,
        supported_formats: list[str] | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the format error."""
        if message is None:
            if format_type:
                message = f"Unsupported format: '{format_type}'"
                if supported_formats:
                    message += f". Supported formats: {', '.join(supported_formats)}"
            else:
                message = "Output format is not supported"

        super().__init__(message, original_error=original_error)
        self.format_type = format_type
        self.supported_formats = supported_formats


class DependencyError(SemdiffError):
    """Exception raised when required dependencies are not available.

    Parameters
    ----------
    converter_name : str
        Name of the parser or renderer requiring dependencies
    missing_packages : list[tuple[str, str]]
        List of (package_name, version_spec) tuples for missing packages
    version_mismatches : list[tuple[str, str, str]], optional
        List of (package_name, required_version, installed_version) tuples
        for packages with version mismatches
    install_command : str, optional
        Suggested pip install command to resolve the issue
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_import_error : ImportError, optional
        The ImportError raised while importing a missing package

    Attributes
    ----------
    converter_name : str
        The component that has missing dependencies
    missing_packages : list[tuple[str, str]]
        Packages that need to be installed
    version_mismatches : list[tuple[str, str, str]]
        Packages with version mismatches
    install_command : str
        Command to install missing dependencies

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
        """Initialize the dependency error with package details."""
        version_mismatches = version_mismatches or []
        self.original_import_error = original_import_error
        if message is None:
            message_parts = []

            if missing_packages:
                pkg_list = ", ".join(f"'{name}{spec}'" if spec else f"'{name}'" for name, spec in missing_packages)
                message_parts.append(f"{converter_name.upper()} support requires the following packages: {pkg_list}")

            if version_mismatches:
                mismatch_details = [
                    f"'{name}' (requires {required}, but {installed} is installed)"
                    for name, required, installed in version_mismatches
                ]
                message_parts.append(
                    f"{converter_name.upper()} support has version mismatches: {', '.join(mismatch_details)}"
                )

            message = "\n".join(message_parts)

            if install_command:
                message += f"\nInstall with: {install_command}"
            else:
                all_packages = missing_packages + [(name, req) for name, req, _ in version_mismatches]
                if all_packages:
                    packages_str = " ".join(f'"{name}{spec}"' if spec else name for name, spec in all_packages)
                    message += f"\nInstall with: pip install --upgrade {packages_str}"

        super().__init__(message)
        self.converter_name = converter_name
        self.missing_packages = missing_packages
        self.version_mismatches = version_mismatches
        self.install_command = install_command
