#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the md2blocks library.

Rendering a token tree never raises on its own; these exceptions cover the
public entry points around it.

Exception Hierarchy
-------------------
- Md2BlocksError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for an entry point)

  - ParsingError (markdown input could not be read)

"""

from typing import Any


class Md2BlocksError(Exception):
    """Base exception class for all md2blocks-specific errors.

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


class ValidationError(Md2BlocksError):
    """Exception raised for invalid input parameters or options.

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
    """Exception raised when an options object of the wrong class is provided.

    Parameters
    ----------
    converter_name : str
        Name of the entry point that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{converter_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class ParsingError(Md2BlocksError):
    """Exception raised when markdown input cannot be read or tokenized.

    Parameters
    ----------
    message : str
        Description of the parsing error
    original_error : Exception, optional
        The original exception that caused this error

    """


def validate_options_type(options: Any, expected_type: type, converter_name: str) -> None:
    """Raise InvalidOptionsError unless ``options`` is None or an ``expected_type``.

    Raises
    ------
    InvalidOptionsError
        If options are not None and not an instance of expected_type

    """
    if options is not None and not isinstance(options, expected_type):
        raise InvalidOptionsError(
            converter_name=converter_name,
            expected_type=expected_type,
            received_type=type(options),
        )
