#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the mdbreaks library.

This module defines specialized exception classes for the error conditions
that can occur while walking and rewriting document trees. These exceptions
provide more specific error information than generic built-ins.

Exception Hierarchy
-------------------
- MdBreaksError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidTestError (unsupported node test shape, also a TypeError)
    - InvalidSchemaError (unsupported find-and-replace schema, also a TypeError)
    - SerializationError (malformed serialized trees)
    - ConfigError (unreadable or invalid configuration files)

  - TransformError (tree transformation failures)

"""

from typing import Any


class MdBreaksError(Exception):
    """Base exception class for all mdbreaks-specific errors.

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


class ValidationError(MdBreaksError):
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


class InvalidTestError(ValidationError, TypeError):
    """Exception raised when a node test has an unsupported shape.

    Tests must be ``None``, a type name, a mapping of expected field values,
    a callable, or a list of those. The error is raised when the test is
    converted, before any node is visited.

    Parameters
    ----------
    test : any
        The rejected test value

    """

    def __init__(self, test: Any):
        """Initialize the error for the rejected test."""
        super().__init__(
            f"Expected function, string, or object as test, got {type(test).__name__}",
            parameter_name="test",
            parameter_value=test,
        )


class InvalidSchemaError(ValidationError, TypeError):
    """Exception raised when a find-and-replace schema is neither a list nor a mapping."""

    def __init__(self, schema: Any):
        """Initialize the error for the rejected schema."""
        super().__init__(
            f"Expected array or object as schema, got {type(schema).__name__}",
            parameter_name="schema",
            parameter_value=schema,
        )


class SerializationError(ValidationError):
    """Exception raised when a serialized tree cannot be turned into nodes.

    Parameters
    ----------
    message : str
        Description of the problem
    path : str, optional
        Location of the offending value inside the input, e.g. ``root.children[2]``
    original_error : Exception, optional
        The underlying decode error, if any

    """

    def __init__(self, message: str, path: str | None = None, original_error: Exception | None = None):
        """Initialize the serialization error."""
        if path:
            message = f"{message} (at {path})"
        super().__init__(message, parameter_name="tree", original_error=original_error)
        self.path = path


class ConfigError(ValidationError):
    """Exception raised for unreadable or invalid configuration files.

    Parameters
    ----------
    message : str
        Description of the configuration problem
    config_path : str, optional
        Path of the configuration file involved
    original_error : Exception, optional
        The underlying parse or I/O error

    """

    def __init__(self, message: str, config_path: str | None = None, original_error: Exception | None = None):
        """Initialize the configuration error."""
        super().__init__(message, parameter_name="config", parameter_value=config_path, original_error=original_error)
        self.config_path = config_path


class TransformError(MdBreaksError):
    """Exception raised when a tree transformation fails.

    Parameters
    ----------
    message : str
        Description of the transform failure
    transform_name : str, optional
        Name of the transform that failed
    original_error : Exception, optional
        The underlying exception that caused the transform failure

    Attributes
    ----------
    transform_name : str or None
        Name of the transform that failed

    """

    def __init__(self, message: str, transform_name: str | None = None, original_error: Exception | None = None):
        """Initialize the transform error."""
        super().__init__(message, original_error)
        self.transform_name = transform_name
