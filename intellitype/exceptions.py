"""Custom exceptions for intellitype.

This module defines the exceptions raised by the collaborators around the
generation core (model loading, configuration and output writing). The core
itself never raises on unrecognized type descriptors; it falls back instead.
"""


class IntellitypeError(Exception):
    """Root of the model, configuration and output failures.

    The CLI reports any of these as a one-line error and exits with status 1.
    Descriptor resolution has no subclass here since unknown descriptors
    resolve to a fallback name.
    """

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class ModelError(IntellitypeError):
    """Base exception for model document errors."""

    pass


class ModelLoadError(ModelError):
    """Failed to load a model document from a source.

    Attributes:
        source: The path that failed to load.
        cause: The underlying exception that caused the failure.
    """

    def __init__(self, source: str, cause: Exception | None = None):
        self.source = source
        self.cause = cause
        message = f"Failed to load model from '{source}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)


class ModelValidationError(ModelError):
    """A model document does not describe valid model objects.

    Attributes:
        source: The path of the invalid document.
        errors: List of validation error messages.
    """

    def __init__(self, source: str, errors: list[str] | None = None):
        self.source = source
        self.errors = errors or []
        message = f"Model validation failed for '{source}'"
        if errors:
            message += f': {"; ".join(errors)}'
        super().__init__(message)


class ConfigurationError(IntellitypeError):
    """Error in configuration.

    Attributes:
        config_path: The path to the configuration file, if applicable.
        field: The specific configuration field that is invalid.
    """

    def __init__(
        self, message: str, config_path: str | None = None, field: str | None = None
    ):
        self.config_path = config_path
        self.field = field
        full_message = message
        if config_path:
            full_message = f"{message} in '{config_path}'"
        if field:
            full_message += f' (field: {field})'
        super().__init__(full_message)


class OutputError(IntellitypeError):
    """Error writing generated output.

    Attributes:
        output_path: The path where output was being written.
        cause: The underlying exception that caused the failure.
    """

    def __init__(self, output_path: str, cause: Exception | None = None):
        self.output_path = output_path
        self.cause = cause
        message = f"Failed to write output to '{output_path}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)
