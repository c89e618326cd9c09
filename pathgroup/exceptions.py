"""Custom exceptions for pathgroup.

This module defines the exceptions raised by pathgroup. The grouping core is
total over well-formed input, so the only errors it raises are contract
violations (a malformed operation record or an unknown grouping mode). The
outer layers (configuration, operation loading, CLI) wrap lower-level
failures in the same hierarchy.
"""


class PathGroupError(Exception):
    """Base exception for all pathgroup errors.

    Example:
        try:
            partition_operations(operations, config)
        except PathGroupError as e:
            print(f"pathgroup error: {e}")
    """

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class ConfigurationError(PathGroupError):
    """Error in configuration.

    Raised when the configuration cannot be loaded, holds an invalid value,
    or names a grouping mode that is not recognised.

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


class InvalidOperationError(PathGroupError):
    """An operation record violates the grouping contract.

    Attributes:
        operation_id: The operationId of the offending record, if known.
        method: The HTTP method of the offending record, if known.
    """

    def __init__(
        self,
        message: str,
        operation_id: str | None = None,
        method: str | None = None,
    ):
        self.operation_id = operation_id
        self.method = method
        full_message = message
        if operation_id:
            full_message = f"{message} (operation '{operation_id}'"
            if method:
                full_message += f', {method.upper()}'
            full_message += ')'
        super().__init__(full_message)


class OperationLoadError(PathGroupError):
    """Failed to load operation records from a file.

    Attributes:
        source: The file that failed to load.
        cause: The underlying exception that caused the failure.
    """

    def __init__(self, source: str, cause: Exception | str | None = None):
        self.source = source
        self.cause = cause
        message = f"Failed to load operations from '{source}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)
