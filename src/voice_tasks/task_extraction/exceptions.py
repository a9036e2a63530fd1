"""Custom exceptions for task extraction functionality."""


class TaskExtractionError(Exception):
    """Base exception for task extraction errors."""

    pass


class DateParseError(TaskExtractionError):
    """Exception raised when a captured date expression cannot be resolved."""

    pass


class InvalidOptionsError(TaskExtractionError):
    """Exception raised for malformed extraction options."""

    pass
