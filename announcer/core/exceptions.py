"""
Custom exceptions for the announcer.

This module defines the exception hierarchy used by the dispatcher, the
registries and the configuration layer.
"""


class AnnouncerError(Exception):
    """Base exception for all announcer errors."""

    pass


class FatalActionError(AnnouncerError):
    """Raised by the ERROR severity once its message has been reported."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UnknownSeverityError(AnnouncerError, ValueError):
    """Raised when an API call names a severity that does not exist."""

    pass


class ConfigurationError(AnnouncerError):
    """Raised when there's an issue with configuration loading or parsing."""

    pass


class ActionImportError(AnnouncerError):
    """Raised when a configured action target cannot be imported."""

    pass
