"""Core exceptions shared across nimbridge."""

from .exceptions import (
    ConflictingSourceSpecError,
    ConflictingVariableError,
    HomeDirectoryUnavailableError,
    MissingRequiredFieldError,
    MissingSourceSpecError,
    ProcessInvocationError,
    ServerlessError,
    UnsupportedFeatureError,
)

__all__ = [
    "ConflictingSourceSpecError",
    "ConflictingVariableError",
    "HomeDirectoryUnavailableError",
    "MissingRequiredFieldError",
    "MissingSourceSpecError",
    "ProcessInvocationError",
    "ServerlessError",
    "UnsupportedFeatureError",
]
