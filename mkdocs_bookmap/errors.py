"""Exceptions reported to whatever build process drives a conversion."""

from __future__ import annotations

from typing import Optional


class ConversionError(RuntimeError):
    """Fatal failure of a single conversion call."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message}: {self.cause}"


class ConfigurationError(ConversionError):
    """A required parameter was not supplied."""


class SourceReadError(ConversionError):
    """The navigation file could not be read."""


class AbstractTopicMissingError(ConversionError):
    """The navigation lists no topic before its first chapter."""


class RenameError(ConversionError):
    """Moving the abstract file into place failed."""


class WriteError(ConversionError):
    """Writing the ditamap failed."""


__all__ = [
    "AbstractTopicMissingError",
    "ConfigurationError",
    "ConversionError",
    "RenameError",
    "SourceReadError",
    "WriteError",
]
