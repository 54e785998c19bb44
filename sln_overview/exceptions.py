"""Custom exceptions for sln-overview."""

from __future__ import annotations

import os


class OverviewError(Exception):
    """Base exception for all sln-overview errors."""


class InvalidArgumentError(OverviewError, ValueError):
    """Raised when a required path argument is missing or empty."""


class DescriptorNotFoundError(InvalidArgumentError):
    """Raised when a project or solution file does not exist."""

    def __init__(self, kind: str, path: str | os.PathLike):
        self.path = os.fspath(path)
        super().__init__(f"{kind} file does not exist ({self.path})")


class MalformedDescriptorError(OverviewError):
    """Raised when a descriptor cannot be parsed."""

    def __init__(self, kind: str, path: str | os.PathLike, reason: str | None = None):
        self.path = os.fspath(path)
        self.reason = reason
        message = f"Failed to load {kind} file: '{self.path}'"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class UnsupportedSolutionFormatError(InvalidArgumentError):
    """Raised when no handler is registered for a solution file's extension."""

    def __init__(self, path: str | os.PathLike):
        self.path = os.fspath(path)
        super().__init__(f"Unsupported solution file format ({self.path})")
