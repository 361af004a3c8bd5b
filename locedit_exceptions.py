# -*- coding: utf-8 -*-
"""
LocEdit Exceptions Module
Custom exception classes for structured error handling across the application.
"""


class LocEditError(Exception):
    """
    Base exception class for all LocEdit-related errors.

    Attributes:
        message: Human-readable error message
        details: Optional additional details (dict, string, etc.)
    """

    def __init__(self, message: str, details=None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self):
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# File Exceptions
# =============================================================================

class FileOperationError(LocEditError):
    """Raised when a file operation (read/write) fails."""

    def __init__(self, message: str, file_path: str = None, operation: str = None):
        super().__init__(message, details={'file_path': file_path, 'operation': operation})
        self.file_path = file_path
        self.operation = operation


class SourceFileError(FileOperationError):
    """Raised when the source file is missing or unreadable. Fatal for the session."""

    def __init__(self, message: str, file_path: str = None):
        super().__init__(message, file_path=file_path, operation='read')


class SaveError(FileOperationError):
    """Raised when writing the progress file fails."""

    def __init__(self, message: str, file_path: str = None):
        super().__init__(message, file_path=file_path, operation='write')


class ExportError(FileOperationError):
    """Raised when an export cannot read its base text or write its target."""


# =============================================================================
# Progress Exceptions
# =============================================================================

class ProgressLoadError(LocEditError):
    """Raised when persisted progress data is malformed."""

    def __init__(self, message: str, file_path: str = None):
        super().__init__(message, details={'file_path': file_path})
        self.file_path = file_path


# =============================================================================
# Session Exceptions
# =============================================================================

class NoActiveFileError(LocEditError):
    """Raised when an editing operation runs before a file was opened."""


class CommandError(LocEditError):
    """Raised when a host command has no handler."""

    def __init__(self, message: str, command=None):
        super().__init__(message, details={'command': type(command).__name__})
        self.command = command


# =============================================================================
# Settings Exceptions
# =============================================================================

class SettingsError(LocEditError):
    """Base exception for settings-related errors."""
    pass


class SettingsLoadError(SettingsError):
    """Raised when loading settings fails."""
    pass


class SettingsSaveError(SettingsError):
    """Raised when saving settings fails."""
    pass
