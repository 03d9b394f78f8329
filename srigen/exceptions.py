"""Custom exceptions for srigen."""


class SriError(Exception):
    """Base exception for all srigen errors."""


class ProjectNotFoundError(SriError, FileNotFoundError):
    """Raised when the project root does not exist or is not a directory."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Project not found: {path}")


class ResourceNotFoundError(SriError, FileNotFoundError):
    """Raised when a local resource reference does not resolve to a file."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Resource not found: {path}")


class BackupError(SriError):
    """Raised when the backup copy of a markup file cannot be written."""
