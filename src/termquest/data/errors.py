"""Custom exceptions for resource loading and note storage."""


class DataError(Exception):
    """Base exception for the data layer."""


class ResourceLoadError(DataError):
    """Raised when a named puzzle resource cannot be fetched."""

    def __init__(self, name: str, status: int, detail: str = "") -> None:
        self.name = name
        self.status = status
        message = f"Failed to load resource '{name}' (status {status})"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class NoteStoreError(DataError):
    """Raised when the notes file exists but cannot be read or parsed."""
