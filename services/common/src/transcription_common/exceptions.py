"""Exceptions shared by the infrastructure layer."""


class CapacityError(Exception):
    """Raised when an audio payload exceeds the configured maximum size."""

    def __init__(self, size_bytes: int, max_bytes: int):
        self.size_bytes = size_bytes
        self.max_bytes = max_bytes
        super().__init__(
            f"Audio payload of {size_bytes} bytes exceeds the {max_bytes} byte limit"
        )


class StorageError(Exception):
    """Raised when ephemeral audio storage cannot be written, read or cleared."""

    def __init__(self, location: str, operation: str, cause: Exception | None = None):
        self.location = location
        self.operation = operation
        self.cause = cause
        super().__init__(f"Temporary audio {operation} failed for '{location}'")


class PersistenceError(Exception):
    """Raised when the transcription record store is unreachable."""

    def __init__(self, operation: str, cause: Exception | None = None):
        self.operation = operation
        self.cause = cause
        super().__init__(f"Transcription record {operation} failed")
